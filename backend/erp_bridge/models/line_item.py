from sqlalchemy import Column, Integer, String, ForeignKey
from sqlalchemy.orm import relationship
from erp_bridge.database import Base
from erp_bridge.models.types import Money


class LineItem(Base):
    __tablename__ = "po_line_items"

    id = Column(Integer, primary_key=True, index=True)
    purchase_order_id = Column(
        Integer,
        ForeignKey("purchase_orders.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    sku = Column(String, nullable=False, index=True)
    quantity = Column(Integer, nullable=False)
    unit_price = Column(Money, nullable=False)

    # Relationships
    purchase_order = relationship("PurchaseOrder", back_populates="line_items")
