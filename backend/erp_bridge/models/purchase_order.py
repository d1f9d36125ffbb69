from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from erp_bridge.database import Base
from erp_bridge.models.types import Money, UTCDateTime


class PurchaseOrder(Base):
    __tablename__ = "purchase_orders"

    id = Column(Integer, primary_key=True, index=True)
    po_number = Column(String, nullable=False, index=True)  # Not unique: partners may resend
    partner_id = Column(String, nullable=False, index=True)  # EDI sender_id
    order_date = Column(UTCDateTime, nullable=False)
    total_amount = Column(Money, nullable=False)  # Sum of line items at ingestion

    # Relationships
    line_items = relationship(
        "LineItem",
        back_populates="purchase_order",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="LineItem.id",
    )
