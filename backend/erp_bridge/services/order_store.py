"""
Order Store - relational persistence for purchase orders and their line items.

An order and its line items form one aggregate: they are written in a single
transaction and always read back together.
"""
import logging
from typing import List, Optional
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, selectinload
from erp_bridge.exceptions import StorageError
from erp_bridge.models.purchase_order import PurchaseOrder
from erp_bridge.models.line_item import LineItem
from erp_bridge.schemas.order import PurchaseOrderCreate

logger = logging.getLogger(__name__)


class OrderStore:
    """Reads and writes PurchaseOrder aggregates through one SQLAlchemy session"""

    def __init__(self, db: Session):
        self.db = db

    def create(self, order_data: PurchaseOrderCreate) -> int:
        """
        Persist an order and all of its line items atomically.

        Args:
            order_data: Mapped purchase order with its line items

        Returns:
            The id assigned to the new order

        Raises:
            StorageError if the database is unreachable or a constraint fails;
            the session is rolled back so no partial order is left behind
        """
        try:
            po = PurchaseOrder(
                po_number=order_data.po_number,
                partner_id=order_data.partner_id,
                order_date=order_data.order_date,
                total_amount=order_data.total_amount,
            )
            self.db.add(po)
            self.db.flush()  # Get the ID

            for item in order_data.line_items:
                self.db.add(LineItem(
                    purchase_order_id=po.id,
                    sku=item.sku,
                    quantity=item.quantity,
                    unit_price=item.unit_price,
                ))

            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Failed to store order {order_data.po_number}: {e}")
            raise StorageError(f"Could not store order {order_data.po_number}: {e}") from e

        logger.info(f"Stored order {po.po_number} with {len(order_data.line_items)} line item(s) (ID: {po.id})")
        return po.id

    def list_all(self) -> List[PurchaseOrder]:
        """Return every order with its line items, in insertion order"""
        try:
            return (
                self.db.query(PurchaseOrder)
                .options(selectinload(PurchaseOrder.line_items))
                .order_by(PurchaseOrder.id)
                .all()
            )
        except SQLAlchemyError as e:
            logger.error(f"Failed to list orders: {e}")
            raise StorageError(f"Could not list orders: {e}") from e

    def get_by_id(self, order_id: int) -> Optional[PurchaseOrder]:
        """Return one order with its line items, or None if it does not exist"""
        try:
            return (
                self.db.query(PurchaseOrder)
                .options(selectinload(PurchaseOrder.line_items))
                .filter(PurchaseOrder.id == order_id)
                .first()
            )
        except SQLAlchemyError as e:
            logger.error(f"Failed to load order {order_id}: {e}")
            raise StorageError(f"Could not load order {order_id}: {e}") from e
