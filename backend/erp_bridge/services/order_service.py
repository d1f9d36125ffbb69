"""
Order workflows behind the HTTP endpoints.

Each function receives already-validated input plus explicit store/client
handles, so the same flows run from routers, scripts and tests alike.
"""
import logging
from datetime import date, datetime
from typing import List, Optional
from erp_bridge.exceptions import OrderNotFoundError
from erp_bridge.models.purchase_order import PurchaseOrder
from erp_bridge.schemas.edi import Inbound850Document, DispatchResult
from erp_bridge.services.inbound_mapper import map_inbound
from erp_bridge.services.order_store import OrderStore
from erp_bridge.services.outbound_mapper import map_outbound
from erp_bridge.services.partner_client import PartnerClient

logger = logging.getLogger(__name__)


def ingest_purchase_order(
    document: Inbound850Document,
    store: OrderStore,
    now: Optional[datetime] = None,
) -> int:
    """Map an inbound EDI 850 document and store it; returns the new order id"""
    logger.info(
        f"Receiving PO {document.po_number} from {document.sender_id} "
        f"(document {document.document_id}, {len(document.items)} item(s))"
    )
    order_data = map_inbound(document, now=now)
    order_id = store.create(order_data)
    logger.info(f"Order {order_data.po_number} mapped and saved to ERP database (ID: {order_id})")
    return order_id


def list_orders(store: OrderStore) -> List[PurchaseOrder]:
    orders = store.list_all()
    logger.info(f"Fetched {len(orders)} purchase order(s)")
    return orders


def get_order(order_id: int, store: OrderStore) -> PurchaseOrder:
    order = store.get_by_id(order_id)
    if order is None:
        raise OrderNotFoundError(order_id)
    return order


def send_invoice(
    order_id: int,
    store: OrderStore,
    client: PartnerClient,
    today: Optional[date] = None,
) -> DispatchResult:
    """
    Build an EDI 810 invoice for a stored order and send it to the partner.

    The order is looked up first; a missing order raises OrderNotFoundError
    and nothing is sent. A rejected dispatch is returned, not raised, and the
    stored order is left untouched.
    """
    order = get_order(order_id, store)
    document = map_outbound(order, today=today)

    logger.info(f"Sending invoice {document.invoice_number} for order {order.id} ({order.po_number})")
    return client.send(document)
