"""
Outbound Mapper - builds EDI 810 invoice documents from stored purchase orders.

The 810 carries only aggregate summaries of the order: the invoice amount and
a line count / hash total pair. Individual line items are not transmitted.
"""
import logging
from datetime import date, datetime, timezone
from decimal import Decimal
from typing import Optional
from erp_bridge.models.purchase_order import PurchaseOrder
from erp_bridge.schemas.edi import Invoice810Document, MonetaryValueSummary, TransactionTotals

logger = logging.getLogger(__name__)

INVOICE_DOCUMENT_TYPE = "810"
INVOICE_NUMBER_PREFIX = "INV"


def build_invoice_number(order_id: int, invoice_date: date) -> str:
    """
    INV-<order id>-<MMDD>.

    Dispatching the same order twice on the same day yields the same number.
    """
    return f"{INVOICE_NUMBER_PREFIX}-{order_id}-{invoice_date.strftime('%m%d')}"


def map_outbound(order: PurchaseOrder, today: Optional[date] = None) -> Invoice810Document:
    """
    Map a stored purchase order to an EDI 810 invoice document.

    Args:
        order: Stored order with its line items loaded
        today: Processing date (defaults to the current UTC date)
    """
    invoice_date = today or datetime.now(timezone.utc).date()
    total = Decimal(order.total_amount)

    document = Invoice810Document(
        document_type=INVOICE_DOCUMENT_TYPE,
        invoice_number=build_invoice_number(order.id, invoice_date),
        invoice_date=invoice_date,
        purchase_order_number=order.po_number,
        total_monetary_value_summary=MonetaryValueSummary(amount=total),
        transaction_totals=TransactionTotals(
            number_of_line_items=len(order.line_items),
            hash_total=total,
        ),
    )
    logger.info(f"Mapped order {order.id} ({order.po_number}) to invoice {document.invoice_number}")
    return document
