"""
Inbound Mapper - converts Zenbridge EDI 850 documents into purchase orders.
"""
import logging
from datetime import datetime, timezone
from decimal import Decimal
from typing import Optional
from erp_bridge.schemas.edi import Inbound850Document
from erp_bridge.schemas.order import PurchaseOrderCreate, LineItemCreate

logger = logging.getLogger(__name__)

# Tried in order after ISO-8601
DATE_FORMATS = [
    '%Y%m%d',    # CCYYMMDD (EDI DTM segment)
    '%m/%d/%Y',  # MM/DD/YYYY (US format)
    '%Y/%m/%d',  # YYYY/MM/DD
]


def to_utc(value: datetime) -> datetime:
    """Offset-less dates are taken as UTC; offset dates are converted to UTC"""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def parse_order_date(date_str: Optional[str], now: Optional[datetime] = None) -> datetime:
    """
    Parse the document's creation date, falling back to the processing time.

    An unparseable date is not an error: the order is still accepted and
    stamped with ``now`` (current time if not given). The result is always
    an aware UTC datetime.
    """
    fallback = to_utc(now or datetime.now(timezone.utc))
    if not date_str or not date_str.strip():
        logger.warning(f"Empty date_created, using processing time {fallback.isoformat()}")
        return fallback

    value = date_str.strip()
    # fromisoformat() only accepts a trailing "Z" from Python 3.11 on
    if value.endswith(("Z", "z")):
        value = value[:-1] + "+00:00"

    try:
        return to_utc(datetime.fromisoformat(value))
    except ValueError:
        pass

    for fmt in DATE_FORMATS:
        try:
            return to_utc(datetime.strptime(value, fmt))
        except ValueError:
            continue

    logger.warning(f"Could not parse date_created '{date_str}', using processing time {fallback.isoformat()}")
    return fallback


def map_inbound(document: Inbound850Document, now: Optional[datetime] = None) -> PurchaseOrderCreate:
    """
    Map an EDI 850 document to a purchase order ready to be stored.

    Each document item becomes one line item (no merging by product code) and
    the order total is the sum of quantity x unit price over all items.
    """
    line_items = [
        LineItemCreate(
            sku=item.product_code,
            quantity=item.qty,
            unit_price=item.price,
        )
        for item in document.items
    ]

    total = Decimal('0.00')
    for line in line_items:
        total += line.quantity * line.unit_price

    return PurchaseOrderCreate(
        po_number=document.po_number,
        partner_id=document.sender_id,
        order_date=parse_order_date(document.date_created, now),
        total_amount=total,
        line_items=line_items,
    )
