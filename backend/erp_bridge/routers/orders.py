"""
ERP orders router - stored purchase orders and outbound EDI 810 invoices
"""
import logging
from typing import List
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from erp_bridge.database import get_db
from erp_bridge.exceptions import OrderNotFoundError
from erp_bridge.schemas.edi import SendInvoiceResponse
from erp_bridge.schemas.order import PurchaseOrderResponse
from erp_bridge.services import order_service
from erp_bridge.services.order_store import OrderStore
from erp_bridge.services.partner_client import PartnerClient, get_partner_client

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/erp/orders", tags=["orders"])


def _not_found(exc: OrderNotFoundError) -> JSONResponse:
    return JSONResponse(status_code=404, content={"error": str(exc)})


@router.get("", response_model=List[PurchaseOrderResponse])
def list_orders(db: Session = Depends(get_db)):
    """List all purchase orders with their line items"""
    return order_service.list_orders(OrderStore(db))


@router.get("/{order_id}", response_model=PurchaseOrderResponse)
def get_order(order_id: int, db: Session = Depends(get_db)):
    """Get one purchase order with its line items"""
    try:
        return order_service.get_order(order_id, OrderStore(db))
    except OrderNotFoundError as e:
        return _not_found(e)


@router.post(
    "/{order_id}/send-invoice",
    response_model=SendInvoiceResponse,
    responses={404: {"description": "Order not found"}},
)
def send_invoice(
    order_id: int,
    db: Session = Depends(get_db),
    client: PartnerClient = Depends(get_partner_client),
):
    """Generate an EDI 810 invoice for an order and send it to the partner API"""
    try:
        result = order_service.send_invoice(order_id, OrderStore(db), client)
    except OrderNotFoundError as e:
        logger.warning(f"Invoice requested for unknown order {order_id}")
        return _not_found(e)

    if not result.success:
        # Mirror the partner's error status; non-error statuses (e.g. redirects) become 502
        status_code = result.status_code if result.status_code >= 400 else 502
        return JSONResponse(
            status_code=status_code,
            media_type="application/problem+json",
            content={
                "title": "Partner API rejected the invoice",
                "status": result.status_code,
                "detail": result.response_body,
            },
        )

    return SendInvoiceResponse(
        message=f"EDI 810 Invoice for order {order_id} sent successfully",
        sent_payload=result.sent_payload,
    )
