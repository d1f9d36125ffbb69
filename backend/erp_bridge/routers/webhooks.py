"""
Webhook router - inbound EDI documents pushed by Zenbridge
"""
import logging
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from erp_bridge.database import get_db
from erp_bridge.schemas.edi import Inbound850Document, Inbound850Response
from erp_bridge.services.order_service import ingest_purchase_order
from erp_bridge.services.order_store import OrderStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/webhook/zenbridge", tags=["webhooks"])


@router.post("/inbound-850", response_model=Inbound850Response)
def receive_inbound_850(document: Inbound850Document, db: Session = Depends(get_db)):
    """Map an EDI 850 purchase order and store it in the ERP database"""
    order_id = ingest_purchase_order(document, OrderStore(db))
    return Inbound850Response(erp_reference_id=order_id)
