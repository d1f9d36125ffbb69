from erp_bridge.schemas.order import (
    PurchaseOrderCreate,
    PurchaseOrderResponse,
    LineItemCreate,
    LineItemResponse,
)
from erp_bridge.schemas.edi import (
    Inbound850Document,
    Inbound850Item,
    Inbound850Response,
    Invoice810Document,
    DispatchResult,
    SendInvoiceResponse,
)

__all__ = [
    "PurchaseOrderCreate",
    "PurchaseOrderResponse",
    "LineItemCreate",
    "LineItemResponse",
    "Inbound850Document",
    "Inbound850Item",
    "Inbound850Response",
    "Invoice810Document",
    "DispatchResult",
    "SendInvoiceResponse",
]
