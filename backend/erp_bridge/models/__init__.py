from erp_bridge.models.purchase_order import PurchaseOrder
from erp_bridge.models.line_item import LineItem

__all__ = ["PurchaseOrder", "LineItem"]
