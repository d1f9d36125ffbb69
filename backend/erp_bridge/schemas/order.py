from pydantic import BaseModel
from typing import List
from datetime import datetime
from decimal import Decimal


class LineItemResponse(BaseModel):
    id: int
    sku: str
    quantity: int
    unit_price: Decimal
    purchase_order_id: int

    class Config:
        from_attributes = True


class LineItemCreate(BaseModel):
    sku: str
    quantity: int
    unit_price: Decimal


class PurchaseOrderResponse(BaseModel):
    id: int
    po_number: str
    partner_id: str
    order_date: datetime
    total_amount: Decimal
    line_items: List[LineItemResponse] = []

    class Config:
        from_attributes = True


class PurchaseOrderCreate(BaseModel):
    """A mapped purchase order that has not been stored yet"""
    po_number: str
    partner_id: str
    order_date: datetime
    total_amount: Decimal
    line_items: List[LineItemCreate] = []
