"""
Wire schemas for the Zenbridge EDI documents.

Inbound 850 documents use the partner's snake_case field names. Outbound 810
documents are camelCase on the wire; the Python attributes stay snake_case and
map through aliases.
"""
from pydantic import BaseModel, Field, field_serializer
from typing import Any, Dict, List, Optional
from datetime import date
from decimal import Decimal


class Inbound850Item(BaseModel):
    product_code: str
    qty: int
    price: Decimal


class Inbound850Document(BaseModel):
    document_id: str
    sender_id: str
    po_number: str
    date_created: str  # Parsed leniently by the inbound mapper
    items: List[Inbound850Item]


class Inbound850Response(BaseModel):
    status: str = "success"
    message: str = "EDI 850 Processed Successfully"
    erp_reference_id: int


class MonetaryValueSummary(BaseModel):
    amount: Decimal

    @field_serializer("amount")
    def serialize_amount(self, amount: Decimal) -> float:
        return float(amount)


class TransactionTotals(BaseModel):
    number_of_line_items: int = Field(alias="numberOfLineItems")
    hash_total: Decimal = Field(alias="hashTotal")  # Equal to the invoice amount, not a checksum

    @field_serializer("hash_total")
    def serialize_hash_total(self, hash_total: Decimal) -> float:
        return float(hash_total)

    class Config:
        populate_by_name = True


class Invoice810Document(BaseModel):
    document_type: str = Field(default="810", alias="documentType")
    invoice_number: str = Field(alias="invoiceNumber")
    invoice_date: date = Field(alias="invoiceDate")
    purchase_order_number: str = Field(alias="purchaseOrderNumber")
    total_monetary_value_summary: MonetaryValueSummary = Field(alias="totalMonetaryValueSummary")
    transaction_totals: TransactionTotals = Field(alias="transactionTotals")

    class Config:
        populate_by_name = True

    def to_wire(self) -> Dict[str, Any]:
        """JSON-ready dict using the partner's field names"""
        return self.model_dump(by_alias=True, mode="json")


class DispatchResult(BaseModel):
    """Outcome of one delivery attempt to the partner API"""
    success: bool
    status_code: int
    sent_payload: List[Dict[str, Any]]
    response_body: Optional[str] = None


class SendInvoiceResponse(BaseModel):
    message: str
    sent_payload: List[Dict[str, Any]]
