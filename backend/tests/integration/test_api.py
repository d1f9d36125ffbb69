"""
API tests for the webhook and ERP order endpoints.
"""
from decimal import Decimal

import httpx
import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from erp_bridge.database import get_db
from erp_bridge.main import app
from erp_bridge.services.partner_client import get_partner_client


@pytest.fixture
def client(engine, partner_client):
    """TestClient using the in-memory database and the fake partner."""
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    def override_get_db():
        db = TestingSessionLocal()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_partner_client] = lambda: partner_client
    yield TestClient(app)
    app.dependency_overrides.clear()


def post_850(client, payload) -> int:
    response = client.post("/webhook/zenbridge/inbound-850", json=payload)
    assert response.status_code == 200
    return response.json()["erp_reference_id"]


@pytest.mark.api
class TestInbound850Webhook:

    def test_accepts_document(self, client, sample_850_payload):
        response = client.post("/webhook/zenbridge/inbound-850", json=sample_850_payload)

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "success"
        assert body["message"] == "EDI 850 Processed Successfully"
        assert isinstance(body["erp_reference_id"], int)

    @pytest.mark.parametrize("missing", ["sender_id", "po_number", "date_created", "items", "document_id"])
    def test_missing_field_is_rejected(self, client, sample_850_payload, missing):
        del sample_850_payload[missing]

        response = client.post("/webhook/zenbridge/inbound-850", json=sample_850_payload)

        assert response.status_code == 422

    def test_non_numeric_quantity_is_rejected(self, client, sample_850_payload):
        sample_850_payload["items"][0]["qty"] = "two"

        response = client.post("/webhook/zenbridge/inbound-850", json=sample_850_payload)

        assert response.status_code == 422
        assert client.get("/erp/orders").json() == []

    def test_unparseable_date_is_accepted(self, client, sample_850_payload):
        sample_850_payload["date_created"] = "last tuesday"

        response = client.post("/webhook/zenbridge/inbound-850", json=sample_850_payload)

        assert response.status_code == 200


@pytest.mark.api
class TestListOrders:

    def test_empty(self, client):
        response = client.get("/erp/orders")

        assert response.status_code == 200
        assert response.json() == []

    def test_lists_every_ingested_order_with_lines(self, client, sample_850_payload, multi_item_850_payload):
        ids = [post_850(client, sample_850_payload), post_850(client, multi_item_850_payload)]

        orders = client.get("/erp/orders").json()

        assert [order["id"] for order in orders] == ids
        submitted = [sample_850_payload, multi_item_850_payload]
        for order, payload in zip(orders, submitted):
            assert order["po_number"] == payload["po_number"]
            assert order["partner_id"] == payload["sender_id"]
            assert [
                (line["sku"], line["quantity"], Decimal(str(line["unit_price"])))
                for line in order["line_items"]
            ] == [
                (item["product_code"], item["qty"], Decimal(str(item["price"])))
                for item in payload["items"]
            ]

    def test_sub_cent_prices_are_listed_exactly(self, client, sample_850_payload):
        sample_850_payload["items"] = [
            {"product_code": "X", "qty": 3, "price": "0.333"},
            {"product_code": "Y", "qty": 1, "price": "0.125"},
        ]
        order_id = post_850(client, sample_850_payload)

        order = client.get(f"/erp/orders/{order_id}").json()

        assert Decimal(str(order["total_amount"])) == Decimal("1.124")
        assert [Decimal(str(line["unit_price"])) for line in order["line_items"]] == [Decimal("0.333"), Decimal("0.125")]

    def test_offset_date_is_listed_in_utc(self, client, sample_850_payload):
        sample_850_payload["date_created"] = "2024-03-15T09:30:00+02:00"
        order_id = post_850(client, sample_850_payload)

        order = client.get(f"/erp/orders/{order_id}").json()

        assert order["order_date"].startswith("2024-03-15T07:30:00")

    def test_get_single_order(self, client, multi_item_850_payload):
        order_id = post_850(client, multi_item_850_payload)

        response = client.get(f"/erp/orders/{order_id}")

        assert response.status_code == 200
        assert response.json()["id"] == order_id
        assert Decimal(str(response.json()["total_amount"])) == Decimal("104.96")

    def test_get_single_order_not_found(self, client):
        response = client.get("/erp/orders/999")

        assert response.status_code == 404
        assert response.json() == {"error": "Order 999 not found"}


@pytest.mark.api
class TestSendInvoice:

    def test_end_to_end_scenario(self, client, partner, sample_850_payload):
        """Ingest PO-1, list it, then invoice it."""
        order_id = post_850(client, sample_850_payload)

        orders = client.get("/erp/orders").json()
        stored = next(order for order in orders if order["id"] == order_id)
        assert Decimal(str(stored["total_amount"])) == Decimal("20.00")
        assert len(stored["line_items"]) == 1

        response = client.post(f"/erp/orders/{order_id}/send-invoice")

        assert response.status_code == 200
        body = response.json()
        assert "message" in body
        document = body["sent_payload"][0]
        assert document["documentType"] == "810"
        assert document["invoiceNumber"].startswith(f"INV-{order_id}-")
        assert document["purchaseOrderNumber"] == "PO-1"
        assert document["totalMonetaryValueSummary"]["amount"] == 20.00
        assert document["transactionTotals"]["numberOfLineItems"] == 1
        assert document["transactionTotals"]["hashTotal"] == 20.00
        assert partner.sent_json() == body["sent_payload"]

    def test_unknown_order_returns_404_without_dispatch(self, client, partner):
        response = client.post("/erp/orders/12345/send-invoice")

        assert response.status_code == 404
        assert "error" in response.json()
        assert partner.requests == []

    def test_partner_failure_returns_problem_with_upstream_details(self, client, partner, sample_850_payload):
        order_id = post_850(client, sample_850_payload)
        partner.status_code = 400
        partner.body = '{"error": "unknown trading partner"}'

        response = client.post(f"/erp/orders/{order_id}/send-invoice")

        assert response.status_code == 400
        assert response.headers["content-type"].startswith("application/problem+json")
        problem = response.json()
        assert problem["status"] == 400
        assert problem["detail"] == '{"error": "unknown trading partner"}'

        # The order is not rolled back
        assert client.get(f"/erp/orders/{order_id}").status_code == 200

    def test_partner_unreachable_returns_502(self, client, sample_850_payload, make_partner_client):
        def refuse(request):
            raise httpx.ConnectError("connection refused", request=request)

        order_id = post_850(client, sample_850_payload)
        unreachable, _ = make_partner_client(handler=refuse)
        app.dependency_overrides[get_partner_client] = lambda: unreachable

        response = client.post(f"/erp/orders/{order_id}/send-invoice")

        assert response.status_code == 502
        assert "Could not reach partner API" in response.json()["detail"]


@pytest.mark.api
def test_health(client):
    assert client.get("/health").json() == {"status": "healthy"}
