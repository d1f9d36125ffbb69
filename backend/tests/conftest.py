"""
Pytest configuration and shared fixtures for the ERP bridge test suite.
"""
import json
from typing import Generator, List

import httpx
import pytest
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from erp_bridge.database import Base, build_engine
import erp_bridge.models  # noqa: F401
from erp_bridge.schemas.edi import Inbound850Document
from erp_bridge.services.order_store import OrderStore
from erp_bridge.services.partner_client import PartnerClient

PARTNER_URL = "https://partner.test/edi/810"
PARTNER_TOKEN = "test-token"


@pytest.fixture
def engine():
    """In-memory SQLite engine shared across connections, with FK enforcement."""
    test_engine = build_engine("sqlite://", poolclass=StaticPool)
    Base.metadata.create_all(bind=test_engine)
    yield test_engine
    Base.metadata.drop_all(bind=test_engine)
    test_engine.dispose()


@pytest.fixture
def db_session(engine) -> Generator[Session, None, None]:
    """Provide a database session bound to the test engine."""
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def order_store(db_session) -> OrderStore:
    return OrderStore(db_session)


class PartnerRecorder:
    """Fake partner endpoint that records every request it receives."""

    def __init__(self, status_code: int = 200, body: str = '{"status": "received"}'):
        self.status_code = status_code
        self.body = body
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, text=self.body)

    def sent_json(self, index: int = 0):
        return json.loads(self.requests[index].content)


@pytest.fixture
def partner() -> PartnerRecorder:
    """A partner endpoint that accepts everything."""
    return PartnerRecorder()


@pytest.fixture
def partner_client(partner) -> PartnerClient:
    return PartnerClient(url=PARTNER_URL, token=PARTNER_TOKEN, transport=httpx.MockTransport(partner))


@pytest.fixture
def make_partner_client():
    """Factory for a client wired to a fake partner with a fixed response."""
    def _make(status_code: int = 200, body: str = "", handler=None, token: str = PARTNER_TOKEN):
        recorder = PartnerRecorder(status_code=status_code, body=body)
        transport = httpx.MockTransport(handler or recorder)
        return PartnerClient(url=PARTNER_URL, token=token, transport=transport), recorder
    return _make


@pytest.fixture
def sample_850_payload() -> dict:
    """Return a sample inbound EDI 850 webhook body."""
    return {
        "document_id": "DOC-0001",
        "sender_id": "S1",
        "po_number": "PO-1",
        "date_created": "2024-01-01",
        "items": [
            {"product_code": "X", "qty": 2, "price": 10.00}
        ]
    }


@pytest.fixture
def multi_item_850_payload() -> dict:
    """Return an 850 body with repeated product codes and mixed prices."""
    return {
        "document_id": "DOC-0002",
        "sender_id": "ACME-RETAIL",
        "po_number": "PO-2024-0042",
        "date_created": "2024-03-15T09:30:00Z",
        "items": [
            {"product_code": "WIDGET-A", "qty": 3, "price": "19.99"},
            {"product_code": "WIDGET-B", "qty": 10, "price": "2.50"},
            {"product_code": "WIDGET-A", "qty": 1, "price": "19.99"}
        ]
    }


@pytest.fixture
def sample_850(sample_850_payload) -> Inbound850Document:
    return Inbound850Document(**sample_850_payload)


@pytest.fixture
def multi_item_850(multi_item_850_payload) -> Inbound850Document:
    return Inbound850Document(**multi_item_850_payload)


# Configure pytest markers
def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "integration: Integration tests")
    config.addinivalue_line("markers", "api: API tests")
