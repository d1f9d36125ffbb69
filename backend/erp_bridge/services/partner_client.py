"""
Dispatch Client - delivers EDI 810 invoices to the partner API.

One POST per call: no retries, no backoff, and the transport's default timeout.
"""
import logging
from typing import Optional
import httpx
from erp_bridge.config import settings
from erp_bridge.exceptions import DispatchError
from erp_bridge.schemas.edi import Invoice810Document, DispatchResult

logger = logging.getLogger(__name__)


class PartnerClient:
    """HTTP client for the partner's invoice endpoint"""

    def __init__(
        self,
        url: Optional[str] = None,
        token: Optional[str] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.url = url or settings.partner_api_url
        self.token = token if token is not None else settings.partner_api_token
        self.transport = transport

    def _headers(self) -> dict:
        headers = {"Content-Type": "application/json"}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    def send(self, document: Invoice810Document) -> DispatchResult:
        """
        Send one invoice document to the partner API.

        The document is wrapped in a single-element list. Any 2xx status is a
        success; anything else is returned as a failed result carrying the
        status and raw response body.

        Raises:
            DispatchError if no HTTP response was received
        """
        payload = [document.to_wire()]

        try:
            with httpx.Client(transport=self.transport) as client:
                response = client.post(self.url, json=payload, headers=self._headers())
        except httpx.HTTPError as e:
            logger.error(f"Could not reach partner API at {self.url}: {e}")
            raise DispatchError(f"Could not reach partner API: {e}", url=self.url) from e

        if response.is_success:
            logger.info(f"Invoice {document.invoice_number} accepted by partner (HTTP {response.status_code})")
        else:
            logger.error(
                f"Invoice {document.invoice_number} rejected by partner "
                f"(HTTP {response.status_code}): {response.text[:200]}"
            )

        return DispatchResult(
            success=response.is_success,
            status_code=response.status_code,
            sent_payload=payload,
            response_body=response.text,
        )


partner_client = PartnerClient()


def get_partner_client() -> PartnerClient:
    """FastAPI dependency; overridden in tests"""
    return partner_client
