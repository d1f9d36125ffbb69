"""
Error types raised by the ERP bridge services.

Routers translate these into HTTP responses; see the handlers in main.py.
"""
from typing import Optional


class ERPBridgeError(Exception):
    """Base class for all ERP bridge errors"""


class StorageError(ERPBridgeError):
    """The order store could not complete a read or write"""


class OrderNotFoundError(ERPBridgeError):
    """No purchase order exists with the requested id"""

    def __init__(self, order_id: int):
        self.order_id = order_id
        super().__init__(f"Order {order_id} not found")


class DispatchError(ERPBridgeError):
    """The partner API could not be reached at all (no HTTP response)"""

    def __init__(self, message: str, url: Optional[str] = None):
        self.url = url
        super().__init__(message)
