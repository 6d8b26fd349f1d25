"""
Domain Interfaces (Ports)
"""

from .clients import AuthProvider, EntityTable, Order, RecordStoreClient, Row

__all__ = [
    "AuthProvider",
    "EntityTable",
    "Order",
    "RecordStoreClient",
    "Row",
]
