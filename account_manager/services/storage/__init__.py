"""
Storage Services Package

Provides abstract interfaces and concrete implementations for data storage.
Currently implements in-memory storage only; the interface keeps it swappable.
"""

from account_manager.services.storage.interface import (
    AuditStorageInterface,
    BalanceStorageInterface,
    StorageError,
)
from account_manager.services.storage.memory import (
    InMemoryAuditStorage,
    InMemoryBalanceStorage,
)

__all__ = [
    # Interfaces
    "AuditStorageInterface",
    "BalanceStorageInterface",
    # Exceptions
    "StorageError",
    # In-memory implementation
    "InMemoryAuditStorage",
    "InMemoryBalanceStorage",
]
