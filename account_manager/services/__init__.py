"""Services package."""

from account_manager.services.storage import (
    AuditStorageInterface,
    BalanceStorageInterface,
    InMemoryAuditStorage,
    InMemoryBalanceStorage,
    StorageError,
)

__all__ = [
    "AuditStorageInterface",
    "BalanceStorageInterface",
    "InMemoryAuditStorage",
    "InMemoryBalanceStorage",
    "StorageError",
]
