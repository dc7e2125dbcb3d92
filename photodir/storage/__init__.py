"""
Storage package for photodir.
"""

from .storage_provider import (
    StorageProvider,
    LocalStorageProvider,
    create_storage_provider
)

__all__ = [
    'StorageProvider',
    'LocalStorageProvider',
    'create_storage_provider',
]
