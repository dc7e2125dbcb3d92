"""
Storage Provider

Interface for reading album directories. Only the local filesystem is
supported; the abstraction keeps directory listing and file timestamps out of
the album code so tests can substitute their own provider.
"""

import os
import logging
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List, Optional

from photodir.config import section
from photodir.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class StorageProvider(ABC):
    """
    Abstract base class for storage providers.
    """

    @abstractmethod
    def list_files(self, prefix: str) -> List[str]:
        """
        List the regular files directly under prefix.

        Args:
            prefix: Directory to list

        Returns:
            Sorted leaf file names
        """
        pass

    @abstractmethod
    def list_directories(self, prefix: str, exclude: Iterable[str] = ()) -> List[str]:
        """
        List the subdirectories directly under prefix.

        Args:
            prefix: Directory to list
            exclude: Absolute paths to leave out

        Returns:
            Sorted absolute directory paths
        """
        pass

    @abstractmethod
    def resolve(self, path: str) -> str:
        """Absolute location of an album or portfolio path."""
        pass

    @abstractmethod
    def get_created_time(self, path: str) -> datetime:
        """Get file creation time as an aware UTC datetime."""
        pass


class LocalStorageProvider(StorageProvider):
    """
    Local filesystem storage provider.

    Attributes:
        base_path: Base directory relative paths are resolved against

    Example:
        >>> storage = LocalStorageProvider('/photos')
        >>> storage.list_files('2025/concerts')
        ['IMG_0001.jpg', 'IMG_0002.jpg', 'album.json']
    """

    def __init__(self, base_path: Optional[str] = None):
        self.base_path = base_path

    def _full_path(self, path: str) -> str:
        return os.path.join(self.base_path, path) if self.base_path else path

    def list_files(self, prefix: str) -> List[str]:
        """List regular files in a local directory, not recursing."""
        search_path = self._full_path(prefix)
        with os.scandir(search_path) as entries:
            return sorted(entry.name for entry in entries if entry.is_file())

    def list_directories(self, prefix: str, exclude: Iterable[str] = ()) -> List[str]:
        """List subdirectories of a local directory as absolute paths."""
        search_path = os.path.abspath(self._full_path(prefix))
        excluded = {os.path.abspath(p) for p in exclude}
        with os.scandir(search_path) as entries:
            directories = [
                os.path.join(search_path, entry.name)
                for entry in entries
                if entry.is_dir()
            ]
        return sorted(d for d in directories if d not in excluded)

    def resolve(self, path: str) -> str:
        """Resolve path against base_path (when set) and make it absolute."""
        return os.path.abspath(self._full_path(path))

    def get_created_time(self, path: str) -> datetime:
        """
        Get local file creation time.

        Uses the birth time where the platform records one and falls back to
        st_ctime (inode change time on Linux).
        """
        stat = os.stat(self._full_path(path))
        timestamp = getattr(stat, 'st_birthtime', None)
        if timestamp is None:
            timestamp = stat.st_ctime
        return datetime.fromtimestamp(timestamp, tz=timezone.utc)


def create_storage_provider(config: Dict[str, Any]) -> StorageProvider:
    """
    Factory function to create storage provider from a loaded configuration.

    Args:
        config: Configuration dict; only the ``storage:`` section is read

    Raises:
        ConfigurationError: The section names a storage type other than local

    Example:
        >>> storage = create_storage_provider(load_config('config.yaml'))
        >>> storage.list_directories('portfolio')
    """
    storage_config = section(config, 'storage')
    storage_type = storage_config.get('type') or 'local'
    if storage_type != 'local':
        raise ConfigurationError(f"Unsupported storage type: {storage_type}")
    return LocalStorageProvider(base_path=storage_config.get('base_path'))
