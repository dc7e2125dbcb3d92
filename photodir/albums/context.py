"""
Processing Context

Bundles the collaborators a Photo needs to resolve and resize itself, so an
album can share one set of them across all of its photos.
"""

from dataclasses import dataclass
from datetime import tzinfo
from typing import Any, Dict, Optional

from photodir.config import section
from photodir.diagnostics import WarningSink, resolve_sink
from photodir.extractors import ExifExtractor
from photodir.resizers import ImageResizer, ResizePlanner
from photodir.resolvers import DateResolver, DimensionResolver
from photodir.storage import LocalStorageProvider, StorageProvider, create_storage_provider


@dataclass
class ProcessingContext:
    """
    Shared collaborators for photo processing.

    Attributes:
        extractor: Decoder adapter producing TagBags
        date_resolver: Capture date precedence chain
        dimension_resolver: Header dimension reader
        planner: Resize target planner
        resizer: Pillow re-encoder
        storage: Filesystem access (listing, creation times)
        warn: Diagnostic sink shared by every component above
    """

    extractor: Any
    date_resolver: DateResolver
    dimension_resolver: DimensionResolver
    planner: ResizePlanner
    resizer: Any
    storage: StorageProvider
    warn: WarningSink

    @classmethod
    def create(cls, extractor=None, storage: Optional[StorageProvider] = None,
               warn: Optional[WarningSink] = None,
               local_timezone: Optional[tzinfo] = None) -> 'ProcessingContext':
        """
        Build a context, filling in defaults for anything not supplied.

        Example:
            >>> messages = []
            >>> ctx = ProcessingContext.create(warn=messages.append)
        """
        sink = resolve_sink(warn)
        extractor = extractor if extractor is not None else ExifExtractor()
        return cls(
            extractor=extractor,
            date_resolver=DateResolver(local_timezone=local_timezone, warn=sink),
            dimension_resolver=DimensionResolver(),
            planner=ResizePlanner(warn=sink),
            resizer=ImageResizer(extractor),
            storage=storage if storage is not None else LocalStorageProvider(),
            warn=sink,
        )

    @classmethod
    def from_config(cls, config: Dict[str, Any], warn: Optional[WarningSink] = None,
                    extractor=None) -> 'ProcessingContext':
        """
        Build a context from a loaded configuration dict.

        Reads ``extraction.exiftool_path`` unless an extractor is supplied, and
        the ``storage:`` section for the storage provider.
        """
        if extractor is None:
            extraction_config = section(config, 'extraction')
            extractor = ExifExtractor(executable=extraction_config.get('exiftool_path'))
        return cls.create(
            extractor=extractor,
            storage=create_storage_provider(config),
            warn=warn,
        )
