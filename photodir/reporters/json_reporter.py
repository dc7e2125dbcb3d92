"""
JSON Reporter

Writes album documents as JSON files.
"""

import os
import json
import logging
from typing import Any, Dict, Optional

from photodir.config import load_config, section

logger = logging.getLogger(__name__)


def write_json(path: str, document: Dict[str, Any], indent: Optional[int] = None) -> str:
    """
    Write a document to path as UTF-8 JSON, creating parent directories.

    Returns:
        Path of the written file
    """
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    with open(path, 'w', encoding='utf-8') as f:
        json.dump(document, f, indent=indent, ensure_ascii=False)
        f.write('\n')
    logger.info(f"Wrote {path}")
    return path


class JsonReporter:
    """
    Writes one JSON document per album.

    Attributes:
        output_directory: Directory reports are written to
        indent: JSON indentation, None for compact output

    Example:
        >>> reporter = JsonReporter('site/albums', indent=2)
        >>> reporter.generate_report(album.metadata(), reporter.report_path(album))
        'site/albums/summer.json'
    """

    def __init__(self, output_directory: str = 'albums', indent: Optional[int] = None):
        """
        Initialize JSON reporter.

        Args:
            output_directory: Base directory for saving reports
            indent: JSON indentation
        """
        self.output_directory = output_directory
        self.indent = indent

    @classmethod
    def from_config(cls, config_path: Optional[str] = None) -> 'JsonReporter':
        """Create JsonReporter from configuration file."""
        config = load_config(config_path)
        reporting_config = section(config, 'reporting')
        return cls(
            output_directory=reporting_config.get('output_path', 'albums'),
            indent=reporting_config.get('indent'),
        )

    def report_path(self, album) -> str:
        """``<output_directory>/<album name lower-cased>.json``"""
        return os.path.join(self.output_directory, f"{album.name.lower()}.json")

    def generate_report(self, document: Dict[str, Any], path: str) -> str:
        """
        Write an album document.

        Args:
            document: Album document as returned by Album.metadata()
            path: Target file, usually from report_path()

        Returns:
            Path to generated report file
        """
        return write_json(path, document, self.indent)
