"""
Shared fixtures: a recording warning sink, a fake decoder wired into a
processing context, an album directory builder and a UTC-8 host clock.
"""

import os
import json
import time
from datetime import timezone
from pathlib import Path
from typing import List, Optional

import pytest

from helpers import FakeExtractor, FixedTimeStorage, RecordingSink, make_tags
from photodir.albums import ProcessingContext


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def extractor() -> FakeExtractor:
    return FakeExtractor(default=make_tags(camera_date='2023:01:01 00:00:01', offset='+00:00'))


@pytest.fixture
def context(extractor, sink) -> ProcessingContext:
    return ProcessingContext.create(
        extractor=extractor,
        storage=FixedTimeStorage(),
        warn=sink,
        local_timezone=timezone.utc,
    )


@pytest.fixture
def make_album(tmp_path):
    """
    Create an album directory with empty files and optional metadata.

    Returns a function (name, files, metadata=None, metadata_name='_metadata.json').
    """

    def _make(name: str, files: List[str], metadata: Optional[dict] = None,
              metadata_name: str = '_metadata.json', parent: Optional[Path] = None) -> Path:
        album = (parent or tmp_path) / name
        album.mkdir(parents=True, exist_ok=True)
        for filename in files:
            (album / filename).write_bytes(b'')
        if metadata is not None:
            (album / metadata_name).write_text(json.dumps(metadata), encoding='utf-8')
        return album

    return _make


@pytest.fixture
def host_utc_minus_8():
    """Run with the process timezone set to UTC-8 (POSIX TZ string, no tz database needed)."""
    if not hasattr(time, 'tzset'):
        pytest.skip("time.tzset is not available on this platform")
    previous = os.environ.get('TZ')
    os.environ['TZ'] = 'PST8'
    time.tzset()
    yield
    if previous is None:
        os.environ.pop('TZ', None)
    else:
        os.environ['TZ'] = previous
    time.tzset()
