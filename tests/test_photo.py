"""
Tests for Photo: cached, single-flight metadata and resizing.
"""

import threading
from concurrent.futures import ThreadPoolExecutor

import pytest
from PIL import Image

from helpers import FakeExtractor, make_tags
from photodir.albums import Photo
from photodir.exceptions import ConflictingOptions, DimensionUnavailable, InvalidImageFormat
from photodir.schemas import ResizeOptions


class TestPhotoMetadata:

    def test_resolves_record(self, tmp_path, context, extractor):
        extractor.tags['IMG_1.jpg'] = make_tags(
            width=1064, height=1600, camera_date='2023:01:01 00:00:01', offset='+00:00',
            identifier='id-1', description='A boat')
        record = Photo(str(tmp_path / 'IMG_1.jpg'), context=context).metadata()

        assert record.to_dict() == {
            'filename': 'IMG_1.jpg',
            'date': '2023-01-01T00:00:01.000Z',
            'width': 1064,
            'height': 1600,
            'landscape': False,
            'id': 'id-1',
            'alt': 'A boat',
        }

    def test_repeated_calls_return_same_record(self, tmp_path, context, extractor):
        photo = Photo(str(tmp_path / 'a.jpg'), context=context)
        assert photo.metadata() is photo.metadata()
        assert len(extractor.calls) == 1

    def test_concurrent_callers_share_one_decode(self, tmp_path, context, extractor):
        extractor.gate = threading.Event()
        photo = Photo(str(tmp_path / 'a.jpg'), context=context)

        with ThreadPoolExecutor(max_workers=8) as pool:
            futures = [pool.submit(photo.metadata) for _ in range(8)]
            extractor.gate.set()
            records = [f.result(timeout=10) for f in futures]

        assert len(extractor.calls) == 1
        assert all(r is records[0] for r in records)

    def test_failure_is_not_cached(self, tmp_path, context, extractor):
        extractor.tags['a.jpg'] = InvalidImageFormat('a.jpg', 'truncated')
        photo = Photo(str(tmp_path / 'a.jpg'), context=context)

        with pytest.raises(InvalidImageFormat):
            photo.metadata()

        extractor.tags['a.jpg'] = make_tags(xmp_date='2021-01-01T00:00:00Z')
        assert photo.metadata().iso_date == '2021-01-01T00:00:00.000Z'
        assert len(extractor.calls) == 2

    def test_missing_dimensions_raise(self, tmp_path, context, extractor):
        extractor.tags['a.jpg'] = make_tags(width=None, height=None)
        with pytest.raises(DimensionUnavailable):
            Photo(str(tmp_path / 'a.jpg'), context=context).metadata()

    def test_fallback_date_warns_once(self, tmp_path, context, extractor, sink):
        extractor.tags['a.jpg'] = make_tags()
        photo = Photo(str(tmp_path / 'a.jpg'), context=context)
        photo.metadata()
        photo.metadata()
        assert photo.metadata().iso_date == '2020-06-01T12:00:00.250Z'
        assert len(sink.messages) == 1


class TestPhotoResize:

    def test_resized_photo_keeps_record_with_new_size(self, tmp_path, context, extractor):
        source_dir = tmp_path / 'album'
        source_dir.mkdir()
        Image.new('RGB', (1600, 1064), 'navy').save(source_dir / 'a.jpg', format='JPEG')
        extractor.tags['a.jpg'] = make_tags(
            width=1600, height=1064, xmp_date='2021-01-01T00:00:00Z', identifier='id-1')

        photo = Photo(str(source_dir / 'a.jpg'), context=context)
        options = ResizeOptions(dir=str(tmp_path / 'out' / 'small'), largeSideMax=800, smallSideMax=600)
        resized = photo.resize(options)

        assert resized.path == str(tmp_path / 'out' / 'small' / 'a.jpg')
        record = resized.metadata()
        assert (record.width, record.height) == (800, 532)
        assert record.date == photo.metadata().date
        assert record.id == 'id-1'
        assert len(extractor.calls) == 1
        assert extractor.copies == [(photo.path, resized.path)]

    def test_resize_into_own_directory_conflicts(self, tmp_path, context):
        photo = Photo(str(tmp_path / 'a.jpg'), context=context)
        with pytest.raises(ConflictingOptions):
            photo.resize(ResizeOptions(dir=str(tmp_path), largeSideMax=800))
