"""
Tests for the strict input and output document schemas.
"""

import pytest
from pydantic import ValidationError

from photodir.schemas import AlbumMetadata, AlbumSchema, PhotoSchema, ResizeOptions

PHOTO = {
    'filename': 'IMG_2851.jpg',
    'date': '2009-12-09T00:33:19.000Z',
    'width': 1064,
    'height': 1600,
    'landscape': False,
}


class TestAlbumMetadata:

    def test_full_document(self):
        metadata = AlbumMetadata.model_validate({
            'title': 'My Album',
            'description': 'An album of photos',
            'thumb': 'IMG_1234.jpg',
            'slug': 'my-album',
            'unlisted': False,
            'keywords': ['landscapes', 'art'],
            'order': ['IMG_7890.jpg', 'IMG_1234.jpg'],
        })
        assert metadata.keywords == ['landscapes', 'art']

    def test_title_is_required(self):
        with pytest.raises(ValidationError):
            AlbumMetadata.model_validate({'description': 'untitled'})

    def test_unknown_fields_are_rejected(self):
        with pytest.raises(ValidationError):
            AlbumMetadata.model_validate({'title': 'x', 'author': 'me'})

    @pytest.mark.parametrize('field,value', [
        ('title', 42),
        ('unlisted', 'yes'),
        ('keywords', 'art'),
        ('order', [1, 2]),
    ])
    def test_wrong_types_are_rejected(self, field, value):
        document = {'title': 'x', field: value}
        with pytest.raises(ValidationError):
            AlbumMetadata.model_validate(document)


class TestPhotoSchema:

    def test_valid_photo(self):
        assert PhotoSchema.model_validate(PHOTO).width == 1064

    @pytest.mark.parametrize('changes', [
        {'width': '1064'},
        {'width': 0},
        {'landscape': True},
        {'date': '2009-12-09T00:33:19Z'},
        {'extra': 1},
    ])
    def test_invalid_photos(self, changes):
        with pytest.raises(ValidationError):
            PhotoSchema.model_validate({**PHOTO, **changes})


class TestAlbumSchema:

    def test_round_trip(self):
        document = {'title': 'Summer', 'slug': 'summer', 'unlisted': False, 'photos': [PHOTO]}
        validated = AlbumSchema.model_validate(document)
        assert validated.model_dump(exclude_none=True) == document

    def test_requires_slug_and_unlisted(self):
        with pytest.raises(ValidationError):
            AlbumSchema.model_validate({'title': 'Summer', 'photos': []})


class TestResizeOptions:

    def test_accepts_document_names(self):
        options = ResizeOptions.model_validate({'dir': 'out', 'largeSideMax': 2048, 'smallSideMax': 1024})
        assert options.large_side_max == 2048
        assert options.small_side_max == 1024
        assert options.quality == 80

    def test_accepts_field_names(self):
        assert ResizeOptions(dir='out', large_side_max=10).large_side_max == 10

    @pytest.mark.parametrize('changes', [
        {'largeSideMax': 0},
        {'smallSideMax': -5},
        {'quality': 0},
        {'quality': 101},
        {'resample': 'lanczos'},
    ])
    def test_invalid_options(self, changes):
        with pytest.raises(ValidationError):
            ResizeOptions.model_validate({'dir': 'out', 'largeSideMax': 100, **changes})

    def test_from_config_overrides(self):
        options = ResizeOptions.from_config(
            {'resize': {'dir': 'from-config', 'large_side_max': 2048, 'quality': 90}},
            dir='from-cli', large_side_max=None,
        )
        assert options.dir == 'from-cli'
        assert options.large_side_max == 2048
        assert options.quality == 90

    def test_from_config_without_resize_section(self):
        options = ResizeOptions.from_config({'album': {'max_workers': 2}}, dir='out', large_side_max=640)
        assert (options.dir, options.large_side_max, options.quality) == ('out', 640, 80)
