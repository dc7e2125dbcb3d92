"""
Tests for Portfolio discovery and bulk writing.
"""

import json
import os

from photodir.albums import Portfolio, PortfolioOptions
from photodir.schemas import AlbumSchema


def test_one_album_per_subdirectory(tmp_path, make_album, context):
    for name in ('Winter', 'Autumn', 'Drafts'):
        make_album(name, ['a.jpg'])
    (tmp_path / 'cover.jpg').write_bytes(b'')

    portfolio = Portfolio(str(tmp_path), PortfolioOptions(skip_album_names=('Drafts',)), context)

    assert [album.name for album in portfolio.albums] == ['Autumn', 'Winter']


def test_metadata_dir_inside_portfolio_is_not_an_album(tmp_path, make_album, context):
    make_album('Winter', ['a.jpg'])
    meta = tmp_path / '_meta'
    meta.mkdir()
    (meta / 'Winter.json').write_text(json.dumps({'title': 'Cold'}))

    portfolio = Portfolio(str(tmp_path), PortfolioOptions(metadata_dir=str(meta)), context)

    assert [album.title for album in portfolio.albums] == ['Cold']


def test_save_all_metadata(tmp_path, make_album, context):
    root = tmp_path / 'portfolio'
    make_album('Winter', ['a.jpg', 'b.jpg'], parent=root)
    make_album('Autumn', ['c.jpg'], parent=root)
    output = tmp_path / 'site'

    portfolio = Portfolio(str(root), context=context)
    written = portfolio.save_all_metadata(
        lambda album: os.path.join(str(output), f"{album.name.lower()}.json"))

    assert written == [str(output / 'autumn.json'), str(output / 'winter.json')]
    winter = json.loads((output / 'winter.json').read_text())
    AlbumSchema.model_validate(winter)
    assert len(winter['photos']) == 2


def test_options_from_config():
    config = {
        'album': {'metadata_file': '_metadata.json', 'allowed_extensions': ['jpg']},
        'portfolio': {'skip_album_names': ['Drafts']},
    }
    options = PortfolioOptions.from_config(config, max_workers=2)
    assert options.metadata_file == '_metadata.json'
    assert options.allowed_extensions == ('jpg',)
    assert options.skip_album_names == ('Drafts',)
    assert options.max_workers == 2
