"""
Command-Line Interface for photodir

Generates album documents for a single album or a whole portfolio, and
resizes an album's photos.
"""

import sys
import json
import argparse
import logging
from typing import List, Optional

from pydantic import ValidationError

from photodir.albums import Album, AlbumOptions, Portfolio, PortfolioOptions, ProcessingContext
from photodir.config import load_config, section
from photodir.exceptions import PhotoDirError
from photodir.reporters import JsonReporter
from photodir.schemas import ResizeOptions

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(config: dict, verbose: bool = False) -> None:
    level_name = 'DEBUG' if verbose else str(section(config, 'logging').get('level', 'INFO'))
    logging.basicConfig(level=getattr(logging, level_name.upper(), logging.INFO),
                        format=LOG_FORMAT)


def _album_overrides(args) -> dict:
    return {
        'metadata_file': args.metadata_file,
        'metadata_dir': args.metadata_dir,
        'max_workers': args.workers,
    }


def cmd_album(args, config: dict) -> None:
    """Print or write the document of one album."""
    logger.info(f"Reading album: {args.path}")
    context = ProcessingContext.from_config(config)
    album = Album(args.path, AlbumOptions.from_config(config, **_album_overrides(args)), context)

    reporter = JsonReporter.from_config(args.config)
    if args.indent is not None:
        reporter.indent = args.indent

    document = album.metadata(skip_failed=args.skip_failed)
    if args.output:
        reporter.generate_report(document, args.output)
        logger.info(f"✓ Album {album.name} written to {args.output}")
    else:
        json.dump(document, sys.stdout, indent=reporter.indent, ensure_ascii=False)
        sys.stdout.write('\n')


def cmd_portfolio(args, config: dict) -> None:
    """Write one document per album of a portfolio."""
    logger.info(f"Reading portfolio: {args.path}")
    context = ProcessingContext.from_config(config)
    options = PortfolioOptions.from_config(
        config,
        skip_album_names=tuple(args.skip) if args.skip else None,
        **_album_overrides(args),
    )
    portfolio = Portfolio(args.path, options, context)

    reporter = JsonReporter.from_config(args.config)
    if args.output_dir:
        reporter.output_directory = args.output_dir
    if args.indent is not None:
        reporter.indent = args.indent

    written = portfolio.save_all_metadata(
        reporter.report_path, indent=reporter.indent, skip_failed=args.skip_failed)
    logger.info(f"✓ Wrote {len(written)} album documents to {reporter.output_directory}")


def cmd_resize(args, config: dict) -> None:
    """Resize every photo of an album."""
    context = ProcessingContext.from_config(config)
    album = Album(args.path, AlbumOptions.from_config(config, **_album_overrides(args)), context)
    options = ResizeOptions.from_config(
        config,
        dir=args.dir,
        large_side_max=args.large_side_max,
        small_side_max=args.small_side_max,
        quality=args.quality,
    )
    resized = album.resize(options)
    logger.info(f"✓ Resized {len(resized)} photos into {options.dir}")


def _add_album_arguments(parser: argparse.ArgumentParser) -> None:
    group = parser.add_mutually_exclusive_group()
    group.add_argument('--metadata-file', help='Metadata file name inside each album, e.g. _metadata.json')
    group.add_argument('--metadata-dir', help='Directory holding <album name>.json metadata files')
    parser.add_argument('--workers', type=int, help='Worker threads per album')


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='photodir',
        description='Generate JSON metadata documents from directories of photos',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog='''
Examples:
  # Print one album's document
  photodir album /Volumes/Photos/Portfolio/Summer --metadata-file _metadata.json

  # Write a document per album
  photodir portfolio /Volumes/Photos/Portfolio --output-dir /srv/site/albums --skip Drafts

  # Resize an album for the web
  photodir resize /Volumes/Photos/Portfolio/Summer --dir /srv/site/photos/summer --large-side-max 2048
        '''
    )

    parser.add_argument('--config', default=None, help='Path to config file (default: config.yaml if present)')
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging')

    subparsers = parser.add_subparsers(dest='command', help='Commands')

    # Album command
    album_parser = subparsers.add_parser('album', help='Generate the document of one album')
    album_parser.add_argument('path', help='Album directory')
    album_parser.add_argument('--output', '-o', help='Write to this file instead of stdout')
    album_parser.add_argument('--indent', type=int, help='JSON indentation')
    album_parser.add_argument('--skip-failed', action='store_true',
                              help='Omit photos that cannot be read instead of failing')
    _add_album_arguments(album_parser)
    album_parser.set_defaults(func=cmd_album)

    # Portfolio command
    portfolio_parser = subparsers.add_parser('portfolio', help='Generate a document per album')
    portfolio_parser.add_argument('path', help='Portfolio directory')
    portfolio_parser.add_argument('--output-dir', help='Directory for <album name>.json files')
    portfolio_parser.add_argument('--skip', nargs='+', metavar='NAME', help='Subdirectories to skip')
    portfolio_parser.add_argument('--indent', type=int, help='JSON indentation')
    portfolio_parser.add_argument('--skip-failed', action='store_true',
                                  help='Omit photos that cannot be read instead of failing')
    _add_album_arguments(portfolio_parser)
    portfolio_parser.set_defaults(func=cmd_portfolio)

    # Resize command
    resize_parser = subparsers.add_parser('resize', help="Resize an album's photos")
    resize_parser.add_argument('path', help='Album directory')
    resize_parser.add_argument('--dir', help='Destination directory')
    resize_parser.add_argument('--large-side-max', type=int, help='Maximum long side in pixels')
    resize_parser.add_argument('--small-side-max', type=int, help='Maximum short side in pixels')
    resize_parser.add_argument('--quality', type=int, help='Encoder quality, 1-100')
    _add_album_arguments(resize_parser)
    resize_parser.set_defaults(func=cmd_resize)

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return

    config = load_config(args.config)
    setup_logging(config, args.verbose)

    try:
        args.func(args, config)
    except (PhotoDirError, OSError, ValidationError) as e:
        logger.error(f"Error: {e}", exc_info=True)
        sys.exit(1)


if __name__ == '__main__':
    main()
