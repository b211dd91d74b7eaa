"""
Argument parsing for the CLI interface.

Provides functions to create and configure the argument parser for the
image similarity command-line interface.
"""

from __future__ import annotations

import argparse
from pathlib import Path

from .. import __version__


def _create_common_parser() -> argparse.ArgumentParser:
    """Options shared by every subcommand."""
    common = argparse.ArgumentParser(add_help=False)

    common.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Verbose output'
    )

    common.add_argument(
        '-w', '--workers',
        type=int,
        default=None,
        help='Number of parallel workers. Default: from user config (4)'
    )

    common.add_argument(
        '--no-progress',
        action='store_true',
        help='Disable progress bars (useful for piping output)'
    )

    return common


def _add_extension_argument(subparser: argparse.ArgumentParser) -> None:
    subparser.add_argument(
        '-e', '--ext',
        dest='extension',
        default=None,
        help='Allowed extensions, defaults are "png,jpg,jpeg"'
    )


def create_parser() -> argparse.ArgumentParser:
    """
    Create and configure the argument parser for the CLI.

    Returns:
        Configured ArgumentParser instance with the pair, directory, match,
        hash and config subcommands
    """
    parser = argparse.ArgumentParser(
        prog='imgsim',
        description='Compute image similarity',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s pair -a cat.png -b cat_small.jpg
      Print the similarity of two images

  %(prog)s directory -d /path/to/photos
      Rank every pair of images in a directory, most similar first

  %(prog)s match -i cat.png -d /path/to/photos -e png,gif
      Rank the images of a directory by similarity to cat.png

  %(prog)s hash -i cat.png
      Print the hexadecimal fingerprint of an image
        """
    )

    parser.add_argument(
        '--version',
        action='version',
        version=f'%(prog)s {__version__}'
    )

    common = _create_common_parser()
    subparsers = parser.add_subparsers(dest='command', metavar='command')
    subparsers.required = True

    pair = subparsers.add_parser(
        'pair',
        parents=[common],
        help='Compute image similarity with image a and image b'
    )
    pair.add_argument('-a', '--imagea', type=Path, required=True, help='Image A')
    pair.add_argument('-b', '--imageb', type=Path, required=True, help='Image B')

    directory = subparsers.add_parser(
        'directory',
        parents=[common],
        help='Compute image similarity of all image pairs with allowed extensions in given directory'
    )
    directory.add_argument('-d', '--directory', type=Path, required=True, help='Directory')
    _add_extension_argument(directory)

    match = subparsers.add_parser(
        'match',
        parents=[common],
        help='Compute similarities of given image with all images that end in allowed extensions in given directory'
    )
    match.add_argument('-d', '--directory', type=Path, required=True, help='Directory')
    match.add_argument('-i', '--image', type=Path, required=True, help='Image')
    _add_extension_argument(match)

    hash_cmd = subparsers.add_parser(
        'hash',
        parents=[common],
        help='Print the hexadecimal fingerprint of one or more images'
    )
    hash_cmd.add_argument('-i', '--image', type=Path, nargs='+', required=True, help='Image(s)')

    config = subparsers.add_parser(
        'config',
        parents=[common],
        help='Show the user configuration'
    )
    config.add_argument(
        '-i', '--init',
        action='store_true',
        help='Create an example configuration file'
    )

    return parser


def parse_arguments(argv=None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Args:
        argv: List of argument strings (default: sys.argv)

    Returns:
        Parsed arguments as Namespace object

    Examples:
        >>> args = parse_arguments(['pair', '-a', 'a.png', '-b', 'b.png'])
        >>> args.command
        'pair'
    """
    parser = create_parser()
    return parser.parse_args(argv)


__all__ = [
    'create_parser',
    'parse_arguments',
]
