"""
Runs Exif tag extraction in command line.
"""

import argparse
import os
import sys
import timeit
from typing import List, Optional

from . import __version__, process_file
from .exif_log import get_logger, setup_logger
from .utils import ExifError

logger = get_logger()


def get_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog='exifparser',
        description='Extract EXIF information from a JPEG image into a JSON file.'
    )
    parser.add_argument(
        '-i', '--image', type=str, required=True,
        help='path to the image to be processed'
    )
    parser.add_argument(
        '-o', '--output', type=str, default='output.json',
        help='path to the file where the result of the parsing will be stored (default: %(default)s)'
    )
    parser.add_argument(
        '-v', '--version', action='version',
        version='exifparser %s on Python %s.%s' % (__version__, sys.version_info[0], sys.version_info[1]),
        help='display version information and exit'
    )
    parser.add_argument(
        '-d', '--debug', action='store_true', dest='debug', default=False,
        help='run in debug mode (display extra info)'
    )
    parser.add_argument(
        '-c', '--color', action='store_true', dest='color', default=False,
        help='output in color (only works with debug on POSIX)'
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Parse command line options/arguments and execute."""
    args = get_args(argv)
    setup_logger(args.debug, args.color)

    if not os.path.isfile(args.image):
        logger.error("'%s' is unreadable", args.image)
        return 1

    logger.debug('Opening: %s', args.image)
    tag_start = timeit.default_timer()
    try:
        record = process_file(args.image)
    except (ExifError, OSError) as err:
        logger.error('Error parsing image file: %s', err)
        return 1
    tag_stop = timeit.default_timer()

    if not record:
        logger.warning('No EXIF information found')

    content = record.to_json()
    try:
        with open(args.output, 'w', encoding='utf-8') as out_file:
            out_file.write(content)
    except OSError as err:
        logger.error('Failed to write file: %s', err)
        return 1

    print(content)
    logger.debug('Tags processed in %s seconds', tag_stop - tag_start)
    return 0


def run() -> None:
    sys.exit(main())
