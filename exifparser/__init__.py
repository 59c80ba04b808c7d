"""
Read Exif metadata from jpeg files.
"""
import os
from typing import BinaryIO, Union

from .exif_log import get_logger
from .exif_header import ExifHeader
from .record import ExifRecord
from .tags import EXIF_TAGS, ExifField
from .utils import (
    App1NotFound, ExifError, IfdOffsetOutOfBounds, InvalidExifHeader, InvalidMagicNumber,
    NotAJpeg, SegmentTooShort, UnknownByteOrder,
)

__version__ = '1.0.0'

__all__ = [
    'process_bytes', 'process_file', 'ExifRecord', 'ExifField', 'EXIF_TAGS',
    'ExifError', 'NotAJpeg', 'App1NotFound', 'SegmentTooShort', 'InvalidExifHeader',
    'UnknownByteOrder', 'InvalidMagicNumber', 'IfdOffsetOutOfBounds',
]

logger = get_logger()


def process_bytes(data: bytes) -> ExifRecord:
    """
    Decode the EXIF tags of a JPEG image held in memory.

    Structural problems raise an ExifError; a bad individual entry only
    leaves its field out of the result.
    """
    hdr = ExifHeader(bytes(data))

    return hdr.get_tags()


def process_file(fh: Union[BinaryIO, str, os.PathLike]) -> ExifRecord:
    """
    Process an image file (expects an open file object or a path).
    """
    if isinstance(fh, (str, os.PathLike)):
        with open(fh, 'rb') as img_file:
            data = img_file.read()
    else:
        fh.seek(0)
        data = fh.read()

    return process_bytes(data)
