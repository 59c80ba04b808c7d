from typing import NamedTuple

from .exif_log import get_logger
from .ifd import Ifd
from .record import ExifRecord
from .utils import (
    IfdOffsetOutOfBounds, InvalidExifHeader, InvalidMagicNumber, UnknownByteOrder,
    find_jpeg_app1, read_exif_block, s2n,
)

logger = get_logger()

EXIF_IDENTIFIER = b'Exif\x00\x00'
TIFF_MAGIC = 42
TIFF_HEADER_SIZE = 8

BYTE_ORDERS = {
    b'II': 'I',
    b'MM': 'M',
}


class TiffHeader(NamedTuple):
    """
    The 8 byte TIFF header found after the EXIF identifier.

    ``tiff_base`` is where the header sits in the EXIF block; every offset
    in the TIFF data is relative to it.
    """
    byte_order: str
    magic: int
    first_ifd_offset: int
    tiff_base: int

    @classmethod
    def parse(cls, block: bytes) -> 'TiffHeader':
        if block[0:len(EXIF_IDENTIFIER)] != EXIF_IDENTIFIER \
                or len(block) < len(EXIF_IDENTIFIER) + TIFF_HEADER_SIZE:
            raise InvalidExifHeader('invalid EXIF header')

        tiff_base = len(EXIF_IDENTIFIER)
        try:
            endian = BYTE_ORDERS[block[tiff_base:tiff_base + 2]]
        except KeyError:
            raise UnknownByteOrder('unknown byte order: %r' % block[tiff_base:tiff_base + 2]) from None
        logger.debug('Endian format is %s (%s)', endian, {'I': 'Intel', 'M': 'Motorola'}[endian])

        magic = s2n(block, tiff_base + 2, 2, endian)
        if magic != TIFF_MAGIC:
            raise InvalidMagicNumber('Invalid TIFF magic number: got %d' % magic)

        first_ifd_offset = s2n(block, tiff_base + 4, 4, endian)
        if tiff_base + first_ifd_offset + 2 > len(block):
            raise IfdOffsetOutOfBounds('IFD offset out of bounds: %d' % first_ifd_offset)

        return cls(endian, magic, first_ifd_offset, tiff_base)


class ExifHeader:
    """
    Handle an EXIF header.
    """
    def __init__(self, data: bytes):
        segment = find_jpeg_app1(data)
        self.block: bytes = read_exif_block(data, segment)
        self.offset = segment.start
        self.tiff = TiffHeader.parse(self.block)

        logger.debug('IFD0 at offset %d:', self.tiff.first_ifd_offset)
        self.ifd = Ifd(
            self.block,
            'IFD0',
            self.tiff.tiff_base,
            self.tiff.first_ifd_offset,
            self.tiff.byte_order,
        )

    def __str__(self) -> str:
        return 'JPEG EXIF Header @ {}'.format(self.offset)

    def __repr__(self) -> str:
        return '<{}.{} offset={}, endian={} at {}>'.format(
            self.__class__.__module__,
            self.__class__.__name__,
            self.offset,
            self.tiff.byte_order,
            hex(id(self))
        )

    def get_tags(self) -> ExifRecord:
        """
        Get all tags from the first IFD
        """
        return self.ifd.get_tags()
