"""
Misc utilities.
"""

from fractions import Fraction
import struct
from typing import NamedTuple

from .exif_log import get_logger

logger = get_logger()

JPEG_SOI = b'\xFF\xD8'
APP1_MARKER = 0xE1


class ExifError(Exception):
    """Base class for anything that stops an image from being decoded."""


class NotAJpeg(ExifError):
    pass


class App1NotFound(ExifError):
    pass


class SegmentTooShort(ExifError):
    pass


class InvalidExifHeader(ExifError):
    pass


class UnknownByteOrder(ExifError):
    pass


class InvalidMagicNumber(ExifError):
    pass


class IfdOffsetOutOfBounds(ExifError):
    pass


class Segment(NamedTuple):
    """
    APP1 payload position within the image.

    ``start`` points at the two byte length field, ``length`` counts it.
    """
    start: int
    length: int


def s2n(data: bytes, offset: int, length: int, endian: str, signed: bool = False) -> int:
    """
    Convert slice to integer, based on sign and endian flags.

    The offset is relative to the start of ``data``; callers working in the
    TIFF address space add the TIFF base themselves.
    """
    # Little-endian if Intel, big-endian if Motorola
    fmt = '<' if endian == 'I' else '>'
    # Construct a format string from the requested length and signedness;
    # raise a ValueError if length is something silly like 3
    try:
        fmt += {
            (1, False): 'B',
            (1, True):  'b',
            (2, False): 'H',
            (2, True):  'h',
            (4, False): 'I',
            (4, True):  'i',
            }[(length, signed)]
    except KeyError:
        raise ValueError('unexpected unpacking length: %d' % length)
    buf = data[offset:offset + length]
    if len(buf) != length:
        raise IndexError('cannot read %d bytes at offset %d' % (length, offset))
    return struct.unpack(fmt, buf)[0]


def read_length_field(marker_header: bytes) -> int:
    """
    Declared segment length from a marker header (marker + length field).

    Always big-endian and includes the two length bytes themselves.
    """
    if len(marker_header) < 4:
        raise SegmentTooShort('APP1 marker is not followed by a length field')
    length = s2n(marker_header, 2, 2, 'M')
    if length < 2:
        raise SegmentTooShort('invalid segment length: %d' % length)
    return length


def find_jpeg_app1(data: bytes) -> Segment:
    """
    Locate the first APP1 segment in a JPEG image.

    Every 0xFF byte is considered a marker candidate, segment lengths are
    not used to skip over other segments' payloads.
    """
    if data[0:2] != JPEG_SOI:
        raise NotAJpeg('Image is not a JPEG file')
    logger.debug('JPEG format recognized data[0:2]=0x%X%X', data[0], data[1])

    # stop one short so a trailing 0xFF never reads past the end
    for i in range(2, len(data) - 1):
        if data[i] == 0xFF and data[i + 1] == APP1_MARKER:
            logger.debug('  APP1 at base 0x%X', i)
            length = read_length_field(data[i:i + 4])
            logger.debug('  Length: %d', length)
            return Segment(i + 2, length)

    raise App1NotFound('APP1 marker not found in image')


def read_exif_block(data: bytes, segment: Segment) -> bytes:
    """Slice the APP1 payload out of the image and drop its length field."""
    remaining = len(data) - segment.start
    if remaining < segment.length:
        raise SegmentTooShort(
            'invalid segment length: expected at least %d bytes, got %d' % (segment.length, remaining)
        )
    return data[segment.start + 2:segment.start + segment.length]


def make_string(seq: bytes) -> str:
    """
    Don't throw an exception when given undecodable bytes.

    Trailing nulls are dropped, invalid UTF-8 is replaced.
    """
    seq = seq.rstrip(b'\x00')
    try:
        return seq.decode('utf-8')
    except UnicodeDecodeError:
        logger.debug('Possibly corrupted ASCII value: %r', seq)
        return seq.decode('utf-8', 'replace')


def printable_float(value: float) -> str:
    """
    Shortest text that round-trips ``value``, without a trailing '.0'.

    72.0 prints as '72', 0.005 as '0.005'.
    """
    printable = repr(value)
    if printable.endswith('.0'):
        printable = printable[:-2]
    return printable


class Ratio(Fraction):
    """
    Ratio object that keeps a zero denominator instead of raising.
    """

    # We're immutable, so use __new__ not __init__
    def __new__(cls, numerator=0, denominator=None):
        try:
            self = super(Ratio, cls).__new__(cls, numerator, denominator)
        except ZeroDivisionError:
            self = super(Ratio, cls).__new__(cls)
            self._numerator = numerator
            self._denominator = denominator
        return self

    def __repr__(self) -> str:
        return str(self)

    @property
    def num(self):
        return self.numerator

    @property
    def den(self):
        return self.denominator

    def decimal(self) -> float:
        return float(self)
