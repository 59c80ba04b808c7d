from typing import Iterator, List, Optional

from .exif_log import get_logger
from .record import ExifRecord
from .tags import EXIF_TAGS, FIELD_TYPES, TYPE_ASCII, TYPE_LONG, TYPE_RATIONAL, TYPE_SHORT
from .utils import Ratio, make_string, printable_float, s2n

logger = get_logger()

# tag (2) + type (2) + count (4) + value or offset (4)
ENTRY_SIZE = 12


class IfdEntry:
    """
    One raw 12 byte directory entry.

    ``value_or_offset`` is kept as bytes; whether it holds the value itself
    or a pointer to it depends on the value size.
    """
    def __init__(
        self,
        tag: int,
        field_type: int,
        count: int,
        value_or_offset: bytes,
        entry_offset: int,
    ):
        self.tag = tag
        self.field_type = field_type
        self.count = count
        self.value_or_offset = value_or_offset
        self.entry_offset = entry_offset

        self.tag_id: str = '0x%04X' % (tag)

    @property
    def type_name(self) -> str:
        if 0 < self.field_type < len(FIELD_TYPES):
            return FIELD_TYPES[self.field_type][2]
        return 'Unknown(%d)' % self.field_type

    def __str__(self) -> str:
        return '({}) {} x{} @ {}'.format(self.tag_id, self.type_name, self.count, self.entry_offset)

    def __repr__(self) -> str:
        return '<{}.{} tag_id={}, type={}, count={}, offset={} at {}>'.format(
            self.__class__.__module__,
            self.__class__.__name__,
            self.tag_id,
            self.type_name,
            self.count,
            self.entry_offset,
            hex(id(self))
        )


def value_size(field_type: int, count: int) -> int:
    """
    Byte size of an entry's value, 0 for unknown field types.
    """
    if not 0 < field_type < len(FIELD_TYPES):
        return 0
    return FIELD_TYPES[field_type][0] * count


def decode_value(field_type: int, value: bytes, endian: str) -> str:
    """
    Printable version of the first value in ``value``.

    Only ASCII, Short, Long and Ratio are decoded; anything else, as well as
    a ratio with a zero denominator, gives an empty string.
    """
    if field_type == TYPE_ASCII:
        return make_string(value)
    if field_type == TYPE_SHORT and len(value) >= 2:
        return str(s2n(value, 0, 2, endian))
    if field_type == TYPE_LONG and len(value) >= 4:
        return str(s2n(value, 0, 4, endian))
    if field_type == TYPE_RATIONAL and len(value) >= 8:
        ratio = Ratio(s2n(value, 0, 4, endian), s2n(value, 4, 4, endian))
        if ratio.den == 0:
            return ''
        return printable_float(ratio.decimal())
    return ''


class Ifd:
    """
    An IFD

    ``block`` is the whole EXIF block, offsets stored in the IFD are relative
    to ``tiff_base`` within it.
    """
    def __init__(
        self,
        block: bytes,
        ifd_name: str,
        tiff_base: int,
        ifd_offset: int,
        endian: str,
    ):
        self.name = ifd_name
        self.offset = ifd_offset
        self._block = block
        self._tiff_base = tiff_base
        self._endian = endian

        self.entries: List[IfdEntry] = []
        self.tags = ExifRecord()

        self._dump_ifd()

    def __str__(self) -> str:
        return '{} @ {}'.format(self.name, self.offset)

    def __repr__(self) -> str:
        return '<{}.{} {} offset={}, endian={} at {}>'.format(
            self.__class__.__module__,
            self.__class__.__name__,
            self.name,
            self.offset,
            self._endian,
            hex(id(self))
        )

    def _read_entries(self) -> Iterator[IfdEntry]:
        start = self._tiff_base + self.offset
        entries = s2n(self._block, start, 2, self._endian)
        logger.debug('%s: %d entries at offset %d', self.name, entries, self.offset)

        for i in range(entries):
            # entry is index of this entry within the block
            entry = start + 2 + ENTRY_SIZE * i
            if entry + ENTRY_SIZE > len(self._block):
                logger.debug('IFD entry %d out of bounds', i)
                continue

            yield IfdEntry(
                s2n(self._block, entry, 2, self._endian),
                s2n(self._block, entry + 2, 2, self._endian),
                s2n(self._block, entry + 4, 4, self._endian),
                self._block[entry + 8:entry + ENTRY_SIZE],
                entry,
            )

    def _resolve_value(self, entry: IfdEntry) -> Optional[bytes]:
        """Bytes holding the entry's value, or None when they can't be had."""
        size = value_size(entry.field_type, entry.count)
        if size == 0:
            logger.debug('Unsupported data format %d for tag %s', entry.field_type, entry.tag_id)
            return None

        # If the value fits in 4 bytes, it is inlined, else we
        # need to jump ahead again.
        if size <= 4:
            return entry.value_or_offset[:size]

        # offset is not the value; it's a pointer to the value
        position = self._tiff_base + s2n(entry.value_or_offset, 0, 4, self._endian)
        if position + size > len(self._block):
            logger.debug('Tag value offset out of bounds for tag %s', entry.tag_id)
            return None
        return self._block[position:position + size]

    def _process_tag(self, entry: IfdEntry) -> None:
        value = self._resolve_value(entry)
        if value is None:
            return

        field = EXIF_TAGS.get(entry.tag)
        if field is None:
            logger.debug('Unknown tag %s, skipped', entry.tag_id)
            return

        printable = decode_value(entry.field_type, value, self._endian)
        if not printable:
            logger.debug('No printable value for %s (%s)', field.tag_name, entry.type_name)
            return

        self.tags.set(field, printable)
        logger.debug(' %s: %s', field.tag_name, printable)

    def _dump_ifd(self) -> None:
        """Populate IFD tags, in directory order."""
        for entry in self._read_entries():
            self.entries.append(entry)
            self._process_tag(entry)

    def get_tags(self) -> ExifRecord:
        return self.tags
