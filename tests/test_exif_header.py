import pytest

from exifparser.exif_header import ExifHeader, TiffHeader
from exifparser.utils import (
    IfdOffsetOutOfBounds, InvalidExifHeader, InvalidMagicNumber, UnknownByteOrder,
)

from builders import ascii_entry, build_block, build_jpeg, build_tiff, pack


def test_parse_little_endian():
    tiff = TiffHeader.parse(build_block(build_tiff([], 'I')))
    assert tiff == TiffHeader('I', 42, 8, 6)


def test_parse_big_endian_with_gap_before_ifd():
    tiff = TiffHeader.parse(build_block(build_tiff([], 'M', ifd_offset=16)))
    assert tiff.byte_order == 'M'
    assert tiff.first_ifd_offset == 16
    assert tiff.tiff_base == 6


@pytest.mark.parametrize('block', [
    b'',
    b'Exif\x00',
    b'EXIF\x00\x00II*\x00\x08\x00\x00\x00\x00\x00',
    b'Exif\x00\x00II*\x00\x08\x00',
])
def test_invalid_exif_header(block):
    with pytest.raises(InvalidExifHeader):
        TiffHeader.parse(block)


def test_unknown_byte_order():
    block = build_block(b'IM' + build_tiff([], 'I')[2:])
    with pytest.raises(UnknownByteOrder):
        TiffHeader.parse(block)


@pytest.mark.parametrize('endian', ['I', 'M'])
def test_invalid_magic_number(endian):
    tiff = build_tiff([], endian)
    tiff = tiff[:2] + pack('H', endian, 43) + tiff[4:]
    with pytest.raises(InvalidMagicNumber, match='got 43'):
        TiffHeader.parse(build_block(tiff))


def test_ifd_offset_out_of_bounds():
    tiff = build_tiff([], 'I')
    tiff = tiff[:4] + pack('I', 'I', 100) + tiff[8:]
    with pytest.raises(IfdOffsetOutOfBounds):
        TiffHeader.parse(build_block(tiff))


def test_ifd_count_at_very_end_of_block():
    # header, then nothing but the 2 byte entry count
    block = build_block(build_tiff([], 'I')[:10])
    assert TiffHeader.parse(block).first_ifd_offset == 8
    assert not ExifHeader(build_jpeg(block)).get_tags()


def test_exif_header_reads_ifd0():
    data = build_jpeg(build_block(build_tiff([ascii_entry(0x010F, 'Canon')])))
    hdr = ExifHeader(data)
    assert hdr.offset == 4
    assert hdr.ifd.name == 'IFD0'
    assert hdr.get_tags()['Make'] == 'Canon'
    assert str(hdr) == 'JPEG EXIF Header @ 4'
