"""
Tag definitions.

Field types and the known top-level IFD tags, mapped to the fields of an
:class:`~exifparser.record.ExifRecord`.
"""

from enum import Enum
from types import MappingProxyType
from typing import Mapping

# Field type descriptions as (length, abbreviation, full name) tuples,
# indexed by the numeric field type of an IFD entry.
FIELD_TYPES = (
    (0, 'X', 'Proprietary'),  # no such type
    (1, 'B', 'Byte'),
    (1, 'A', 'ASCII'),
    (2, 'S', 'Short'),
    (4, 'L', 'Long'),
    (8, 'R', 'Ratio'),
    (1, 'SB', 'Signed Byte'),
    (1, 'U', 'Undefined'),
    (2, 'SS', 'Signed Short'),
    (4, 'SL', 'Signed Long'),
    (8, 'SR', 'Signed Ratio'),
)

TYPE_ASCII = 2
TYPE_SHORT = 3
TYPE_LONG = 4
TYPE_RATIONAL = 5


class ExifField(Enum):
    """
    Every field an ExifRecord knows about.

    Values are (tag name, JSON key) pairs.
    """
    MAKE = ('Make', 'make')
    MODEL = ('Model', 'model')
    ORIENTATION = ('Orientation', 'orientation')
    SOFTWARE = ('Software', 'software')
    DATE_TIME = ('DateTime', 'date_time')
    EXPOSURE_TIME = ('ExposureTime', 'exposure_time')
    F_NUMBER = ('FNumber', 'f_number')
    EXIF_OFFSET = ('ExifOffset', 'exif_offset')
    ISO_SPEED_RATINGS = ('ISOSpeedRatings', 'iso_speed_ratings')
    DATE_TIME_ORIGINAL = ('DateTimeOriginal', 'date_time_original')
    SHUTTER_SPEED_VALUE = ('ShutterSpeedValue', 'shutter_speed_value')
    APERTURE_VALUE = ('ApertureValue', 'aperture_value')
    FLASH = ('Flash', 'flash')
    PIXEL_X_DIMENSION = ('PixelXDimension', 'pixel_x_dimension')
    PIXEL_Y_DIMENSION = ('PixelYDimension', 'pixel_y_dimension')
    FOCAL_LENGTH_IN_35MM_FILM = ('FocalLengthIn35mmFilm', 'focal_length_in_35mm_film')
    IMAGE_DESCRIPTION = ('ImageDescription', 'image_description')
    X_RESOLUTION = ('XResolution', 'x_resolution')
    Y_RESOLUTION = ('YResolution', 'y_resolution')
    RESOLUTION_UNIT = ('ResolutionUnit', 'resolution_unit')
    ARTIST = ('Artist', 'artist')
    Y_CB_CR_POSITIONING = ('YCbCrPositioning', 'y_cb_cr_positioning')
    COPYRIGHT = ('Copyright', 'copyright')
    GPS_INFO_IFD_POINTER = ('GPSInfoIFDPointer', 'gps_info_ifd_pointer')
    EXIF_VERSION = ('ExifVersion', 'exif_version')
    DATE_TIME_DIGITIZED = ('DateTimeDigitized', 'date_time_digitized')
    BRIGHTNESS_VALUE = ('BrightnessValue', 'brightness_value')
    EXPOSURE_BIAS_VALUE = ('ExposureBiasValue', 'exposure_bias_value')
    MAX_APERTURE_VALUE = ('MaxApertureValue', 'max_aperture_value')
    METERING_MODE = ('MeteringMode', 'metering_mode')
    FOCAL_LENGTH = ('FocalLength', 'focal_length')
    GPS_VERSION_ID = ('GPSVersionID', 'gps_version_id')
    GPS_LATITUDE_REF = ('GPSLatitudeRef', 'gps_latitude_ref')
    GPS_LATITUDE = ('GPSLatitude', 'gps_latitude')
    GPS_LONGITUDE_REF = ('GPSLongitudeRef', 'gps_longitude_ref')
    GPS_LONGITUDE = ('GPSLongitude', 'gps_longitude')
    GPS_ALTITUDE_REF = ('GPSAltitudeRef', 'gps_altitude_ref')
    GPS_ALTITUDE = ('GPSAltitude', 'gps_altitude')
    GPS_MAP_DATUM = ('GPSMapDatum', 'gps_map_datum')

    @property
    def tag_name(self) -> str:
        return self.value[0]

    @property
    def json_key(self) -> str:
        return self.value[1]

    @classmethod
    def from_name(cls, name: str) -> 'ExifField':
        """Look a field up by its tag name, e.g. 'Make'."""
        try:
            return _FIELDS_BY_NAME[name]
        except KeyError:
            raise KeyError('unknown EXIF field: %s' % name) from None


_FIELDS_BY_NAME = MappingProxyType({f.tag_name: f for f in ExifField})

# Top-level IFD tags we decode. Anything else is dropped.
EXIF_TAGS: Mapping[int, ExifField] = MappingProxyType({
    0x010E: ExifField.IMAGE_DESCRIPTION,
    0x010F: ExifField.MAKE,
    0x0110: ExifField.MODEL,
    0x0112: ExifField.ORIENTATION,
    0x011A: ExifField.X_RESOLUTION,
    0x011B: ExifField.Y_RESOLUTION,
    0x0128: ExifField.RESOLUTION_UNIT,
    0x0131: ExifField.SOFTWARE,
    0x0132: ExifField.DATE_TIME,
    0x013B: ExifField.ARTIST,
    0x0213: ExifField.Y_CB_CR_POSITIONING,
    0x8298: ExifField.COPYRIGHT,
    0x829A: ExifField.EXPOSURE_TIME,
    0x829D: ExifField.F_NUMBER,
    0x8769: ExifField.EXIF_OFFSET,
    0x8825: ExifField.GPS_INFO_IFD_POINTER,
    0x8827: ExifField.ISO_SPEED_RATINGS,
    # EXIF SubIFD tags, only picked up if they show up in IFD0
    0x9000: ExifField.EXIF_VERSION,
    0x9003: ExifField.DATE_TIME_ORIGINAL,
    0x9004: ExifField.DATE_TIME_DIGITIZED,
    0x9201: ExifField.SHUTTER_SPEED_VALUE,
    0x9202: ExifField.APERTURE_VALUE,
    0x9203: ExifField.BRIGHTNESS_VALUE,
    0x9204: ExifField.EXPOSURE_BIAS_VALUE,
    0x9205: ExifField.MAX_APERTURE_VALUE,
    0x9207: ExifField.METERING_MODE,
    0x9209: ExifField.FLASH,
    0x920A: ExifField.FOCAL_LENGTH,
    0xA002: ExifField.PIXEL_X_DIMENSION,
    0xA003: ExifField.PIXEL_Y_DIMENSION,
    0xA405: ExifField.FOCAL_LENGTH_IN_35MM_FILM,
    # GPS IFD tags, same as above
    0x0000: ExifField.GPS_VERSION_ID,
    0x0001: ExifField.GPS_LATITUDE_REF,
    0x0002: ExifField.GPS_LATITUDE,
    0x0003: ExifField.GPS_LONGITUDE_REF,
    0x0004: ExifField.GPS_LONGITUDE,
    0x0005: ExifField.GPS_ALTITUDE_REF,
    0x0006: ExifField.GPS_ALTITUDE,
    0x0012: ExifField.GPS_MAP_DATUM,
})
