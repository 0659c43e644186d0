# *-* coding: utf-8 *-*
from .errors import (
    PDFFormatError,
    MissingEofMarker,
    MissingStartxrefKeyword,
    MissingXrefOffset,
    InvalidXrefOffset,
    MissingTrailerKeyword,
    MissingDictionaryStart,
    MissingDictionaryEnd,
)
from .xref import TAIL_SIZE, tail, find_xref_offset
from .trailer import TRAILER_WINDOW, locate_trailer, parse_trailer, find_trailer
from .protect import Inspection, PDFChecker, inspect, is_protected, is_protected_from_file, check_password
