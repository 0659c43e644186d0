# *-* coding: utf-8 *-*
import re
import sys
import logging

from .errors import MissingEofMarker, MissingStartxrefKeyword, MissingXrefOffset, InvalidXrefOffset

logger = logging.getLogger(__name__)

# writers put "startxref\n<offset>\n%%EOF" at the very end of the file
TAIL_SIZE = 1024

ENCODING = 'utf-8'
DECODE_ERRORS = 'replace'

EOF_MARKER = '%%EOF'
STARTXREF = 'startxref'
DIGITS_RE = re.compile(r'[0-9]+')


def check_buffer(pdfdata):
    if not isinstance(pdfdata, (bytes, bytearray, memoryview)):
        raise TypeError(f'PDF document must be bytes-like, not {type(pdfdata).__name__}')


def check_size(size: int, name: str):
    if size <= 0:
        raise ValueError(f'{name} must be positive, got {size}')


def decode(window) -> str:
    """Decode a byte window; undecodable bytes become U+FFFD filler."""
    return bytes(window).decode(ENCODING, DECODE_ERRORS)


def tail(pdfdata, size: int = TAIL_SIZE):
    """Return the last ``size`` bytes of the document (all of it if shorter)."""
    check_buffer(pdfdata)
    check_size(size, 'tail_size')
    start = max(len(pdfdata) - size, 0)
    return pdfdata[start:]


def find_xref_offset(pdfdata, tail_size: int = TAIL_SIZE) -> int:
    """
    Find the cross-reference offset recorded after the last ``startxref``.

    :param pdfdata: PDF document as bytes.
    :param tail_size: Number of trailing bytes searched for the markers.
    :return: Byte offset from the start of the document.
    :raises MissingEofMarker: no ``%%EOF`` in the tail.
    :raises MissingStartxrefKeyword: no ``startxref`` before ``%%EOF``.
    :raises MissingXrefOffset: no digits between the two markers.
    :raises InvalidXrefOffset: the offset does not fit in ``sys.maxsize``,
        however many digits it has.
    """
    text = decode(tail(pdfdata, tail_size))

    eof = text.rfind(EOF_MARKER)
    if eof == -1:
        raise MissingEofMarker('PDF end of file marker (%%EOF) not found')

    i = text.rfind(STARTXREF, 0, eof)
    if i == -1:
        raise MissingStartxrefKeyword('PDF startxref keyword not found')

    # the offset may be followed by comments or junk, take the first number
    segment = text[i + len(STARTXREF):eof].strip()
    m = DIGITS_RE.search(segment)
    if m is None:
        raise MissingXrefOffset('xref offset not found after startxref keyword')

    digits = m.group(0).lstrip('0') or '0'
    # int() refuses very long digit strings, reject them by length first
    if len(digits) > len(str(sys.maxsize)) or int(digits) > sys.maxsize:
        raise InvalidXrefOffset(f'xref offset of {len(digits)} digits is out of range')
    offset = int(digits)
    logger.debug(f'startxref points at {offset}')
    return offset
