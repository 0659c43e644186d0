# *-* coding: utf-8 *-*
import re

from .errors import MissingTrailerKeyword, MissingDictionaryStart, MissingDictionaryEnd
from .xref import TAIL_SIZE, check_buffer, check_size, decode, find_xref_offset

# the trailer dictionary is short and follows the xref table
TRAILER_WINDOW = 2048

TRAILER = 'trailer'
DICT_START = '<<'
DICT_END = '>>'

# value is a name, a number or an indirect reference "N G R"
KEY_VALUE_RE = re.compile(r'/([a-zA-Z0-9]+)\s*([^/>\s]+(?:\s+\d+\s+R)?)?', re.ASCII)


def locate_trailer(pdfdata, offset: int, window: int = TRAILER_WINDOW) -> str:
    """
    Return the trailer dictionary text, from ``<<`` through ``>>``.

    The offset is clamped into the document, then at most ``window`` bytes
    starting there are searched. Nested dictionaries are not matched, the
    first ``>>`` after ``<<`` closes the span.
    """
    check_buffer(pdfdata)
    check_size(window, 'window')
    if len(pdfdata) == 0:
        raise MissingTrailerKeyword('PDF trailer keyword not found in an empty document')

    start = min(max(offset, 0), len(pdfdata) - 1)
    text = decode(pdfdata[start:start + window])

    i = text.find(TRAILER)
    if i == -1:
        raise MissingTrailerKeyword('PDF trailer keyword not found near xref offset')

    dstart = text.find(DICT_START, i)
    if dstart == -1:
        raise MissingDictionaryStart('PDF trailer dictionary start (<<) not found after trailer keyword')

    dend = text.find(DICT_END, dstart)
    if dend == -1:
        raise MissingDictionaryEnd('PDF trailer dictionary end (>>) not found after its start')

    return text[dstart:dend + len(DICT_END)]


def parse_trailer(text: str) -> dict:
    """Map each ``/Key`` of a dictionary to its raw value token.

    Never fails; text that does not look like a dictionary gives an empty
    or partial mapping. Later keys override earlier ones.
    """
    text = text.strip()
    if text.startswith(DICT_START):
        text = text[len(DICT_START):]
    if text.endswith(DICT_END):
        text = text[:-len(DICT_END)]

    result = {}
    for m in KEY_VALUE_RE.finditer(text):
        value = (m.group(2) or '').strip()
        if value:
            result['/' + m.group(1)] = value
    return result


def find_trailer(pdfdata, tail_size: int = TAIL_SIZE, window: int = TRAILER_WINDOW) -> dict:
    """
    Read the trailer dictionary of a PDF document.

    :param pdfdata: PDF document as bytes.
    :return: Mapping of trailer keys (e.g. ``/Root``) to raw value tokens.
    :raises PDFFormatError: the subclass names the structural element missing.
    """
    offset = find_xref_offset(pdfdata, tail_size)
    return parse_trailer(locate_trailer(pdfdata, offset, window))
