# *-* coding: utf-8 *-*
import logging

import attr
from attr.validators import and_, ge, instance_of, optional

from .errors import PDFFormatError
from .xref import TAIL_SIZE, find_xref_offset
from .trailer import TRAILER_WINDOW, locate_trailer, parse_trailer, find_trailer

logger = logging.getLogger(__name__)

ENCRYPT = '/Encrypt'


# identity hash, the trailer mapping is a dict
@attr.s(frozen=True, hash=False)
class Inspection(object):
    """Outcome of a protection check, including why it could not be made."""
    protected = attr.ib(default=False, validator=instance_of(bool))
    xref_offset = attr.ib(default=None, validator=optional(and_(instance_of(int), ge(0))))
    trailer = attr.ib(factory=dict, validator=instance_of(dict))
    error = attr.ib(default=None, validator=optional(instance_of(PDFFormatError)))

    @property
    def ok(self) -> bool:
        return self.error is None


def inspect(pdfdata, tail_size: int = TAIL_SIZE, window: int = TRAILER_WINDOW) -> Inspection:
    """
    Check a PDF document for encryption and report every stage result.

    Malformed documents do not raise; the failure is returned in
    ``Inspection.error`` with ``protected`` left False.
    """
    offset = None
    try:
        offset = find_xref_offset(pdfdata, tail_size)
        trailer = parse_trailer(locate_trailer(pdfdata, offset, window))
    except PDFFormatError as ex:
        return Inspection(xref_offset=offset, error=ex)
    return Inspection(protected=ENCRYPT in trailer, xref_offset=offset, trailer=trailer)


def is_protected(pdfdata, tail_size: int = TAIL_SIZE, window: int = TRAILER_WINDOW) -> bool:
    """
    Tell whether the trailer of a PDF document has an /Encrypt entry.

    :param pdfdata: PDF document as bytes.
    :return: True if encrypted. Malformed, truncated or unrecognized
        documents are reported as not protected.
    """
    try:
        trailer = find_trailer(pdfdata, tail_size, window)
    except PDFFormatError as ex:
        logger.debug(f'cannot check PDF protection: {ex.kind}: {ex}')
        return False
    return ENCRYPT in trailer


def is_protected_from_file(path) -> bool:
    """Read a file fully and check it with :func:`is_protected`.

    A file that cannot be read is reported as not protected.
    """
    try:
        with open(path, 'rb') as fh:
            pdfdata = fh.read()
    except OSError as ex:
        logger.exception(ex)
        return False
    return is_protected(pdfdata)


def check_password(pdfdata, password: str) -> bool:
    if not is_protected(pdfdata):
        return False
    # TODO: standard security handler R2-R4, derive the key and compare against /U and /O
    return False


class PDFChecker(object):
    """Stateless facade over the module functions."""
    inspect = staticmethod(inspect)
    is_protected = staticmethod(is_protected)
    is_protected_from_file = staticmethod(is_protected_from_file)
    check_password = staticmethod(check_password)
    find_trailer = staticmethod(find_trailer)
