# *-* coding: utf-8 *-*


class PDFFormatError(ValueError):
    """A structural expectation about the document was violated.

    Every subclass names one scanning stage failure; ``kind`` is the stable
    tag callers can switch on.
    """

    @property
    def kind(self) -> str:
        return type(self).__name__


class MissingEofMarker(PDFFormatError):
    pass


class MissingStartxrefKeyword(PDFFormatError):
    pass


class MissingXrefOffset(PDFFormatError):
    pass


class InvalidXrefOffset(PDFFormatError):
    pass


class MissingTrailerKeyword(PDFFormatError):
    pass


class MissingDictionaryStart(PDFFormatError):
    pass


class MissingDictionaryEnd(PDFFormatError):
    pass
