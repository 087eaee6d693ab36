class BitmapError(Exception):
    """Base class for every failure raised by the bitmap tool."""


class DecodeError(BitmapError):
    pass


class OpenFailedError(DecodeError):
    # source exists but cannot be opened or read
    pass


class SourceNotFoundError(OpenFailedError):
    pass


class TruncatedInputError(DecodeError):
    # header or pixel data shorter than the layout requires
    pass


class InvalidHeaderError(DecodeError):
    pass


class EncodeError(BitmapError):
    pass


class WriteFailedError(EncodeError):
    pass


class InvalidParameterError(BitmapError, ValueError):
    # channel selector or quantization level out of range
    pass
