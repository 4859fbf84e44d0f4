"""Decode errors, one kind per encoding family."""


class DecodeError(ValueError):
    """Raised when a char decoder rejects the units at the front of a source."""

    def __init__(self, encoding: str) -> None:
        super().__init__(f"invalid {encoding} sequence")
        self.encoding = encoding


class InvalidAscii(DecodeError):
    pass


class InvalidUtf8(DecodeError):
    pass


class InvalidUtf16(DecodeError):
    pass


class InvalidUtf32(DecodeError):
    pass
