from __future__ import annotations


class StuntsError(Exception):
    """Base class for every failure raised by the track and replay readers."""


class UnreadableSourceError(StuntsError, OSError):
    """The named file does not exist or cannot be opened for reading."""


class ValidationError(StuntsError, ValueError):
    """The bytes do not form a valid track or replay."""


class SizeOutOfRangeError(ValidationError):
    def __init__(self, message: str, *, size: int, minimum: int | None = None, maximum: int | None = None) -> None:
        super().__init__(message)
        self.size = int(size)
        self.minimum = minimum
        self.maximum = maximum


class UnrecognizedFormatError(ValidationError):
    pass


class LengthMismatchError(ValidationError):
    def __init__(self, *, expected: int, actual: int) -> None:
        super().__init__(f"recording length should be {int(expected)}, actually {int(actual)}")
        self.expected = int(expected)
        self.actual = int(actual)


class StructureTooSmallError(ValidationError):
    def __init__(self, what: str, *, size: int, required: int) -> None:
        super().__init__(f"{what} is too small: {int(size)} < {int(required)}")
        self.size = int(size)
        self.required = int(required)
