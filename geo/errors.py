from __future__ import annotations


class CoordinateError(ValueError):
    pass


class ParseError(CoordinateError):
    def __init__(self, message: str = "Could not parse string") -> None:
        super().__init__(message)


class InvalidCoordinateError(CoordinateError):
    def __init__(self, message: str = "Not a valid coordinate") -> None:
        super().__init__(message)


class OutOfRangeError(CoordinateError):
    pass


class DegreesOutOfRange(OutOfRangeError):
    def __init__(self, message: str = "Degrees out of range") -> None:
        super().__init__(message)


class MinutesOutOfRange(OutOfRangeError):
    def __init__(self, message: str = "Minutes out of range") -> None:
        super().__init__(message)


class SecondsOutOfRange(OutOfRangeError):
    def __init__(self, message: str = "Seconds out of range") -> None:
        super().__init__(message)


class CoordinateRangeError(OutOfRangeError):
    """Longitude or latitude of a parsed pair outside the global bounds."""

    def __init__(self, message: str = "Lon/Lat values out of range") -> None:
        super().__init__(message)
