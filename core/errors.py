"""Errors raised by the Game of Life core."""

from utils.timestamp import format_timestamp


class LifeError(Exception):
    """Base error carrying context and the time it was raised."""

    def __init__(self, message, context=None, cause=None):
        super().__init__(message)
        self.timestamp = format_timestamp()
        self.context = context or {}
        self.cause = cause


class InvalidDimensionError(LifeError, ValueError):
    """Grid or simulation built with a non-positive width or height."""

    def __init__(self, message, width=None, height=None, **kwargs):
        context = kwargs.pop("context", {})
        context.update(width=width, height=height)
        super().__init__(message, context=context, **kwargs)


class CellOutOfRangeError(LifeError, IndexError):
    """Cell written outside [0, width) x [0, height)."""

    def __init__(self, message, x=None, y=None, width=None, height=None, **kwargs):
        context = kwargs.pop("context", {})
        context.update(x=x, y=y, width=width, height=height)
        super().__init__(message, context=context, **kwargs)
