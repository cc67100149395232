"""
Exceptions raised by data entities.

Every error derives from DataEntitiesError and from the closest builtin
exception, so callers may catch either.
"""


class DataEntitiesError(Exception):
    """Base class for all data entities errors."""
    pass


class InvalidNumericValue(DataEntitiesError, ValueError):
    """Raised when a value cannot be converted to a Decimal or is NaN."""
    pass


class NonFiniteValue(DataEntitiesError, ValueError):
    """Raised when a value converts to positive or negative infinity."""
    pass


class InvalidAssetField(DataEntitiesError, ValueError):
    """Raised when asset info carries an empty id/name/sender or a bad precision/height."""
    pass


class AssetMismatch(DataEntitiesError, ValueError):
    """Raised when Money values with different asset ids are combined."""
    pass


class DivisionByZero(DataEntitiesError, ZeroDivisionError):
    """Raised when Money is divided by a zero amount."""
    pass


class UnknownConfigKey(DataEntitiesError, KeyError):
    """Raised when a config key is outside the allowed set."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message
        return str(self.args[0]) if self.args else ""


class InvalidInputType(DataEntitiesError, TypeError):
    """Raised when OrderPrice is built from something other than str, int, float or Decimal."""
    pass


class EmptyArguments(DataEntitiesError, ValueError):
    """Raised when an aggregate such as Money.max() is called without arguments."""
    pass


class ConfigLoadError(DataEntitiesError, ValueError):
    """Raised when remap hooks cannot be loaded from a file or the environment."""
    pass


class InvalidTimestamp(DataEntitiesError, ValueError):
    """Raised when a raw timestamp string is not ISO 8601."""
    pass
