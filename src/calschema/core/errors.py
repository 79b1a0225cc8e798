class CalschemaError(Exception):
    """Base error."""

class InvalidConstructionError(CalschemaError, ValueError):
    """Raised when a schema/segment pair violates a structural precondition."""

class InvalidPartsError(CalschemaError, ValueError):
    """Raised when date, ordinal or month parts lie outside a calendar."""

class ArithmeticOverflowError(CalschemaError, OverflowError):
    """Raised when a result falls outside the supported range or the 32-bit domain."""

class RoundoffError(ArithmeticOverflowError):
    """Raised by the 'overflow' addition rule when a result had to be clamped."""
