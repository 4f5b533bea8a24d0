class ElapsedTimeError(Exception):
    """Base class for caller-contract violations."""


class InvalidArgumentError(ElapsedTimeError, ValueError):
    """An argument is out of its allowed range, eg, a negative work-unit count."""


class InvalidStateError(ElapsedTimeError, RuntimeError):
    """The operation is not allowed in the current state."""
