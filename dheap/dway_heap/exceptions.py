class HeapError(Exception):
    """Base class for errors raised by the heap."""


class InvalidConfigurationError(HeapError, ValueError):
    """The branching factor is outside the supported range."""


class NullInputError(HeapError, TypeError):
    """Bulk construction was given no input sequence."""


class NotFoundError(HeapError, KeyError):
    """The referenced value is not stored in the heap."""

    def __init__(self, value):
        super().__init__(value)
        self.value = value

    def __str__(self) -> str:
        return f"{self.value!r} is not in the heap"
