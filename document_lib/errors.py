"""Exception types raised by the document accessor layer."""


class DocumentError(Exception):
    """Base class for document_lib errors."""


class NoSuchElementError(DocumentError, KeyError):
    """Raised when an unsafe lookup (single key or dotted path) finds nothing."""

    def __init__(self, key: str) -> None:
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"No such element: {self.key!r}"


class DocumentCastError(DocumentError, TypeError):
    """Raised when a stored value does not have the requested runtime type."""

    def __init__(self, key: str, expected: object, actual: object) -> None:
        self.key = key
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Value at {key!r} is {type(actual).__name__}, expected {_type_name(expected)}"
        )


class ConfigError(DocumentError, ValueError):
    """Raised when a configuration file cannot be parsed or validated."""


def _type_name(expected: object) -> str:
    if isinstance(expected, tuple):
        return " | ".join(_type_name(t) for t in expected)
    return getattr(expected, "__name__", repr(expected))
