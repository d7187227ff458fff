from typing import Any, Protocol
import json
import yaml

from .base import DocumentBackend, to_plain
from .memory_backend import BasicDocument, BasicDocumentList


class Serializer(Protocol):
    """Render documents as text and read them back.

    Implementations should be symmetric: `dump` -> bytes, `load` <- bytes.
    Loaded mappings come back as `BasicDocument` and arrays as
    `BasicDocumentList`, so the result can be wrapped directly.
    """

    def dump(self, value: Any) -> bytes: ...

    def load(self, data: bytes) -> Any: ...


def to_documents(value: Any) -> Any:
    """Rebuild plain dicts/lists (as produced by a text parser) as documents."""
    if isinstance(value, DocumentBackend):
        return value
    if isinstance(value, dict):
        return BasicDocument({k: to_documents(v) for k, v in value.items()})
    if isinstance(value, list):
        return BasicDocumentList(to_documents(v) for v in value)
    return value


class JSONSerializer:
    """Serializer using JSON (text). Non-JSON scalars are written with `str()`."""

    def __init__(self, indent: int | None = None) -> None:
        self.indent = indent

    def dump(self, value: Any) -> bytes:
        return json.dumps(to_plain(value), indent=self.indent, default=str).encode("utf-8")

    def load(self, data: bytes) -> Any:
        return to_documents(json.loads(data.decode("utf-8")))


class YAMLSerializer:
    """Serializer using YAML (text). Key order is kept as inserted."""

    def dump(self, value: Any) -> bytes:
        return yaml.dump(to_plain(value), sort_keys=False, allow_unicode=True).encode("utf-8")

    def load(self, data: bytes) -> Any:
        return to_documents(yaml.safe_load(data.decode("utf-8")))
