from typing import Protocol, Any, Iterable, Optional, runtime_checkable


@runtime_checkable
class DocumentProtocol(Protocol):
    """Document adapter protocol mirroring `document_lib.storage.DocumentBackend`.

    Any object with these methods can be wrapped by a `TypedDocument`; the
    semantics are documented on the abstract base class in
    `document_lib.storage.base` (None for missing keys, no error on removing
    an absent key, insertion-ordered keys).
    """

    def get(self, key: str) -> Optional[Any]: ...

    def put(self, key: str, value: Any) -> Optional[Any]: ...

    def remove_field(self, key: str) -> Optional[Any]: ...

    def contains_field(self, key: str) -> bool: ...

    def keys(self) -> Iterable[str]: ...
