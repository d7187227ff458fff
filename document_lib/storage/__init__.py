"""Document adapter package for document_lib."""

from .base import DocumentBackend
from .interfaces import DocumentProtocol
from .memory_backend import BasicDocument, BasicDocumentList

__all__ = ["DocumentBackend", "DocumentProtocol", "BasicDocument", "BasicDocumentList"]
