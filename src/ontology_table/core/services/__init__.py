"""
Services that compose the core operations.

- pipeline: per-document pipeline and sequential batch driver
"""

from .pipeline import (
    DocumentInput,
    process_batch,
    process_document,
    read_documents,
)

__all__ = [
    'DocumentInput',
    'process_batch',
    'process_document',
    'read_documents',
]
