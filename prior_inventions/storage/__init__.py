"""Output storage for generated documents."""

from .writer import write_document

__all__ = ["write_document"]
