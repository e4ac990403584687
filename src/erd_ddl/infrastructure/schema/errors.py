"""Errors raised by the DDL compiler in strict reference mode."""

from __future__ import annotations

from typing import Sequence, Tuple


class UnresolvedReferenceError(Exception):
    """Raised when a relationship points at a table or column that does not exist.

    Only raised when the compiler runs with ``strict=True``; the lenient
    default skips or shortens the relationship instead.
    """

    def __init__(self, relationship_id: str, missing_ids: Sequence[str], message: str):
        super().__init__(message)
        self.relationship_id = relationship_id
        self.missing_ids: Tuple[str, ...] = tuple(missing_ids)


__all__ = ["UnresolvedReferenceError"]
