"""Collision-free naming for generated constraint identifiers."""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from typing import List, Set, Tuple


@dataclass(frozen=True)
class GeneratedName:
    """A constraint name already issued in the current compile run."""

    id: str
    name: str


class NameRegistry:
    """
    Track generated names within one compile run.

    A registry belongs to exactly one compile call; create a new one per call
    instead of sharing it between runs or threads.

    Example:
        >>> registry = NameRegistry()
        >>> registry.reserve("FK_a_TO_b")
        'FK_a_TO_b'
        >>> registry.reserve("FK_a_TO_b")
        'FK_a_TO_b_1'
    """

    def __init__(self) -> None:
        self._records: List[GeneratedName] = []
        self._issued: Set[str] = set()

    def reserve(self, base_name: str) -> str:
        """
        Issue a unique name derived from ``base_name``.

        Args:
            base_name: Candidate name before collision resolution

        Returns:
            ``base_name`` if unused, else the first free ``base_name_<n>``
            for n = 1, 2, ...
        """
        name = base_name
        suffix = 0
        while name in self._issued:
            suffix += 1
            name = f"{base_name}_{suffix}"

        self._issued.add(name)
        self._records.append(GeneratedName(id=str(uuid.uuid4()), name=name))
        return name

    def reset(self) -> None:
        self._records.clear()
        self._issued.clear()

    @property
    def names(self) -> List[str]:
        """Issued names in reservation order."""
        return [record.name for record in self._records]

    @property
    def records(self) -> Tuple[GeneratedName, ...]:
        return tuple(self._records)

    def __contains__(self, name: object) -> bool:
        return name in self._issued

    def __len__(self) -> int:
        return len(self._records)


__all__ = ["GeneratedName", "NameRegistry"]
