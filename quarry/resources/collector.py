"""
Quarry resources — Result collection.
"""

from __future__ import annotations

from typing import Generic, Iterable, List

from .core import Mapper, R, ResourceRecord


class ResultCollector(Generic[R]):
    """
    Applies a mapper to records and keeps the results that are not None.

    Results are kept in visitation order. Nothing is deduplicated: a file
    exposed by two roots is mapped once per root.
    """

    def __init__(self, mapper: Mapper):
        self.mapper = mapper
        self._results: List[R] = []

    def __len__(self) -> int:
        return len(self._results)

    def add(self, record: ResourceRecord) -> bool:
        """Map one record; return whether a result was kept."""
        result = self.mapper(record)
        if result is None:
            return False
        self._results.append(result)
        return True

    def collect(self, records: Iterable[ResourceRecord]) -> int:
        """Map every record; return how many results were kept."""
        kept = 0
        for record in records:
            if self.add(record):
                kept += 1
        return kept

    @property
    def results(self) -> List[R]:
        return list(self._results)
