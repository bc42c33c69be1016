"""Deduplicated ordinal indexes over categorical values."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Hashable, Iterable, Iterator, TypeVar

from themetokens.errors import ValueNotIndexed

V = TypeVar("V", bound=Hashable)


class IndexOrder(Enum):
    """How distinct values are ordered in a :class:`CategoricalIndex`."""

    # sort ascending, then drop repeats
    NUMERIC = "numeric"
    # drop repeats, then sort by code point (case-sensitive)
    ALPHABETICAL = "alphabetical"


@dataclass(frozen=True, slots=True)
class CategoricalIndex(Generic[V]):
    """Ordered distinct values addressable by position."""

    values: tuple[V, ...]

    def lookup(self, value: V) -> int:
        try:
            return self.values.index(value)
        except ValueError as exc:
            raise ValueNotIndexed(details={"value": value}) from exc

    def __contains__(self, value: object) -> bool:
        return value in self.values

    def __iter__(self) -> Iterator[V]:
        return iter(self.values)

    def __len__(self) -> int:
        return len(self.values)


def build_index(values: Iterable[V], order: IndexOrder = IndexOrder.NUMERIC) -> CategoricalIndex[V]:
    """Build a deterministic index of the distinct ``values``."""
    if order is IndexOrder.NUMERIC:
        return CategoricalIndex(_dedupe(sorted(values)))
    return CategoricalIndex(tuple(sorted(_dedupe(values))))


def font_size_index(sizes: Iterable[float]) -> CategoricalIndex[float]:
    return build_index(sizes, IndexOrder.NUMERIC)


def font_family_index(families: Iterable[str]) -> CategoricalIndex[str]:
    return build_index(families, IndexOrder.ALPHABETICAL)


def _dedupe(values: Iterable[V]) -> tuple[V, ...]:
    seen: set[V] = set()
    distinct: list[V] = []
    for value in values:
        if value in seen:
            continue
        seen.add(value)
        distinct.append(value)
    return tuple(distinct)
