from __future__ import annotations

from collections.abc import Sequence
from functools import cmp_to_key, lru_cache
import math
import random
from typing import Any, Callable

from pyuca import Collator

from kabir_api.services.couplets.types import Couplet

ORDER_BY_VALUES = ("id", "random", "popular", "couplet_english", "couplet_hindi")
ORDER_VALUES = ("ASC", "DESC")


@lru_cache(maxsize=1)
def _collator() -> Collator:
    return Collator()


def collation_key(text: str) -> tuple[int, ...]:
    """Unicode Collation Algorithm sort key; orders Devanagari by script order, not codepoint."""
    return _collator().sort_key(text)


def _numeric_id(couplet: Couplet) -> tuple[int, float]:
    try:
        value = float(str(couplet.id).strip())
    except ValueError:
        return (1, 0.0)
    if math.isnan(value):
        return (1, 0.0)
    return (0, value)


def _popular_key(couplet: Couplet) -> tuple[bool, tuple[int, ...]]:
    return (not couplet.popular, collation_key(couplet.couplet_hindi))


_SORT_KEYS: dict[str, Callable[[Couplet], Any]] = {
    "id": _numeric_id,
    "couplet_english": lambda couplet: collation_key(couplet.couplet_english),
    "couplet_hindi": lambda couplet: collation_key(couplet.couplet_hindi),
    "popular": _popular_key,
}


def _compare_raw(left: object, right: object) -> int:
    try:
        if left < right:  # type: ignore[operator]
            return -1
        if left > right:  # type: ignore[operator]
            return 1
    except TypeError:
        return 0
    return 0


def _field_key(field_name: str) -> Callable[[Couplet], Any]:
    return cmp_to_key(
        lambda left, right: _compare_raw(
            getattr(left, field_name, None), getattr(right, field_name, None)
        )
    )


def sort_couplets(
    records: Sequence[Couplet],
    order_by: str = "id",
    order: str = "ASC",
    *,
    rng: random.Random | None = None,
) -> list[Couplet]:
    """Return a new list of ``records`` ordered by ``order_by``.

    Equal keys keep their input order in both directions. ``random`` ignores
    ``order`` and returns a uniform shuffle.
    """
    normalized_order_by = order_by.lower()
    descending = order.upper() == "DESC"

    if normalized_order_by == "random":
        return (rng or random).sample(list(records), len(records))

    key = _SORT_KEYS.get(normalized_order_by) or _field_key(normalized_order_by)
    return sorted(records, key=key, reverse=descending)
