from __future__ import annotations

from collections.abc import Sequence
import math

from kabir_api.services.couplets.normalize import to_bool_lenient, to_int
from kabir_api.services.couplets.types import Couplet, ResultPage

DEFAULT_PER_PAGE = 10
SHOW_ALL = -1


def resolve_per_page(per_page: object, record_count: int) -> int:
    size = to_int(per_page)
    if size == SHOW_ALL:
        size = record_count
    if size is None or size <= 0:
        size = DEFAULT_PER_PAGE
    return size


def resolve_page(page: object) -> int:
    return max(to_int(page) or 1, 1)


def paginate(
    records: Sequence[Couplet],
    page: object = 1,
    per_page: object = DEFAULT_PER_PAGE,
    pagination: object = True,
) -> ResultPage:
    """Slice ``records`` into one page.

    With pagination disabled the same window is returned, but ``total`` is the
    window length and ``total_pages`` is 1.
    """
    is_enabled = to_bool_lenient(pagination, default=True)
    size = resolve_per_page(per_page, len(records))
    page_number = resolve_page(page)

    total = len(records)
    total_pages = math.ceil(total / size)
    start = (page_number - 1) * size

    window = [] if page_number > total_pages else list(records[start : start + size])

    return ResultPage(
        couplets=window,
        total=total if is_enabled else len(window),
        total_pages=total_pages if is_enabled else 1,
        page=page_number,
        per_page=size,
        pagination=is_enabled,
    )
