from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
import random

from kabir_api.services.couplets.filters import (
    filter_by_popularity,
    filter_by_search,
    filter_by_tags,
)
from kabir_api.services.couplets.loader import load_couplets
from kabir_api.services.couplets.paginator import paginate
from kabir_api.services.couplets.sorter import sort_couplets
from kabir_api.services.couplets.types import Couplet, QueryOptions, ResultPage


def query_couplets(
    records: Sequence[Couplet],
    options: QueryOptions,
    *,
    rng: random.Random | None = None,
) -> ResultPage:
    data = filter_by_search(records, options.search, options.exact_match, options.search_fields)
    data = filter_by_tags(data, options.tags)
    data = filter_by_popularity(data, options.popular)
    data = sort_couplets(data, options.order_by, options.order, rng=rng)
    return paginate(data, options.page, options.per_page, options.pagination)


def get_couplets(options: QueryOptions, *, data_path: Path) -> ResultPage:
    return query_couplets(load_couplets(data_path), options)
