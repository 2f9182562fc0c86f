from __future__ import annotations

from collections.abc import Mapping

from kabir_api.services.couplets.errors import ValidationError
from kabir_api.services.couplets.filters import parse_tags, resolve_search_fields
from kabir_api.services.couplets.normalize import to_bool, to_bool_lenient, to_int
from kabir_api.services.couplets.paginator import DEFAULT_PER_PAGE, resolve_page
from kabir_api.services.couplets.sorter import ORDER_BY_VALUES, ORDER_VALUES
from kabir_api.services.couplets.types import QueryOptions


def _present(value: object) -> bool:
    return value is not None and value != ""


def validate_order_by(order_by: object) -> None:
    if _present(order_by) and order_by not in ORDER_BY_VALUES:
        raise ValidationError(
            "Bad Request: The 'orderBy' value provided is invalid. Accepted values are "
            "'id', 'random', 'popular', 'couplet_english', or 'couplet_hindi'."
        )


def validate_order(order: object) -> None:
    if _present(order) and order not in ORDER_VALUES:
        raise ValidationError(
            "Bad Request: The 'order' value provided is invalid. "
            "Accepted values are 'ASC' (ascending) or 'DESC' (descending)."
        )


def build_query_options(params: Mapping[str, object]) -> QueryOptions:
    """Validate and normalize raw request parameters into ``QueryOptions``.

    ``params`` uses the wire names (``s``, ``exactMatch``, ``searchWithin``,
    ``tags``, ``popular``, ``orderBy``, ``order``, ``page``, ``perPage``,
    ``pagination``). Enumerated values raise ``ValidationError``; boolean
    flags that cannot be converted raise ``ConversionError``.
    """
    order_by = params.get("orderBy")
    order = params.get("order")
    validate_order_by(order_by)
    validate_order(order)

    search_within = params.get("searchWithin")
    search_fields = resolve_search_fields(str(search_within) if _present(search_within) else None)

    exact_match = params.get("exactMatch")
    popular = params.get("popular")
    tags = params.get("tags")
    per_page = to_int(params.get("perPage"))
    search = params.get("s")

    return QueryOptions(
        search=str(search) if _present(search) else "",
        exact_match=to_bool(exact_match) if _present(exact_match) else False,
        search_fields=search_fields,
        tags=parse_tags(str(tags)) if _present(tags) else (),
        popular=to_bool(popular) if _present(popular) else False,
        order_by=str(order_by) if _present(order_by) else "id",
        order=str(order) if _present(order) else "ASC",
        page=resolve_page(params.get("page")),
        per_page=per_page if per_page is not None else DEFAULT_PER_PAGE,
        pagination=to_bool_lenient(params.get("pagination"), default=True),
    )
