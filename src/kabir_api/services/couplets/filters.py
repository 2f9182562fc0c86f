from __future__ import annotations

from collections.abc import Iterable, Sequence

from kabir_api.services.couplets.errors import ValidationError
from kabir_api.services.couplets.types import ALL_SEARCH_FIELDS, SEARCH_SCOPES, Couplet


def resolve_search_fields(search_within: str | None) -> tuple[str, ...]:
    """Expand a ``searchWithin`` value ("all" or e.g. "couplet,explanation") into field names."""
    if not search_within or search_within.strip().lower() == "all":
        return ALL_SEARCH_FIELDS

    scopes = [scope.strip().lower() for scope in search_within.split(",")]
    invalid = [scope for scope in scopes if scope not in SEARCH_SCOPES]
    if invalid:
        raise ValidationError(
            "Bad Request: The 'searchWithin' value(s) provided are invalid. "
            "Accepted values are 'couplet', 'translation', or 'explanation'. "
            f"Invalid values: {', '.join(invalid)}."
        )

    return tuple(
        field_name
        for scope, pair in SEARCH_SCOPES.items()
        if scope in scopes
        for field_name in pair
    )


def parse_tags(tags: str | Iterable[str] | None) -> tuple[str, ...]:
    if not tags:
        return ()
    raw_tags = tags.split(",") if isinstance(tags, str) else tags
    normalized = (str(tag).strip().lower() for tag in raw_tags)
    return tuple(tag for tag in normalized if tag)


def _field_texts(couplet: Couplet, fields: Sequence[str]) -> list[str]:
    return [getattr(couplet, field_name).lower() for field_name in fields]


def filter_by_search(
    records: Sequence[Couplet],
    search: str,
    exact_match: bool,
    search_fields: Sequence[str] = ALL_SEARCH_FIELDS,
) -> list[Couplet]:
    if not search:
        return list(records)

    needle = search.lower()
    terms = [] if exact_match else needle.split()

    whole_matches: list[Couplet] = []
    term_matches: list[Couplet] = []
    seen_ids: set[str] = set()

    for couplet in records:
        key = str(couplet.id)
        if key in seen_ids:
            continue

        texts = _field_texts(couplet, search_fields)
        if any(needle in text for text in texts):
            whole_matches.append(couplet)
        elif any(term in text for term in terms for text in texts):
            term_matches.append(couplet)
        else:
            continue
        seen_ids.add(key)

    return whole_matches + term_matches


def filter_by_tags(records: Sequence[Couplet], tags: Iterable[str]) -> list[Couplet]:
    wanted = {tag.lower() for tag in tags}
    if not wanted:
        return list(records)
    return [
        couplet
        for couplet in records
        if any(tag.slug.lower() in wanted for tag in couplet.tags)
    ]


def filter_by_popularity(records: Sequence[Couplet], popular: bool) -> list[Couplet]:
    if not popular:
        return list(records)
    return [couplet for couplet in records if couplet.popular is True]
