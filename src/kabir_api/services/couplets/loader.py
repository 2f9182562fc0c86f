from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from kabir_api.services.couplets.errors import ConversionError, DataUnavailable
from kabir_api.services.couplets.normalize import to_bool
from kabir_api.services.couplets.types import ALL_SEARCH_FIELDS, Couplet, Tag

logger = logging.getLogger(__name__)


def _parse_tag(raw: object) -> Tag:
    if isinstance(raw, str):
        return Tag(slug=raw, name=raw)
    if not isinstance(raw, dict) or not isinstance(raw.get("slug"), str):
        raise ValueError(f"tag must be an object with a string 'slug': {raw!r}")

    count = raw.get("count", 0)
    return Tag(
        slug=raw["slug"],
        name=str(raw.get("name") or raw["slug"]),
        count=count if isinstance(count, int) and not isinstance(count, bool) else 0,
    )


def _parse_couplet(raw: object, position: int) -> Couplet:
    if not isinstance(raw, dict):
        raise ValueError(f"record #{position} must be an object")

    couplet_id = raw.get("id")
    if isinstance(couplet_id, bool) or not isinstance(couplet_id, (str, int)) or couplet_id == "":
        raise ValueError(f"record #{position} has no usable 'id'")

    tags = raw.get("tags") or []
    if not isinstance(tags, list):
        raise ValueError(f"record {couplet_id!r}: 'tags' must be a list")

    text_fields: dict[str, Any] = {}
    for field_name in ALL_SEARCH_FIELDS:
        value = raw.get(field_name)
        text_fields[field_name] = value if isinstance(value, str) else ""

    try:
        popular = to_bool(raw.get("popular", False))
    except ConversionError as exc:
        raise ValueError(f"record {couplet_id!r}: {exc}") from exc

    return Couplet(
        id=couplet_id,
        slug=str(raw.get("slug") or ""),
        unique_slug=str(raw.get("unique_slug") or ""),
        tags=tuple(_parse_tag(tag) for tag in tags),
        popular=popular,
        **text_fields,
    )


def load_couplets(path: Path) -> list[Couplet]:
    """Read the couplets JSON array at ``path``.

    Every failure (missing file, bad JSON, malformed record, duplicate id) is
    reported as ``DataUnavailable`` naming the resolved path.
    """
    resolved = path.resolve()

    try:
        payload = json.loads(resolved.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise DataUnavailable(f"Failed to load data from '{resolved}': {exc}") from exc

    if not isinstance(payload, list):
        raise DataUnavailable(
            f"Failed to load data from '{resolved}': expected a JSON array of couplets"
        )

    couplets: list[Couplet] = []
    seen_ids: set[str] = set()
    for position, raw in enumerate(payload):
        try:
            couplet = _parse_couplet(raw, position)
        except ValueError as exc:
            raise DataUnavailable(f"Failed to load data from '{resolved}': {exc}") from exc

        key = str(couplet.id)
        if key in seen_ids:
            raise DataUnavailable(
                f"Failed to load data from '{resolved}': duplicate couplet id {couplet.id!r}"
            )
        seen_ids.add(key)
        couplets.append(couplet)

    logger.debug("loaded %d couplets from %s", len(couplets), resolved)
    return couplets
