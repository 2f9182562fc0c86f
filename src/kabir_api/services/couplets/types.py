from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

SEARCH_SCOPES: dict[str, tuple[str, str]] = {
    "couplet": ("couplet_hindi", "couplet_english"),
    "translation": ("translation_hindi", "translation_english"),
    "explanation": ("explanation_hindi", "explanation_english"),
}
ALL_SEARCH_FIELDS: tuple[str, ...] = tuple(
    field_name for pair in SEARCH_SCOPES.values() for field_name in pair
)


@dataclass(frozen=True)
class Tag:
    slug: str
    name: str = ""
    count: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "slug": self.slug, "count": self.count}


@dataclass(frozen=True)
class Couplet:
    id: str | int
    slug: str = ""
    unique_slug: str = ""
    couplet_hindi: str = ""
    couplet_english: str = ""
    translation_hindi: str = ""
    translation_english: str = ""
    explanation_hindi: str = ""
    explanation_english: str = ""
    tags: tuple[Tag, ...] = ()
    popular: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "slug": self.slug,
            "unique_slug": self.unique_slug,
            "couplet_hindi": self.couplet_hindi,
            "couplet_english": self.couplet_english,
            "translation_hindi": self.translation_hindi,
            "translation_english": self.translation_english,
            "explanation_hindi": self.explanation_hindi,
            "explanation_english": self.explanation_english,
            "tags": [tag.to_dict() for tag in self.tags],
            "popular": self.popular,
        }


@dataclass(frozen=True)
class QueryOptions:
    search: str = ""
    exact_match: bool = False
    search_fields: tuple[str, ...] = ALL_SEARCH_FIELDS
    tags: tuple[str, ...] = ()
    popular: bool = False
    order_by: str = "id"
    order: str = "ASC"
    page: int = 1
    per_page: int = 10
    pagination: bool = True


@dataclass(frozen=True)
class ResultPage:
    couplets: list[Couplet] = field(default_factory=list)
    total: int = 0
    total_pages: int = 0
    page: int = 1
    per_page: int = 10
    pagination: bool = True

    def to_dict(self) -> dict[str, Any]:
        return {
            "couplets": [couplet.to_dict() for couplet in self.couplets],
            "total": self.total,
            "totalPages": self.total_pages,
            "page": self.page,
            "perPage": self.per_page,
            "pagination": self.pagination,
        }
