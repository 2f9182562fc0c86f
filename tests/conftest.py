from collections.abc import Callable, Iterator
import json
from pathlib import Path
from typing import Any

import pytest
from fastapi.testclient import TestClient

from kabir_api.config import get_settings
from kabir_api.main import _cached_couplets, app
from kabir_api.services.couplets.types import Couplet, Tag

THREE_RECORDS: list[dict[str, Any]] = [
    {
        "id": "1",
        "slug": "bura-jo-dekhan",
        "unique_slug": "bura-jo-dekhan-1",
        "couplet_hindi": "बुरा जो देखन मैं चला",
        "couplet_english": "Bura jo dekhan main chala",
        "translation_hindi": "मैं बुराई खोजने चला",
        "translation_english": "I went looking for the wicked",
        "explanation_hindi": "अपने भीतर झाँको",
        "explanation_english": "Look within yourself",
        "tags": [{"name": "Humility", "slug": "humility", "count": 1}],
        "popular": True,
    },
    {
        "id": "2",
        "slug": "kal-kare-so-aaj-kar",
        "unique_slug": "kal-kare-so-aaj-kar-2",
        "couplet_hindi": "काल करे सो आज कर",
        "couplet_english": "Kaal kare so aaj kar",
        "translation_hindi": "कल का काम आज करो",
        "translation_english": "Do tomorrow's work today",
        "explanation_hindi": "समय को मत टालो",
        "explanation_english": "Do not waste time",
        "tags": [{"name": "Time", "slug": "time", "count": 2}],
        "popular": False,
    },
    {
        "id": "3",
        "slug": "dheere-dheere-re-mana",
        "unique_slug": "dheere-dheere-re-mana-3",
        "couplet_hindi": "धीरे-धीरे रे मना",
        "couplet_english": "Dheere dheere re mana",
        "translation_hindi": "धीरे-धीरे सब कुछ होता है",
        "translation_english": "Slowly everything happens in time",
        "explanation_hindi": "धैर्य रखो",
        "explanation_english": "Be patient",
        "tags": [{"name": "Time", "slug": "Time", "count": 2}],
        "popular": True,
    },
]


@pytest.fixture(autouse=True)
def reset_api_caches() -> Iterator[None]:
    get_settings.cache_clear()
    _cached_couplets.cache_clear()
    yield
    get_settings.cache_clear()
    _cached_couplets.cache_clear()


@pytest.fixture
def make_couplet() -> Callable[..., Couplet]:
    def factory(couplet_id: str | int, *, tags: tuple[str, ...] = (), **fields: Any) -> Couplet:
        return Couplet(
            id=couplet_id,
            tags=tuple(Tag(slug=slug, name=slug) for slug in tags),
            **fields,
        )

    return factory


@pytest.fixture
def data_file(tmp_path: Path) -> Path:
    path = tmp_path / "couplets.json"
    path.write_text(json.dumps(THREE_RECORDS, ensure_ascii=False), encoding="utf-8")
    return path


@pytest.fixture
def client(monkeypatch: pytest.MonkeyPatch, data_file: Path) -> Iterator[TestClient]:
    monkeypatch.setenv("COUPLETS_DATA_PATH", str(data_file))
    monkeypatch.setenv("COUPLETS_CACHE_DATASET", "false")

    with TestClient(app) as test_client:
        yield test_client
