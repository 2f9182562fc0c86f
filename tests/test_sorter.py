from collections.abc import Callable
import random

from kabir_api.services.couplets.sorter import collation_key, sort_couplets
from kabir_api.services.couplets.types import Couplet


def _ids(couplets: list[Couplet]) -> list[str | int]:
    return [couplet.id for couplet in couplets]


def test_sort_by_id_is_numeric(make_couplet: Callable[..., Couplet]) -> None:
    records = [make_couplet("10"), make_couplet("2"), make_couplet(1), make_couplet("33")]

    ascending = sort_couplets(records, "id", "ASC")
    descending = sort_couplets(records, "id", "DESC")

    assert _ids(ascending) == [1, "2", "10", "33"]
    assert descending == list(reversed(ascending))


def test_sort_does_not_mutate_input(make_couplet: Callable[..., Couplet]) -> None:
    records = [make_couplet("3"), make_couplet("1"), make_couplet("2")]
    snapshot = list(records)

    sort_couplets(records, "id", "ASC")
    sort_couplets(records, "random", "ASC", rng=random.Random(7))

    assert records == snapshot


def test_order_values_are_case_normalized(make_couplet: Callable[..., Couplet]) -> None:
    records = [make_couplet("1"), make_couplet("2")]

    assert _ids(sort_couplets(records, "ID", "desc")) == ["2", "1"]


def test_sort_by_hindi_follows_devanagari_collation(make_couplet: Callable[..., Couplet]) -> None:
    # U+0958 (qa) sorts next to its base letter ka, ahead of kha, despite its higher codepoint
    records = [
        make_couplet("1", couplet_hindi="ख"),
        make_couplet("2", couplet_hindi="\u0958"),
        make_couplet("3", couplet_hindi="क"),
    ]

    result = sort_couplets(records, "couplet_hindi", "ASC")

    assert _ids(result) == ["3", "2", "1"]
    assert _ids(sorted(records, key=lambda couplet: couplet.couplet_hindi)) == ["3", "1", "2"]
    assert _ids(sort_couplets(records, "couplet_hindi", "DESC")) == ["1", "2", "3"]


def test_sort_by_hindi_matches_reference_collation(make_couplet: Callable[..., Couplet]) -> None:
    texts = ["साईं इतना दीजिए", "काल करे सो आज कर", "ऐसी वाणी बोलिए", "धीरे-धीरे रे मना"]
    records = [make_couplet(str(index), couplet_hindi=text) for index, text in enumerate(texts)]

    result = sort_couplets(records, "couplet_hindi", "ASC")

    assert [c.couplet_hindi for c in result] == sorted(texts, key=collation_key)


def test_sort_by_english_ignores_case(make_couplet: Callable[..., Couplet]) -> None:
    records = [
        make_couplet("1", couplet_english="banana"),
        make_couplet("2", couplet_english="Apple"),
        make_couplet("3", couplet_english="cherry"),
    ]

    assert _ids(sort_couplets(records, "couplet_english", "ASC")) == ["2", "1", "3"]
    assert _ids(sort_couplets(records, "couplet_english", "DESC")) == ["3", "1", "2"]


def test_sort_by_popular_puts_popular_first_then_hindi(make_couplet: Callable[..., Couplet]) -> None:
    records = [
        make_couplet("1", couplet_hindi="ख", popular=False),
        make_couplet("2", couplet_hindi="ख", popular=True),
        make_couplet("3", couplet_hindi="क", popular=False),
        make_couplet("4", couplet_hindi="क", popular=True),
    ]

    ascending = sort_couplets(records, "popular", "ASC")
    descending = sort_couplets(records, "popular", "DESC")

    assert _ids(ascending) == ["4", "2", "3", "1"]
    assert _ids(descending) == ["1", "3", "2", "4"]


def test_random_sort_is_a_permutation(make_couplet: Callable[..., Couplet]) -> None:
    records = [make_couplet(str(index)) for index in range(20)]

    shuffled = sort_couplets(records, "random", "DESC", rng=random.Random(42))

    assert sorted(_ids(shuffled), key=int) == _ids(records)


def test_other_fields_use_raw_comparison_and_keep_ties_stable(
    make_couplet: Callable[..., Couplet],
) -> None:
    records = [
        make_couplet("1", slug="b"),
        make_couplet("2", slug="a"),
        make_couplet("3", slug="b"),
    ]

    assert _ids(sort_couplets(records, "slug", "ASC")) == ["2", "1", "3"]
    assert _ids(sort_couplets(records, "slug", "DESC")) == ["1", "3", "2"]
    assert _ids(sort_couplets(records, "missing_field", "ASC")) == ["1", "2", "3"]
