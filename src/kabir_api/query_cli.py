from __future__ import annotations

import argparse
import json
from pathlib import Path
import sys

from kabir_api.config import get_settings
from kabir_api.logging_config import configure_logging
from kabir_api.services.couplets import CoupletsError, build_query_options, get_couplets


def _build_parser() -> argparse.ArgumentParser:
    settings = get_settings()

    parser = argparse.ArgumentParser(
        prog="couplets-query",
        description="Search, filter, sort and paginate the couplets data file",
    )
    parser.add_argument("search", nargs="?", default=None, help="Free-text search")
    parser.add_argument(
        "--data-path",
        default=settings.data_path,
        help="Path to the couplets JSON file",
    )
    parser.add_argument("--exact-match", action="store_true", help="Only whole-string matches")
    parser.add_argument(
        "--search-within",
        default=None,
        help="Comma-separated scopes: couplet, translation, explanation (default: all)",
    )
    parser.add_argument("--tags", default=None, help="Comma-separated tag slugs")
    parser.add_argument("--popular", action="store_true", help="Only popular couplets")
    parser.add_argument("--order-by", default=None, help="id, random, popular, couplet_english or couplet_hindi")
    parser.add_argument("--order", default=None, help="ASC or DESC")
    parser.add_argument("--page", default=None, help="Page number")
    parser.add_argument("--per-page", default=None, help="Page size, -1 for all")
    parser.add_argument("--no-pagination", action="store_true", help="Disable pagination totals")
    return parser


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)
    configure_logging(get_settings().log_level)

    params: dict[str, object] = {
        "s": args.search,
        "exactMatch": args.exact_match,
        "searchWithin": args.search_within,
        "tags": args.tags,
        "popular": args.popular,
        "orderBy": args.order_by,
        "order": args.order,
        "page": args.page,
        "perPage": args.per_page,
        "pagination": not args.no_pagination,
    }

    try:
        result = get_couplets(build_query_options(params), data_path=Path(args.data_path))
    except CoupletsError as exc:
        print(f"[couplets-query] failed: {exc}", file=sys.stderr, flush=True)
        raise SystemExit(1) from exc

    print(json.dumps(result.to_dict(), ensure_ascii=False, indent=2), flush=True)


if __name__ == "__main__":
    main()
