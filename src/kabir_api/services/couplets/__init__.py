from kabir_api.services.couplets.errors import (
    ConversionError,
    CoupletsError,
    DataUnavailable,
    ValidationError,
)
from kabir_api.services.couplets.loader import load_couplets
from kabir_api.services.couplets.options import build_query_options
from kabir_api.services.couplets.query import get_couplets, query_couplets
from kabir_api.services.couplets.types import Couplet, QueryOptions, ResultPage, Tag

__all__ = [
    "ConversionError",
    "Couplet",
    "CoupletsError",
    "DataUnavailable",
    "QueryOptions",
    "ResultPage",
    "Tag",
    "ValidationError",
    "build_query_options",
    "get_couplets",
    "load_couplets",
    "query_couplets",
]
