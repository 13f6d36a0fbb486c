"""Utility functions"""

from .url_helpers import (
    count_path_segments,
    get_homepage,
    get_subdomain,
    has_query_string,
    is_homepage,
    is_valid_url,
    split_url,
    strip_query_and_fragment,
)

__all__ = [
    "is_valid_url",
    "split_url",
    "has_query_string",
    "strip_query_and_fragment",
    "count_path_segments",
    "get_subdomain",
    "get_homepage",
    "is_homepage",
]
