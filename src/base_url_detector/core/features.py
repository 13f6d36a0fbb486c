"""
Feature extraction for base URL detection.

Each feature is an independent predicate over the raw URL string, registered
under its feature name. Every predicate runs for every URL, so the feature
set always carries the full, fixed key set.
"""

import re
from collections.abc import Callable

from base_url_detector.models import (
    FeatureSet,
    NegativeFeature,
    NegativeFeatures,
    PositiveFeature,
    PositiveFeatures,
)
from base_url_detector.utils.url_helpers import (
    count_path_segments,
    has_query_string,
    is_homepage,
    strip_query_and_fragment,
)

FeatureDetector = Callable[[str], bool]

_API_PATTERN = re.compile(r"(?:^|[./?&])api(?:[./?&]|\Z)", re.IGNORECASE)
_VERSION_PATTERN = re.compile(r"v[0-9]|[0-9]\.[0-9]", re.IGNORECASE)
_ENDS_WITH_VERSION_PATTERN = re.compile(r"(?:v[0-9]|[0-9]\.[0-9])\Z", re.IGNORECASE)
_ENDS_WITH_NUMBER_PATTERN = re.compile(r"[0-9]\Z")
_NON_API_PATTERN = re.compile(r"schema|w3\.org", re.IGNORECASE)
_FILE_EXTENSION_PATTERN = re.compile(r"\.[a-z0-9]{2,5}\Z", re.IGNORECASE)
_BRACKET_PATTERN = re.compile(r"[{}<>\[\]()]")

# Minimum number of slashes (scheme slashes included) before a trailing
# ".ext" is read as a file extension rather than a TLD
_FILE_EXTENSION_MIN_SLASHES = 3


def contains_api_substring(url: str) -> bool:
    """``api`` as a whole token, e.g. ``api.example.com`` or ``/api/`` but not ``rottenapis``"""
    return _API_PATTERN.search(url) is not None


def contains_version_substring(url: str) -> bool:
    return _VERSION_PATTERN.search(url) is not None


def ends_with_version_substring(url: str) -> bool:
    return _ENDS_WITH_VERSION_PATTERN.search(url) is not None


def ends_with_number(url: str) -> bool:
    return _ENDS_WITH_NUMBER_PATTERN.search(url) is not None


def has_fragment(url: str) -> bool:
    return "#" in url


def contains_non_api_substring(url: str) -> bool:
    """Schema and W3C URLs point at specifications, not APIs"""
    return _NON_API_PATTERN.search(url) is not None


def over_two_paths(url: str) -> bool:
    return count_path_segments(url) > 2


def ends_with_file_extension(url: str) -> bool:
    """
    Check if the URL points at a static resource such as ``/logo.png``.

    Only URLs with a path are considered, otherwise the TLD of
    ``http://example.com`` would look like an extension.
    """
    url_no_query = strip_query_and_fragment(url)
    if url_no_query.count("/") < _FILE_EXTENSION_MIN_SLASHES:
        return False
    return _FILE_EXTENSION_PATTERN.search(url_no_query) is not None


def contains_bracket(url: str) -> bool:
    """Brackets show up in URL templates like ``/users/{id}``"""
    return _BRACKET_PATTERN.search(url) is not None


POSITIVE_DETECTORS: dict[PositiveFeature, FeatureDetector] = {
    PositiveFeature.CONTAINS_API_SUBSTRING: contains_api_substring,
    PositiveFeature.CONTAINS_VERSION_SUBSTRING: contains_version_substring,
    PositiveFeature.ENDS_WITH_VERSION_SUBSTRING: ends_with_version_substring,
    PositiveFeature.ENDS_WITH_NUMBER: ends_with_number,
}

NEGATIVE_DETECTORS: dict[NegativeFeature, FeatureDetector] = {
    NegativeFeature.HAS_QUERY_STRING: has_query_string,
    NegativeFeature.HAS_FRAGMENT: has_fragment,
    NegativeFeature.CONTAINS_NON_API_SUBSTRING: contains_non_api_substring,
    NegativeFeature.OVER_TWO_PATHS: over_two_paths,
    NegativeFeature.ENDS_WITH_FILE_EXTENSION: ends_with_file_extension,
    NegativeFeature.CONTAINS_BRACKET: contains_bracket,
    NegativeFeature.IS_HOMEPAGE: is_homepage,
}


def get_base_url_features(url: str) -> FeatureSet:
    """
    Compute the features indicating whether a URL is a base URL.

    Args:
        url: Candidate URL (validated or not)

    Returns:
        FeatureSet with every positive and negative feature

    Example:
        >>> features = get_base_url_features("http://api.twitter.com/v1")
        >>> features.positive.contains_api_substring
        True
        >>> features.negative.is_homepage
        False
    """
    positive = {feature.value: detect(url) for feature, detect in POSITIVE_DETECTORS.items()}
    negative = {feature.value: detect(url) for feature, detect in NEGATIVE_DETECTORS.items()}

    return FeatureSet(
        positive=PositiveFeatures(**positive),
        negative=NegativeFeatures(**negative),
    )
