"""Feature extraction and scoring"""

from .features import (
    NEGATIVE_DETECTORS,
    POSITIVE_DETECTORS,
    get_base_url_features,
)
from .scoring import (
    is_base_url,
    rank_base_urls,
    score,
)

__all__ = [
    "POSITIVE_DETECTORS",
    "NEGATIVE_DETECTORS",
    "get_base_url_features",
    "score",
    "is_base_url",
    "rank_base_urls",
]
