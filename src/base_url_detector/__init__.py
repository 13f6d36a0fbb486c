"""base-url-detector - heuristic detection of web API base URLs

Scores how likely a URL is the base URL of a web API (e.g.
``http://api.example.com/v1``) rather than a resource, a web page or a
static file:

- is_base_url: Score a single URL with its feature breakdown
- rank_base_urls: Order several candidate URLs by score
- get_base_url_features: The individual positive and negative signals
"""

from base_url_detector.core import get_base_url_features, is_base_url, rank_base_urls, score
from base_url_detector.models import FeatureSet, ScoreOptions, ScoreResult, WeightConfig

__version__ = "0.1.0"

__all__ = [
    "is_base_url",
    "rank_base_urls",
    "get_base_url_features",
    "score",
    "FeatureSet",
    "ScoreOptions",
    "ScoreResult",
    "WeightConfig",
]
