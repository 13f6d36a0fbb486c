"""
Base URL scoring.

The score is the weighted share of positive features that fired minus the
weighted share of negative features that fired. Under default weights it lies
in [-1, 1]; 1 means every positive and no negative feature fired.
"""

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from base_url_detector.config import get_settings
from base_url_detector.core.features import get_base_url_features
from base_url_detector.models import (
    FeatureSet,
    NegativeFeature,
    PositiveFeature,
    ScoreOptions,
    ScoreResult,
    WeightConfig,
)
from base_url_detector.utils.url_helpers import is_valid_url

logger = logging.getLogger(__name__)

ScoreOptionsLike = ScoreOptions | Mapping[str, Any] | None


def score(features: FeatureSet, weights: WeightConfig | None = None) -> float:
    """
    Aggregate a feature set into a single score.

    Each true positive feature adds ``weight / 4``, each true negative
    feature subtracts ``weight / 7``.

    Args:
        features: Features of the candidate URL
        weights: Feature weights (default 1.0 for every feature)

    Returns:
        Score, in [-1, 1] under default weights

    Examples:
        >>> score(get_base_url_features("http://api.twitter.com/v1"))
        1.0
    """
    weights = weights or WeightConfig()

    positive_total = sum(getattr(weights.positive, f.value) for f in features.true_positives())
    negative_total = sum(getattr(weights.negative, f.value) for f in features.true_negatives())

    return positive_total / len(PositiveFeature) - negative_total / len(NegativeFeature)


def _resolve_options(options: ScoreOptionsLike) -> ScoreOptions:
    if isinstance(options, ScoreOptions):
        return options
    return ScoreOptions.model_validate(dict(options or {}))


def is_base_url(candidate_url: Any, options: ScoreOptionsLike = None) -> ScoreResult | None:
    """
    Score how likely a URL is the base URL of a web API.

    Args:
        candidate_url: URL to score
        options: ScoreOptions, or a mapping with ``check_url_valid`` /
            ``checkUrlValid`` and ``weights`` ({"positive": {...},
            "negative": {...}}, keyed by snake_case or camelCase feature name)

    Returns:
        ScoreResult, or None if candidate_url is not a string or (with URL
        checking enabled) not a valid URL

    Raises:
        pydantic.ValidationError: If options are malformed (e.g. a negative weight)

    Examples:
        >>> is_base_url("http://api.twitter.com/v1").score
        1.0
        >>> is_base_url("some sting - no url") is None
        True
        >>> is_base_url("some sting - no url", {"check_url_valid": False}) is None
        False
    """
    if not isinstance(candidate_url, str):
        logger.debug(f"Not scoring non-string candidate of type {type(candidate_url).__name__}")
        return None

    resolved = _resolve_options(options)
    check_url_valid = resolved.check_url_valid
    if check_url_valid is None:
        check_url_valid = get_settings().check_url_valid

    if check_url_valid and not is_valid_url(candidate_url):
        logger.debug(f"Not scoring invalid URL: {candidate_url!r}")
        return None

    features = get_base_url_features(candidate_url)
    result = ScoreResult(
        candidate_url=candidate_url,
        score=score(features, resolved.weights),
        features=features,
    )
    logger.debug(f"Scored {candidate_url!r}: {result.score:.3f}")
    return result


def rank_base_urls(candidate_urls: Iterable[Any], options: ScoreOptionsLike = None) -> list[ScoreResult]:
    """
    Score several candidate URLs and order them from most to least likely base URL.

    Candidates that ``is_base_url`` rejects are left out. Equal scores keep
    their input order.

    Args:
        candidate_urls: URLs to score
        options: Options applied to every candidate (see is_base_url)

    Returns:
        Score results sorted by descending score

    Example:
        >>> results = rank_base_urls([
        ...     "http://www.twitter.com/users.html?order=desc",
        ...     "http://api.twitter.com/v1",
        ... ])
        >>> results[0].candidate_url
        'http://api.twitter.com/v1'
    """
    resolved = _resolve_options(options)

    results = []
    for candidate_url in candidate_urls:
        result = is_base_url(candidate_url, resolved)
        if result is not None:
            results.append(result)

    logger.debug(f"Ranked {len(results)} base URL candidates")
    return sorted(results, key=lambda r: r.score, reverse=True)
