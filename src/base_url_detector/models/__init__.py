"""Data models for base-url-detector"""

from .features import (
    FeatureSet,
    NegativeFeature,
    NegativeFeatures,
    PositiveFeature,
    PositiveFeatures,
)
from .scoring import (
    DEFAULT_WEIGHT,
    NegativeWeights,
    PositiveWeights,
    ScoreOptions,
    ScoreResult,
    WeightConfig,
)

__all__ = [
    "PositiveFeature",
    "NegativeFeature",
    "PositiveFeatures",
    "NegativeFeatures",
    "FeatureSet",
    "DEFAULT_WEIGHT",
    "PositiveWeights",
    "NegativeWeights",
    "WeightConfig",
    "ScoreOptions",
    "ScoreResult",
]
