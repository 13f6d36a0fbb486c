"""Scoring configuration and result data models"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from .features import FeatureSet

DEFAULT_WEIGHT = 1.0

_WEIGHT_CONFIG = ConfigDict(
    alias_generator=to_camel,
    populate_by_name=True,
    frozen=True,
)


class _Weights(BaseModel):
    """Per-feature weights; a falsy override (0, None) falls back to the default"""

    model_config = _WEIGHT_CONFIG

    @field_validator("*", mode="before")
    @classmethod
    def _default_falsy_weight(cls, value: Any) -> Any:
        return value or DEFAULT_WEIGHT


class PositiveWeights(_Weights):
    """Weights of the positive features"""

    contains_api_substring: float = Field(default=DEFAULT_WEIGHT, gt=0)
    contains_version_substring: float = Field(default=DEFAULT_WEIGHT, gt=0)
    ends_with_version_substring: float = Field(default=DEFAULT_WEIGHT, gt=0)
    ends_with_number: float = Field(default=DEFAULT_WEIGHT, gt=0)


class NegativeWeights(_Weights):
    """Weights of the negative features"""

    has_query_string: float = Field(default=DEFAULT_WEIGHT, gt=0)
    has_fragment: float = Field(default=DEFAULT_WEIGHT, gt=0)
    contains_non_api_substring: float = Field(default=DEFAULT_WEIGHT, gt=0)
    over_two_paths: float = Field(default=DEFAULT_WEIGHT, gt=0)
    ends_with_file_extension: float = Field(default=DEFAULT_WEIGHT, gt=0)
    contains_bracket: float = Field(default=DEFAULT_WEIGHT, gt=0)
    is_homepage: float = Field(default=DEFAULT_WEIGHT, gt=0)


class WeightConfig(BaseModel):
    """Weights for every feature, 1.0 unless overridden"""

    model_config = ConfigDict(frozen=True)

    positive: PositiveWeights = Field(default_factory=PositiveWeights)
    negative: NegativeWeights = Field(default_factory=NegativeWeights)

    @field_validator("positive", "negative", mode="before")
    @classmethod
    def _none_means_defaults(cls, value: Any) -> Any:
        return {} if value is None else value


class ScoreOptions(BaseModel):
    """Options for scoring a candidate URL"""

    model_config = _WEIGHT_CONFIG

    # None defers to Settings.check_url_valid
    check_url_valid: bool | None = None
    weights: WeightConfig = Field(default_factory=WeightConfig)

    @field_validator("weights", mode="before")
    @classmethod
    def _none_means_defaults(cls, value: Any) -> Any:
        return {} if value is None else value


class ScoreResult(BaseModel):
    """Base URL score of a candidate URL with its feature breakdown"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    candidate_url: str
    score: float
    features: FeatureSet
