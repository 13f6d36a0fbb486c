"""Base URL feature data models"""

from enum import Enum

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class PositiveFeature(str, Enum):
    """Signals that a URL is a base URL"""

    CONTAINS_API_SUBSTRING = "contains_api_substring"
    CONTAINS_VERSION_SUBSTRING = "contains_version_substring"
    ENDS_WITH_VERSION_SUBSTRING = "ends_with_version_substring"
    ENDS_WITH_NUMBER = "ends_with_number"

    @property
    def alias(self) -> str:
        return to_camel(self.value)


class NegativeFeature(str, Enum):
    """Signals that a URL is a specific resource, a web page or a static file"""

    HAS_QUERY_STRING = "has_query_string"
    HAS_FRAGMENT = "has_fragment"
    CONTAINS_NON_API_SUBSTRING = "contains_non_api_substring"
    OVER_TWO_PATHS = "over_two_paths"
    ENDS_WITH_FILE_EXTENSION = "ends_with_file_extension"
    CONTAINS_BRACKET = "contains_bracket"
    IS_HOMEPAGE = "is_homepage"

    @property
    def alias(self) -> str:
        return to_camel(self.value)


_FEATURE_CONFIG = ConfigDict(
    alias_generator=to_camel,
    populate_by_name=True,
    extra="forbid",
    frozen=True,
)


class PositiveFeatures(BaseModel):
    """Positive feature values, one per PositiveFeature"""

    model_config = _FEATURE_CONFIG

    contains_api_substring: bool
    contains_version_substring: bool
    ends_with_version_substring: bool
    ends_with_number: bool


class NegativeFeatures(BaseModel):
    """Negative feature values, one per NegativeFeature"""

    model_config = _FEATURE_CONFIG

    has_query_string: bool
    has_fragment: bool
    contains_non_api_substring: bool
    over_two_paths: bool
    ends_with_file_extension: bool
    contains_bracket: bool
    is_homepage: bool


class FeatureSet(BaseModel):
    """All features computed for a candidate URL"""

    model_config = ConfigDict(frozen=True)

    positive: PositiveFeatures
    negative: NegativeFeatures

    def true_positives(self) -> list[PositiveFeature]:
        """Positive features that fired, in declaration order"""
        return [f for f in PositiveFeature if getattr(self.positive, f.value)]

    def true_negatives(self) -> list[NegativeFeature]:
        """Negative features that fired, in declaration order"""
        return [f for f in NegativeFeature if getattr(self.negative, f.value)]
