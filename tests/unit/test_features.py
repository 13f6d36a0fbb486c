"""Tests for base URL feature extraction.

Tests the features module that:
- Runs one independent predicate per positive and negative feature
- Always returns the full, fixed feature key set
"""

import pytest

from base_url_detector.core.features import (
    NEGATIVE_DETECTORS,
    POSITIVE_DETECTORS,
    contains_api_substring,
    contains_bracket,
    contains_non_api_substring,
    contains_version_substring,
    ends_with_file_extension,
    ends_with_number,
    ends_with_version_substring,
    get_base_url_features,
    has_fragment,
    over_two_paths,
)
from base_url_detector.models import (
    NegativeFeature,
    NegativeFeatures,
    PositiveFeature,
    PositiveFeatures,
)

# ============================================================================
# Detector registry
# ============================================================================


class TestDetectorRegistry:
    """Tests for the detector mappings"""

    def test_every_positive_feature_has_a_detector(self) -> None:
        """Test that each positive feature is registered exactly once"""
        assert list(POSITIVE_DETECTORS) == list(PositiveFeature)

    def test_every_negative_feature_has_a_detector(self) -> None:
        """Test that each negative feature is registered exactly once"""
        assert list(NEGATIVE_DETECTORS) == list(NegativeFeature)

    def test_models_match_feature_enums(self) -> None:
        """Test that model fields mirror the feature enums"""
        assert set(PositiveFeatures.model_fields) == {f.value for f in PositiveFeature}
        assert set(NegativeFeatures.model_fields) == {f.value for f in NegativeFeature}


# ============================================================================
# Positive features
# ============================================================================


class TestContainsApiSubstring:
    """Tests for contains_api_substring"""

    @pytest.mark.parametrize(
        "url",
        [
            "http://api.twitter.com/v1",
            "http://API.example.com",
            "http://example.com/api/users",
            "http://example.com/api",
            "http://example.com/?api",
            "http://example.com/search?x=1&api&y=2",
        ],
    )
    def test_delimited_token(self, url: str) -> None:
        """Test that api delimited by . / ? & or the end is found"""
        assert contains_api_substring(url) is True

    @pytest.mark.parametrize(
        "url",
        [
            "http://www.rottenapis.com",
            "http://myapi.example.com",
            "http://example.com/apis",
            "http://example.com/rapid",
            "http://example.com/api-docs",
        ],
    )
    def test_embedded_in_word(self, url: str) -> None:
        """Test that api inside a longer word is not found"""
        assert contains_api_substring(url) is False


class TestVersionFeatures:
    """Tests for version and number features"""

    def test_version_inside_path(self) -> None:
        """Test a version in the middle of the URL"""
        url = "http://example.com/v2/users"
        assert contains_version_substring(url) is True
        assert ends_with_version_substring(url) is False
        assert ends_with_number(url) is False

    def test_version_at_end(self) -> None:
        """Test a version at the end of the URL"""
        url = "http://example.com/V3"
        assert contains_version_substring(url) is True
        assert ends_with_version_substring(url) is True
        assert ends_with_number(url) is True

    def test_dotted_version(self) -> None:
        """Test digit.digit versions"""
        url = "http://example.com/1.0"
        assert contains_version_substring(url) is True
        assert ends_with_version_substring(url) is True

    def test_number_without_version(self) -> None:
        """Test that a trailing year is a number but not a version"""
        url = "http://example.com/archive/2015"
        assert contains_version_substring(url) is False
        assert ends_with_version_substring(url) is False
        assert ends_with_number(url) is True

    def test_no_version(self) -> None:
        """Test URLs without any digits"""
        url = "http://www.twitter.com/erikwittern"
        assert contains_version_substring(url) is False
        assert ends_with_number(url) is False


# ============================================================================
# Negative features
# ============================================================================


class TestNegativeFeatures:
    """Tests for the simple negative predicates"""

    def test_has_fragment(self) -> None:
        """Test fragment detection"""
        assert has_fragment("http://example.com/#top") is True
        assert has_fragment("http://example.com/top") is False

    @pytest.mark.parametrize(
        "url",
        [
            "http://json-schema.org/draft-04/schema",
            "http://www.w3.org/1999/xhtml",
            "http://example.com/SCHEMAS/user",
        ],
    )
    def test_contains_non_api_substring(self, url: str) -> None:
        """Test that schema and W3C URLs are flagged"""
        assert contains_non_api_substring(url) is True

    def test_w3_needs_literal_dot(self) -> None:
        """Test that w3.org matches a literal dot only"""
        assert contains_non_api_substring("http://example.com/w3xorg") is False

    @pytest.mark.parametrize(
        ("url", "expected"),
        [
            ("http://example.com", False),
            ("http://example.com/", False),
            ("http://example.com/a/b", False),
            ("http://example.com/a/b/c", True),
            ("http://example.com/a/b/", True),
        ],
    )
    def test_over_two_paths(self, url: str, expected: bool) -> None:
        """Test path depth detection"""
        assert over_two_paths(url) is expected

    @pytest.mark.parametrize(
        "url",
        [
            "http://example.com/logo.png",
            "http://example.com/data.json?x=1",
            "http://example.com/data.json#x",
            "http://example.com/archive.tar.gz",
            "http://www.twitter.com/users.html?order=desc",
        ],
    )
    def test_ends_with_file_extension(self, url: str) -> None:
        """Test that static resources are flagged"""
        assert ends_with_file_extension(url) is True

    @pytest.mark.parametrize(
        "url",
        [
            "http://example.com",
            "http://example.com/docs",
            "http://example.com/",
            "http://example.com/file.verylongext",
            "http://example.com/v1.0",
        ],
    )
    def test_no_file_extension(self, url: str) -> None:
        """Test that hosts and extension-less paths are not flagged"""
        assert ends_with_file_extension(url) is False

    def test_file_extension_requires_a_path(self) -> None:
        """Test that slashes in the query do not enable the check"""
        assert ends_with_file_extension("http://example.com?next=/a/b.html") is False

    @pytest.mark.parametrize("bracket", ["{", "}", "<", ">", "[", "]", "(", ")"])
    def test_contains_bracket(self, bracket: str) -> None:
        """Test that every bracket character is flagged"""
        assert contains_bracket(f"http://example.com/users/{bracket}id") is True

    def test_no_bracket(self) -> None:
        """Test URLs without brackets"""
        assert contains_bracket("http://example.com/users/42") is False


# ============================================================================
# get_base_url_features
# ============================================================================


class TestGetBaseUrlFeatures:
    """Tests for get_base_url_features"""

    def test_obvious_base_url(self) -> None:
        """Test that all positive and no negative features fire"""
        features = get_base_url_features("http://api.twitter.com/v1")

        assert features.true_positives() == list(PositiveFeature)
        assert features.true_negatives() == []

    def test_resource_url(self) -> None:
        """Test features of a web page with query string"""
        features = get_base_url_features("http://www.twitter.com/users.html?order=desc")

        assert features.true_positives() == []
        assert features.true_negatives() == [
            NegativeFeature.HAS_QUERY_STRING,
            NegativeFeature.ENDS_WITH_FILE_EXTENSION,
        ]

    def test_homepage(self) -> None:
        """Test that a bare host is flagged as homepage"""
        features = get_base_url_features("http://www.rottenapis.com")

        assert features.positive.contains_api_substring is False
        assert features.negative.is_homepage is True

    def test_always_has_fixed_keys(self) -> None:
        """Test that every feature is present for arbitrary input"""
        for url in ["", "some sting - no url", "http://[oops/a/b/c", "http://api.example.com/v1"]:
            dumped = get_base_url_features(url).model_dump()

            assert set(dumped["positive"]) == {f.value for f in PositiveFeature}
            assert set(dumped["negative"]) == {f.value for f in NegativeFeature}
            assert all(isinstance(v, bool) for v in dumped["positive"].values())
            assert all(isinstance(v, bool) for v in dumped["negative"].values())

    def test_camel_case_dump(self) -> None:
        """Test that features serialize under their external names"""
        dumped = get_base_url_features("http://api.twitter.com/v1").model_dump(by_alias=True)

        assert dumped["positive"]["containsApiSubstring"] is True
        assert dumped["negative"]["isHomepage"] is False
        assert set(dumped["negative"]) == {f.alias for f in NegativeFeature}
