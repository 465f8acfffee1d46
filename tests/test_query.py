"""Tests for query string serialization."""

from __future__ import annotations

from darksky_api.query import serialize
from darksky_api.schemas import Exclude, Extend, Language, Units


class TestSerialize:
    """Test serialize()."""

    def test_empty(self) -> None:
        assert serialize({}) == ""

    def test_only_none_values(self) -> None:
        assert serialize({"a": None}) == ""

    def test_sequence_joined_with_encoded_comma(self) -> None:
        assert serialize({"a": [1, 2]}) == "?a=1%2C2"

    def test_none_values_skipped(self) -> None:
        assert serialize({"units": Units.SI, "extend": None, "lang": "en"}) == "?units=si&lang=en"

    def test_enum_values(self) -> None:
        params = {
            "exclude": [Exclude.HOURLY, Exclude.DAILY],
            "lang": Language.ENGLISH,
            "extend": Extend.HOURLY,
        }
        assert serialize(params) == "?exclude=hourly%2Cdaily&lang=en&extend=hourly"

    def test_keeps_insertion_order(self) -> None:
        assert serialize({"units": "ca", "exclude": ["daily", "flags"]}) == (
            "?units=ca&exclude=daily%2Cflags"
        )
        assert serialize({"exclude": ["daily", "flags"], "units": "ca"}) == (
            "?exclude=daily%2Cflags&units=ca"
        )

    def test_values_are_percent_encoded(self) -> None:
        assert serialize({"q": "a b&c=d/e"}) == "?q=a%20b%26c%3Dd%2Fe"

    def test_unreserved_characters_untouched(self) -> None:
        assert serialize({"lang": Language.PIG_LATIN}) == "?lang=x-pig-latin"

    def test_tuple_values(self) -> None:
        assert serialize({"exclude": (Exclude.ALERTS,)}) == "?exclude=alerts"
