"""Tests for query-string encoding."""

from enum import Enum

from sonarqube_client.core.query import encode_value, to_query_params


class Color(str, Enum):
    RED = "red"


class TestEncodeValue:
    """Tests for encode_value."""

    def test_booleans_are_lowercase(self) -> None:
        assert encode_value(True) == "true"
        assert encode_value(False) == "false"

    def test_lists_are_comma_joined(self) -> None:
        assert encode_value(["a", "b", "c"]) == "a,b,c"
        assert encode_value(("x", 1)) == "x,1"

    def test_enum_uses_value(self) -> None:
        assert encode_value(Color.RED) == "red"
        assert encode_value([Color.RED, "blue"]) == "red,blue"

    def test_none_and_empty_list_are_omitted(self) -> None:
        assert encode_value(None) is None
        assert encode_value([]) is None

    def test_numbers(self) -> None:
        assert encode_value(42) == "42"
        assert encode_value(0) == "0"


class TestToQueryParams:
    """Tests for to_query_params."""

    def test_drops_missing_values(self) -> None:
        params = to_query_params({"p": 1, "q": None, "tags": [], "resolved": False})

        assert params == {"p": "1", "resolved": "false"}

    def test_keeps_wire_names(self) -> None:
        params = to_query_params({"owaspTop10-2021": ["a1", "a2"], "ps": 500})

        assert params == {"owaspTop10-2021": "a1,a2", "ps": "500"}
