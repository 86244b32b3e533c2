"""Tests for open-symbol URI parsing."""

from symbol_opener.open_request import OpenRequest, parse_open_uri


def test_parse_all_params() -> None:
    """symbol, cwd and kind are read from the query string."""
    request = parse_open_uri("symbol-opener://open?symbol=Foo&cwd=/src/app&kind=Class")
    assert request == OpenRequest("Foo", "/src/app", "Class")


def test_parse_double_encoded_query() -> None:
    """A query encoded twice by the OS launcher still parses."""
    uri = "symbol-opener://open?symbol%3DLinker.build%26cwd%3D%252Fsrc%252Fmy%2520app"
    request = parse_open_uri(uri)
    assert request.symbol == "Linker.build"
    assert request.cwd == "/src/my app"
    assert request.kind is None


def test_parse_missing_and_blank_params() -> None:
    """Missing or empty values come back as None."""
    request = parse_open_uri("symbol-opener://open?symbol=&kind=Function")
    assert request == OpenRequest(None, None, "Function")
