"""Unit tests for relay payload decoding"""

import base64

import pytest

from tickertape.infrastructure.http.payload import decode_payload


@pytest.mark.unit
def test_plain_text_is_returned_unchanged(series_csv):
    assert decode_payload(series_csv) == series_csv


@pytest.mark.unit
@pytest.mark.parametrize("raw", [None, ""])
def test_empty_input_returns_empty_string(raw):
    assert decode_payload(raw) == ""


@pytest.mark.unit
def test_base64_payload_is_decoded(series_csv):
    encoded = base64.b64encode(series_csv.encode()).decode()

    assert decode_payload(f"data:text/csv;base64,{encoded}") == series_csv


@pytest.mark.unit
def test_percent_encoded_payload_is_decoded():
    assert decode_payload("data:text/plain,a%2Cb%0A1%2C2") == "a,b\n1,2"


@pytest.mark.unit
def test_prefix_without_separator_is_returned_unchanged():
    assert decode_payload("data:text/plain") == "data:text/plain"


@pytest.mark.unit
def test_only_first_comma_separates_metadata():
    assert decode_payload("data:text/csv,a,b") == "a,b"


@pytest.mark.unit
def test_empty_base64_payload_decodes_to_empty():
    assert decode_payload("data:text/csv;base64,") == ""


@pytest.mark.unit
def test_undecodable_base64_is_returned_as_opaque_text():
    # Valid base64 of bytes that are not UTF-8
    raw = "data:application/octet-stream;base64,/w=="

    assert decode_payload(raw) == raw


@pytest.mark.unit
@pytest.mark.parametrize(
    ("payload", "expected"), [("YWI", "ab"), ("YQ", "a"), ("YWJj", "abc")]
)
def test_unpadded_base64_is_decoded(payload, expected):
    assert decode_payload(f"data:text/csv;base64,{payload}") == expected
