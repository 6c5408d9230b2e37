from datetime import datetime, timezone

import pytest

from cprkit.cookies import EPOCH, Cookies
from cprkit.util import (
    Header,
    ParsedHeader,
    is_true,
    parse_cookies,
    parse_header,
    secure_clear,
    split,
    timestamp_to_t,
)

SIMPLE_RESPONSE = "HTTP/1.1 200 OK\r\nContent-Type: text/html\r\nContent-Length: 12\r\n\r\n"


def test_header_is_case_insensitive():
    header = Header({"Content-Type": "text/html"})
    assert header["content-type"] == "text/html"
    assert "CONTENT-TYPE" in header


def test_header_keeps_first_key_spelling():
    header = Header()
    header["Content-Type"] = "text/html"
    header["content-type"] = "text/plain"
    assert list(header) == ["Content-Type"]
    assert header["Content-Type"] == "text/plain"


def test_header_orders_keys_case_insensitively():
    header = Header({"b": "2", "A": "1", "c": "3"})
    assert list(header) == ["A", "b", "c"]


def test_header_missing_key_raises():
    with pytest.raises(KeyError):
        Header()["missing"]


def test_header_delete():
    header = Header({"Accept": "*/*"})
    del header["ACCEPT"]
    assert len(header) == 0


def test_parse_header_simple():
    parsed = parse_header(SIMPLE_RESPONSE)
    assert isinstance(parsed, ParsedHeader)
    assert parsed.status_line == "HTTP/1.1 200 OK"
    assert parsed.reason == "OK"
    assert parsed.header["content-type"] == "text/html"
    assert parsed.header["Content-Length"] == "12"
    assert len(parsed.header) == 2


def test_parse_header_status_line_starts_new_block():
    raw = (
        "HTTP/1.1 301 Moved Permanently\r\nLocation: hello.html\r\n\r\n"
        "HTTP/1.1 200 OK\r\nContent-Type: text/html\r\n\r\n"
    )
    parsed = parse_header(raw)
    assert parsed.status_line == "HTTP/1.1 200 OK"
    assert parsed.reason == "OK"
    assert "Location" not in parsed.header
    assert parsed.header["content-type"] == "text/html"


def test_parse_header_multi_word_reason():
    parsed = parse_header("HTTP/1.1 404 Not Found\r\n")
    assert parsed.reason == "Not Found"
    assert parsed.status_line == "HTTP/1.1 404 Not Found"


def test_parse_header_trims_value_whitespace():
    parsed = parse_header("X-Test: \t  spaced value \t\r\n")
    assert parsed.header["X-Test"] == "spaced value"


def test_parse_header_ignores_lines_without_colon():
    parsed = parse_header("no colon here\nName: value\n")
    assert dict(parsed.header) == {"Name": "value"}


def test_parse_header_empty_input():
    parsed = parse_header("")
    assert parsed.status_line == ""
    assert parsed.reason == ""
    assert len(parsed.header) == 0


def test_split_drops_trailing_empty_field():
    assert split("a\tb\t", "\t") == ["a", "b"]


def test_split_keeps_inner_empty_fields():
    assert split("a,,b", ",") == ["a", "", "b"]


def test_split_empty_string():
    assert split("", ",") == []


def test_split_join_round_trip():
    parts = ["example.com", "TRUE", "/", "FALSE", "0", "SID", "value"]
    assert split("\t".join(parts), "\t") == parts


def test_split_rejects_long_delimiter():
    with pytest.raises(ValueError):
        split("a,b", ",,")


@pytest.mark.parametrize("text", ["true", "TRUE", "True", "tRuE"])
def test_is_true_accepts_any_case(text):
    assert is_true(text) is True


@pytest.mark.parametrize("text", ["false", "", "yes", "true "])
def test_is_true_rejects_others(text):
    assert is_true(text) is False


def test_timestamp_to_t_plain():
    assert timestamp_to_t("3908488680") == 3908488680


def test_timestamp_to_t_leading_space_and_sign_with_suffix():
    assert timestamp_to_t("  -42abc") == -42


@pytest.mark.parametrize("text", ["", "abc", "-"])
def test_timestamp_to_t_invalid(text):
    with pytest.raises(ValueError):
        timestamp_to_t(text)


def test_timestamp_to_t_out_of_range():
    with pytest.raises(OverflowError):
        timestamp_to_t(str(2**63))


def test_parse_cookies_fields():
    lines = [
        "example.com\tTRUE\t/\tFALSE\t3908488680\tSID\t31d4d96e407aad42",
        "#HttpOnly_.example.com\tfalse\t/docs\ttrue\t0\tlang\ten-US",
    ]
    cookies = parse_cookies(lines)
    assert isinstance(cookies, Cookies)
    first, second = list(cookies)
    assert first.domain == "example.com"
    assert first.include_subdomains is True
    assert first.path == "/"
    assert first.https_only is False
    assert first.name == "SID"
    assert first.value == "31d4d96e407aad42"
    assert first.expires == datetime.fromtimestamp(3908488680, tz=timezone.utc)
    assert second.domain == "#HttpOnly_.example.com"
    assert second.include_subdomains is False
    assert second.path == "/docs"
    assert second.https_only is True
    assert second.expires == EPOCH


def test_parse_cookies_pads_missing_value():
    cookies = parse_cookies(["example.com\tFALSE\t/\tFALSE\t0\tSID"])
    assert cookies[0].name == "SID"
    assert cookies[0].value == ""


def test_parse_cookies_missing_expiry_raises():
    with pytest.raises(ValueError):
        parse_cookies(["example.com\tFALSE\t/"])


def test_parse_cookies_empty():
    assert len(parse_cookies([])) == 0


def test_secure_clear_empties_buffer():
    buffer = bytearray(b"secret")
    secure_clear(buffer)
    assert buffer == bytearray()


def test_secure_clear_empty_buffer_stays_empty():
    buffer = bytearray()
    secure_clear(buffer)
    assert len(buffer) == 0


def test_secure_clear_rejects_immutable():
    with pytest.raises(TypeError):
        secure_clear(b"secret")