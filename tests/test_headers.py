import pytest

from tcphttp.headers import HeaderError, Headers


def test_valid_single_header():
    headers = Headers()
    n, done = headers.parse(b"Host: localhost:42069\r\n\r\n")
    assert done is False
    assert n == 23
    assert headers["host"] == "localhost:42069"


def test_valid_header_with_extra_whitespace():
    headers = Headers()
    n, done = headers.parse(b"       Host: localhost:42069       \r\n\r\n")
    assert done is False
    assert n == 23
    assert headers["host"] == "localhost:42069"


def test_valid_append_header():
    headers = Headers({"set-person": "lane-loves-go, prime-loves-zig, tj-loves-ocaml"})
    _, done = headers.parse(b"Set-Person: jake-loves-vim\r\n\r\n")
    assert done is False
    assert headers["set-person"] == (
        "lane-loves-go, prime-loves-zig, tj-loves-ocaml, jake-loves-vim"
    )


def test_valid_done_blank_line():
    headers = Headers()
    n, done = headers.parse(b"\r\n")
    assert done is True
    assert n == 2
    assert dict(headers) == {}


def test_invalid_spacing_in_header():
    headers = Headers()
    with pytest.raises(HeaderError):
        headers.parse(b"       Host : localhost:42069       \r\n\r\n")
    assert "host" not in headers


def test_invalid_character_in_field_name():
    headers = Headers()
    with pytest.raises(HeaderError):
        headers.parse("H©st: localhost:42069\r\n\r\n".encode("utf-8"))
    assert dict(headers) == {}


def test_missing_colon_is_rejected():
    with pytest.raises(HeaderError):
        Headers().parse(b"Host localhost\r\n")


def test_missing_field_name_is_rejected():
    with pytest.raises(HeaderError):
        Headers().parse(b": value\r\n")


def test_incomplete_line_consumes_nothing():
    headers = Headers()
    assert headers.parse(b"Host: local") == (0, False)
    assert dict(headers) == {}


def test_field_name_is_lowercased():
    headers = Headers()
    headers.parse(b"Content-Type: application/json\r\n")
    assert headers["content-type"] == "application/json"


def test_parsing_lines_one_after_another():
    headers = Headers()
    data = b"Content-Type: application/json\r\nCache-Control: max-age=604800\r\n\r\n"
    done = False
    while not done:
        n, done = headers.parse(data)
        data = data[n:]
    assert data == b""
    assert dict(headers) == {
        "content-type": "application/json",
        "cache-control": "max-age=604800",
    }


def test_get_is_case_insensitive():
    headers = Headers()
    headers.parse(b"Host: localhost:42069\r\n")
    assert headers.get("HOST") == "localhost:42069"
    assert headers.get("host") == "localhost:42069"


def test_get_missing_content_length_defaults_to_zero():
    assert Headers().get("Content-Length") == "0"


def test_get_missing_other_field_is_empty():
    assert Headers().get("Host") == ""