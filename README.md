# tcphttp

A streaming HTTP/1.1 request parser that works directly on TCP sockets or
binary file-like objects. It reads a request in small chunks and handles the
request line, the headers and a `Content-Length` body. The package also has
helpers for writing response status lines and headers, and a command that
prints every request it receives.

## Installation

```
pip install .
```

Install `.[test]` as well if you want to run the test suite with `pytest`.

## Command

`tcphttp-listen` listens on TCP port 42069. Use `--port` to choose another
port. For each connection it prints the client address, then parses one
request and prints its request line, headers and body. It stops with exit
status 1 at the first error: it cannot listen, it cannot accept a connection,
or it receives a malformed request.

```
tcphttp-listen
```

Then, from another shell, send it a request with `curl http://localhost:42069/coffee`.
The listener sends no response. `curl` waits until the connection closes.

## Library use

```python
import io
from tcphttp.request import request_from_reader

raw = b"GET /coffee HTTP/1.1\r\nHost: localhost:42069\r\n\r\n"
req = request_from_reader(io.BytesIO(raw))
print(req.request_line.method, req.request_line.request_target)
print(req.headers.get("Host"))
```

### `tcphttp.request`

- `request_from_reader(reader)` reads from a socket (through `recv`) or from a
  binary file-like object (through `read`). It returns a `Request` with these
  fields:
  - `request_line`: a `RequestLine` with `method`, `request_target` and `http_version`
  - `headers`
  - `body`
  - `content_length`
  - `state`: a `ParseState`
- A body is read only when `Content-Length` is present and not `"0"`. NUL bytes
  in the body are dropped.
- `request_from_reader` raises `RequestError` (a `ValueError`) in these cases:
  - the request line does not have exactly three parts
  - the version is not `HTTP/1.1`
  - the method is not upper case
  - the input ends before the request is complete
  - the body length does not match `Content-Length`
- A malformed header line raises `HeaderError`.

### `tcphttp.headers`

`Headers` is a `dict` keyed by lower-cased field names.

- `Headers.parse(data)` parses one line from the front of `data`. It returns
  `(bytes_consumed, done)`, where `done` is true on the blank line that ends
  the header section.
- A repeated field has its values joined with `", "`.
- A line without a colon, with a space before the colon, or with characters
  that are not token characters in the field name raises `HeaderError`.
- `Headers.get(key)` looks up a field regardless of case. A missing field
  gives `""`, except a missing `Content-Length`, which gives `"0"`.

### `tcphttp.response`

- `StatusCode` has the members `OK` (200), `BAD_REQUEST` (400) and
  `INTERNAL_SERVER_ERROR` (500).
- `write_status_line(w, status_code)` writes `HTTP/1.1 <code> <reason>\r\n`
  to a binary writer. Codes it does not know get an empty reason phrase.
- `default_headers(content_length)` returns the headers `Content-Length`,
  `Connection: close` and `Content-Type: text/plain`.
- `write_headers(w, headers)` writes each header as a `name: value\r\n` line.

## What it does not do

This package does not run an HTTP server. Nothing here accepts requests and
sends back responses. `tcphttp-listen` only prints what it receives. The
response helpers write status lines and headers, but you have to call them
from your own socket code. The package also has no tool for sending traffic.