# scratchweb

A minimal HTTP/1.1 server written on plain sockets, plus a few small
command-line tools and library helpers that sit alongside it. There are no
third-party dependencies.

## The HTTP server

The server handles one connection at a time. From each connection it reads a
single chunk of up to 1024 bytes. It parses the request line (method, path,
optional query string and protocol) and answers with a status line, a blank
line and a body. Headers and request bodies are ignored.

Only `HTTP/1.1` is accepted. Each of the following produces `400 Bad Request`:

- an unknown method (method names are case-sensitive);
- any other protocol;
- a malformed request line;
- input that is not UTF-8.

Start it with:

```
scratchweb-serve [--addr HOST:PORT] [--public-path DIR]
```

The address defaults to `127.0.0.1:4005`. The public directory is
`--public-path` if given, otherwise the `PUBLIC_PATH` environment variable,
otherwise `./public` under the current directory. Give it as an absolute path:
files are only served when their resolved location lies under that path as
written.

- `GET /` returns `index.html` from the public directory. If that file is
  missing, the answer is `200 OK` with an empty body.
- `GET /hello` returns `<h1>Hello world</h1>`.
- Any other `GET` path returns the matching file, or `404 Not Found`.
- Paths that resolve outside the public directory are logged as traversal
  attempts and answered with `404 Not Found`.
- Every other method gets `400 Bad Request`.

### Using the parts on their own

```python
from scratchweb.query_string import QueryString
from scratchweb.request import Request

qs = QueryString.parse("a=1&b=2&c&d=&e===&d=7&d=abc")
qs.get("a")      # "1"
qs.get("c")      # ""
qs.get("e")      # "=="
qs.get("d")      # ["", "7", "abc"]

request = Request.from_bytes(b"GET /search?name=abc&sort=1 HTTP/1.1\r\n\r\n")
request.method   # Method.GET
request.path     # "/search"
```

`QueryString.parse` behaves as follows:

- it splits on `&`;
- each part is split at its first `=`, and a part without `=` gets an empty
  value;
- a key seen more than once maps to a list of its values.

`Request.from_bytes` raises `ParseError`. Its `kind`, a `ParseErrorKind`, says
whether the request, the encoding, the protocol or the method was invalid.
`parse_method` turns text into a `Method` and raises `MethodError` for unknown
names. `StatusCode` covers `OK`, `BAD_REQUEST` and `NOT_FOUND`, with
`reason_phrase()`.

A `Response` holds a `StatusCode` and an optional text body. `to_bytes()`
renders it. `send(stream)` writes it to a socket (via `sendall`) or to a binary
file (via `write`).

To serve your own routes:

1. Subclass `scratchweb.server.Handler`.
2. Implement `handle_request`. You may also override `handle_bad_request`,
   which by default answers `400`.
3. Pass an instance to `Server("127.0.0.1:4005").run(handler)`.

`Server.serve_connection(conn, handler)` answers a single already-accepted
connection.

## A single-page server

```
scratchweb-hello [--addr HOST:PORT] [--html FILE]
```

It listens on `127.0.0.1:8080` by default. Requests beginning with
`GET / HTTP/1.1` get `HTTP/1.1 200 OK` and the contents of the HTML file,
which defaults to `./hello.html`. Other requests are logged as `Not Get` and
closed without an answer.

The HTML file is read anew for each request. If it cannot be read, the error
stops the server. The same logic is available as `open_html`,
`handle_connection` and `serve` in `scratchweb.simple_server`.

## Utilities

```
scratchweb-grep PATTERN FILE
```

Prints every line of `FILE` that contains `PATTERN`. Lines that are not valid
UTF-8 are skipped. A file that cannot be opened is reported on standard error
as `File not found: ...`, with exit status 1. The library functions are
`scratchweb.grep.read_lines` and `find_matches`. `find_matches` returns the
number of matching lines.

```
scratchweb-csvfilter QUERY < cities.csv
```

Reads CSV from standard input. It writes the header and every record that has
a field exactly equal to `QUERY` to standard error.

- Blank lines are ignored.
- A record whose field count differs from the header's stops the run with a
  message and exit status 1.
- Without `QUERY` it prints `expected 1 arg, but got none` and exits with
  status 1.

The library function is `scratchweb.csvfilter.filter_records`.

```
scratchweb-gigasecond
```

Prints a greeting, then the moment one billion seconds after
2024-03-03 00:00:00, then the clock time `05:03`.

```
scratchweb-dip
```

Shows `BusinessLogic.process_data` working unchanged over a
`FileDataProvider` and a `DatabaseDataProvider`, both subclasses of the
abstract `DataProvider`. The providers only describe where their data would
come from; they read no file and open no database.

## Library extras

### `scratchweb.clock.Clock`

A time of day without a date.

- Any hours and minutes, negative too, wrap into one day.
- Clocks compare and hash by value.
- They print as `HH:MM`.
- `add_minutes` returns a new clock.
- The properties `hours`, `minutes` and `total_minutes` read the time back.

### `scratchweb.gigasecond.after`

Adds one billion seconds to a `datetime`.

### `scratchweb.paths`

- `path_absolute_form` returns absolute paths unchanged and joins relative
  ones onto the current directory.
- `absolute_path` does the same and, on Windows, also drops a leading `\?`.
- `plus_one` adds one to a value, or passes `None` through. It raises
  `OverflowError` past 127.

### `scratchweb.sushi`

- `AddSushiRequest.validate` raises `ValidationError` for an empty name.
- `Sushi` converts to and from a dict.
- `UpdateSushiURL` carries a `uuid`.
- `NoSushiFound`, `SushiCreationFailure` and `NoSuchSushiFound` are
  `SushiError` subclasses:
  - `status_code()` returns 404, 500 and 404 respectively;
  - `error_response()` returns status, a JSON content-type header and the
    error's name.

## What it does not do

The server is a learning-sized one. It has:

- no concurrency;
- no persistent connections;
- no request headers or bodies;
- no content types on responses.

The sushi types are data and error definitions only. The package has no sushi
web service and no storage behind them.

## Tests

The test suite uses pytest. Install the `test` extra and run `pytest` from the
project root.