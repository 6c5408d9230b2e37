# cprkit

Small building blocks for HTTP client code. The package uses only the
standard library.

## Modules

### `cprkit.timeout`

- `Timeout(duration)` takes an `int` number of milliseconds or a
  `datetime.timedelta`. A timedelta is truncated toward zero to whole
  milliseconds. Any other type raises `TypeError`.
- `Timeout.milliseconds()` returns the value. If the value is above the
  signed 64-bit maximum, it raises `OverflowError`. If it is below the signed
  64-bit minimum, it raises `TimeoutUnderflowError`, which is an
  `ArithmeticError`.
- `ConnectTimeout` is a `Timeout` that applies to the connection phase only.
  A `Timeout` and a `ConnectTimeout` with the same value are not equal.

### `cprkit.cookies`

- `Cookie` is a frozen dataclass with these fields:
  - `name` and `value`
  - `domain`
  - `include_subdomains`
  - `path`, which defaults to `"/"`
  - `https_only`
  - `expires`, which defaults to the Unix epoch in UTC.
- `Cookies(cookies=(), encode=True)` is an ordered collection. You can pass it
  a single `Cookie` or an iterable of them. It supports:
  - `append()`
  - `pop()`, which raises `IndexError` when the collection is empty
  - indexing, iteration, `len()` and truth testing
  - the `encode` flag.

### `cprkit.util`

- `parse_header(text)` reads a raw response header block and returns a
  `ParsedHeader`. It has three members:
  - `header`: a case-insensitive `Header` mapping
  - `status_line`
  - `reason`

  Each `HTTP/` status line clears the headers collected so far. Only the last
  response block is kept, so the result is the headers of the final response
  after redirects.
- `Header` is a case-insensitive `MutableMapping`. It keeps the spelling of
  the first key that was set and iterates in case-insensitive key order.
- `parse_cookies(lines)` reads tab-separated cookie-jar lines and returns
  `Cookies`. Each line has these fields, in order:
  1. domain
  2. include-subdomains
  3. path
  4. https-only
  5. expires
  6. name
  7. value

  Missing trailing fields are read as empty. The expires field must start with
  an integer.
- `split(text, delimiter)` splits on a single character and drops one empty
  field at the end.
- `is_true(s)` compares with `"true"`, ignoring case.
- `timestamp_to_t(s)` parses the leading integer of a string. It raises
  `ValueError` if there is none. It raises `OverflowError` if the value does
  not fit in a signed 64-bit integer.
- `secure_clear(buffer)` zeroes a `bytearray` and then empties it.

### `cprkit.threadpool`

`ThreadPool(min_threads=1, max_threads=None, max_idle_time=250 ms)` runs
submitted callables on worker threads.

- `max_threads` defaults to the CPU count.
- `max_idle_time` is a `timedelta` or a number of milliseconds.
- The pool adds workers when none are idle, up to the maximum.
- A worker that has been idle longer than `max_idle_time` exits, as long as
  more than the minimum number of workers remain.

Methods:

- `start(start_threads=0)` starts the pool. The thread count is clamped to
  the minimum and maximum.
- `submit(fn, *args, **kwargs)` queues a call and returns a
  `concurrent.futures.Future`. It starts the pool if it is stopped.
- `pause()` and `resume()` stop and restart the handing out of tasks.
- `wait()` blocks until the queue is empty and every worker is idle.
- `stop()` joins all workers.
- `current_thread_num()`, `idle_thread_num()`, `is_started()` and
  `is_stopped()` report the pool's state.

Calling `start()` on a running pool raises `RuntimeError`, and so does
calling `stop()` on a stopped one. The pool is also a context manager that
stops on exit.

### `cprkit.singleton`

`Singleton` is a base class. Each subclass gets its own lazily created
instance:

- `get_instance()` returns the instance, creating it on the first call.
- `exit_instance()` releases the instance once. Later calls do nothing, and
  `get_instance()` returns `None` from then on.

Instances refuse `copy` and `deepcopy`.

### `cprkit.options`

Value types for request settings:

- `Range(resume_from=None, finish_at=None)`: a missing start means 0 and a
  missing end means open-ended. `str()` renders `start-end` and leaves out
  negative bounds.
- `MultiRange(ranges)`: `str()` joins the ranges with `", "`.
- `HttpVersionCode` and `HttpVersion(code=VERSION_NONE)`.
- `File(filepath, overriden_filename="")` and `File.has_overriden_filename()`.
- `Files`: an ordered list with `append()` and `pop()`. It accepts `File`
  objects or paths.
- `Bearer(token)`.
- `LocalPortRange(value)`: the value must be between 0 and 65535.
- `ReserveSize(size)`: the size must not be negative.
- `Verbose(verbose=True)`.
- `CertInfo`: a list of certificate text entries, with `append()` and `pop()`.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

Parse a raw header block:

```python
from cprkit.util import parse_header

parsed = parse_header("HTTP/1.1 200 OK\r\nContent-Type: text/html\r\n\r\n")
parsed.header["content-type"]   # 'text/html'
parsed.status_line              # 'HTTP/1.1 200 OK'
parsed.reason                   # 'OK'
```

Build byte ranges:

```python
from cprkit.options import MultiRange, Range

Range(1, None).str()                             # '1-'
MultiRange([Range(None, 3), Range(5, 6)]).str()  # '0-3, 5-6'
```

Run work on a thread pool:

```python
from cprkit.threadpool import ThreadPool

with ThreadPool(min_threads=1, max_threads=4) as pool:
    pool.start(0)
    futures = [pool.submit(pow, 2, n) for n in range(5)]
    pool.wait()
    print([f.result() for f in futures])  # [1, 2, 4, 8, 16]
```

## What it does not do

cprkit has no HTTP transport. It does not open connections, send requests,
follow redirects or URL-encode payloads. It only provides the values, parsers
and thread pool that client code can build on.