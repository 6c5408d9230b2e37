"""Building blocks for HTTP clients: timeouts, cookies, header parsing, request options, a singleton base and a thread pool."""

__version__ = "0.1.0"
__all__ = ["cookies", "options", "singleton", "threadpool", "timeout", "util"]