"""Department-to-campus lookup over TCP: list parsing, a main server and an interactive client."""

__version__ = "0.1.0"
__all__ = ["campus", "server", "client"]