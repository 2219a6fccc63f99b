"""Interactive TCP client asking the main server where a department lives."""

from __future__ import annotations

import argparse
import socket
import sys
from typing import Sequence

DEFAULT_HOST = "localhost"
DEFAULT_PORT = 24394
MAX_RESPONSE = 999
MAX_INPUT = 499


class LookupClient:
    """A connection to the department lookup server."""

    def __init__(self, host: str = DEFAULT_HOST, port: int = DEFAULT_PORT) -> None:
        self._sock = socket.create_connection((host, port))

    @property
    def local_port(self) -> int:
        return self._sock.getsockname()[1]

    def query(self, department: str) -> str:
        """Send a department name and return the server's reply text."""
        if not department:
            raise ValueError("department name must not be empty")
        self._sock.sendall(department.encode("utf-8"))
        data = b""
        while b"\0" not in data and len(data) < MAX_RESPONSE:
            chunk = self._sock.recv(MAX_RESPONSE - len(data))
            if not chunk:
                raise ConnectionError("server closed the connection")
            data += chunk
        return data.split(b"\0", 1)[0].decode("utf-8", errors="replace")

    def close(self) -> None:
        self._sock.close()

    def __enter__(self) -> "LookupClient":
        return self

    def __exit__(self, *args) -> None:
        self.close()


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Department lookup client.")
    parser.add_argument("--host", default=DEFAULT_HOST)
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    args = parser.parse_args(argv)

    try:
        client = LookupClient(args.host, args.port)
    except OSError as exc:
        print(f"client: failed to connect: {exc}", file=sys.stderr)
        return 2

    with client:
        print("Client is up and running.")
        port = client.local_port
        while True:
            try:
                department = input("Enter Department Name: ")[:MAX_INPUT]
            except EOFError:
                return 0
            if not department:
                continue
            try:
                reply = client.query(department)
            except OSError as exc:
                print(f"\nconnection: {exc}", file=sys.stderr)
                return 1
            print(
                f"Client has sent Department {department} to Main Server "
                f"using TCP over port {port}"
            )
            print(reply, end="", flush=True)


if __name__ == "__main__":
    sys.exit(main())