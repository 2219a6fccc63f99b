"""TCP server answering department-to-campus lookups."""

from __future__ import annotations

import argparse
import socketserver
import sys
import threading
from dataclasses import dataclass
from typing import Sequence

from .campus import CampusServer, find_campus_id, format_summary, load_department_list

DEFAULT_PORT = 24394
MAX_REQUEST = 511
MAX_RESPONSE = 999


@dataclass(frozen=True)
class LookupResult:
    """The outcome of looking up one department."""

    department: str
    campus_id: int | None

    @property
    def found(self) -> bool:
        return self.campus_id is not None

    @property
    def response(self) -> str:
        if self.found:
            text = (
                "Client has received results from Main Server: "
                f"{self.department} is associated with Campus server {self.campus_id}\n"
            )
        else:
            text = f"{self.department} Not found\n"
        return text[:MAX_RESPONSE]

    def wire(self) -> bytes:
        """The response as sent on the connection, NUL-terminated."""
        return self.response.encode("utf-8") + b"\0"


def lookup(servers: Sequence[CampusServer], department: str) -> LookupResult:
    """Find which campus hosts the department."""
    return LookupResult(department, find_campus_id(servers, department))


class _Handler(socketserver.BaseRequestHandler):
    def handle(self) -> None:
        owner: DepartmentLookupServer = self.server.owner
        client_id = owner._next_client_id()
        port = owner.address[1]
        while True:
            try:
                data = self.request.recv(MAX_REQUEST)
            except OSError as exc:
                print(f"recv: {exc}", file=sys.stderr)
                return
            if not data:
                return
            department = data.decode("utf-8", errors="replace")
            print(
                f"Main server has received the request on Department {department} "
                f"from client {client_id} using TCP over port {port}",
                flush=True,
            )
            result = lookup(owner.servers, department)
            if result.found:
                print(
                    f"Main Server has sent searching result to client {client_id} "
                    f"using TCP over port {port}",
                    flush=True,
                )
            else:
                ids = ", ".join(str(s.campus_id) for s in owner.servers)
                print(f"Department {department} does not show up in Campus server {ids}")
                print(
                    'The Main Server has sent "Department Name: Not found" to client '
                    f"{client_id} using TCP over port {port}",
                    flush=True,
                )
            try:
                self.request.sendall(result.wire())
            except OSError as exc:
                print(f"send: {exc}", file=sys.stderr)


class _TCPServer(socketserver.ThreadingTCPServer):
    allow_reuse_address = True
    daemon_threads = True
    block_on_close = False
    request_queue_size = 100


class DepartmentLookupServer:
    """Serves lookups over TCP, one thread per connected client."""

    def __init__(
        self,
        servers: Sequence[CampusServer],
        host: str = "",
        port: int = DEFAULT_PORT,
    ) -> None:
        self.servers = list(servers)
        self._server = _TCPServer((host, port), _Handler)
        self._server.owner = self
        self._lock = threading.Lock()
        self._client_count = 0
        self._started = False
        self._stopped = False

    @property
    def address(self) -> tuple:
        return self._server.server_address

    def _next_client_id(self) -> int:
        with self._lock:
            self._client_count += 1
            return self._client_count

    def serve_forever(self) -> None:
        """Accept connections until shutdown() is called."""
        with self._lock:
            if self._stopped:
                return
            self._started = True
        self._server.serve_forever()

    def shutdown(self) -> None:
        """Stop serve_forever(), waiting for it to return if it is running."""
        with self._lock:
            if self._stopped:
                return
            self._stopped = True
            started = self._started
        if started:
            self._server.shutdown()

    def __enter__(self) -> "DepartmentLookupServer":
        return self

    def __exit__(self, *args) -> None:
        self.shutdown()
        self._server.server_close()


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Department lookup main server.")
    parser.add_argument("--list", default="list.txt", help="department list file")
    parser.add_argument("--host", default="", help="address to bind")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    args = parser.parse_args(argv)

    try:
        servers = load_department_list(args.list)
    except OSError as exc:
        print(f"Error opening file: {exc}", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(f"Invalid department list: {exc}", file=sys.stderr)
        return 1

    try:
        lookup_server = DepartmentLookupServer(servers, args.host, args.port)
    except OSError as exc:
        print(f"server: failed to bind: {exc}", file=sys.stderr)
        return 1

    with lookup_server:
        print("Main server is up and running.")
        print(f"Main Server has read the department list from {args.list}.")
        print(format_summary(servers), end="", flush=True)
        try:
            lookup_server.serve_forever()
        except KeyboardInterrupt:
            pass
    return 0


if __name__ == "__main__":
    sys.exit(main())