import socket
import threading

import pytest

from campuslookup.campus import parse_department_list
from campuslookup.server import DepartmentLookupServer, LookupResult, lookup, main

SERVERS = parse_department_list(["1", "ECE;CS", "2", "Math"])


@pytest.fixture
def running_server():
    with DepartmentLookupServer(SERVERS, host="127.0.0.1", port=0) as srv:
        thread = threading.Thread(target=srv.serve_forever, daemon=True)
        thread.start()
        yield srv
        srv.shutdown()
    thread.join(timeout=5)


def _recv_until_nul(sock):
    data = b""
    while not data.endswith(b"\0"):
        chunk = sock.recv(1024)
        if not chunk:
            break
        data += chunk
    return data


def test_lookup_found():
    result = lookup(SERVERS, "Math")
    assert result == LookupResult("Math", 2)
    assert result.found
    assert result.response == (
        "Client has received results from Main Server: "
        "Math is associated with Campus server 2\n"
    )


def test_lookup_not_found():
    result = lookup(SERVERS, "History")
    assert result.campus_id is None
    assert result.response == "History Not found\n"


def test_wire_is_nul_terminated():
    result = lookup(SERVERS, "CS")
    assert result.wire() == result.response.encode("utf-8") + b"\0"


def test_response_truncated():
    result = lookup(SERVERS, "x" * 2000)
    assert len(result.response) == 999


def test_server_answers_queries(running_server):
    with socket.create_connection(running_server.address[:2], timeout=5) as sock:
        sock.sendall(b"ECE")
        assert _recv_until_nul(sock) == lookup(SERVERS, "ECE").wire()
        sock.sendall(b"Nope")
        assert _recv_until_nul(sock) == b"Nope Not found\n\0"


def test_server_logs_client_ids(running_server, capsys):
    for _ in range(2):
        with socket.create_connection(running_server.address[:2], timeout=5) as sock:
            sock.sendall(b"CS")
            _recv_until_nul(sock)
    out = capsys.readouterr().out
    assert "from client 1 " in out
    assert "from client 2 " in out


def test_shutdown_before_serving_does_not_block():
    with DepartmentLookupServer(SERVERS, host="127.0.0.1", port=0) as srv:
        srv.shutdown()
        srv.serve_forever()
        assert srv.address[1] > 0


def test_main_missing_list_fails(tmp_path):
    assert main(["--list", str(tmp_path / "absent.txt"), "--port", "0"]) == 1