# campuslookup

A small TCP lookup service. The main server reads a department list. It then
tells each client which campus server a department belongs to.

## Installing

    pip install .

To run the tests as well:

    pip install ".[test]"
    pytest

## The department list

The server reads a plain text file, `list.txt` by default. A line that starts
with a digit begins a new campus server, and the number at its start is the
campus id. Each line after it lists departments separated by `;`:

    1
    ECE;CS;Math
    2
    Physics;cs;Biology

Trailing whitespace is trimmed from each department name. Leading whitespace
is kept. Empty entries are skipped. Within one campus server, departments are
compared without regard to case, and later duplicates are dropped. A
department listed before any campus id is an error (`ValueError`).

## Running

Start the main server:

    campuslookup-server [--list FILE] [--host ADDRESS] [--port PORT]

By default it reads `list.txt` and listens on TCP port 24394 on all addresses.
On startup it prints how many campus servers it loaded. It also prints how many
distinct departments each one holds. Each connected client is served in its own
thread and gets a client number. The server logs every request and every reply.
Stop it with Ctrl-C.

In another terminal, start the client:

    campuslookup-client [--host HOST] [--port PORT]

By default it connects to `localhost` on port 24394. It asks for a department
name and sends it to the main server. It then prints the reply, for example:

    Client has received results from Main Server: CS is associated with Campus server 1

An unknown department gets `<name> Not found`. Department names are matched
exactly, including case. Empty input is ignored. End of input (Ctrl-D) ends
the client.

## Using it from Python

```python
import threading

from campuslookup.campus import load_department_list, find_campus_id, format_summary
from campuslookup.server import DepartmentLookupServer, lookup
from campuslookup.client import LookupClient

servers = load_department_list("list.txt")
print(format_summary(servers), end="")
print(find_campus_id(servers, "CS"))       # campus id, or None
print(lookup(servers, "CS").response)      # the reply text the server sends

with DepartmentLookupServer(servers, "localhost", 0) as server:
    threading.Thread(target=server.serve_forever, daemon=True).start()
    host, port = server.address[:2]
    with LookupClient(host, port) as client:
        print(client.query("CS"), end="")
```

`campuslookup.campus` also has `parse_department_list(lines)`, which parses
the list from any iterable of lines. `CampusServer.add_department(name)`
applies the same trimming and case-insensitive de-duplication.

## What it does not do

The campus servers exist only as ids in the list file. The main server answers
from that list alone. It does not contact any campus server, and it does not
reload the list while running.