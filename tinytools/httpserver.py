"""A tiny static-file HTTP server."""

from __future__ import annotations

import socket
import sys
from pathlib import Path

from tinytools.cstrings import c_atoi

BUFFER = 1024
NOT_FOUND = "404 Not Found"
NOT_IMPLEMENTED = "501 Not Implemented"
OK = "200 OK"


def resolve_request(request: bytes, root=".") -> tuple[str, Path | None]:
    """Return the status line for ``request`` and the file to send, if any."""
    request = bytes(request[:BUFFER])
    if not request.startswith(b"GET /"):
        return NOT_IMPLEMENTED, None
    end = next(
        (i for i in range(5, len(request)) if request[i] == ord("?") or not 32 < request[i] < 127),
        None,
    )
    if end is None or request[end] == 0:
        return NOT_IMPLEMENTED, None
    target = request[5:end]
    if request[end - 1] == ord("/"):
        target += b"index.html"
    name = target.decode("latin-1")
    if "/." in "/" + name:
        return NOT_FOUND, None
    path = Path(root) / name
    if not path.is_file():
        return NOT_FOUND, None
    return OK, path


def serve(port: int = 8080, root=".") -> None:
    """Serve files from ``root`` on ``port`` until an error occurs."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as server:
        server.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        server.bind(("", port))
        server.listen(5)
        while True:
            conn, _ = server.accept()
            with conn:
                status, path = resolve_request(conn.recv(BUFFER), root)
                if status != NOT_IMPLEMENTED:
                    print(path if path else status, flush=True)
                body = b"" if path else status.encode()
                conn.sendall(f"HTTP/1.1 {status}\r\n\r\n".encode() + body)
                if path:
                    with path.open("rb") as fh:
                        while chunk := fh.read(BUFFER):
                            conn.sendall(chunk)


def main(argv=None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    port = c_atoi(args[0]) if args else 8080
    try:
        serve(port)
    except OSError as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())