"""Small HTTP server that serves the web front end and the search API."""

from __future__ import annotations

import argparse
import functools
import json
import os
from collections.abc import Sequence
from http.server import SimpleHTTPRequestHandler, ThreadingHTTPServer
from urllib.parse import urlsplit


def search_results() -> list[dict]:
    """Return the results the search API answers with."""
    return [
        {
            "Filename": "test1.txt",
            "Region": "Almaty",
            "Path": "/files/test1.txt",
            "Lat": 43.238949,
            "Lon": 76.889709,
        }
    ]


class FrontendHandler(SimpleHTTPRequestHandler):
    """Serves static front-end files and the JSON search endpoint."""

    def _handle(self, preflight: bool = False) -> None:
        route = urlsplit(self.path).path
        if route != "/api/search":
            if route == "/":
                self.path = "/index.html"
            super().do_GET()
            return
        body = b"" if preflight else (
            json.dumps(search_results(), sort_keys=True, separators=(",", ":")) + "\n"
        ).encode("utf-8")
        self.send_response(200)
        self.send_header("Access-Control-Allow-Origin", "*")
        self.send_header("Access-Control-Allow-Methods", "GET, POST, OPTIONS")
        self.send_header("Access-Control-Allow-Headers", "Content-Type")
        if body:
            self.send_header("Content-Type", "application/json")
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def do_GET(self) -> None:
        self._handle()

    def do_POST(self) -> None:
        self._handle()

    def do_OPTIONS(self) -> None:
        self._handle(preflight=True)


def make_server(
    frontend_dir: str | os.PathLike = "frontend", host: str = "", port: int = 8080
) -> ThreadingHTTPServer:
    """Create an HTTP server serving ``frontend_dir`` and the search API."""
    handler = functools.partial(FrontendHandler, directory=os.fspath(frontend_dir))
    return ThreadingHTTPServer((host, port), handler)


def main(argv: Sequence[str] | None = None) -> int:
    """Start the server and serve until interrupted."""
    parser = argparse.ArgumentParser(prog="filescout-server")
    parser.add_argument("--host", default="")
    parser.add_argument("--port", type=int, default=8080)
    parser.add_argument("--frontend", default="frontend")
    args = parser.parse_args(argv)

    with make_server(args.frontend, args.host, args.port) as server:
        print(f"Сервер запущен на порту :{args.port}", flush=True)
        try:
            server.serve_forever()
        except KeyboardInterrupt:
            pass
    return 0


if __name__ == "__main__":
    raise SystemExit(main())