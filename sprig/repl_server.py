from __future__ import annotations

"""
Simple TCP REPL server for Sprig.

Protocol: JSON per line over TCP.
- Request: {"cmd": "eval", "code": "(begin ...)"}
- Response: {"ok": true, "result": <rendered value>} or {"ok": false, "error": <message>}

One Interpreter is kept alive for the lifetime of the server so that
definitions persist across requests and across clients.
"""

import json
import logging
import socket
import threading
from typing import Any, Optional, Tuple

from sprig.config import get_repl_address
from sprig.errors import SprigError
from sprig.interpreter import Interpreter
from sprig.printer import to_lisp


class ReplServer:
    def __init__(self, host: Optional[str] = None, port: Optional[int] = None, interp: Optional[Interpreter] = None):
        default_host, default_port = get_repl_address()
        self.host = host or default_host
        self.port = port if port is not None else default_port
        self.interp = interp if interp is not None else Interpreter()
        # Evaluation is single-threaded; clients take turns on the shared interpreter
        self._lock = threading.Lock()
        self._logger = logging.getLogger(self.__class__.__name__)

    def handle_request(self, line: bytes) -> dict[str, Any]:
        """Decode one request line and produce its response object."""
        try:
            req = json.loads(line.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            return {"ok": False, "error": f"Invalid request: {e}"}
        if not isinstance(req, dict) or req.get("cmd") != "eval":
            cmd = req.get("cmd") if isinstance(req, dict) else None
            return {"ok": False, "error": f"Unknown cmd: {cmd}"}

        code = req.get("code", "")
        if not isinstance(code, str):
            return {"ok": False, "error": "Invalid request: code must be a string"}
        with self._lock:
            try:
                result = self.interp.eval(code)
            except SprigError as e:
                return {"ok": False, "error": str(e)}
            except RecursionError:
                return {"ok": False, "error": "RuntimeError: maximum recursion depth exceeded"}
        return {"ok": True, "result": to_lisp(result)}

    def serve_forever(self):
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
            s.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            s.bind((self.host, self.port))
            s.listen(5)
            self._logger.info("Listening on %s:%d", self.host, self.port)
            while True:
                conn, addr = s.accept()
                threading.Thread(target=self._handle_client, args=(conn, addr), daemon=True).start()

    def _handle_client(self, conn: socket.socket, addr: Tuple[str, int]):
        self._logger.info("Client connected: %s:%d", *addr)
        with conn:
            buf = b""
            while True:
                try:
                    data = conn.recv(4096)
                except OSError as e:
                    self._logger.warning("Receive failed for %s:%d: %s", addr[0], addr[1], e)
                    break
                if not data:
                    break
                buf += data
                while b"\n" in buf:
                    line, buf = buf.split(b"\n", 1)
                    line = line.strip()
                    if not line:
                        continue
                    resp = self.handle_request(line)
                    if not resp["ok"]:
                        self._logger.debug("Request failed: %s", resp["error"])
                    conn.sendall((json.dumps(resp) + "\n").encode("utf-8"))
        self._logger.info("Client disconnected: %s:%d", *addr)


if __name__ == "__main__":
    from sprig.log import setup_logging
    setup_logging()
    ReplServer().serve_forever()
