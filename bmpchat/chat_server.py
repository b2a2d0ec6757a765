"""Chat server that echoes back every message tagged ``message:``."""

from __future__ import annotations

import argparse
import socket
import socketserver
import sys

PORT = 8089
BUFFER_SIZE = 1024
MESSAGE_TAG = b"message:"


def _until_nul(data: bytes) -> bytes:
    return data.split(b"\0", 1)[0]


def _text(data: bytes) -> str:
    return _until_nul(data).decode("utf-8", errors="replace")


def reply_for(data: bytes) -> bytes | None:
    """Return the reply owed to ``data``, or None when nothing is sent back.

    A message whose first word is exactly ``message:`` is echoed unchanged;
    anything else gets no reply.
    """
    data = _until_nul(data)
    words = data.split(None, 1)
    if words and words[0] == MESSAGE_TAG:
        return data
    return None


def handle_client(conn: socket.socket) -> None:
    """Serve one connected client until it disconnects, then close it."""
    with conn:
        while True:
            try:
                data = conn.recv(BUFFER_SIZE)
            except OSError as exc:
                print(f"Erreur de réception: {exc}", file=sys.stderr)
                break
            if not data:
                print("Client déconnecté.")
                break
            print(f"Message reçu: {_text(data)}")
            reply = reply_for(data)
            if reply is None:
                continue
            try:
                conn.sendall(reply)
            except OSError as exc:
                print(f"Erreur d'écriture: {exc}", file=sys.stderr)


class _ChatServer(socketserver.ThreadingTCPServer):
    allow_reuse_address = True
    daemon_threads = True
    request_queue_size = 10


class _ClientHandler(socketserver.BaseRequestHandler):
    def handle(self) -> None:
        handle_client(self.request)


def serve(host: str = "", port: int = PORT) -> None:
    """Accept clients forever, each one served on its own thread."""
    with _ChatServer((host, port), _ClientHandler) as server:
        print("Serveur en attente de connexions...", flush=True)
        server.serve_forever()


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Echo chat messages back to clients.")
    parser.add_argument("--host", default="", help="address to listen on (default: all)")
    parser.add_argument("--port", type=int, default=PORT, help=f"port (default: {PORT})")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _parser().parse_args(argv)
    try:
        serve(args.host, args.port)
    except KeyboardInterrupt:
        print("\nSignal Ctrl+C capturé. Sortie du programme.")
        return 0
    except OSError as exc:
        print(f"bind: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())