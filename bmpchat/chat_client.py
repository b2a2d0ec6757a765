"""Interactive client that sends chat messages and prints the replies."""

from __future__ import annotations

import argparse
import socket
import sys

from .chat_server import BUFFER_SIZE, PORT

PROMPT = "Votre message (max 1000 caractères): "


def send_and_receive(sock: socket.socket, message: str) -> str:
    """Send ``message`` tagged as a chat message and return the reply."""
    sock.sendall(f"message: {message}".encode("utf-8"))
    data = sock.recv(BUFFER_SIZE)
    return data.split(b"\0", 1)[0].decode("utf-8", errors="replace")


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Chat with the echo server.")
    parser.add_argument("--host", default="127.0.0.1", help="server address")
    parser.add_argument("--port", type=int, default=PORT, help=f"port (default: {PORT})")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _parser().parse_args(argv)
    try:
        sock = socket.create_connection((args.host, args.port))
    except OSError as exc:
        print(f"connection serveur: {exc}", file=sys.stderr)
        return 1
    with sock:
        while True:
            try:
                message = input(PROMPT)
            except (EOFError, KeyboardInterrupt):
                print()
                return 0
            try:
                reply = send_and_receive(sock, message + "\n")
            except OSError as exc:
                print(f"Erreur de communication: {exc}", file=sys.stderr)
                return 1
            if not reply:
                print("Connexion fermée par le serveur.", file=sys.stderr)
                return 1
            print(f"Message reçu: {reply}")


if __name__ == "__main__":
    sys.exit(main())