"""Client that sends the dominant colours of a BMP image to the pie server."""

from __future__ import annotations

import argparse
import socket
import sys
from collections.abc import Iterable
from os import PathLike

from .bmp import BmpFormatError, analyse_bmp_image
from .chat_client import PROMPT, send_and_receive
from .chat_server import PORT
from .colors import ColorCount

MAX_COLORS = 10
PALETTE_TAG = "couleurs: "


def palette_message(counts: Iterable[ColorCount]) -> str:
    """Build the ``couleurs:`` message from counts sorted least frequent first.

    The message holds the number of colours (at most ten) followed by the
    hex codes of the most frequent colours, most frequent first. The least
    frequent entry is never listed.
    """
    counts = list(counts)
    listed = [entry.color.hex for entry in reversed(counts[1:])][:MAX_COLORS]
    fields = [str(min(len(counts), MAX_COLORS)), *listed]
    return PALETTE_TAG + ",".join(fields)


def analyse(path: str | PathLike[str]) -> str:
    """Analyse a BMP image and return its palette message."""
    return palette_message(analyse_bmp_image(path))


def send_colors(sock: socket.socket, path: str | PathLike[str]) -> str:
    """Send the palette message of the image at ``path`` and return it."""
    message = analyse(path)
    sock.sendall(message.encode("utf-8"))
    return message


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Send the dominant colours of a BMP image to the server."
    )
    parser.add_argument("image", help="path of the BMP image")
    parser.add_argument(
        "extra",
        nargs="*",
        help="any further argument sends a chat message instead of colours",
    )
    parser.add_argument("--host", default="127.0.0.1", help="server address")
    parser.add_argument("--port", type=int, default=PORT, help=f"port (default: {PORT})")
    return parser


def _chat_once(host: str, port: int) -> int:
    try:
        sock = socket.create_connection((host, port))
    except OSError as exc:
        print(f"connection serveur: {exc}", file=sys.stderr)
        return 1
    with sock:
        try:
            message = input(PROMPT)
        except (EOFError, KeyboardInterrupt):
            print()
            return 0
        try:
            reply = send_and_receive(sock, message + "\n")
        except OSError as exc:
            print(f"erreur ecriture: {exc}", file=sys.stderr)
            return 1
        print(f"Message recu: {reply}")
    return 0


def main(argv: list[str] | None = None) -> int:
    args = _parser().parse_args(argv)
    if args.extra:
        return _chat_once(args.host, args.port)

    try:
        message = analyse(args.image)
    except (OSError, BmpFormatError) as exc:
        print(f"Erreur: {exc}", file=sys.stderr)
        return 1

    try:
        with socket.create_connection((args.host, args.port)) as sock:
            sock.sendall(message.encode("utf-8"))
    except OSError as exc:
        print(f"connection serveur: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())