"""Server that draws received colour palettes as an SVG pie chart."""

from __future__ import annotations

import argparse
import math
import socketserver
import subprocess
import sys
from os import PathLike
from pathlib import Path

from .chat_server import BUFFER_SIZE, PORT, reply_for

SVG_FILE_PATH = "pie_chart.svg"
BROWSER = "firefox"
NUM_COLORS = 10

CENTER_X = 200.0
CENTER_Y = 200.0
RADIUS = 150.0
START_ANGLE = -90.0

_SVG_HEAD = (
    '<?xml version="1.0" encoding="UTF-8" standalone="no"?>\n'
    '<svg width="400" height="400" xmlns="http://www.w3.org/2000/svg">\n'
    '  <rect width="100%" height="100%" fill="#ffffff" />\n'
)
_SVG_TAIL = "</svg>\n"


def degrees_to_radians(degrees: float) -> float:
    return degrees * math.pi / 180.0


def _point(angle: float) -> tuple[float, float]:
    rad = degrees_to_radians(angle)
    return CENTER_X + RADIUS * math.cos(rad), CENTER_Y + RADIUS * math.sin(rad)


def render_pie_svg(data: str) -> str:
    """Render a ``couleurs:`` message as an SVG pie chart.

    The first comma-separated field (the tag and count) is skipped; every
    following non-empty field is the fill of one slice of a tenth of the
    circle, starting at the top and going clockwise.
    """
    fills = [field for field in data.split(",") if field][1:]
    parts = [_SVG_HEAD]
    start = START_ANGLE
    step = 360.0 / NUM_COLORS
    for fill in fills:
        end = start + step
        x1, y1 = _point(start)
        x2, y2 = _point(end)
        parts.append(
            f'  <path d="M{x1:.2f},{y1:.2f} A{RADIUS:.2f},{RADIUS:.2f} 0 0,1 '
            f'{x2:.2f},{y2:.2f} L{CENTER_X:.2f},{CENTER_Y:.2f} Z" fill="{fill}" />\n'
        )
        start = end
    parts.append(_SVG_TAIL)
    return "".join(parts)


def visualize_plot(path: str | PathLike[str] = SVG_FILE_PATH, browser: str = BROWSER) -> bool:
    """Open the SVG file in a browser; return whether it succeeded."""
    try:
        result = subprocess.run([browser, str(path)], check=False)
    except OSError:
        ok = False
    else:
        ok = result.returncode == 0
    if ok:
        print(f"SVG file opened in {browser}.")
    else:
        print("Failed to open the SVG file.")
    return ok


def plot(data: str, path: str | PathLike[str] = SVG_FILE_PATH) -> Path:
    """Write the pie chart of ``data`` to ``path`` and open it."""
    target = Path(path)
    target.write_text(render_pie_svg(data), encoding="utf-8")
    visualize_plot(target)
    return target


def handle_message(data: bytes, svg_path: str | PathLike[str] = SVG_FILE_PATH) -> bytes | None:
    """Answer one message: echo chat messages, plot anything else.

    Returns the bytes to send back, or None when there is no reply.
    """
    text = data.split(b"\0", 1)[0].decode("utf-8", errors="replace")
    print(f"Message recu: {text}")
    reply = reply_for(data)
    if reply is None:
        plot(text, svg_path)
    return reply


class _PieServer(socketserver.TCPServer):
    allow_reuse_address = True
    request_queue_size = 10

    def __init__(self, address: tuple[str, int], svg_path: str | PathLike[str]) -> None:
        self.svg_path = svg_path
        super().__init__(address, _PieHandler)


class _PieHandler(socketserver.BaseRequestHandler):
    def handle(self) -> None:
        data = self.request.recv(BUFFER_SIZE)
        reply = handle_message(data, self.server.svg_path)
        if reply is not None:
            try:
                self.request.sendall(reply)
            except OSError as exc:
                print(f"erreur ecriture: {exc}", file=sys.stderr)


def serve(host: str = "", port: int = PORT, svg_path: str | PathLike[str] = SVG_FILE_PATH) -> None:
    """Accept clients one at a time forever, reading one message from each."""
    with _PieServer((host, port), svg_path) as server:
        server.serve_forever()


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Draw received colour palettes as pie charts.")
    parser.add_argument("--host", default="", help="address to listen on (default: all)")
    parser.add_argument("--port", type=int, default=PORT, help=f"port (default: {PORT})")
    parser.add_argument("--svg", default=SVG_FILE_PATH, help="output SVG file")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _parser().parse_args(argv)
    try:
        serve(args.host, args.port, args.svg)
    except KeyboardInterrupt:
        print("\nSignal Ctrl+C capturé. Sortie du programme.")
        return 0
    except OSError as exc:
        print(f"bind: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())