import socket
import threading

import pytest

from bmpchat.bmp import BmpFormatError, BmpHeader, BmpInfoHeader
from bmpchat.colors import Color, ColorCount
from bmpchat.palette_client import analyse, main, palette_message, send_colors


def write_bmp(path, pixels, bit_count=24):
    header = BmpHeader(0x4D42, 54 + len(pixels), 0, 0, 54)
    info = BmpInfoHeader(40, 1, 1, 1, bit_count, 0, len(pixels), 0, 0, 0, 0)
    path.write_bytes(header.pack() + info.pack() + pixels)
    return path


RED = bytes([0, 0, 255])
GREEN = bytes([0, 255, 0])
BLUE = bytes([255, 0, 0])


@pytest.fixture
def image(tmp_path):
    return write_bmp(tmp_path / "image.bmp", RED * 3 + GREEN * 2 + BLUE)


def test_palette_message_lists_most_frequent_first():
    counts = [
        ColorCount(Color(1, 2, 3), 1),
        ColorCount(Color(4, 5, 6), 2),
        ColorCount(Color(7, 8, 9), 3),
    ]
    message = palette_message(counts)
    assert message.startswith("couleurs: 3,")
    assert message.split(",")[1:] == [Color(7, 8, 9).hex, Color(4, 5, 6).hex]


def test_palette_message_caps_at_ten_colours():
    counts = [ColorCount(Color(i, 0, 0), i) for i in range(1, 13)]
    fields = palette_message(counts).split(",")
    assert fields[0] == "couleurs: 10"
    assert len(fields) == 11
    assert fields[1] == Color(12, 0, 0).hex
    assert Color(1, 0, 0).hex not in fields


def test_palette_message_single_colour_has_only_count():
    assert palette_message([ColorCount(Color(9, 9, 9), 4)]) == "couleurs: 1"


def test_palette_message_empty():
    assert palette_message([]) == "couleurs: 0"


def test_analyse_image(image):
    assert analyse(image) == "couleurs: 3,#ff0000,#00ff00"


def test_analyse_rejects_non_bmp(tmp_path):
    path = tmp_path / "text.bmp"
    path.write_bytes(b"XX" + bytes(60))
    with pytest.raises(BmpFormatError):
        analyse(path)


def test_send_colors_writes_message(image):
    left, right = socket.socketpair()
    with left, right:
        sent = send_colors(left, image)
        left.shutdown(socket.SHUT_WR)
        received = b"".join(iter(lambda: right.recv(1024), b""))
    assert received == sent.encode("utf-8")
    assert sent == analyse(image)


def test_main_sends_palette_to_server(image):
    received = []
    with socket.create_server(("127.0.0.1", 0)) as listener:
        port = listener.getsockname()[1]

        def accept():
            conn, _ = listener.accept()
            with conn:
                received.append(b"".join(iter(lambda: conn.recv(1024), b"")))

        thread = threading.Thread(target=accept, daemon=True)
        thread.start()
        status = main(["--host", "127.0.0.1", "--port", str(port), str(image)])
        thread.join(timeout=5)
    assert status == 0
    assert received == [analyse(image).encode("utf-8")]


def test_main_fails_on_invalid_image(tmp_path):
    path = tmp_path / "bad.bmp"
    path.write_bytes(b"nope")
    assert main(["--port", "1", str(path)]) == 1


def test_main_fails_without_server(image):
    with socket.create_server(("127.0.0.1", 0)) as probe:
        port = probe.getsockname()[1]
    assert main(["--host", "127.0.0.1", "--port", str(port), str(image)]) == 1