import socket
import threading

from bmpchat.chat_client import main, send_and_receive
from bmpchat.chat_server import handle_client


def test_send_and_receive_tags_message_and_returns_reply():
    ours, peer = socket.socketpair()
    received = []

    def answer():
        with peer:
            received.append(peer.recv(1024))
            peer.sendall(b"pong")

    thread = threading.Thread(target=answer)
    thread.start()
    with ours:
        reply = send_and_receive(ours, "hi\n")
    thread.join(timeout=5)
    assert received == [b"message: hi\n"]
    assert reply == "pong"


def test_send_and_receive_round_trips_through_server():
    ours, theirs = socket.socketpair()
    thread = threading.Thread(target=handle_client, args=(theirs,))
    thread.start()
    with ours:
        assert send_and_receive(ours, "bonjour\n") == "message: bonjour\n"
    thread.join(timeout=5)
    assert not thread.is_alive()


def test_send_and_receive_returns_empty_when_peer_stops_writing():
    ours, peer = socket.socketpair()
    peer.shutdown(socket.SHUT_WR)
    with ours:
        reply = send_and_receive(ours, "x")
    with peer:
        received = peer.recv(1024)
    assert received == b"message: x"
    assert reply == ""


def _start_server():
    listener = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    listener.bind(("127.0.0.1", 0))
    listener.listen(1)

    def accept_one():
        with listener:
            conn, _ = listener.accept()
            handle_client(conn)

    thread = threading.Thread(target=accept_one)
    thread.start()
    return listener.getsockname()[1], thread


def test_main_chats_until_end_of_input(monkeypatch, capsys):
    port, thread = _start_server()
    messages = iter(["hello", "world"])

    def fake_input(prompt=""):
        try:
            return next(messages)
        except StopIteration:
            raise EOFError from None

    monkeypatch.setattr("builtins.input", fake_input)
    assert main(["--host", "127.0.0.1", "--port", str(port)]) == 0
    thread.join(timeout=5)
    out = capsys.readouterr().out
    assert "Message reçu: message: hello\n" in out
    assert "Message reçu: message: world\n" in out
    assert out.index("hello") < out.index("world")


def test_main_reports_connection_failure(capsys):
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as probe:
        probe.bind(("127.0.0.1", 0))
        port = probe.getsockname()[1]
    assert main(["--host", "127.0.0.1", "--port", str(port)]) == 1
    assert "connection serveur:" in capsys.readouterr().err