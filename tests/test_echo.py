import socket
import threading

import pytest

from classics.echo import GREETING, create_server, run_client, serve_client


def _start_server(greeting=GREETING):
    server = create_server("127.0.0.1", 0)
    port = server.getsockname()[1]
    log = []
    result = {}

    def worker():
        try:
            result["echoed"] = serve_client(server, greeting, log.append)
        finally:
            server.close()

    thread = threading.Thread(target=worker, daemon=True)
    thread.start()
    return port, thread, log, result


def test_echo_round_trip_stops_at_quit():
    port, thread, log, result = _start_server()
    output = []
    replies = run_client(
        "127.0.0.1", port, ["hello\n", "world\n", "quit\n", "ignored\n"], output.append
    )
    thread.join(timeout=5)
    assert replies == ["hello\n", "world\n"]
    assert result["echoed"] == 2
    assert "Client: hello\n" in log
    assert log[-1] == "Client disconnected"


def test_client_shows_greeting():
    port, thread, _, _ = _start_server()
    output = []
    run_client("127.0.0.1", port, [], output.append)
    thread.join(timeout=5)
    text = "".join(output)
    assert f"Server: {GREETING}" in text
    assert text.endswith("Closing connection...\n")


def test_custom_greeting_and_log_order():
    port, thread, log, result = _start_server("welcome")
    output = []
    run_client("127.0.0.1", port, ["ping\n"], output.append)
    thread.join(timeout=5)
    assert "Server: welcome" in "".join(output)
    assert log[:2] == ["Client connected!", "Greeting message sent"]
    assert result["echoed"] == 1


def test_end_of_input_closes_connection():
    port, thread, log, result = _start_server()
    replies = run_client("127.0.0.1", port, iter(["a\n"]), lambda s: None)
    thread.join(timeout=5)
    assert replies == ["a\n"]
    assert not thread.is_alive()
    assert result["echoed"] == 1


def test_connection_refused():
    probe = socket.socket()
    probe.bind(("127.0.0.1", 0))
    port = probe.getsockname()[1]
    probe.close()
    with pytest.raises(ConnectionRefusedError):
        run_client("127.0.0.1", port, [], lambda s: None)