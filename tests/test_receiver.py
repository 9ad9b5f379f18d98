import socket
import threading

import pytest

from udpdecode.datagram import EXAMPLE_DATAGRAM, UdpDatagram
from udpdecode.receiver import main, receive_one


def _free_port():
    with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
        sock.bind(("127.0.0.1", 0))
        return sock.getsockname()[1]


def _send_until_done(port, payload, thread):
    with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sender:
        sender.bind(("127.0.0.1", 0))
        for _ in range(200):
            if not thread.is_alive():
                break
            sender.sendto(payload, ("127.0.0.1", port))
            thread.join(0.02)
        return sender.getsockname()


def test_receive_one_returns_sent_bytes():
    port = _free_port()
    results = []
    thread = threading.Thread(
        target=lambda: results.append(receive_one("127.0.0.1", port, 1024, 5.0))
    )
    thread.start()
    sender_address = _send_until_done(port, EXAMPLE_DATAGRAM, thread)
    thread.join()
    data, address = results[0]
    assert data == EXAMPLE_DATAGRAM
    assert address == sender_address


def test_received_bytes_parse_as_datagram():
    port = _free_port()
    results = []
    thread = threading.Thread(
        target=lambda: results.append(receive_one("127.0.0.1", port, 1024, 5.0))
    )
    thread.start()
    _send_until_done(port, EXAMPLE_DATAGRAM, thread)
    thread.join()
    assert str(UdpDatagram.from_bytes(results[0][0])) == "test"


def test_receive_one_truncates_to_bufsize():
    port = _free_port()
    results = []
    thread = threading.Thread(
        target=lambda: results.append(receive_one("127.0.0.1", port, 4, 5.0))
    )
    thread.start()
    sender_address = _send_until_done(port, EXAMPLE_DATAGRAM, thread)
    thread.join()
    assert len(results) == 1
    data, address = results[0]
    assert data == EXAMPLE_DATAGRAM[:4]
    assert len(data) == 4
    assert address == sender_address


def test_receive_one_times_out():
    with pytest.raises(TimeoutError):
        receive_one("127.0.0.1", _free_port(), 1024, 0.05)


def test_receive_one_port_in_use():
    with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as busy:
        busy.bind(("127.0.0.1", 0))
        port = busy.getsockname()[1]
        with pytest.raises(OSError):
            receive_one("127.0.0.1", port, 1024, 0.05)


def test_main_reports_bind_error(capsys):
    with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as busy:
        busy.bind(("127.0.0.1", 0))
        port = busy.getsockname()[1]
        code = main(["--port", str(port), "--timeout", "0.05"])
    captured = capsys.readouterr()
    assert code == 1
    assert "Listening for datagrams..." in captured.out
    assert "Error binding to socket:" in captured.err


def test_main_reports_receive_error(capsys):
    code = main(["--port", str(_free_port()), "--timeout", "0.05"])
    assert code == 1
    assert "Error receiving datagram" in capsys.readouterr().err


def test_main_prints_padded_buffer(capsys):
    port = _free_port()
    codes = []
    thread = threading.Thread(
        target=lambda: codes.append(
            main(["--port", str(port), "--bufsize", "16", "--timeout", "5"])
        )
    )
    thread.start()
    _send_until_done(port, EXAMPLE_DATAGRAM[:8], thread)
    thread.join()
    out = capsys.readouterr().out
    assert codes == [0]
    assert str(list(EXAMPLE_DATAGRAM[:8]) + [0] * 8) in out