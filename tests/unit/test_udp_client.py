# SPDX-FileCopyrightText: 2025 steam-exporter contributors
# SPDX-License-Identifier: AGPL-3.0-or-later

import socket
import time

import pytest

from steamexporter.a2s.protocol import QUERY_REQUEST
from steamexporter.a2s.udp_client import UdpQueryClient
from steamexporter.errors import DownReason


class RecordingSocketFactory:
    def __init__(self):
        self.sockets = []

    def __call__(self, *args, **kwargs):
        sock = socket.socket(*args, **kwargs)
        self.sockets.append(sock)
        return sock


class FakeSocket:
    def __init__(self, *, connect_error=None, send_error=None, recv_error=None, payload=b""):
        self.connect_error = connect_error
        self.send_error = send_error
        self.recv_error = recv_error
        self.payload = payload
        self.sent = []
        self.closed = False

    def connect(self, sockaddr):  # noqa: ARG002
        if self.connect_error:
            raise self.connect_error

    def settimeout(self, timeout):  # noqa: ARG002
        return None

    def send(self, data):
        if self.send_error:
            raise self.send_error
        self.sent.append(data)
        return len(data)

    def recv(self, size):  # noqa: ARG002
        if self.recv_error:
            raise self.recv_error
        return self.payload

    def shutdown(self, how):  # noqa: ARG002
        raise OSError("not connected")

    def close(self):
        self.closed = True


@pytest.fixture
def client():
    with UdpQueryClient() as query_client:
        yield query_client


def test_query_request_constant():
    assert len(QUERY_REQUEST) == 25
    assert QUERY_REQUEST == bytes.fromhex("ffffffff54536f7572636520456e67696e6520517565727900")


def test_probe_success_against_loopback_server(udp_responder, info_response):
    responder = udp_responder(info_response(players=7, max_players=32, bots=3))
    factory = RecordingSocketFactory()

    with UdpQueryClient(socket_factory=factory) as query_client:
        outcome = query_client.probe(responder.address, timeout=2.0)

    assert outcome.ok is True
    assert outcome.reason is None
    assert outcome.status.players == 7
    assert outcome.status.max_players == 32
    assert outcome.status.bots == 3
    assert 0.0 < outcome.status.latency < 2.0
    assert responder.received == [QUERY_REQUEST]
    assert all(sock.fileno() == -1 for sock in factory.sockets)


def test_probe_sends_identical_request_for_every_target(udp_responder, info_response, client):
    first = udp_responder(info_response())
    second = udp_responder(info_response(name="Other"))

    client.probe(first.address, timeout=2.0)
    client.probe(second.address, timeout=2.0)
    client.probe(first.address, timeout=2.0)

    assert first.received == [QUERY_REQUEST, QUERY_REQUEST]
    assert second.received == [QUERY_REQUEST]


def test_probe_times_out_and_closes_socket(udp_responder):
    silent = udp_responder(payload=None)
    factory = RecordingSocketFactory()
    timeout = 0.2

    with UdpQueryClient(socket_factory=factory) as query_client:
        for _ in range(3):
            started = time.monotonic()
            outcome = query_client.probe(silent.address, timeout=timeout)
            elapsed = time.monotonic() - started

            assert outcome.ok is False
            assert outcome.reason == DownReason.TIMEOUT
            assert outcome.status is None
            assert elapsed < timeout + 1.0

    assert len(factory.sockets) == 3
    assert all(sock.fileno() == -1 for sock in factory.sockets)


def test_probe_malformed_response_is_down(udp_responder, info_response):
    responder = udp_responder(info_response(header=b"\xff\xff\xff\xff\x6d"))
    with UdpQueryClient() as query_client:
        outcome = query_client.probe(responder.address, timeout=2.0)

    assert outcome.ok is False
    assert outcome.reason == DownReason.WRONG_HEADER
    assert "can not parse response" in outcome.error_message


def test_probe_short_response_is_down(udp_responder):
    responder = udp_responder(b"\xff\xff\xff\xff\x49\x11")
    with UdpQueryClient() as query_client:
        outcome = query_client.probe(responder.address, timeout=2.0)

    assert outcome.reason == DownReason.RESPONSE_TOO_SHORT


@pytest.mark.parametrize("address", ["no-port", "host:notaport", "host:70000", "a:b:c"])
def test_probe_invalid_address_is_resolve_error(client, address):
    outcome = client.probe(address, timeout=0.1)
    assert outcome.ok is False
    assert outcome.reason == DownReason.RESOLVE_ERROR


def test_probe_resolver_failure_is_resolve_error():
    def resolver(*args, **kwargs):  # noqa: ARG001
        raise socket.gaierror(socket.EAI_NONAME, "Name or service not known")

    with UdpQueryClient(resolver=resolver) as query_client:
        outcome = query_client.probe("unknown.invalid:27015", timeout=0.1)

    assert outcome.reason == DownReason.RESOLVE_ERROR
    assert "unknown.invalid:27015" in outcome.error_message


def test_probe_socket_creation_failure():
    def factory(*args, **kwargs):  # noqa: ARG001
        raise OSError("too many open files")

    with UdpQueryClient(socket_factory=factory) as query_client:
        outcome = query_client.probe("127.0.0.1:27015", timeout=0.1)

    assert outcome.reason == DownReason.SOCKET_ERROR


def test_probe_connect_failure_is_socket_error_and_closes():
    fake = FakeSocket(connect_error=OSError("network unreachable"))
    with UdpQueryClient(socket_factory=lambda *a, **k: fake) as query_client:
        outcome = query_client.probe("127.0.0.1:27015", timeout=0.1)

    assert outcome.reason == DownReason.SOCKET_ERROR
    assert fake.closed is True


def test_probe_write_failure_closes_socket():
    fake = FakeSocket(send_error=OSError("message too long"))
    with UdpQueryClient(socket_factory=lambda *a, **k: fake) as query_client:
        outcome = query_client.probe("127.0.0.1:27015", timeout=0.1)

    assert outcome.reason == DownReason.WRITE_ERROR
    assert "can not write datagram" in outcome.error_message
    assert fake.closed is True


def test_probe_read_failure_closes_socket():
    fake = FakeSocket(recv_error=ConnectionRefusedError("connection refused"))
    with UdpQueryClient(socket_factory=lambda *a, **k: fake) as query_client:
        outcome = query_client.probe("127.0.0.1:27015", timeout=1.0)

    assert outcome.reason == DownReason.READ_ERROR
    assert "error reading from socket" in outcome.error_message
    assert fake.sent == [QUERY_REQUEST]
    assert fake.closed is True


def test_probe_fake_socket_success(info_response):
    fake = FakeSocket(payload=info_response(players=1))
    with UdpQueryClient(socket_factory=lambda *a, **k: fake) as query_client:
        outcome = query_client.probe("127.0.0.1:27015", timeout=1.0)

    assert outcome.ok is True
    assert outcome.status.players == 1
    assert outcome.status.latency >= 0.0
    assert fake.closed is True
