# SPDX-FileCopyrightText: 2025 steam-exporter contributors
# SPDX-License-Identifier: AGPL-3.0-or-later

import socket
import struct
import threading

import pytest

from steamexporter.a2s.protocol import RESPONSE_HEADER


def encode_info_response(
    *,
    protocol=17,
    name="Test Server",
    map_name="de_dust2",
    folder="csgo",
    game="Counter-Strike",
    app_id=730,
    players=5,
    max_players=24,
    bots=2,
    server_type=ord("d"),
    environment=ord("l"),
    visibility=0,
    vac=1,
    trailer=b"",
    header=RESPONSE_HEADER,
):
    body = bytes([protocol])
    for text in (name, map_name, folder, game):
        body += text.encode("utf-8") + b"\x00"
    body += struct.pack("<H", app_id)
    body += bytes([players, max_players, bots, server_type, environment, visibility, vac])
    return header + body + trailer


@pytest.fixture
def info_response():
    return encode_info_response


class UdpResponder:
    """Loopback UDP server answering each datagram with a fixed payload (or never)."""

    def __init__(self, payload=None):
        self.payload = payload
        self.received = []
        self.sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
        self.sock.bind(("127.0.0.1", 0))
        self.sock.settimeout(0.1)
        self._stop = threading.Event()
        self._thread = threading.Thread(target=self._serve, daemon=True)
        self._thread.start()

    @property
    def address(self):
        host, port = self.sock.getsockname()
        return f"{host}:{port}"

    def _serve(self):
        while not self._stop.is_set():
            try:
                data, addr = self.sock.recvfrom(2048)
            except OSError:
                continue
            self.received.append(data)
            if self.payload is not None:
                self.sock.sendto(self.payload, addr)

    def close(self):
        self._stop.set()
        self._thread.join(timeout=2)
        self.sock.close()


@pytest.fixture
def udp_responder():
    responders = []

    def factory(payload=None):
        responder = UdpResponder(payload)
        responders.append(responder)
        return responder

    yield factory
    for responder in responders:
        responder.close()
