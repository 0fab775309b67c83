# SPDX-FileCopyrightText: 2025 steam-exporter contributors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""UDP socket-backed QueryClient implementation."""

from __future__ import annotations

import logging
import socket
import time
from collections.abc import Callable
from concurrent.futures import FIRST_COMPLETED, Executor, ThreadPoolExecutor, wait
from contextlib import suppress
from typing import Any

from ..errors import DecodeError, DownReason, categorize_exception
from ..utils import split_host_port
from .client import QueryClient
from .decoder import decode_info_response
from .models import ProbeOutcome
from .protocol import MAX_PACKET_SIZE, QUERY_REQUEST

logger = logging.getLogger(__name__)

SocketFactory = Callable[..., socket.socket]
Resolver = Callable[..., list[tuple[Any, ...]]]


class UdpQueryClient(QueryClient):
    """
    Single-shot A2S_INFO client.

    Every probe opens its own socket, sends the query, and races a background
    read against the timeout. The socket is shut down and closed before
    `probe` returns, which also releases an abandoned read.
    """

    def __init__(
        self,
        *,
        socket_factory: SocketFactory = socket.socket,
        resolver: Resolver = socket.getaddrinfo,
        executor: Executor | None = None,
        max_workers: int = 2,
    ):
        self._socket_factory = socket_factory
        self._resolver = resolver
        self._owns_executor = executor is None
        self._executor = executor or ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="a2s-read")

    def _resolve(self, address: str) -> tuple[int, int, tuple[Any, ...]]:
        host, port = split_host_port(address)
        infos = self._resolver(host or None, port, type=socket.SOCK_DGRAM)
        if not infos:
            raise OSError(f"no addresses found for {address!r}")
        family, _, proto, _, sockaddr = infos[0]
        return family, proto, sockaddr

    def probe(self, address: str, timeout: float) -> ProbeOutcome:
        try:
            family, proto, sockaddr = self._resolve(address)
        except (OSError, ValueError) as exc:
            return ProbeOutcome.down(address, DownReason.RESOLVE_ERROR, f"can not resolve {address!r}: {exc}")

        try:
            sock = self._socket_factory(family, socket.SOCK_DGRAM, proto)
        except OSError as exc:
            return ProbeOutcome.down(address, DownReason.SOCKET_ERROR, f"can not create UDP socket: {exc}")

        try:
            return self._exchange(sock, address, sockaddr, timeout)
        finally:
            _release(sock)

    def _exchange(self, sock: socket.socket, address: str, sockaddr: tuple[Any, ...], timeout: float) -> ProbeOutcome:
        try:
            sock.connect(sockaddr)
            # Bounds the reader thread even if shutdown does not wake it.
            sock.settimeout(timeout)
        except OSError as exc:
            return ProbeOutcome.down(address, DownReason.SOCKET_ERROR, f"can not create UDP socket: {exc}")

        start = time.perf_counter()
        try:
            sock.send(QUERY_REQUEST)
        except OSError as exc:
            return ProbeOutcome.down(address, DownReason.WRITE_ERROR, f"can not write datagram: {exc}")

        future = self._executor.submit(_read_datagram, sock, start)
        done, _ = wait([future], timeout=timeout, return_when=FIRST_COMPLETED)
        if future not in done:
            return ProbeOutcome.down(address, DownReason.TIMEOUT)

        exc = future.exception()
        if exc is not None:
            reason = categorize_exception(exc)
            if reason != DownReason.TIMEOUT:
                reason = DownReason.READ_ERROR
            return ProbeOutcome.down(address, reason, f"error reading from socket: {exc}")

        payload, latency = future.result()
        logger.debug("Received %d bytes from %s", len(payload), address)

        try:
            status = decode_info_response(payload)
        except DecodeError as exc:
            return ProbeOutcome.down(address, exc.reason, f"can not parse response: {exc}")

        return ProbeOutcome.up(address, status.with_latency(latency))

    def close(self) -> None:
        if self._owns_executor:
            self._executor.shutdown(wait=False)

    def __enter__(self) -> UdpQueryClient:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:  # noqa: ANN001
        self.close()


def _read_datagram(sock: socket.socket, start: float) -> tuple[bytes, float]:
    payload = sock.recv(MAX_PACKET_SIZE)
    return payload, time.perf_counter() - start


def _release(sock: socket.socket) -> None:
    with suppress(OSError):
        sock.shutdown(socket.SHUT_RDWR)
    with suppress(OSError):
        sock.close()


__all__ = ["UdpQueryClient"]
