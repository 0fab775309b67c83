# SPDX-FileCopyrightText: 2025 steam-exporter contributors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
A2S_INFO response decoding.

Response layout (after the 5-byte `FF FF FF FF 49` header):

    protocol  u8
    name      NUL-terminated string
    map       NUL-terminated string
    folder    NUL-terminated string
    game      NUL-terminated string
    app_id    u16 little-endian
    players, max_players, bots, server_type, environment, visibility, vac  u8 each

Every field depends on the previous one having been read, so any truncation
invalidates the whole response. Bytes after `vac` (extra data flags, version,
keywords) are ignored.
"""

from __future__ import annotations

import struct

from ..errors import FieldTruncated, ResponseTooShort, WrongHeader
from .models import ServerStatus
from .protocol import MIN_RESPONSE_SIZE, RESPONSE_HEADER

_UINT16_LE = struct.Struct("<H")


class _Cursor:
    """Forward-only reader over a response buffer."""

    def __init__(self, buffer: bytes, offset: int = 0):
        self._buffer = buffer
        self._offset = offset

    def read_uint8(self, field: str) -> int:
        if self._offset >= len(self._buffer):
            raise FieldTruncated(field)
        value = self._buffer[self._offset]
        self._offset += 1
        return value

    def read_uint16_le(self, field: str) -> int:
        if self._offset + _UINT16_LE.size > len(self._buffer):
            raise FieldTruncated(field)
        (value,) = _UINT16_LE.unpack_from(self._buffer, self._offset)
        self._offset += _UINT16_LE.size
        return value

    def read_string(self, field: str) -> str:
        end = self._buffer.find(b"\x00", self._offset)
        if end < 0:
            raise FieldTruncated(field)
        value = self._buffer[self._offset:end]
        self._offset = end + 1
        return value.decode("utf-8", errors="replace")


def decode_info_response(buffer: bytes) -> ServerStatus:
    """
    Decode a raw A2S_INFO response into a ServerStatus.

    Raises ResponseTooShort, WrongHeader or FieldTruncated (all DecodeError).
    """
    data = bytes(buffer)
    if len(data) < MIN_RESPONSE_SIZE:
        raise ResponseTooShort(len(data), MIN_RESPONSE_SIZE)

    if data[: len(RESPONSE_HEADER)] != RESPONSE_HEADER:
        raise WrongHeader(data[: len(RESPONSE_HEADER)])

    cursor = _Cursor(data, len(RESPONSE_HEADER))
    protocol_version = cursor.read_uint8("protocol")
    name = cursor.read_string("name")
    map_name = cursor.read_string("map")
    folder = cursor.read_string("folder")
    game = cursor.read_string("game")

    return ServerStatus(
        protocol_version=protocol_version,
        name=name,
        map=map_name,
        folder=folder,
        game=game,
        app_id=cursor.read_uint16_le("app_id"),
        players=cursor.read_uint8("players"),
        max_players=cursor.read_uint8("max_players"),
        bots=cursor.read_uint8("bots"),
        server_type=cursor.read_uint8("server_type"),
        environment=cursor.read_uint8("environment"),
        visibility=cursor.read_uint8("visibility"),
        vac=cursor.read_uint8("vac"),
    )


__all__ = ["decode_info_response"]
