"""
 Copyright (c) 2024, Eeum, Inc.

 This software is licensed under the terms of the Revised BSD License.
 See LICENSE for details.
"""

from typing import Union

from openpfcp.pfcp.errors import TruncatedFieldError

BufferType = Union[bytes, bytearray, memoryview]


class ByteCursor:
    """
    Forward-only reader over an IE payload.

    Every read checks the remaining length before consuming anything and
    advances the position by exactly the width that was read. A read that
    does not fit raises TruncatedFieldError and leaves the position
    unchanged. Returned bytes are copies, never views into the buffer.
    """

    def __init__(self, data: BufferType, offset: int = 0, ie_name: str = "IE"):
        if offset < 0 or offset > len(data):
            raise ValueError(f"Cursor offset {offset} is outside of a {len(data)}-byte buffer")
        self._data = data
        self._offset = offset
        self._ie_name = ie_name

    @property
    def offset(self) -> int:
        return self._offset

    @property
    def remaining(self) -> int:
        return len(self._data) - self._offset

    def __len__(self) -> int:
        return len(self._data)

    def ensure(self, width: int, name: str):
        if width > self.remaining:
            raise TruncatedFieldError(self._ie_name, name, self._offset, width, self.remaining)

    def read_bytes(self, width: int, name: str) -> bytes:
        self.ensure(width, name)
        start = self._offset
        self._offset += width
        return bytes(self._data[start : self._offset])

    def read_uint(self, width: int, name: str) -> int:
        # NOTE: network byte order
        return int.from_bytes(self.read_bytes(width, name), "big")
