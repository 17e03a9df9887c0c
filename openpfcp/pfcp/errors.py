"""
 Copyright (c) 2024, Eeum, Inc.

 This software is licensed under the terms of the Revised BSD License.
 See LICENSE for details.
"""


class PfcpDecodeError(ValueError):
    """Base class for malformed PFCP IE payloads."""


class TruncatedHeaderError(PfcpDecodeError):
    def __init__(self, ie_name: str, length: int, required: int):
        self.ie_name = ie_name
        self.length = length
        self.required = required
        super().__init__(
            f"{ie_name} payload too short: need at least {required} bytes, got {length}"
        )


class TruncatedFieldError(PfcpDecodeError):
    """
    A field selected by the IE flags does not fit in the bytes that remain.
    `offset` is the position of the first byte of the missing field.
    """

    def __init__(self, ie_name: str, field_name: str, offset: int, width: int, remaining: int):
        self.ie_name = ie_name
        self.field_name = field_name
        self.offset = offset
        self.width = width
        self.remaining = remaining
        super().__init__(
            f"{ie_name}: insufficient bytes for {field_name} at offset {offset} "
            f"(need {width}, have {remaining})"
        )
