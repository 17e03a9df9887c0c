"""
 Copyright (c) 2024, Eeum, Inc.

 This software is licensed under the terms of the Revised BSD License.
 See LICENSE for details.
"""

import click

from openpfcp.util.string import hex_to_bytes


class BasedInt(click.ParamType):
    name = "integer"

    def convert(self, value, param, ctx):
        if isinstance(value, int):
            return value
        try:
            if value[:2].lower() == "0x":
                return int(value[2:], 16)
            else:
                return int(value, 10)
        except ValueError:
            self.fail(f"{value!r} is not a valid integer", param, ctx)


class HexBytes(click.ParamType):
    name = "hex"

    def convert(self, value, param, ctx):
        if isinstance(value, (bytes, bytearray)):
            return bytes(value)
        try:
            return hex_to_bytes(value)
        except ValueError as e:
            self.fail(str(e), param, ctx)


BASED_INT = BasedInt()
HEX_BYTES = HexBytes()
