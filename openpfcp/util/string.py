"""
 Copyright (c) 2024, Eeum, Inc.

 This software is licensed under the terms of the Revised BSD License.
 See LICENSE for details.
"""

from typing import Any, Dict


def get_pretty_string(fields: Dict[str, Any], pretty_string="", indent=0):
    for name, val in fields.items():
        if isinstance(val, dict):
            pretty_string += f"{indent * ' '}{name}:\n"
            pretty_string = get_pretty_string(val, pretty_string, indent + 2)
        elif isinstance(val, int):
            pretty_string += f"{indent * ' '}{name}: 0x{val:X}\n"
        else:
            pretty_string += f"{indent * ' '}{name}: {val}\n"
    return pretty_string


def normalize_hex_string(text: str) -> str:
    """
    Strips an optional "0x" prefix and the separators commonly found in
    captures ("0100 00000001", "01:00", "01-00", "0100 | 00000001").
    """
    text = text.strip()
    if text[:2].lower() == "0x":
        text = text[2:]
    for sep in (" ", "\t", "\n", ":", "-", "|", "_"):
        text = text.replace(sep, "")
    return text


def hex_to_bytes(text: str) -> bytes:
    hex_string = normalize_hex_string(text)
    if len(hex_string) % 2 != 0:
        raise ValueError(f"Odd number of hex digits in {text!r}")
    try:
        return bytes.fromhex(hex_string)
    except ValueError as e:
        raise ValueError(f"{text!r} is not a valid hex string") from e
