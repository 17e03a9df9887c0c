"""
 Copyright (c) 2024, Eeum, Inc.

 This software is licensed under the terms of the Revised BSD License.
 See LICENSE for details.
"""


def extract_upper(from_what: int, how_much: int, how_long: int):
    """
    Extracts and returns the upper `how_much` bits from `from_what`.
    `from_what` is assumed to be `how_long` bits long.
    If `from_what` could not possibly be `how_long` bits long,
    ValueError is raised.
    If `how_much > how_long`, then for obvious reasons ValueError
    is raised again.
    Ex. `extract_upper(0xC100, 8, 16) == 0xC1`.
    """
    if from_what < 0 or from_what >= (1 << how_long):
        raise ValueError(f"{from_what} does not fit within a length of {how_long} bits.")
    if how_much > how_long:
        raise ValueError(
            f"It does not make sense that {how_much} (how_much) > {how_long} (how_long)"
        )
    return from_what >> (how_long - how_much)


def extract_lower(from_what: int, how_much: int, how_long: int):
    """
    Extracts and returns the lower `how_much` bits from `from_what`.
    Same validation rules as `extract_upper`.
    Ex. `extract_lower(0xC1AB, 8, 16) == 0xAB`.
    """
    if from_what < 0 or from_what >= (1 << how_long):
        raise ValueError(f"{from_what} does not fit within a length of {how_long} bits.")
    if how_much > how_long:
        raise ValueError(
            f"It does not make sense that {how_much} (how_much) > {how_long} (how_long)"
        )
    return ((1 << how_much) - 1) & from_what


def is_any_bit_set(value: int, mask: int) -> bool:
    return (value & mask) != 0
