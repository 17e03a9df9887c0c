"""
 Copyright (c) 2024, Eeum, Inc.

 This software is licensed under the terms of the Revised BSD License.
 See LICENSE for details.
"""

from dataclasses import dataclass
from enum import Enum, IntFlag
from ipaddress import IPv4Address, IPv6Address
from typing import Any, Callable, Dict, List, Optional, Union

from openpfcp.pfcp.byte_cursor import ByteCursor, BufferType
from openpfcp.pfcp.errors import TruncatedHeaderError
from openpfcp.util.logger import logger
from openpfcp.util.number import extract_upper, extract_lower, is_any_bit_set

IE_NAME = "OuterHeaderCreation"
DESCRIPTION_SIZE = 2


#
# Outer Header Creation Description, octet 5
# (3GPP TS 29.244, Figure 8.2.56-1)
#
class OHC_DESCRIPTION(IntFlag):
    GTPU_UDP_IPV4 = 0x01
    GTPU_UDP_IPV6 = 0x02
    UDP_IPV4 = 0x04
    UDP_IPV6 = 0x08
    IPV4 = 0x10
    IPV6 = 0x20
    C_TAG = 0x40
    S_TAG = 0x80


class OHC_FIELD(Enum):
    # Members are declared in on-the-wire order
    TEID = "TEID"
    IPV4 = "IPv4"
    IPV6 = "IPv6"
    PORT = "Port"
    C_TAG = "C-TAG"
    S_TAG = "S-TAG"

    @property
    def display_name(self) -> str:
        return self.value


_TRIGGERS = {
    OHC_FIELD.TEID: OHC_DESCRIPTION.GTPU_UDP_IPV4 | OHC_DESCRIPTION.GTPU_UDP_IPV6,
    OHC_FIELD.IPV4: OHC_DESCRIPTION.GTPU_UDP_IPV4
    | OHC_DESCRIPTION.UDP_IPV4
    | OHC_DESCRIPTION.IPV4,
    OHC_FIELD.IPV6: OHC_DESCRIPTION.GTPU_UDP_IPV6
    | OHC_DESCRIPTION.UDP_IPV6
    | OHC_DESCRIPTION.IPV6,
    OHC_FIELD.PORT: OHC_DESCRIPTION.UDP_IPV4 | OHC_DESCRIPTION.UDP_IPV6,
    OHC_FIELD.C_TAG: OHC_DESCRIPTION.C_TAG,
    OHC_FIELD.S_TAG: OHC_DESCRIPTION.S_TAG,
}


def get_trigger_mask(field: OHC_FIELD) -> OHC_DESCRIPTION:
    return _TRIGGERS[field]


def is_field_present(flag_octet: int, field: OHC_FIELD) -> bool:
    """
    A field is present when any of its triggering bits is set. A field
    triggered by several bits is still present only once.
    """
    if flag_octet < 0 or flag_octet > 0xFF:
        raise ValueError(f"Flag octet must be within 0x00-0xFF, got {flag_octet:#x}")
    return is_any_bit_set(flag_octet, _TRIGGERS[field])


def resolve_present_fields(flag_octet: int) -> List[OHC_FIELD]:
    return [field for field in OHC_FIELD if is_field_present(flag_octet, field)]


#
# Sub-field layout: one entry per conditional field, in wire order
#
Extractor = Callable[[bytes], Any]


def _to_uint(raw: bytes) -> int:
    return int.from_bytes(raw, "big")


@dataclass(frozen=True)
class OhcFieldDescriptor:
    field: OHC_FIELD
    attr_name: str
    width: int
    extractor: Extractor = _to_uint


OHC_FIELD_LAYOUT: List[OhcFieldDescriptor] = [
    OhcFieldDescriptor(OHC_FIELD.TEID, "teid", 4),
    OhcFieldDescriptor(OHC_FIELD.IPV4, "ipv4_address", 4, IPv4Address),
    OhcFieldDescriptor(OHC_FIELD.IPV6, "ipv6_address", 16, IPv6Address),
    OhcFieldDescriptor(OHC_FIELD.PORT, "port_number", 2),
    # C-TAG and S-TAG are 3 octets each, not 4
    OhcFieldDescriptor(OHC_FIELD.C_TAG, "c_tag", 3),
    OhcFieldDescriptor(OHC_FIELD.S_TAG, "s_tag", 3),
]

MAX_PAYLOAD_SIZE = DESCRIPTION_SIZE + sum(d.width for d in OHC_FIELD_LAYOUT)


@dataclass(frozen=True)
class OuterHeaderCreationFields:
    description: int
    teid: Optional[int] = None
    ipv4_address: Optional[IPv4Address] = None
    ipv6_address: Optional[IPv6Address] = None
    port_number: Optional[int] = None
    c_tag: Optional[int] = None
    s_tag: Optional[int] = None

    @property
    def flag_octet(self) -> int:
        return extract_upper(self.description, 8, 16)

    @property
    def spare_octet(self) -> int:
        return extract_lower(self.description, 8, 16)

    @property
    def description_flags(self) -> OHC_DESCRIPTION:
        return OHC_DESCRIPTION(self.flag_octet)

    def has_field(self, field: OHC_FIELD) -> bool:
        return is_field_present(self.flag_octet, field)

    def has_teid(self) -> bool:
        return self.has_field(OHC_FIELD.TEID)

    def has_ipv4(self) -> bool:
        return self.has_field(OHC_FIELD.IPV4)

    def has_ipv6(self) -> bool:
        return self.has_field(OHC_FIELD.IPV6)

    def has_port(self) -> bool:
        return self.has_field(OHC_FIELD.PORT)

    def has_ctag(self) -> bool:
        return self.has_field(OHC_FIELD.C_TAG)

    def has_stag(self) -> bool:
        return self.has_field(OHC_FIELD.S_TAG)

    def present_fields(self) -> List[OHC_FIELD]:
        return resolve_present_fields(self.flag_octet)

    def to_dict(self) -> Dict[str, Union[int, str]]:
        result: Dict[str, Union[int, str]] = {"description": self.description}
        for descriptor in OHC_FIELD_LAYOUT:
            if not self.has_field(descriptor.field):
                continue
            value = getattr(self, descriptor.attr_name)
            if isinstance(value, (IPv4Address, IPv6Address)):
                value = str(value)
            result[descriptor.attr_name] = value
        return result


class OuterHeaderCreationDecoder:
    _verbose: bool = False

    @classmethod
    def make_verbose(cls, verbose: bool = True):
        cls._verbose = verbose

    @classmethod
    def is_verbose(cls) -> bool:
        return cls._verbose

    @classmethod
    def decode(cls, payload: BufferType) -> OuterHeaderCreationFields:
        length = len(payload)
        if length < DESCRIPTION_SIZE:
            raise TruncatedHeaderError(IE_NAME, length, DESCRIPTION_SIZE)

        if cls._verbose:
            logger.debug(f"[{IE_NAME}] Decoding {length} bytes")
            logger.hexdump("TRACE", payload)

        cursor = ByteCursor(payload, ie_name=IE_NAME)
        description = cursor.read_uint(DESCRIPTION_SIZE, "description")
        flag_octet = extract_upper(description, 8, 16)

        values = {}
        for descriptor in OHC_FIELD_LAYOUT:
            if not is_field_present(flag_octet, descriptor.field):
                continue
            offset = cursor.offset
            raw = cursor.read_bytes(descriptor.width, descriptor.field.display_name)
            values[descriptor.attr_name] = descriptor.extractor(raw)
            if cls._verbose:
                logger.trace(
                    f"[{IE_NAME}] {descriptor.field.display_name} @ {offset}: "
                    f"{values[descriptor.attr_name]}"
                )

        if cls._verbose and cursor.remaining:
            logger.debug(f"[{IE_NAME}] Ignoring {cursor.remaining} trailing bytes")

        return OuterHeaderCreationFields(description=description, **values)


def parse_outer_header_creation(payload: BufferType) -> OuterHeaderCreationFields:
    return OuterHeaderCreationDecoder.decode(payload)
