"""
 Copyright (c) 2024, Eeum, Inc.

 This software is licensed under the terms of the Revised BSD License.
 See LICENSE for details.
"""

import logging
import sys
import click
from yaml import dump

from openpfcp.util.logger import logger
from openpfcp.util.string import get_pretty_string
from openpfcp.bin.common import BASED_INT, HEX_BYTES
from openpfcp.config.decode_config import DecodeConfig, parse_decode_config
from openpfcp.pfcp.errors import PfcpDecodeError
from openpfcp.pfcp.ie.outer_header_creation import (
    OuterHeaderCreationDecoder,
    OuterHeaderCreationFields,
    resolve_present_fields,
)


def print_result(data, pretty: bool = False):
    if pretty:
        click.echo(get_pretty_string(data), nl=False)
    else:
        click.echo(dump(data, sort_keys=False, default_flow_style=False), nl=False)


# Outer Header Creation command group
@click.group(name="ohc")
def ohc_group():
    """Command group for the Outer Header Creation IE."""
    pass


@ohc_group.command(name="decode")
@click.argument("payload", type=HEX_BYTES)
@click.option("--pretty", is_flag=True, default=False, help="Print as text instead of YAML.")
@click.option("--verbose", is_flag=True, default=False, help="Trace every decoded field.")
def decode(payload: bytes, pretty: bool, verbose: bool):
    """Decode one IE value given as a hex string."""
    was_verbose = OuterHeaderCreationDecoder.is_verbose()
    OuterHeaderCreationDecoder.make_verbose(verbose)
    try:
        fields: OuterHeaderCreationFields = OuterHeaderCreationDecoder.decode(payload)
    except PfcpDecodeError as e:
        logger.error(f"Decode error: {e}")
        sys.exit(1)
    finally:
        OuterHeaderCreationDecoder.make_verbose(was_verbose)
    print_result(fields.to_dict(), pretty)


@ohc_group.command(name="decode-file")
@click.argument("config_file", type=click.Path(exists=True))
@click.option("--pretty", is_flag=True, default=False, help="Print as text instead of YAML.")
def decode_file(config_file: str, pretty: bool):
    """Decode every payload listed in a YAML configuration file."""
    logger.info(f"Decoding payloads - Config: {config_file}")
    try:
        config: DecodeConfig = parse_decode_config(config_file)
    except ValueError as e:
        logger.error(f"Configuration error: {e}")
        sys.exit(1)

    # the file only overrides the level, the command-line format stays
    if config.log_level:
        logger.set_stdout_level(config.log_level)
    if config.log_file:
        file_level = config.log_level or logging.getLevelName(logger.get_stdout_level())
        logger.create_log_file(config.log_file, loglevel=file_level)

    was_verbose = OuterHeaderCreationDecoder.is_verbose()
    OuterHeaderCreationDecoder.make_verbose(config.verbose)
    try:
        results = {}
        failures = 0
        for job in config.jobs:
            try:
                results[job.name] = OuterHeaderCreationDecoder.decode(job.payload).to_dict()
            except PfcpDecodeError as e:
                logger.error(f"{job.name}: {e}")
                results[job.name] = {"error": str(e)}
                failures += 1

        print_result(results, pretty)
        if failures:
            logger.error(f"{failures} of {len(config.jobs)} payloads failed to decode")
            sys.exit(1)
    finally:
        OuterHeaderCreationDecoder.make_verbose(was_verbose)
        logger.close_log_files()


@ohc_group.command(name="flags")
@click.argument("flag_octet", type=BASED_INT)
def flags(flag_octet: int):
    """List the fields selected by a description flag octet."""
    if flag_octet < 0 or flag_octet > 0xFF:
        raise click.BadParameter(f"{flag_octet:#x} does not fit in one octet")
    for field in resolve_present_fields(flag_octet):
        click.echo(field.display_name)
