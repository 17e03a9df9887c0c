"""
 Copyright (c) 2024, Eeum, Inc.

 This software is licensed under the terms of the Revised BSD License.
 See LICENSE for details.
"""

import click

from openpfcp.util.logger import logger
from openpfcp.bin import outer_header_creation as ohc


def validate_log_level(ctx, param, level):
    valid_levels = logger.get_level_names()
    if level:
        level = level.upper()
        if not level in valid_levels:
            raise click.BadParameter(f"Please select from {valid_levels}")
    return level


@click.group()
@click.option("--log-file", help="<Log File> output path.")
@click.option("--log-level", callback=validate_log_level, help="Specify log level.")
@click.option("--show-timestamp", is_flag=True, default=False, help="Show timestamp.")
@click.option("--show-loglevel", is_flag=True, default=False, help="Show log level.")
@click.option("--show-linenumber", is_flag=True, default=False, help="Show line number.")
def cli(log_file, log_level, show_timestamp, show_loglevel, show_linenumber):
    if log_level or show_timestamp or show_loglevel or show_linenumber:
        logger.set_stdout_levels(
            loglevel=log_level if log_level else "INFO",
            show_timestamp=show_timestamp,
            show_loglevel=show_loglevel,
            show_linenumber=show_linenumber,
        )

    if log_file:
        logger.create_log_file(
            f"logs/{log_file}",
            loglevel=log_level if log_level else "INFO",
            show_timestamp=show_timestamp,
            show_loglevel=show_loglevel,
            show_linenumber=show_linenumber,
        )


cli.add_command(ohc.ohc_group)

if __name__ == "__main__":
    cli()
