"""
 Copyright (c) 2024, Eeum, Inc.

 This software is licensed under the terms of the Revised BSD License.
 See LICENSE for details.
"""

from dataclasses import dataclass, field
from typing import List, Optional
import yaml

from openpfcp.util.logger import logger
from openpfcp.util.string import hex_to_bytes


@dataclass
class DecodeJob:
    name: str
    payload: bytes


@dataclass
class DecodeConfig:
    log_level: Optional[str] = None
    log_file: Optional[str] = None
    verbose: bool = False
    jobs: List[DecodeJob] = field(default_factory=list)


def parse_decode_jobs(payloads_data) -> List[DecodeJob]:
    if not isinstance(payloads_data, list):
        raise ValueError("Missing or invalid 'payloads' in configuration data, expected a list.")

    jobs = []
    names = set()
    for index, item in enumerate(payloads_data):
        if not isinstance(item, dict):
            raise ValueError(f"Invalid 'payloads' entry at index {index}, expected a mapping.")
        name = str(item.get("name", f"payload{index}"))
        if name in names:
            raise ValueError(f"Duplicate 'name' for 'payloads' entry: {name}")
        names.add(name)

        try:
            hex_string = item["hex"]
        except KeyError as exc:
            raise ValueError(f"Missing 'hex' for 'payloads' entry '{name}'.") from exc
        if not isinstance(hex_string, str):
            raise ValueError(f"Invalid 'hex' value for 'payloads' entry '{name}', expected a string.")

        try:
            payload = hex_to_bytes(hex_string)
        except ValueError as exc:
            raise ValueError(f"Invalid 'hex' value for 'payloads' entry '{name}': {exc}") from exc

        jobs.append(DecodeJob(name=name, payload=payload))
    return jobs


def parse_decode_config(yaml_path: str) -> DecodeConfig:
    with open(yaml_path, "r") as file:
        config_data = yaml.safe_load(file)

    if not config_data:
        raise ValueError("Configuration file is empty or has invalid content.")
    if not isinstance(config_data, dict):
        raise ValueError("Configuration file must contain a mapping at the top level.")

    log_level = config_data.get("log_level")
    if log_level is not None:
        log_level = str(log_level).upper()
        if log_level not in logger.get_level_names():
            raise ValueError(
                f"Invalid 'log_level' value: {log_level}. "
                f"Expected one of {logger.get_level_names()}."
            )

    log_file = config_data.get("log_file")
    if log_file is not None and not isinstance(log_file, str):
        raise ValueError(f"Invalid 'log_file' value: {log_file}. Expected a path string.")

    verbose = config_data.get("verbose", False)
    if not isinstance(verbose, bool):
        raise ValueError(f"Invalid 'verbose' value: {verbose}. Expected true or false.")

    return DecodeConfig(
        log_level=log_level,
        log_file=log_file,
        verbose=verbose,
        jobs=parse_decode_jobs(config_data.get("payloads")),
    )
