"""
 Copyright (c) 2024, Eeum, Inc.

 This software is licensed under the terms of the Revised BSD License.
 See LICENSE for details.
"""

import pytest

from openpfcp.util.logger import logger
from openpfcp.pfcp.ie.outer_header_creation import OuterHeaderCreationDecoder


@pytest.fixture
def make_payload():
    def _make_payload(*chunks: str) -> bytes:
        return bytes.fromhex("".join(chunks))

    return _make_payload


@pytest.fixture(autouse=True)
def reset_logging_state():
    yield
    OuterHeaderCreationDecoder.make_verbose(False)
    logger.close_log_files()
    logger.set_stdout_levels()
