"""Utility functions for CLI operations."""

import argparse
import json
import logging
import sys
from enum import IntEnum
from typing import Any, NoReturn, Union

from pydantic import BaseModel

from ..config import Config
from ..formats import AudioTag, read


class ExitCode(IntEnum):
    """Process exit codes shared by all commands."""

    SUCCESS = 0
    ERROR = 1
    INVALID_INPUT = 2


def setup_logging(level: str) -> None:
    """Configure logging based on user-specified level.

    Args:
        level: Logging level (debug, info, warning, error, critical)
    """
    numeric_level = getattr(logging, level.upper(), None)
    if not isinstance(numeric_level, int):
        raise ValueError(f"Invalid log level: {level}")

    logging.basicConfig(
        level=numeric_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def json_output(data: Union[BaseModel, dict], exit_code: int = ExitCode.SUCCESS) -> NoReturn:
    """Print a JSON document on stdout and exit.

    Pydantic models are dumped without their None fields.
    """
    if isinstance(data, BaseModel):
        print(data.model_dump_json(indent=2, exclude_none=True))
    else:
        print(json.dumps(data, indent=2))
    sys.exit(int(exit_code))


def load_config(args: argparse.Namespace) -> Config:
    """Load the config file named by ``--config``, or the default one."""
    return Config(getattr(args, "config", None))


def read_tag(path: Any, config: Config) -> AudioTag:
    """Read a file's tag with the settings from ``config``."""
    return read(
        path,
        enabled=config.get_enabled_tag_types(),
        artist_separator=config.get_artist_separator(),
        id3v2_version=config.get_id3v2_version(),
    )
