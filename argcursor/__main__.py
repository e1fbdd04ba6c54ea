#!/usr/bin/env python3
"""
The argcursor cli runner.

Renders the usage described in a toml file:

    python -m argcursor [-v] [--config PATH] [--width N] USAGE_TOML

"""
# Imports:
from __future__ import annotations

import logging as logmod
import pathlib as pl
import sys

##-- logging
logging         = logmod.root
logging.setLevel(logmod.WARNING)
##-- end logging

from argcursor import errors
from argcursor._interface import PROG_NAME
from argcursor.config import load_config
from argcursor.parsers.consumer import TokenConsumer
from argcursor.structs import Usage, argument, flag, literal, option

# ##-- types
# isort: off
import typing

if typing.TYPE_CHECKING:
    from typing import Final
    from collections.abc import Sequence
    from jgdv import Maybe

# isort: on
# ##-- end types

LOG_FORMAT : Final[str] = "{levelname:<8} : {name} : {message}"

CLI_USAGE : Final[Usage] = Usage(
    overview="Render the usage text described by a toml file's [usage] table.",
    commands=[
        [
            literal(PROG_NAME),
            flag(("v", "verbose"), description="Log debug information to stderr."),
            option("config", description="A toml file with render settings, read from [tool.argcursor] in a pyproject.toml, or the root of any other file."),
            option("width", description="Override the total line width used when wrapping descriptions."),
            argument("usage", required=True, description="The toml file describing the usage to render."),
        ],
        [
            literal(PROG_NAME),
            flag(("h", "help"), description="Print this help."),
        ],
    ],
)

def _setup_logging(*, verbose:bool) -> None:
    if not verbose:
        return

    logmod.basicConfig(level=logmod.DEBUG, format=LOG_FORMAT, style="{", stream=sys.stderr)

def main(argv:Maybe[Sequence[str]]=None) -> int:
    consumer = TokenConsumer.from_argv(CLI_USAGE, argv=argv)
    if any([consumer.consume_flag("--help"), consumer.consume_flag("-h")]):
        print(CLI_USAGE, end="")
        return 0

    try:
        verbose = any([consumer.consume_flag("--verbose"), consumer.consume_flag("-v")])
        _setup_logging(verbose=verbose)
        config_path  = consumer.consume_option("--config", pl.Path) if "--config" in consumer else None
        width        = consumer.consume_option("--width", int) if "--width" in consumer else None
        target       = consumer.consume_argument(pl.Path)
    except errors.ArgumentError as err:
        print(err, end="", file=sys.stderr)
        return 1

    if bool(consumer):
        logging.warning("Ignoring unused arguments: %s", consumer.tokens)

    try:
        config = load_config(config_path)
        if width is not None:
            config = config.model_copy(update={"line_width": width})
        usage = Usage.load(target)
    except (errors.ConfigError, errors.UsageLoadError) as err:
        print(err.general_msg, err, file=sys.stderr)
        return 1

    print(usage.render(config), end="")
    return 0

if __name__ == "__main__":
    sys.exit(main())
