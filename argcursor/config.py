#!/usr/bin/env python3
"""
Render configuration, optionally loaded from toml.

Reads [tool.argcursor] from a pyproject.toml,
or the root table of an argcursor.toml:

[tool.argcursor]
line_width = 80
tab_width  = 4
margin     = 1
"""

# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
import pathlib as pl
# ##-- end stdlib imports

# ##-- 3rd party imports
from pydantic import BaseModel, Field, ValidationError
from jgdv import Maybe
from jgdv.structs.chainguard import ChainGuard
# ##-- end 3rd party imports

# ##-- 1st party imports
import argcursor.errors
from argcursor._interface import LINE_WIDTH, MARGIN, PYPROJ_TOML, TAB
# ##-- end 1st party imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

class RenderConfig(BaseModel, frozen=True):
    """ Layout values for rendering usage text """

    line_width  : int  = Field(default=LINE_WIDTH, ge=0)
    tab_width   : int  = Field(default=len(TAB), ge=0)
    margin      : int  = Field(default=len(MARGIN), ge=0)

    @classmethod
    def build(cls, data:Maybe[RenderConfig|dict|ChainGuard]=None) -> RenderConfig:
        match data:
            case None:
                return cls()
            case RenderConfig():
                return data
            case dict() | ChainGuard():
                pass
            case _:
                raise argcursor.errors.ConfigError("Unrecognized render config data: %s", data)

        values = {x:y for x,y in data.items() if x in cls.model_fields}
        try:
            return cls(**values)
        except ValidationError as err:
            raise argcursor.errors.ConfigError("Bad render config: %s", err) from err

    @property
    def tab(self) -> str:
        return " " * self.tab_width

    @property
    def indent(self) -> str:
        return " " * self.margin

def load_config(path:Maybe[pl.Path|str]=None) -> RenderConfig:
    """ Load a RenderConfig from a toml file. No path, or no table, gives the defaults """
    match path:
        case None:
            return RenderConfig()
        case str() | pl.Path():
            path = pl.Path(path)

    if not path.is_file():
        raise argcursor.errors.ConfigError("Config file not found: %s", path)

    logging.debug("Loading Render Config from: %s", path)
    try:
        data = ChainGuard.load(path)
    except (OSError, ValueError) as err:
        raise argcursor.errors.ConfigError("Failed to read config: %s : %s", path, err) from err

    match path.name:
        case x if x == PYPROJ_TOML:
            table = data.on_fail(None).tool.argcursor()
        case _:
            table = data

    if table is None:
        logging.debug("No render config table in %s, using defaults", path)
        return RenderConfig()

    return RenderConfig.build(table)
