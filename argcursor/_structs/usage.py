#!/usr/bin/env python3
"""
A declarative description of a command's expected shape.

"""

# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
import pathlib as pl
# ##-- end stdlib imports

# ##-- 3rd party imports
import more_itertools as mitz
from pydantic import BaseModel, ValidationError, field_validator
from jgdv import Maybe
from jgdv.structs.chainguard import ChainGuard
# ##-- end 3rd party imports

# ##-- 1st party imports
import argcursor.errors
from argcursor._interface import PYPROJ_TOML
from argcursor.formatters.usage_renderer import UsageRenderer
from .argument_spec import ArgumentSpec, LiteralComponent, component
# ##-- end 1st party imports

# ##-- types
# isort: off
import typing
from typing import override

if typing.TYPE_CHECKING:
    from typing import Any
    from collections.abc import Iterable
    from argcursor.config import RenderConfig

# isort: on
# ##-- end types

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

class Usage(BaseModel, frozen=True):
    """ The overview, related commands, and alternative invocation forms of a command.

    Each command form is a sequence of literal words and argument specs.
    Multiple forms are rendered as alternatives under one USAGE heading.
    """

    overview  : Maybe[str]                                                = None
    see_also  : Maybe[tuple[str, ...]]                                    = None
    commands  : tuple[tuple[LiteralComponent|ArgumentSpec, ...], ...]    = ()

    @classmethod
    def build(cls, data:Usage|dict|ChainGuard) -> Usage:
        match data:
            case Usage():
                return data
            case dict() | ChainGuard():
                pass
            case _:
                raise argcursor.errors.UsageLoadError("Unrecognized usage data: %s", data)

        see_also = data.get("see_also", None) or data.get("see-also", None)
        try:
            return cls(overview=data.get("overview", None),
                       see_also=see_also,
                       commands=data.get("commands", []))
        except ValidationError as err:
            raise argcursor.errors.UsageLoadError("Bad usage data: %s", err) from err

    @classmethod
    def load(cls, path:pl.Path|str) -> Usage:
        """ Load a usage from a toml file.
        Reads the [usage] table, or [tool.argcursor.usage] from a pyproject.toml
        """
        path = pl.Path(path)
        logging.debug("Loading Usage from: %s", path)
        if not path.is_file():
            raise argcursor.errors.UsageLoadError("Usage file not found: %s", path)

        try:
            data = ChainGuard.load(path)
        except (OSError, ValueError) as err:
            raise argcursor.errors.UsageLoadError("Failed to read usage file: %s : %s", path, err) from err

        match path.name:
            case x if x == PYPROJ_TOML:
                table = data.on_fail(None).tool.argcursor.usage()
            case _:
                table = data.on_fail(None).usage()

        if table is None:
            raise argcursor.errors.UsageLoadError("No usage table found in: %s", path)

        return cls.build(table)

    @field_validator("see_also", mode="before")
    def _validate_see_also(cls, val:Any) -> Maybe[tuple[str, ...]]:
        match val:
            case None:
                return None
            case str():
                return (val,)
            case _:
                return tuple(val)

    @field_validator("commands", mode="before")
    def _validate_commands(cls, val:Any) -> tuple:
        match val:
            case None:
                return ()
            case str():
                raise ValueError("Usage commands should be a list of command forms", val)
            case [*forms] if any(isinstance(x, str) for x in forms):
                raise ValueError("Each command form should be a list of components", val)
            case _:
                return tuple(tuple(component(x) for x in form) for form in val)

    def arguments(self) -> list[ArgumentSpec]:
        """ The distinct argument specs across all command forms, in first seen order """
        specs : Iterable[ArgumentSpec] = (x for form in self.commands for x in form if isinstance(x, ArgumentSpec))
        return list(mitz.unique_everseen(specs))

    def render(self, config:Maybe[RenderConfig]=None) -> str:
        return UsageRenderer(config=config).render(self)

    @override
    def __str__(self) -> str:
        return self.render()

    @override
    def __repr__(self) -> str:
        return f"<Usage: {len(self.commands)} forms, {len(self.arguments())} arguments>"
