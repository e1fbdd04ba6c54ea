#!/usr/bin/env python3
"""

"""

# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
# ##-- end stdlib imports

# ##-- 3rd party imports
from pydantic import BaseModel, model_validator
from jgdv import Maybe
from jgdv.structs.chainguard import ChainGuard
# ##-- end 3rd party imports

# ##-- 1st party imports
import argcursor.errors
from argcursor._interface import LONG_PREFIX, SHORT_PREFIX
# ##-- end 1st party imports

# ##-- types
# isort: off
import typing
from typing import override

if typing.TYPE_CHECKING:
    from typing import Any, Self

# isort: on
# ##-- end types

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

class ArgName(BaseModel, frozen=True):
    """ The name of an argument: short (-s), long (--long), or both.

    A bare string builds a long name.
    """

    short_name  : Maybe[str] = None
    long_name   : Maybe[str] = None

    @classmethod
    def short(cls, short:str) -> ArgName:
        return cls(short_name=short)

    @classmethod
    def long(cls, long:str) -> ArgName:
        return cls(long_name=long)

    @classmethod
    def both(cls, short:str, long:str) -> ArgName:
        return cls(short_name=short, long_name=long)

    @classmethod
    def build(cls, data:ArgName|str|tuple|list|dict|ChainGuard) -> ArgName:
        match data:
            case ArgName():
                return data
            case str():
                return cls.long(data)
            case (str() as short, str() as long):
                return cls.both(short, long)
            case dict() | ChainGuard():
                return cls(short_name=data.get("short", None), long_name=data.get("long", None))
            case _:
                raise argcursor.errors.UsageLoadError("Unrecognized argument name data: %s", data)

    @model_validator(mode="after")
    def _validate_has_a_name(self) -> Self:
        if not (self.short_name or self.long_name):
            raise ValueError("An argument name needs a short or long form")
        if "" in (self.short_name, self.long_name):
            raise ValueError("An argument name can not be empty")
        return self

    @property
    def name(self) -> str:
        """ The bare name, preferring the long form """
        return self.long_name or self.short_name

    @property
    def command_help(self) -> str:
        match self:
            case ArgName(long_name=str() as long):
                return f"{LONG_PREFIX}{long}"
            case ArgName(short_name=str() as short):
                return f"{SHORT_PREFIX}{short}"
            case _:
                raise ValueError("Nameless ArgName", self)

    @property
    def argument_help(self) -> str:
        match self:
            case ArgName(short_name=str() as short, long_name=str() as long):
                return f"{SHORT_PREFIX}{short}, {LONG_PREFIX}{long}"
            case _:
                return self.command_help

    @override
    def __str__(self) -> str:
        return self.argument_help

    @override
    def __repr__(self) -> str:
        return f"<ArgName: {self.argument_help}>"
