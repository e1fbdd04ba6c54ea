#!/usr/bin/env python3
"""
Shared constants, enums and protocols for argcursor.

"""
# ruff: noqa:

# Imports:
from __future__ import annotations

# ##-- stdlib imports
import enum
import logging as logmod
from importlib.metadata import PackageNotFoundError, version
# ##-- end stdlib imports

# ##-- types
# isort: off
from typing import TYPE_CHECKING
# Protocols:
from typing import Protocol, runtime_checkable

if TYPE_CHECKING:
    from typing import Final
    from typing import Self
    from jgdv import Maybe

##--|

# isort: on
# ##-- end types

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

try:
    __version__ = version("argcursor")
except PackageNotFoundError:
    __version__ = "0.0.0"

# Vars:
PROG_NAME          : Final[str]  = "argcursor"
TAB                : Final[str]  = "    "
MARGIN             : Final[str]  = " "
LINE_WIDTH         : Final[int]  = 80
DEFAULT_FMT        : Final[str]  = "(default: {})"
LIST_SEP           : Final[str]  = ", "

OVERVIEW_HEADER    : Final[str]  = "OVERVIEW:"
SEE_ALSO_HEADER    : Final[str]  = "SEE ALSO:"
USAGE_HEADER       : Final[str]  = "USAGE:"
ARGUMENTS_HEADER   : Final[str]  = "ARGUMENTS"
OPTIONS_HEADER     : Final[str]  = "OPTIONS"

SHORT_PREFIX       : Final[str]  = "-"
LONG_PREFIX        : Final[str]  = "--"

PYPROJ_TOML        : Final[str]  = "pyproject.toml"

BOOL_TRUE          : Final[frozenset[str]] = frozenset(["true", "yes", "on", "1"])
BOOL_FALSE         : Final[frozenset[str]] = frozenset(["false", "no", "off", "0"])

# Body:

class ArgKind_e(enum.Enum):
    """ The three shapes an argument placeholder can take """
    option    = enum.auto()
    argument  = enum.auto()
    flag      = enum.auto()

class ErrorReason_e(enum.Enum):
    """ Why consuming a token failed """
    missing_argument  = enum.auto()
    missing_option    = enum.auto()
    invalid_argument  = enum.auto()
    invalid_option    = enum.auto()

##--| Protocols

@runtime_checkable
class Converter_p(Protocol):
    """ A type which can build itself from a single cli token.
    Returning None signals the token can't be converted.
    """

    @classmethod
    def from_argument(cls, argument:str) -> Maybe[Self]: ...

@runtime_checkable
class HelpComponent_p(Protocol):
    """ Anything that can appear in a command form """

    @property
    def command_help(self) -> str: ...
