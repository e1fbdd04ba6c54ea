#!/usr/bin/env python3
"""
Conversion of a single raw token into a typed value.

A target can be:
- a type implementing Converter_p (ie: has a `from_argument` classmethod),
- any callable taking the token, eg: int, float, pathlib.Path,
- a type name: "str", "int", "float", "bool", "path".

Callables signal failure by raising ValueError/TypeError, or returning None.
"""

# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
import pathlib as pl
# ##-- end stdlib imports

# ##-- 1st party imports
import argcursor.errors
from argcursor._interface import BOOL_FALSE, BOOL_TRUE, Converter_p
# ##-- end 1st party imports

# ##-- types
# isort: off
import typing

if typing.TYPE_CHECKING:
    from typing import Any, Final
    from collections.abc import Callable
    from jgdv import Maybe

    type ConvertTarget = type | Callable[[str], Any] | str

# isort: on
# ##-- end types

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

def to_bool(argument:str) -> Maybe[bool]:
    """ Parse true/false, yes/no, on/off, 1/0. None if unrecognised """
    match argument.strip().lower():
        case x if x in BOOL_TRUE:
            return True
        case x if x in BOOL_FALSE:
            return False
        case _:
            return None

NAMED_CONVERTERS : Final[dict[str, Callable]] = {
    "str"   : str,
    "int"   : int,
    "float" : float,
    "bool"  : to_bool,
    "path"  : pl.Path,
}

def resolve(type_:ConvertTarget) -> Callable[[str], Any]:
    """ Get the callable which performs conversion to type_ """
    match type_:
        case str() if type_ in NAMED_CONVERTERS:
            return NAMED_CONVERTERS[type_]
        case str():
            raise ValueError("Unknown converter name", type_)
        case type() if type_ is bool:
            return to_bool
        case type() if isinstance(type_, Converter_p):
            return type_.from_argument
        case x if callable(x):
            return x
        case x:
            raise TypeError("Not a usable converter", x)

def type_name(type_:ConvertTarget) -> str:
    """ The description of a target type, as used in error messages """
    match type_:
        case str():
            return type_
        case _:
            return getattr(type_, "__name__", None) or type(type_).__name__

def convert(argument:str, type_:ConvertTarget) -> Any:
    """ Convert the argument, raising ConversionError on failure """
    converter = resolve(type_)
    try:
        result = converter(argument)
    except (ValueError, TypeError) as err:
        raise argcursor.errors.ConversionError("Could not convert %s to %s", argument, type_name(type_)) from err

    if result is None:
        raise argcursor.errors.ConversionError("Could not convert %s to %s", argument, type_name(type_))

    logging.debug("Converted %s -> %r", argument, result)
    return result
