#!/usr/bin/env python3
"""
A destructive cursor over the remaining cli tokens.

Rather than parsing against a grammar up front,
callers ask for what they expect, one item at a time:

    consumer = TokenConsumer(["-v", "--name", "bob", "file.txt"], usage=usage)
    verbose  = consumer.consume_flag("-v")
    name     = consumer.consume_option("--name")
    target   = consumer.consume_argument(pl.Path)

"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
import sys
# ##-- end stdlib imports

# ##-- 1st party imports
import argcursor.errors
from argcursor import converters
# ##-- end 1st party imports

# ##-- types
# isort: off
import typing
from typing import override

if typing.TYPE_CHECKING:
    from typing import Any
    from collections.abc import Iterable
    from jgdv import Maybe
    from argcursor._structs.usage import Usage
    from argcursor.converters import ConvertTarget

# isort: on
# ##-- end types

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

class TokenConsumer:
    """ Owns a list of tokens, and removes them as they are consumed.

    Positionals are always taken from the front.
    Options and flags are found by exact match of their first remaining occurrence.
    A failing consume leaves the tokens untouched.
    The usage, if given, is attached to any error raised.
    """

    def __init__(self, tokens:Iterable[str], usage:Maybe[Usage]=None) -> None:
        self.tokens  : list[str]    = list(tokens)
        self.usage   : Maybe[Usage] = usage

    @classmethod
    def from_argv(cls, usage:Maybe[Usage]=None, *, argv:Maybe[Iterable[str]]=None) -> TokenConsumer:
        """ Build from the process arguments, minus the program name """
        match argv:
            case None:
                return cls(sys.argv[1:], usage=usage)
            case _:
                return cls(argv, usage=usage)

    def consume_argument(self, type_:Maybe[ConvertTarget]=None) -> Any:
        """ Remove and return the first remaining token, optionally converted """
        if not bool(self.tokens):
            raise argcursor.errors.MissingArgument(usage=self.usage)

        raw = self.tokens[0]
        match type_:
            case None:
                value = raw
            case _:
                try:
                    value = converters.convert(raw, type_)
                except argcursor.errors.ConversionError as err:
                    raise argcursor.errors.InvalidArgument(raw, converters.type_name(type_), usage=self.usage) from err

        del self.tokens[0]
        logging.debug("Consumed Argument: %s", raw)
        return value

    def consume_option(self, name:str, type_:Maybe[ConvertTarget]=None) -> Any:
        """ Find the first `name` token, remove it and its following value, returning the value.

        A name with nothing after it counts as missing.
        Later occurrences of the name are left for later calls.
        """
        match self._index(name):
            case None:
                raise argcursor.errors.MissingOption(name, usage=self.usage)
            case int() as idx if len(self.tokens) <= idx + 1:
                raise argcursor.errors.MissingOption(name, usage=self.usage)
            case int() as idx:
                raw = self.tokens[idx + 1]

        match type_:
            case None:
                value = raw
            case _:
                try:
                    value = converters.convert(raw, type_)
                except argcursor.errors.ConversionError as err:
                    raise argcursor.errors.InvalidOption(name, raw, converters.type_name(type_), usage=self.usage) from err

        del self.tokens[idx:idx + 2]
        logging.debug("Consumed Option: %s = %s", name, raw)
        return value

    def consume_flag(self, name:str) -> bool:
        """ Remove the first `name` token if there is one. Never fails """
        match self._index(name):
            case None:
                return False
            case int() as idx:
                del self.tokens[idx]
                logging.debug("Consumed Flag: %s", name)
                return True

    def _index(self, name:str) -> Maybe[int]:
        try:
            return self.tokens.index(name)
        except ValueError:
            return None

    def __len__(self) -> int:
        return len(self.tokens)

    def __bool__(self) -> bool:
        return bool(self.tokens)

    def __contains__(self, token:str) -> bool:
        return token in self.tokens

    @override
    def __repr__(self) -> str:
        return f"<TokenConsumer: {self.tokens}>"
