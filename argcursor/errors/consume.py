#!/usr/bin/env python3
"""
Errors raised while consuming tokens.

Each carries the reason it failed, and the Usage attached to the consumer
that raised it, so printing the error gives a full diagnostic.
"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
# ##-- end stdlib imports

# ##-- 1st party imports
from argcursor._interface import ErrorReason_e
# ##-- end 1st party imports

from ._base import ArgcursorError

# ##-- types
# isort: off
import typing
from typing import override

if typing.TYPE_CHECKING:
    from typing import ClassVar, Any
    from jgdv import Maybe
    from argcursor._structs.usage import Usage

# isort: on
# ##-- end types

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

# ##-- Generated Exports
__all__ = ( # noqa: RUF022

# -- Classes
"ArgumentError",
"MissingArgument",
"MissingOption",
"InvalidArgument",
"InvalidOption",

)
# ##-- end Generated Exports

class ArgumentError(ArgcursorError):
    """ In the course of consuming cli tokens, an expected token was missing or unusable.

    args are the values interpolated into the reason's sentence.
    """
    general_msg  : ClassVar[str]            = "Argument Consumption Failure:"
    reason       : ClassVar[ErrorReason_e]
    _fmt         : ClassVar[str]            = "%s"

    def __init__(self, *args:Any, usage:Maybe[Usage]=None) -> None:
        super().__init__(*args)
        self.usage = usage

    @property
    def message(self) -> str:
        """ The reason sentence, without any usage text """
        try:
            return self._fmt % self.args
        except (TypeError, ValueError):
            return super().__str__()

    @override
    def __str__(self) -> str:
        match self.usage:
            case None:
                return self.message
            case usage:
                return f"{self.message}\n\n{usage}"

    @override
    def __repr__(self) -> str:
        return f"<{type(self).__name__}: {self.message}>"

class MissingArgument(ArgumentError):
    """ A positional was requested but no tokens remain """
    reason  = ErrorReason_e.missing_argument
    _fmt    = "Missing expected argument."

class MissingOption(ArgumentError):
    """ A named option was absent, or was the final token with no value """
    reason  = ErrorReason_e.missing_option
    _fmt    = "Missing expected option '%s'."

    def __init__(self, name:str, *, usage:Maybe[Usage]=None) -> None:
        super().__init__(name, usage=usage)

    @property
    def name(self) -> str:
        return self.args[0]

class InvalidArgument(ArgumentError):
    """ A positional token was present but failed conversion """
    reason  = ErrorReason_e.invalid_argument
    _fmt    = "Could not convert argument value '%s' to expected type: %s."

    def __init__(self, value:str, expected_type:str, *, usage:Maybe[Usage]=None) -> None:
        super().__init__(value, expected_type, usage=usage)

    @property
    def value(self) -> str:
        return self.args[0]

    @property
    def expected_type(self) -> str:
        return self.args[1]

class InvalidOption(ArgumentError):
    """ An option's value token was present but failed conversion """
    reason  = ErrorReason_e.invalid_option
    _fmt    = "Could not convert option '%s' value '%s' to expected type: %s."

    def __init__(self, name:str, value:str, expected_type:str, *, usage:Maybe[Usage]=None) -> None:
        super().__init__(name, value, expected_type, usage=usage)

    @property
    def name(self) -> str:
        return self.args[0]

    @property
    def value(self) -> str:
        return self.args[1]

    @property
    def expected_type(self) -> str:
        return self.args[2]
