#!/usr/bin/env python3
"""
Formats a Usage into aligned, word-wrapped help text.

Layout:

OVERVIEW: {overview}

SEE ALSO: {see_also, ...}

USAGE: {form}

ARGUMENTS:
 {name}    {description}

OPTIONS:
 {name}    {description that is long enough to
           wrap onto further lines} (default: {default})

"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
# ##-- end stdlib imports

# ##-- 3rd party imports
import more_itertools as mitz
# ##-- end 3rd party imports

# ##-- 1st party imports
from argcursor._interface import (ARGUMENTS_HEADER, LIST_SEP, OPTIONS_HEADER,
                                  OVERVIEW_HEADER, SEE_ALSO_HEADER,
                                  USAGE_HEADER, ArgKind_e)
from argcursor.config import RenderConfig
# ##-- end 1st party imports

# ##-- types
# isort: off
import typing

if typing.TYPE_CHECKING:
    from typing import Final
    from collections.abc import Iterable, Sequence
    from jgdv import Maybe
    from argcursor._interface import HelpComponent_p
    from argcursor._structs.argument_spec import ArgumentSpec
    from argcursor._structs.usage import Usage

    type Section = list[str]

# isort: on
# ##-- end types

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

class _UsageHeader_m:
    """ The free text sections, and the compact usage lines """

    def _overview_section(self, usage:Usage) -> Maybe[Section]:
        match usage.overview:
            case None:
                return None
            case str() as overview:
                return [f"{OVERVIEW_HEADER} {overview}"]

    def _see_also_section(self, usage:Usage) -> Maybe[Section]:
        match usage.see_also:
            case None | ():
                return None
            case [*xs]:
                return [f"{SEE_ALSO_HEADER} {LIST_SEP.join(xs)}"]

    def _usage_section(self, usage:Usage) -> Maybe[Section]:
        match usage.commands:
            case ():
                return None
            case (form,):
                return [f"{USAGE_HEADER} {self._form_help(form)}"]
            case [*forms]:
                return [USAGE_HEADER, *(f"{self.config.tab}{self._form_help(x)}" for x in forms)]

    def _form_help(self, form:Sequence[HelpComponent_p]) -> str:
        return " ".join(x.command_help for x in form)

class _ArgumentListing_m:
    """ The detailed, column aligned ARGUMENTS and OPTIONS sections """

    def _argument_sections(self, usage:Usage) -> list[Section]:
        sections  : list[Section]  = []
        specs                      = usage.arguments()
        if not bool(specs):
            return sections

        width      = max(len(x.help_name()) for x in specs)
        by_kind    = mitz.bucket(specs, key=lambda x: x.kind)
        arguments  = self._sorted(by_kind[ArgKind_e.argument])
        options    = self._sorted(by_kind[ArgKind_e.option])
        flags      = self._sorted(by_kind[ArgKind_e.flag])
        logging.debug("Argument Column Width: %s", width)

        if bool(arguments):
            sections.append(self._listing(ARGUMENTS_HEADER, arguments, width=width))

        if bool(options) or bool(flags):
            sections.append(self._listing(OPTIONS_HEADER, options + flags, width=width))

        return sections

    def _sorted(self, specs:Iterable[ArgumentSpec]) -> list[ArgumentSpec]:
        return sorted(specs, key=lambda x: x.help_name())

    def _listing(self, title:str, specs:list[ArgumentSpec], *, width:int) -> Section:
        return [f"{title}:", *(self._entry(x, width=width) for x in specs)]

    def _entry(self, spec:ArgumentSpec, *, width:int) -> str:
        """ One aligned entry. Continuation lines start under the description column """
        prefix       = f"{self.config.indent}{spec.help_name(width)}{self.config.tab}"
        desc_width   = self.config.line_width - width - self.config.tab_width
        description  = self._wrap(spec.help_text, width=desc_width, indent=" " * len(prefix))
        return f"{prefix}{description}"

    def _wrap(self, text:str, *, width:int, indent:str) -> str:
        """ Greedy word wrap of text to width, joining lines with newline+indent.
        A width of zero or less leaves the text unwrapped.
        """
        if width <= 0:
            return text

        lines    : list[str]  = []
        current  : list[str]  = []
        length                = 0
        for word in text.split():
            match current:
                case []:
                    current, length = [word], len(word)
                case [*_] if width < length + 1 + len(word):
                    lines.append(" ".join(current))
                    current, length = [word], len(word)
                case [*_]:
                    current.append(word)
                    length += 1 + len(word)
        else:
            if bool(current):
                lines.append(" ".join(current))

        return f"\n{indent}".join(lines)

class UsageRenderer(_UsageHeader_m, _ArgumentListing_m):
    """ Renders a Usage to text. Holds no state besides its config.

    Sections are separated by a single blank line,
    and the text ends with a newline.
    """

    def __init__(self, *, config:Maybe[RenderConfig]=None) -> None:
        self.config = RenderConfig.build(config)

    def render(self, usage:Usage) -> str:
        logging.debug("Rendering Usage: %r", usage)
        sections = [
            self._overview_section(usage),
            self._see_also_section(usage),
            self._usage_section(usage),
            *self._argument_sections(usage),
        ]
        blocks = ["\n".join(x) for x in sections if x is not None]
        if not bool(blocks):
            return ""

        return "{}\n".format("\n\n".join(blocks))

def render(usage:Usage, *, config:Maybe[RenderConfig]=None) -> str:
    return UsageRenderer(config=config).render(usage)
