#!/usr/bin/env python3
"""
argcursor : Consume cli tokens one expectation at a time, and render usage text.

"""
# Imports:
from __future__ import annotations

import logging as logmod

from ._interface import __version__, ArgKind_e, ErrorReason_e, Converter_p
from . import errors
from .config import RenderConfig, load_config
from .structs import (ArgName, ArgumentSpec, LiteralComponent, Usage,
                      argument, flag, literal, option)
from .parsers.consumer import TokenConsumer
from .formatters.usage_renderer import UsageRenderer, render

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging
