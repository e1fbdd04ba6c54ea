#!/usr/bin/env python3
"""
These are the argcursor specific errors that can occur
"""
# Imports:
from __future__ import annotations

# ##-- 1st party imports
from ._base import ArgcursorError, ConversionError
from .config import ConfigError, UsageLoadError
from .consume import (ArgumentError, InvalidArgument, InvalidOption,
                      MissingArgument, MissingOption)

# ##-- end 1st party imports
