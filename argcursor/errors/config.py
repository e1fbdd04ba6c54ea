#!/usr/bin/env python3
"""
Errors from loading toml described usages and render configs
"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
# ##-- end stdlib imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

from ._base import ArgcursorError

class UsageLoadError(ArgcursorError):
    """ A Usage couldn't be built from the data or file provided """
    general_msg = "Usage Load Failure:"
    pass

class ConfigError(ArgcursorError):
    """ Render configuration was missing or malformed """
    general_msg = "Render Config Failure:"
    pass
