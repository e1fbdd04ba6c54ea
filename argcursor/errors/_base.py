#!/usr/bin/env python3
"""



"""
# Import:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
# ##-- end stdlib imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

# Body:
class ArgcursorError(Exception):
    """
      The base class for all argcursor Errors
      will try to % format the first argument with remaining args in str()
    """
    general_msg = "Non-Specific argcursor Error:"

    def __str__(self):
        try:
            return self.args[0] % self.args[1:]
        except (TypeError, IndexError):
            return str(self.args)

class ConversionError(ArgcursorError):
    """ A converter could not turn a token into its target type """
    general_msg = "Token Conversion Failure:"
    pass
