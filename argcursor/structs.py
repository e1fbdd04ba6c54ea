#!/usr/bin/env python3
"""
Public Access point for argcursor Structures
"""
from __future__ import annotations

from argcursor._structs.arg_name import ArgName
from argcursor._structs.argument_spec import (ArgumentSpec, LiteralComponent,
                                              argument, component, flag,
                                              literal, option)
from argcursor._structs.usage import Usage
