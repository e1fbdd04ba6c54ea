#!/usr/bin/env python3
"""

"""
# ruff: noqa: ANN201, ANN001, B011, E402
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
# ##-- end stdlib imports

# ##-- 3rd party imports
import pytest
# ##-- end 3rd party imports

# ##-- 1st party imports
import argcursor.errors as errs
from argcursor._interface import ErrorReason_e
from argcursor.structs import Usage, flag
# ##-- end 1st party imports

logging = logmod.root

class TestBaseError:

    def test_formatting(self):
        err = errs.ArgcursorError("Bad thing: %s, %s", "a", 2)
        assert(str(err) == "Bad thing: a, 2")

    def test_formatting_fallback(self):
        err = errs.ArgcursorError("No format", "a")
        assert(str(err) == str(("No format", "a")))

    def test_argument_error_base_formatting(self):
        assert(str(errs.ArgumentError("x")) == "x")
        assert(errs.ArgumentError("x").message == "x")
        assert(str(errs.ArgumentError("a", "b")) == str(("a", "b")))

    def test_hierarchy(self):
        for cls in [errs.ArgumentError, errs.ConversionError, errs.UsageLoadError, errs.ConfigError]:
            assert(issubclass(cls, errs.ArgcursorError))

        for cls in [errs.MissingArgument, errs.MissingOption, errs.InvalidArgument, errs.InvalidOption]:
            assert(issubclass(cls, errs.ArgumentError))

class TestArgumentErrors:

    @pytest.mark.parametrize("err,reason,expected", [
        (errs.MissingArgument(), ErrorReason_e.missing_argument, "Missing expected argument."),
        (errs.MissingOption("--x"), ErrorReason_e.missing_option, "Missing expected option '--x'."),
        (errs.InvalidArgument("a", "int"), ErrorReason_e.invalid_argument, "Could not convert argument value 'a' to expected type: int."),
        (errs.InvalidOption("--x", "a", "int"), ErrorReason_e.invalid_option, "Could not convert option '--x' value 'a' to expected type: int."),
    ])
    def test_messages(self, err, reason, expected):
        assert(err.reason is reason)
        assert(err.message == expected)
        assert(str(err) == expected)
        assert(err.usage is None)

    def test_with_usage(self):
        usage = Usage(overview="blah", commands=[["cmd", flag("x")]])
        err   = errs.MissingOption("--y", usage=usage)
        assert(str(err).startswith("Missing expected option '--y'.\n\n"))
        assert(str(err).endswith(usage.render()))

    def test_repr(self):
        assert(repr(errs.MissingOption("--x")) == "<MissingOption: Missing expected option '--x'.>")

    def test_fields(self):
        err = errs.InvalidOption("--x", "val", "float")
        assert(err.name == "--x")
        assert(err.value == "val")
        assert(err.expected_type == "float")
