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
from jgdv.structs.chainguard import ChainGuard
# ##-- end 3rd party imports

# ##-- 1st party imports
import argcursor.errors
from argcursor._interface import LINE_WIDTH
from argcursor.config import RenderConfig, load_config
# ##-- end 1st party imports

logging = logmod.root

##-- toml strings

pyproject_toml = """
[project]
name = "blah"

[tool.argcursor]
line_width = 100
tab_width  = 2
"""

plain_toml = """
line_width = 60
margin     = 0
"""

bad_toml = """
line_width = -5
"""

##-- end toml strings

class TestRenderConfig:

    def test_defaults(self):
        config = RenderConfig()
        assert(config.line_width == LINE_WIDTH)
        assert(config.tab == "    ")
        assert(config.indent == " ")

    def test_build(self):
        assert(RenderConfig.build(None) == RenderConfig())
        assert(RenderConfig.build({"line_width": 40}).line_width == 40)
        assert(RenderConfig.build(ChainGuard({"tab_width": 1})).tab == " ")

    def test_build_ignores_unknown(self):
        assert(RenderConfig.build({"blah": 2}) == RenderConfig())

    def test_build_fail(self):
        with pytest.raises(argcursor.errors.ConfigError):
            RenderConfig.build({"line_width": -1})

        with pytest.raises(argcursor.errors.ConfigError):
            RenderConfig.build(["blah"])

class TestLoadConfig:

    def test_no_path(self):
        assert(load_config() == RenderConfig())

    def test_pyproject(self, tmp_path):
        target = tmp_path / "pyproject.toml"
        target.write_text(pyproject_toml)
        config = load_config(target)
        assert(config.line_width == 100)
        assert(config.tab_width == 2)
        assert(config.margin == 1)

    def test_pyproject_without_table(self, tmp_path):
        target = tmp_path / "pyproject.toml"
        target.write_text("[project]\nname = 'blah'\n")
        assert(load_config(target) == RenderConfig())

    def test_plain(self, tmp_path):
        target = tmp_path / "argcursor.toml"
        target.write_text(plain_toml)
        config = load_config(str(target))
        assert(config.line_width == 60)
        assert(config.margin == 0)

    def test_bad_values(self, tmp_path):
        target = tmp_path / "argcursor.toml"
        target.write_text(bad_toml)
        with pytest.raises(argcursor.errors.ConfigError):
            load_config(target)

    def test_missing_file(self, tmp_path):
        with pytest.raises(argcursor.errors.ConfigError):
            load_config(tmp_path / "nothing.toml")
