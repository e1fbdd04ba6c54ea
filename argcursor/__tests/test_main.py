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
from argcursor.__main__ import CLI_USAGE, main
# ##-- end 1st party imports

logging = logmod.root

##-- toml strings

usage_toml = """
[usage]
overview = "Example"
commands = [["example", {kind="flag", long="flag", description="a flag with a description long enough to need wrapping when the line is narrow"}]]
"""

##-- end toml strings

@pytest.fixture
def usage_file(tmp_path):
    target = tmp_path / "usage.toml"
    target.write_text(usage_toml)
    return target

class TestMain:

    def test_help(self, capsys):
        assert(main(["--help"]) == 0)
        assert(capsys.readouterr().out == CLI_USAGE.render())

    def test_render(self, capsys, usage_file):
        assert(main([str(usage_file)]) == 0)
        out = capsys.readouterr().out
        assert(out.startswith("OVERVIEW: Example\n\nUSAGE: example [--flag]\n"))
        assert(" --flag    a flag with a description" in out)

    def test_render_width(self, capsys, usage_file):
        assert(main(["--width", "40", str(usage_file)]) == 0)
        out   = capsys.readouterr().out
        lines = out.split("OPTIONS:\n")[1].splitlines()
        assert(1 < len(lines))
        assert(all(len(x) <= 41 for x in lines))

    def test_config_file(self, capsys, usage_file, tmp_path):
        config = tmp_path / "argcursor.toml"
        config.write_text("tab_width = 1\n")
        assert(main(["--config", str(config), str(usage_file)]) == 0)
        assert(" --flag a flag" in capsys.readouterr().out)

    def test_missing_argument(self, capsys):
        assert(main([]) == 1)
        err = capsys.readouterr().err
        assert(err.startswith("Missing expected argument.\n\n"))
        assert(CLI_USAGE.render() in err)

    def test_invalid_width(self, capsys, usage_file):
        assert(main(["--width", "wide", str(usage_file)]) == 1)
        err = capsys.readouterr().err
        assert(err.startswith("Could not convert option '--width' value 'wide' to expected type: int."))

    def test_missing_usage_file(self, capsys, tmp_path):
        assert(main([str(tmp_path / "nothing.toml")]) == 1)
        assert("Usage file not found" in capsys.readouterr().err)

    def test_verbose(self, usage_file, mocker):
        setup = mocker.patch("argcursor.__main__._setup_logging")
        assert(main(["-v", str(usage_file)]) == 0)
        setup.assert_called_once_with(verbose=True)

    @pytest.mark.parametrize("flags", [
        ["-v", "--verbose"],
        ["--verbose", "-v"],
    ])
    def test_verbose_both_spellings(self, flags, usage_file, mocker):
        setup = mocker.patch("argcursor.__main__._setup_logging")
        assert(main([*flags, str(usage_file)]) == 0)
        setup.assert_called_once_with(verbose=True)

    def test_help_both_spellings(self, capsys):
        assert(main(["--help", "-h"]) == 0)
        assert(capsys.readouterr().out == CLI_USAGE.render())
