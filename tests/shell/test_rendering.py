"""
Tests for pinshim.shell.rendering module.
"""

from unittest.mock import patch

import pytest

from pinshim.core.exceptions import TemplateRenderError
from pinshim.shell import rendering
from pinshim.shell.rendering import render_template


class TestRenderTemplate:
    """Tests for render_template function."""

    def test_shim_template(self):
        script = render_template("shim.sh.j2", executable="pinshim", name="pip")

        assert script == (
            "#!/usr/bin/env sh\n"
            "# Generated by pinshim; do not edit.\n"
            'exec pinshim run pip "$@"\n'
        )

    def test_completion_loop(self):
        """Test one case branch per command, with or without words."""
        script = render_template(
            "completion.bash.j2",
            prog="tool",
            func="_tool",
            commands={"go": ["--fast"], "stop": []},
            top_level=["go", "stop", "-h"],
        )
        lines = script.splitlines()

        assert '"go stop -h"' in script
        assert lines[lines.index("        go)") + 1].endswith('"--fast" -- "$cur") )')
        assert lines[lines.index("        stop)") + 1] == "            COMPREPLY=()"
        assert not any("{%" in line for line in lines)
        assert script.endswith("complete -F _tool -o default tool\n")

    def test_missing_template(self):
        with pytest.raises(TemplateRenderError) as exc_info:
            render_template("missing.j2")
        assert "missing.j2" in str(exc_info.value)

    def test_missing_template_directory(self, tmp_path):
        rendering._environment.cache_clear()
        try:
            with patch.object(rendering, "TEMPLATE_DIR", tmp_path / "nowhere"):
                with pytest.raises(TemplateRenderError):
                    render_template("shim.sh.j2")
        finally:
            rendering._environment.cache_clear()
