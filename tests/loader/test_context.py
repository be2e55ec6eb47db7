"""
Unit tests for LoadContext file/line bookkeeping.
"""

import pytest

from loadconfig.core.errors import IncludeCycleError, IncludeDepthError, LoadError
from loadconfig.loader import LoadContext


class TestEnterFile:
    """Test save/restore of the active location."""

    def test_resets_and_restores_location(self):
        """Test nested files start at line 1 and restore the caller."""
        ctx = LoadContext()
        with ctx.enter_file("main.cfg", required=True):
            ctx.line_number = 7
            with ctx.enter_file("child.cfg", required=False):
                assert ctx.location == ("child.cfg", 1)
                assert ctx.required is False
                assert ctx.depth == 2
            assert ctx.location == ("main.cfg", 7)
            assert ctx.required is True
        assert ctx.current_file is None
        assert ctx.depth == 0

    def test_restores_on_error(self):
        """Test the caller's location is restored when the nested file fails."""
        ctx = LoadContext()
        with ctx.enter_file("main.cfg", required=True):
            ctx.line_number = 3
            with pytest.raises(LoadError):
                with ctx.enter_file("child.cfg", required=False):
                    ctx.line_number = 9
                    raise LoadError("boom")
            assert ctx.location == ("main.cfg", 3)
            assert ctx.required is True

    def test_cycle_detected(self, tmp_path):
        """Test re-entering an active file raises IncludeCycleError."""
        path = str(tmp_path / "a.cfg")
        ctx = LoadContext()
        with ctx.enter_file(path, required=True):
            with pytest.raises(IncludeCycleError):
                with ctx.enter_file(path, required=False):
                    pass
            assert ctx.location == (path, 1)

    def test_same_file_twice_in_sequence_is_fine(self):
        """Test a file may be included again once it has been closed."""
        ctx = LoadContext()
        with ctx.enter_file("main.cfg", required=True):
            for _ in range(2):
                with ctx.enter_file("common.cfg", required=False):
                    pass

    def test_depth_limit(self):
        """Test nesting past max_include_depth raises IncludeDepthError."""
        ctx = LoadContext(max_include_depth=1)
        with ctx.enter_file("main.cfg", required=True):
            with pytest.raises(IncludeDepthError):
                with ctx.enter_file("child.cfg", required=False):
                    pass
            assert ctx.depth == 1


class TestDiagnostics:
    """Test error reporting against the active location."""

    def test_report_records_issue(self, caplog):
        """Test report logs the original message format and records it."""
        ctx = LoadContext()
        error = LoadError()
        with ctx.enter_file("main.cfg", required=True):
            ctx.line_number = 4
            ctx.report(error)

        assert error.reported is True
        assert "Config error in main.cfg on line 4" in caplog.text
        assert [i.to_dict() for i in ctx.result.issues] == [
            {"file": "main.cfg", "line": 4, "message": "Config error"}
        ]

    def test_unknown_location(self):
        """Test diagnostics outside any file are attributed to 'unknown'."""
        ctx = LoadContext()
        ctx.log_error("Cannot create working buffer")

        assert ctx.result.issues[0].file == "unknown"
