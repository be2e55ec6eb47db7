"""
Tests for the loadconfig command line entry point.
"""

import json
from unittest.mock import patch

import pytest

from loadconfig.cli.main import main


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv("LOADCONFIG_VARSERVER_URL", raising=False)
    monkeypatch.delenv("LOADCONFIG_WORKBUF_SIZE", raising=False)


@pytest.fixture(autouse=True)
def no_logging_setup():
    with patch("loadconfig.cli.main.configure_logging"):
        yield


def write_cfg(path, body):
    path.write_text(f"@config test\n{body}")
    return str(path)


class TestMain:
    """Test exit status and output options."""

    def test_success_and_dump(self, tmp_path, capsys):
        """Test a clean load exits 0 and --dump prints the variables."""
        root = write_cfg(tmp_path / "main.cfg", "/b 2\n/a=1\n")

        assert main(["-f", root, "--dump"]) == 0

        assert capsys.readouterr().out.splitlines() == ["/a 1", "/b 2"]

    def test_failure_exit_status(self, tmp_path):
        """Test any load error exits 1."""
        root = write_cfg(tmp_path / "main.cfg", "lonely\n")

        assert main(["-f", root]) == 1

    def test_missing_root(self, tmp_path):
        """Test a missing root file exits 1."""
        assert main(["-f", str(tmp_path / "missing.cfg")]) == 1

    def test_json_output(self, tmp_path, capsys):
        """Test --json prints the load result."""
        root = write_cfg(tmp_path / "main.cfg", "/a 1\n")

        main(["-f", root, "--json"])

        result = json.loads(capsys.readouterr().out)
        assert result["success"] is True
        assert result["files"] == [root]
        assert result["assignments"] == [["/a", "1"]]

    def test_vars_file_and_strict(self, tmp_path, capsys):
        """Test --vars seeds the store and --strict rejects undeclared names."""
        vars_file = tmp_path / "vars.json"
        vars_file.write_text(json.dumps({"/host": "box", "/motd": ""}))
        root = write_cfg(tmp_path / "main.cfg", "/motd hi ${/host}\n/other 1\n")

        status = main(["-f", root, "--vars", str(vars_file), "--strict", "--dump"])

        assert status == 1
        assert capsys.readouterr().out.splitlines() == ["/host box", "/motd hi box"]

    def test_small_working_buffer(self, tmp_path):
        """Test -w limits the expanded line length."""
        root = write_cfg(tmp_path / "main.cfg", "/a 0123456789\n")

        assert main(["-f", root, "-w", "8"]) == 1
        assert main(["-f", root, "-w", "64"]) == 0

    def test_invalid_working_buffer(self, tmp_path):
        """Test a non-positive -w is a usage error."""
        root = write_cfg(tmp_path / "main.cfg", "")

        assert main(["-f", root, "-w", "0"]) == 2

    def test_bad_vars_file(self, tmp_path):
        """Test an unreadable --vars file is a usage error."""
        root = write_cfg(tmp_path / "main.cfg", "")

        assert main(["-f", root, "--vars", str(tmp_path / "none.json")]) == 2

    def test_file_option_required(self):
        """Test -f is mandatory."""
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 2

    @patch("loadconfig.cli.main.VarServerStore")
    def test_varserver_url_selects_remote_store(self, mock_store_cls, tmp_path):
        """Test --varserver-url switches to the HTTP store."""
        remote = mock_store_cls.from_config.return_value
        remote.get_by_name.return_value = None
        root = write_cfg(tmp_path / "main.cfg", "/a 1\n")

        assert main(["-f", root, "--varserver-url", "http://vs:8085"]) == 0

        config = mock_store_cls.from_config.call_args[0][0]
        assert config.varserver.base_url == "http://vs:8085"
        remote.set_by_name.assert_called_once_with("/a", "1")
