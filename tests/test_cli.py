"""Command line entry point."""

from unittest.mock import patch

import click
import pytest
from click.testing import CliRunner

from readsync.cli import main, parse_addr


class TestParseAddr:

    def test_host_and_port(self):
        assert parse_addr("127.0.0.1:9200") == ("127.0.0.1", 9200)

    def test_port_only_binds_all_interfaces(self):
        assert parse_addr(":8080") == ("0.0.0.0", 8080)

    @pytest.mark.parametrize("value", ["localhost", "localhost:http", "9200"])
    def test_invalid(self, value):
        with pytest.raises(click.BadParameter):
            parse_addr(value)


class TestServeCommand:

    @patch("readsync.cli.uvicorn.run")
    def test_options_reach_uvicorn(self, mock_run, tmp_path):
        db_file = tmp_path / "sync.sqlite"
        runner = CliRunner()
        result = runner.invoke(main, ["--addr", "0.0.0.0:9300", "--db", str(db_file)])

        assert result.exit_code == 0, result.output
        mock_run.assert_called_once()
        app = mock_run.call_args.args[0]
        assert mock_run.call_args.kwargs["host"] == "0.0.0.0"
        assert mock_run.call_args.kwargs["port"] == 9300
        assert app.state.settings.database_url == f"sqlite+aiosqlite:///{db_file}"

    @patch("readsync.cli.uvicorn.run")
    def test_bad_addr(self, mock_run):
        result = CliRunner().invoke(main, ["--addr", "nowhere"])
        assert result.exit_code != 0
        mock_run.assert_not_called()

    def test_version(self):
        result = CliRunner().invoke(main, ["--version"])
        assert result.exit_code == 0
        assert "readsync" in result.output
