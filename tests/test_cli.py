"""Tests for perch.cli — argument parsing and startup."""

from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from perch import __version__
from perch.app import App
from perch.cli import main


@pytest.fixture
def site(tmp_path: Path) -> Path:
    root = tmp_path / "site"
    root.mkdir()
    (root / "index.html").write_text("<h1>Home</h1>")
    (root / "app.js").write_text("console.log(1);")
    return root


class TestCLIParsing:
    def test_help_exits_zero(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--help"])
        assert exc_info.value.code == 0

    def test_version(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0
        assert capsys.readouterr().out.strip() == __version__ == "0.0.1"

    def test_directory_required(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 2

    def test_bad_log_level(self, site: Path) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main([str(site), "--log-level", "chatty"])
        assert exc_info.value.code == 2


class TestCLIServe:
    @patch("perch.server.launch.run_server")
    def test_defaults(self, mock_server: MagicMock, site: Path) -> None:
        main([str(site)])
        mock_server.assert_called_once()
        app, config = mock_server.call_args[0]
        assert isinstance(app, App)
        assert config.port == 8888
        assert config.host == "0.0.0.0"
        assert config.no_cache is False
        assert "" in app.assets
        assert "/app.js" in app.assets

    @patch("perch.server.launch.run_server")
    def test_flags(self, mock_server: MagicMock, site: Path) -> None:
        main(
            [
                str(site),
                "--no-cache",
                "--host",
                "127.0.0.1",
                "--port",
                "9000",
                "--workers",
                "4",
                "--log-level",
                "DEBUG",
                "--request-timeout",
                "5",
            ]
        )
        _, config = mock_server.call_args[0]
        assert config.no_cache is True
        assert config.host == "127.0.0.1"
        assert config.port == 9000
        assert config.workers == 4
        assert config.log_level == "debug"
        assert config.request_timeout == 5.0

    @patch("perch.server.launch.run_server")
    def test_missing_directory_exits_1(
        self, mock_server: MagicMock, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main([str(tmp_path / "nope")])
        assert exc_info.value.code == 1
        assert "Error:" in capsys.readouterr().err
        mock_server.assert_not_called()

    @patch("perch.server.launch.run_server")
    def test_bad_port_exits_1(
        self, mock_server: MagicMock, site: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main([str(site), "--port", "70000"])
        assert exc_info.value.code == 1
        assert "Port" in capsys.readouterr().err
        mock_server.assert_not_called()
