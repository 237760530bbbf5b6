"""Unit tests for the acul command-line entry point (acul_cli.cli)."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest

from acul_cli import __version__
from acul_cli.cli import build_parser, init_project, main
from acul_cli.config import Config
from acul_cli.scaffolder import ProjectOptions, ScaffoldError, Screen


pytestmark = pytest.mark.unit


class TestParser:
    def test_init_command(self):
        args = build_parser().parse_args(["init", "my-app"])
        assert args.command == "init"
        assert args.project_name == "my-app"

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0
        assert __version__ in capsys.readouterr().out

    def test_no_arguments_prints_help(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 0
        assert "init" in capsys.readouterr().out

    def test_init_requires_name(self):
        with pytest.raises(SystemExit) as exc_info:
            main(["init"])
        assert exc_info.value.code == 2


class TestInitProject:
    @pytest.fixture
    def options(self) -> ProjectOptions:
        return ProjectOptions(screens=[Screen.LOGIN, Screen.PASSKEY])

    def test_success(self, config: Config, options):
        with patch("acul_cli.cli.collect_options", return_value=options):
            status = init_project("my-app", config)
        assert status == 0
        root = config.output_dir / "my-app"
        assert (root / "src" / "screens" / "login-id" / "index.jsx").is_file()
        assert (root / "passkey-enrollment.html").is_file()

    def test_existing_directory_skips_prompts(self, config: Config):
        (config.output_dir / "taken").mkdir()
        with patch("acul_cli.cli.collect_options") as prompts:
            status = init_project("taken", config)
        assert status == 1
        prompts.assert_not_called()

    @pytest.mark.parametrize("name", ["foo/bar", "..", "   "])
    def test_invalid_name_rejected_before_prompts(self, config: Config, name, capsys):
        with patch("acul_cli.cli.collect_options") as prompts:
            status = init_project(name, config)
        assert status == 1
        prompts.assert_not_called()
        assert "Error creating project:" in capsys.readouterr().err
        assert list(config.output_dir.iterdir()) == []

    def test_existing_directory_detected_after_stripping(self, config: Config):
        (config.output_dir / "taken").mkdir()
        with patch("acul_cli.cli.collect_options") as prompts:
            status = init_project("  taken  ", config)
        assert status == 1
        prompts.assert_not_called()

    def test_cancelled_prompts(self, config: Config):
        with patch("acul_cli.cli.collect_options", side_effect=KeyboardInterrupt):
            status = init_project("my-app", config)
        assert status == 1
        assert not (config.output_dir / "my-app").exists()

    def test_generation_failure(self, config: Config, options, capsys):
        with patch("acul_cli.cli.collect_options", return_value=options), patch(
            "acul_cli.cli.ProjectComposer.compose",
            side_effect=ScaffoldError("disk full"),
        ):
            status = init_project("my-app", config)
        assert status == 1
        assert "Error creating project: disk full" in capsys.readouterr().err

    def test_io_failure(self, config: Config, options):
        with patch("acul_cli.cli.collect_options", return_value=options), patch(
            "acul_cli.cli.ProjectComposer.compose",
            side_effect=PermissionError("denied"),
        ):
            status = init_project("my-app", config)
        assert status == 1

    def test_main_exit_status(self, config: Config, options):
        with patch("acul_cli.cli.Config.from_env", return_value=config), patch(
            "acul_cli.cli.collect_options", return_value=options
        ):
            with pytest.raises(SystemExit) as exc_info:
                main(["init", "from-main"])
        assert exc_info.value.code == 0
        assert (config.output_dir / "from-main" / "package.json").is_file()
