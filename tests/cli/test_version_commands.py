"""
Tests for the show and file commands.
"""

import json
from functools import partial
from unittest.mock import patch

import pytest
from click.testing import CliRunner

import scmversion.config as config_module
from scmversion import __version__
from scmversion.cli.main import cli
from scmversion.engine import VersioningEngine


@pytest.fixture(autouse=True)
def isolated_user_config(tmp_path, monkeypatch):
    monkeypatch.setattr(config_module, "config_dir", tmp_path / "user-config")


@pytest.fixture
def project_dir(tmp_path):
    directory = tmp_path / "project"
    directory.mkdir()
    return directory


@pytest.fixture
def run_cli(fake_service, registry):
    """Invoke the CLI with the git backend replaced by a fake service."""

    def _run(args, branch="feature/login", **service_options):
        service = fake_service(branch, **service_options)
        engine_factory = partial(VersioningEngine, services=registry(service))
        with patch("scmversion.cli.utils.args.VersioningEngine", engine_factory):
            return CliRunner().invoke(cli, args)

    return _run


@pytest.mark.short
class TestShow:
    """Test the show command."""

    def test_text_output(self, run_cli, project_dir):
        result = run_cli(["show", str(project_dir)])

        assert result.exit_code == 0, result.output
        assert "[version] display     = feature-login-ab12cd3" in result.output
        assert "[version] branch_id   = feature-login" in result.output
        assert "[version] scm         = git" in result.output

    def test_json_output(self, run_cli, project_dir):
        result = run_cli(["show", str(project_dir), "--json"])

        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["full"] == "feature-login-ab12cd3"
        assert data["build"] == "ab12cd3"

    def test_single_field(self, run_cli, project_dir):
        result = run_cli(["show", str(project_dir), "--field", "display"])

        assert result.exit_code == 0, result.output
        assert result.output == "feature-login-ab12cd3\n"

    def test_display_mode_option(self, run_cli, project_dir):
        result = run_cli(
            ["show", str(project_dir), "--display-mode", "base", "--field", "display"],
            branch="feature/2.0",
        )

        assert result.output == "2.0\n"

    def test_snapshot_option(self, run_cli, project_dir):
        result = run_cli(
            [
                "show",
                str(project_dir),
                "--display-mode",
                "snapshot",
                "--snapshot",
                ".dev",
                "--field",
                "display",
            ],
            branch="feature/2.0",
        )

        assert result.output == "2.0.dev\n"

    def test_release_option(self, run_cli, project_dir):
        result = run_cli(
            ["show", str(project_dir), "--release", "hotfix", "--field", "display"],
            branch="hotfix/1.2",
            tags=["1.2.7"],
        )

        assert result.output == "1.2.8\n"

    def test_invalid_display_mode_option(self, run_cli, project_dir):
        result = run_cli(["show", str(project_dir), "--display-mode", "bogus"])

        assert result.exit_code == 2

    def test_invalid_display_mode_in_file(self, run_cli, project_dir):
        (project_dir / "scmversion.cfg").write_text(
            "[versioning]\ndisplay_mode = bogus\n"
        )
        result = run_cli(["show", str(project_dir)])

        assert result.exit_code == 1
        assert "bogus is not a valid display mode" in result.output

    def test_unknown_scm(self, run_cli, project_dir):
        result = run_cli(["show", str(project_dir), "--scm", "hg"])

        assert result.exit_code == 1
        assert "Unknown SCM info service: hg" in result.output

    def test_no_scm_information(self, run_cli, project_dir):
        result = run_cli(["show", str(project_dir), "--field", "display"], branch=None)

        assert result.exit_code == 0
        assert "feature" not in result.output

    def test_missing_project_dir(self, run_cli, tmp_path):
        result = run_cli(["show", str(tmp_path / "missing")])

        assert result.exit_code == 2

    def test_git_command_failure(self, run_cli, project_dir, fake_service):
        service_class = type(fake_service())
        git = pytest.importorskip("git")
        failure = git.exc.GitCommandError(["git", "tag"], 128, "fatal: bad object")
        with patch.object(service_class, "get_base_tags", side_effect=failure):
            result = run_cli(["show", str(project_dir)], branch="release/1.2")

        assert result.exit_code == 1
        assert "fatal: bad object" in result.output

    def test_other_errors_propagate(self, run_cli, project_dir, fake_service):
        service_class = type(fake_service())
        with patch.object(service_class, "get_info", side_effect=RuntimeError("boom")):
            result = run_cli(["show", str(project_dir)])

        assert result.exit_code == 1
        assert isinstance(result.exception, RuntimeError)


@pytest.mark.short
class TestVersionFile:
    """Test the file command."""

    def test_default_location(self, run_cli, project_dir):
        result = run_cli(["file", str(project_dir)], branch="release/2.1")

        assert result.exit_code == 0, result.output
        path = project_dir / "build" / "version.properties"
        lines = path.read_text().splitlines()
        assert "VERSION_DISPLAY=2.1.0" in lines
        assert "VERSION_BRANCHTYPE=release" in lines
        assert len(lines) == 9
        assert "Version 2.1.0 written to" in result.output

    def test_output_and_prefix(self, run_cli, project_dir, tmp_path):
        output = tmp_path / "out" / "version.env"
        result = run_cli(
            ["file", str(project_dir), "-o", str(output), "--prefix", "APP_"]
        )

        assert result.exit_code == 0, result.output
        assert "APP_FULL=feature-login-ab12cd3" in output.read_text().splitlines()

    def test_prefix_from_config_file(self, run_cli, project_dir):
        (project_dir / "scmversion.cfg").write_text("[versioning]\nprefix = BUILD_\n")
        result = run_cli(["file", str(project_dir)])

        assert result.exit_code == 0, result.output
        content = (project_dir / "build" / "version.properties").read_text()
        assert "BUILD_BRANCH=feature/login" in content.splitlines()

    def test_no_scm_information(self, run_cli, project_dir):
        result = run_cli(["file", str(project_dir)], branch=None)

        assert result.exit_code == 0
        assert not (project_dir / "build").exists()


@pytest.mark.short
class TestMain:
    """Test the command group."""

    def test_version(self):
        result = CliRunner().invoke(cli, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.output

    def test_help_lists_commands(self):
        result = CliRunner().invoke(cli, ["--help"])

        assert result.exit_code == 0
        assert "show" in result.output
        assert "file" in result.output

    def test_debug_option(self, run_cli, project_dir):
        result = run_cli(["show", "--debug", str(project_dir), "--field", "build"])

        assert result.exit_code == 0, result.output
        assert "ab12cd3" in result.output
