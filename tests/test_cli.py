"""Tests for the CLI commands."""

import json
import subprocess
from pathlib import Path

from typer.testing import CliRunner

from prmanager import __version__
from prmanager.cli import app

runner = CliRunner()


def _write_diff(tmp_path: Path, text: str) -> str:
    path = tmp_path / "change.diff"
    path.write_text(text)
    return str(path)


class TestVersion:
    def test_version_flag(self):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert f"prmanager {__version__}" in result.output


class TestInit:
    def test_creates_config(self, tmp_git_repo: Path, monkeypatch):
        monkeypatch.chdir(tmp_git_repo)
        result = runner.invoke(app, ["init"])
        assert result.exit_code == 0
        assert "[analyze]" in (tmp_git_repo / ".prmanager.toml").read_text()

    def test_refuses_overwrite(self, tmp_git_repo: Path, monkeypatch):
        monkeypatch.chdir(tmp_git_repo)
        (tmp_git_repo / ".prmanager.toml").write_text("existing")
        result = runner.invoke(app, ["init"])
        assert result.exit_code == 1
        assert (tmp_git_repo / ".prmanager.toml").read_text() == "existing"

    def test_force_overwrites(self, tmp_git_repo: Path, monkeypatch):
        monkeypatch.chdir(tmp_git_repo)
        (tmp_git_repo / ".prmanager.toml").write_text("existing")
        result = runner.invoke(app, ["init", "--force"])
        assert result.exit_code == 0
        assert "[analyze]" in (tmp_git_repo / ".prmanager.toml").read_text()


class TestAnalyzeArguments:
    def test_no_source(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        result = runner.invoke(app, ["analyze"])
        assert result.exit_code == 2

    def test_two_sources(self, tmp_path: Path, monkeypatch, sample_diff_auth):
        monkeypatch.chdir(tmp_path)
        diff = _write_diff(tmp_path, sample_diff_auth)
        result = runner.invoke(app, ["analyze", "--diff", diff, "--staged"])
        assert result.exit_code == 2

    def test_to_without_from(self, tmp_path: Path, monkeypatch, sample_diff_auth):
        monkeypatch.chdir(tmp_path)
        diff = _write_diff(tmp_path, sample_diff_auth)
        result = runner.invoke(app, ["analyze", "--diff", diff, "--to", "HEAD"])
        assert result.exit_code == 2

    def test_bad_format(self, tmp_path: Path, monkeypatch, sample_diff_auth):
        monkeypatch.chdir(tmp_path)
        diff = _write_diff(tmp_path, sample_diff_auth)
        result = runner.invoke(app, ["analyze", "--diff", diff, "--format", "xml"])
        assert result.exit_code == 2

    def test_bad_fail_on(self, tmp_path: Path, monkeypatch, sample_diff_auth):
        monkeypatch.chdir(tmp_path)
        diff = _write_diff(tmp_path, sample_diff_auth)
        result = runner.invoke(app, ["analyze", "--diff", diff, "--fail-on", "critical"])
        assert result.exit_code == 2

    def test_missing_diff_file(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        result = runner.invoke(app, ["analyze", "--diff", "nope.diff"])
        assert result.exit_code == 2

    def test_invalid_pr_url(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        result = runner.invoke(app, ["analyze", "--pr-url", "https://example.com/not-a-pr"])
        assert result.exit_code == 2
        assert "Invalid GitHub PR URL format" in result.output

    def test_github_failure(self, tmp_path: Path, monkeypatch):
        from prmanager.github import client

        def broken_fetch(ref, token=None, session=None):
            raise client.GitHubError("Failed to fetch PR data: invalid JSON")

        monkeypatch.chdir(tmp_path)
        monkeypatch.setattr(client, "fetch_pull_request", broken_fetch)
        result = runner.invoke(app, ["analyze", "--pr-url", "https://github.com/octo/demo/pull/7"])
        assert result.exit_code == 2
        assert "invalid JSON" in result.output

    def test_staged_outside_git(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        result = runner.invoke(app, ["analyze", "--staged"])
        assert result.exit_code == 2


class TestAnalyzeDiff:
    def test_json_to_stdout(self, tmp_path: Path, monkeypatch, sample_diff_migration):
        monkeypatch.chdir(tmp_path)
        diff = _write_diff(tmp_path, sample_diff_migration)
        result = runner.invoke(app, ["analyze", "--diff", diff, "--format", "json"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["risk_level"] == "Medium"
        assert data["stats"]["risk_score_pre"] == 30

    def test_stdin(self, tmp_path: Path, monkeypatch, sample_diff_two_files):
        monkeypatch.chdir(tmp_path)
        result = runner.invoke(
            app, ["analyze", "--diff", "-", "--format", "json"], input=sample_diff_two_files
        )
        assert result.exit_code == 0
        assert json.loads(result.stdout)["risk_level"] == "Low"

    def test_output_file(self, tmp_path: Path, monkeypatch, sample_diff_auth):
        monkeypatch.chdir(tmp_path)
        diff = _write_diff(tmp_path, sample_diff_auth)
        report = tmp_path / "report.json"
        result = runner.invoke(app, ["analyze", "--diff", diff, "--output", str(report)])
        assert result.exit_code == 0
        assert json.loads(report.read_text())["files"][0]["path"] == "src/auth/login.ts"

    def test_fail_on_threshold(self, tmp_path: Path, monkeypatch, sample_diff_auth):
        monkeypatch.chdir(tmp_path)
        diff = _write_diff(tmp_path, sample_diff_auth)
        result = runner.invoke(app, ["analyze", "--diff", diff, "--fail-on", "medium"])
        assert result.exit_code == 1

    def test_fail_on_never(self, tmp_path: Path, monkeypatch, sample_diff_auth):
        monkeypatch.chdir(tmp_path)
        diff = _write_diff(tmp_path, sample_diff_auth)
        result = runner.invoke(app, ["analyze", "--diff", diff, "--fail-on", "never"])
        assert result.exit_code == 0

    def test_config_fail_on(self, tmp_path: Path, monkeypatch, sample_diff_auth):
        monkeypatch.chdir(tmp_path)
        (tmp_path / ".prmanager.toml").write_text('[analyze]\nfail_on = "low"\n')
        diff = _write_diff(tmp_path, sample_diff_auth)
        result = runner.invoke(app, ["analyze", "--diff", diff])
        assert result.exit_code == 1

    def test_bad_config(self, tmp_path: Path, monkeypatch, sample_diff_auth):
        monkeypatch.chdir(tmp_path)
        (tmp_path / ".prmanager.toml").write_text("not [valid")
        diff = _write_diff(tmp_path, sample_diff_auth)
        result = runner.invoke(app, ["analyze", "--diff", diff])
        assert result.exit_code == 2

    def test_wrongly_typed_config_value(self, tmp_path: Path, monkeypatch, sample_diff_auth):
        monkeypatch.chdir(tmp_path)
        (tmp_path / ".prmanager.toml").write_text('[analyze]\nmax_files = "100"\n')
        diff = _write_diff(tmp_path, sample_diff_auth)
        result = runner.invoke(app, ["analyze", "--diff", diff])
        assert result.exit_code == 2
        assert result.exception is None or isinstance(result.exception, SystemExit)

    def test_empty_diff(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        diff = _write_diff(tmp_path, "\n")
        result = runner.invoke(app, ["analyze", "--diff", diff])
        assert result.exit_code == 0
        assert "No changes to analyse" in result.output

    def test_too_large(self, tmp_path: Path, monkeypatch, sample_diff_auth):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("PRMANAGER_MAX_CHANGED_LINES", "3")
        diff = _write_diff(tmp_path, sample_diff_auth)
        result = runner.invoke(app, ["analyze", "--diff", diff])
        assert result.exit_code == 2


class TestAnalyzeGit:
    def test_no_staged_changes(self, tmp_git_repo: Path, monkeypatch):
        monkeypatch.chdir(tmp_git_repo)
        result = runner.invoke(app, ["analyze", "--staged"])
        assert result.exit_code == 0

    def test_staged_migration(self, tmp_git_repo: Path, monkeypatch):
        monkeypatch.chdir(tmp_git_repo)
        (tmp_git_repo / "migrations").mkdir()
        (tmp_git_repo / "migrations" / "001_init.sql").write_text("CREATE TABLE t (id INT);\n")
        subprocess.run(["git", "add", "."], cwd=tmp_git_repo, capture_output=True, check=True)
        result = runner.invoke(app, ["analyze", "--staged", "--format", "json"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["files"][0]["path"] == "migrations/001_init.sql"
        assert data["stats"]["has_migrations"] is True

    def test_commit_range(self, tmp_git_repo: Path, monkeypatch):
        monkeypatch.chdir(tmp_git_repo)
        (tmp_git_repo / "README.md").write_text("# Test\n\nMore docs.\n")
        subprocess.run(["git", "commit", "-am", "docs"], cwd=tmp_git_repo, capture_output=True, check=True)
        result = runner.invoke(app, ["analyze", "--from", "HEAD~1", "--format", "json"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["stats"]["touched_areas"] == ["docs"]

    def test_bad_ref(self, tmp_git_repo: Path, monkeypatch):
        monkeypatch.chdir(tmp_git_repo)
        result = runner.invoke(app, ["analyze", "--from", "no-such-ref"])
        assert result.exit_code == 2
