"""Tests for the intl-datetime CLI."""

import json

import pytest
from typer.testing import CliRunner

from intl_datetime.cli import app


EPOCH = "1970-01-01T00:00:00+00:00"


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def runner():
    """Create CLI runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep ambient settings out of the tests."""
    for name in ("LOCALE", "DATE_FORMAT", "TIME_FORMAT", "LOG_LEVEL"):
        monkeypatch.delenv(f"INTL_DATETIME_{name}", raising=False)


# =============================================================================
# render
# =============================================================================


class TestRenderCommand:
    """Tests for the render command."""

    def test_date_only(self, runner):
        result = runner.invoke(app, ["render", EPOCH, "--locale", "en-US", "--date", "short"])
        assert result.exit_code == 0
        assert result.output.strip() == "1/1/70"

    def test_time_only(self, runner):
        result = runner.invoke(app, ["render", EPOCH, "-l", "de_DE", "-t", "short"])
        assert result.exit_code == 0
        assert result.output.strip() == "00:00"

    def test_date_and_time(self, runner):
        result = runner.invoke(
            app, ["render", EPOCH, "-l", "de_DE", "-d", "medium", "-t", "short"]
        )
        assert result.exit_code == 0
        assert result.output.strip() == "01.01.1970, 00:00"

    def test_default_format(self, runner):
        result = runner.invoke(app, ["render", EPOCH, "-l", "en_US"])
        assert result.exit_code == 0
        assert "1970" in result.output

    def test_timezone_option(self, runner):
        result = runner.invoke(
            app,
            ["render", EPOCH, "-l", "de_DE", "-d", "short", "--timezone", "America/New_York"],
        )
        assert result.exit_code == 0
        assert result.output.strip() == "31.12.69"

    def test_unknown_format(self, runner):
        result = runner.invoke(app, ["render", EPOCH, "--date", "bogus"])
        assert result.exit_code == 1
        assert '"bogus"' in result.output

    def test_invalid_timestamp(self, runner):
        result = runner.invoke(app, ["render", "yesterday"])
        assert result.exit_code == 1
        assert "ISO 8601" in result.output

    def test_unknown_timezone(self, runner):
        result = runner.invoke(app, ["render", EPOCH, "--timezone", "Mars/Olympus"])
        assert result.exit_code == 1
        assert "Unknown timezone" in result.output

    def test_locale_from_env(self, runner):
        result = runner.invoke(
            app,
            ["render", EPOCH, "--date", "medium"],
            env={"INTL_DATETIME_LOCALE": "de_DE"},
        )
        assert result.exit_code == 0
        assert result.output.strip() == "01.01.1970"

    def test_locale_from_config_file(self, runner, tmp_path):
        config = tmp_path / "settings.json"
        config.write_text(json.dumps({"locale": "de_DE"}), encoding="utf-8")
        result = runner.invoke(app, ["render", EPOCH, "-d", "short", "--config", str(config)])
        assert result.exit_code == 0
        assert result.output.strip() == "01.01.70"

    def test_bad_config(self, runner, tmp_path):
        result = runner.invoke(
            app, ["render", EPOCH, "--config", str(tmp_path / "missing.toml")]
        )
        assert result.exit_code == 1
        assert "not found" in result.output

    def test_unknown_locale(self, runner):
        """Test that engine errors exit cleanly."""
        result = runner.invoke(app, ["render", EPOCH, "-l", "xx_XX", "-d", "short"])
        assert result.exit_code == 1
        assert "Error:" in result.output
        assert "xx_XX" in result.output

    def test_config_directory(self, runner, tmp_path):
        config = tmp_path / "settings.json"
        config.mkdir()
        result = runner.invoke(app, ["render", EPOCH, "--config", str(config)])
        assert result.exit_code == 1
        assert "Failed to load" in result.output

    def test_config_not_utf8(self, runner, tmp_path):
        config = tmp_path / "settings.json"
        config.write_bytes(b"\xff\xfe{")
        result = runner.invoke(app, ["render", EPOCH, "--config", str(config)])
        assert result.exit_code == 1
        assert "Failed to load" in result.output


# =============================================================================
# styles / formats
# =============================================================================


class TestStylesCommand:
    """Tests for the styles command."""

    def test_table(self, runner):
        result = runner.invoke(
            app, ["styles", EPOCH, "--locale", "de_DE"], env={"COLUMNS": "200"}
        )
        assert result.exit_code == 0
        assert "Date" in result.output
        assert "01.01.1970, 00:00" in result.output
        assert "19700101 12:00" in result.output

    def test_unknown_locale(self, runner):
        """Test that engine errors exit cleanly."""
        result = runner.invoke(app, ["styles", EPOCH, "-l", "xx_XX"])
        assert result.exit_code == 1
        assert "Error:" in result.output
        assert "xx_XX" in result.output


class TestFormatsCommand:
    """Tests for the formats command."""

    def test_lists_names(self, runner):
        result = runner.invoke(app, ["formats"])
        assert result.exit_code == 0
        lines = result.output.strip().splitlines()
        assert lines == ["none", "short", "medium", "long", "full (default)"]
