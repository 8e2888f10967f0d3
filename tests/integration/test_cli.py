"""
CLI Integration Tests
=====================

Tests the complete CLI interface including command parsing, settings
persistence and document tuning.
"""

import json

import pytest
import yaml
from click.testing import CliRunner

from main import cli
from src.typetune.core.models import LineHeightUnit
from src.typetune.host.document import Document


class TestCLIIntegration:
    """CLI integration tests."""

    @pytest.fixture
    def runner(self):
        """Click test runner."""
        return CliRunner()

    @pytest.fixture
    def invoke(self, runner, settings_path):
        """Invoke the CLI with an isolated settings file."""

        def _invoke(*args):
            return runner.invoke(cli, ["--settings-file", str(settings_path), *args])

        return _invoke

    def test_cli_help(self, runner):
        """Test CLI help command."""
        result = runner.invoke(cli, ["--help"])

        assert result.exit_code == 0
        for command in ("calculate", "export", "fonts", "tune", "settings"):
            assert command in result.output

    def test_calculate(self, invoke):
        """Test calculating Inter 16px."""
        result = invoke("calculate", "--family", "Inter", "--size", "16")

        assert result.exit_code == 0
        assert "Inter · 16px · Regular" in result.output
        assert "24px (150%)" in result.output
        assert "Approximate" not in result.output

    def test_calculate_json(self, invoke):
        """Test JSON output."""
        result = invoke("calculate", "-f", "SF Pro", "-s", "13", "--json")

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["line_height"] == 18
        assert data["is_approximate"] is False

    def test_calculate_unknown_family(self, invoke):
        """Test the approximation notice."""
        result = invoke("calculate", "-f", "Mystery Grotesk", "-s", "16")

        assert result.exit_code == 0
        assert "Approximate" in result.output

    def test_calculate_weight_from_style(self, invoke):
        """Test the weight is derived from --style when not given."""
        regular = json.loads(invoke("calculate", "-f", "Inter", "-s", "16", "--json").output)
        bold = json.loads(
            invoke("calculate", "-f", "Inter", "-s", "16", "--style", "Bold", "--json").output
        )

        assert bold["line_height_raw"] < regular["line_height_raw"]

    def test_calculate_invalid_size(self, invoke):
        """Test invalid input exits with an error."""
        result = invoke("calculate", "-f", "Inter", "-s", "0")

        assert result.exit_code == 1

    def test_export_css(self, invoke):
        """Test CSS export."""
        result = invoke("export", "-f", "Inter", "-s", "16", "--format", "css")

        assert result.exit_code == 0
        assert "line-height: 24px; /* 150% */" in result.output

    def test_export_default_format(self, invoke, monkeypatch):
        """Test the default format comes from the app configuration."""
        monkeypatch.setenv("APP_DEFAULT_EXPORT_FORMAT", "ios")

        result = invoke("export", "-f", "Inter", "-s", "16")

        assert result.exit_code == 0
        assert "lineHeightMultiple = 1.5" in result.output

    def test_config_file_sets_default_format(self, invoke, tmp_path):
        """Test --config loads the application configuration from YAML."""
        config_path = tmp_path / "app.yaml"
        config_path.write_text(yaml.safe_dump({"default_export_format": "android"}))

        result = invoke("--config", str(config_path), "export", "-f", "Inter", "-s", "16")

        assert result.exit_code == 0
        assert 'android:lineSpacingMultiplier="1.5"' in result.output

    def test_config_file_invalid(self, invoke, tmp_path):
        """Test an invalid configuration file exits with an error."""
        config_path = tmp_path / "app.yaml"
        config_path.write_text(yaml.safe_dump({"log_level": "chatty"}))

        result = invoke("--config", str(config_path), "fonts")

        assert result.exit_code == 1

    def test_export_invalid_format(self, invoke):
        """Test unknown formats are rejected by the option parser."""
        result = invoke("export", "-f", "Inter", "-s", "16", "--format", "flutter")

        assert result.exit_code != 0

    def test_fonts(self, invoke):
        """Test the font listing."""
        result = invoke("fonts", "--aliases")

        assert result.exit_code == 0
        assert "Inter" in result.output
        assert "Merriweather" in result.output
        assert "sf pro display" in result.output

    def test_tune_scan_only(self, invoke, document_path):
        """Test scanning a document without applying."""
        result = invoke("tune", str(document_path))

        assert result.exit_code == 0
        assert "5 text items in 4 configurations" in result.output
        assert "2 already well-tuned, 3 to fix" in result.output
        assert Document.load(document_path).get_node("caption").line_height.unit == (
            LineHeightUnit.AUTO
        )

    def test_tune_apply(self, invoke, document_path, tmp_path):
        """Test applying results and writing a new document."""
        output = tmp_path / "tuned.json"

        result = invoke("tune", str(document_path), "--apply", "--output", str(output))

        assert result.exit_code == 0
        assert "2 already well-tuned, 3 fixed" in result.output
        tuned = Document.load(output)
        assert tuned.get_node("caption").line_height.unit == LineHeightUnit.PERCENT
        assert Document.load(document_path).get_node("caption").line_height.unit == (
            LineHeightUnit.AUTO
        )

    def test_tune_auto_apply_setting(self, invoke, document_path):
        """Test the auto_apply setting applies without --apply."""
        assert invoke("settings", "set", "auto_apply=true").exit_code == 0

        result = invoke("tune", str(document_path))

        assert result.exit_code == 0
        assert "2 already well-tuned, 3 fixed" in result.output
        assert Document.load(document_path).get_node("caption").line_height.unit == (
            LineHeightUnit.PERCENT
        )

    def test_tune_update_styles(self, invoke, document_path):
        """Test the style changelog is printed."""
        result = invoke("tune", str(document_path), "--apply", "--update-styles")

        assert result.exit_code == 0
        assert "style Body/Large: line-height 100% -> " in result.output
        tuned = Document.load(document_path)
        assert tuned.styles["S:body-large"].line_height.unit == LineHeightUnit.PERCENT

    def test_tune_reports_failures(self, invoke, tmp_path, sample_document_data):
        """Test a failing node makes the command exit non-zero."""
        sample_document_data["unavailable_fonts"] = ["SF Pro Text"]
        path = tmp_path / "broken-font.json"
        path.write_text(json.dumps(sample_document_data))

        result = invoke("tune", str(path), "--apply")

        assert result.exit_code == 1
        assert "1 failed" in result.output

    def test_tune_invalid_document(self, invoke, tmp_path):
        """Test unreadable documents exit with an error."""
        path = tmp_path / "broken.json"
        path.write_text("{")

        result = invoke("tune", str(path))

        assert result.exit_code == 1

    def test_settings_show_defaults(self, invoke):
        """Test showing default settings."""
        result = invoke("settings", "show")

        assert result.exit_code == 0
        assert "grid_step: 4" in result.output

    def test_settings_set_persists(self, invoke, settings_path):
        """Test settings are written and used by later commands."""
        result = invoke("settings", "set", "grid_step=8", "bg_mode=dark")

        assert result.exit_code == 0
        with settings_path.open() as f:
            saved = yaml.safe_load(f)
        assert saved["grid_step"] == 8
        assert saved["bg_mode"] == "dark"

        calculated = json.loads(invoke("calculate", "-f", "Inter", "-s", "16", "--json").output)
        assert calculated["letter_spacing"] > -0.08

    def test_settings_set_invalid_value(self, invoke, settings_path):
        """Test invalid values are rejected and nothing is written."""
        result = invoke("settings", "set", "grid_step=3")

        assert result.exit_code == 1
        assert not settings_path.exists()

    def test_settings_set_malformed(self, invoke):
        """Test assignments without '=' are rejected."""
        result = invoke("settings", "set", "grid_step")

        assert result.exit_code == 1

    def test_settings_set_unknown(self, invoke):
        """Test unknown setting names are rejected."""
        result = invoke("settings", "set", "font_scale=2")

        assert result.exit_code == 1
