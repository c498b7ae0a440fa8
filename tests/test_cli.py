"""Tests for CLI commands."""

import json
import logging

from typer.testing import CliRunner

from furusato.cli import app

runner = CliRunner()


class TestCLI:
    def test_logging_configured_only_when_verbose(self, sample_input_file, monkeypatch):
        calls = []
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
        runner.invoke(app, ["estimate", str(sample_input_file)])
        assert calls == []
        runner.invoke(app, ["--verbose", "estimate", str(sample_input_file)])
        assert calls[0]["level"] == logging.DEBUG

    def test_help(self):
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "Furusato" in result.output

    def test_no_command_shows_banner(self):
        result = runner.invoke(app, [])
        assert result.exit_code == 0
        assert "furusato estimate" in result.output

    def test_estimate_help(self):
        result = runner.invoke(app, ["estimate", "--help"])
        assert result.exit_code == 0

    def test_savings_help(self):
        result = runner.invoke(app, ["savings", "--help"])
        assert result.exit_code == 0


class TestEstimateCommand:
    def test_report(self, sample_input_file):
        result = runner.invoke(app, ["estimate", str(sample_input_file)])
        assert result.exit_code == 0, result.output
        assert "DONATION LIMIT" in result.output
        assert "44,287" in result.output
        assert "90,300" in result.output
        assert "179,500" in result.output
        assert '"salaryIncome": 5000000' in result.output

    def test_json(self, sample_input_file):
        result = runner.invoke(app, ["estimate", str(sample_input_file), "--json"])
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["donation_limit"] == 44_287
        assert data["income_tax_saving"] == 2_200
        assert data["taxpayer"]["declarationMethod"] == "electronic"

    def test_region(self, sample_input_file):
        result = runner.invoke(
            app, ["estimate", str(sample_input_file), "--region", "kanagawa", "--json"]
        )
        assert result.exit_code == 0, result.output
        assert json.loads(result.output)["donation_limit"] == 44_394

    def test_rate_override(self, sample_input_file):
        result = runner.invoke(
            app,
            ["estimate", str(sample_input_file), "--resident-tax-rate", "0.10025", "--json"],
        )
        assert result.exit_code == 0, result.output
        assert json.loads(result.output)["resident_tax"] == 179_900

    def test_amounts(self, sample_input_file):
        result = runner.invoke(
            app, ["estimate", str(sample_input_file), "-a", "10000", "-a", "30000"]
        )
        assert result.exit_code == 0, result.output
        assert "SCENARIOS" in result.output
        assert "30,000" in result.output

    def test_unknown_region(self, sample_input_file):
        result = runner.invoke(app, ["estimate", str(sample_input_file), "--region", "mars"])
        assert result.exit_code == 1
        assert "unknown region" in result.output

    def test_missing_file(self, tmp_path):
        result = runner.invoke(app, ["estimate", str(tmp_path / "missing.yml")])
        assert result.exit_code == 1
        assert "Error" in result.output

    def test_unrecognized_method_warns(self, tmp_path):
        path = tmp_path / "in.yml"
        path.write_text("salaryIncome: 6000000\nbusinessIncome: 300000\ndeclarationMethod: tablet\n")
        result = runner.invoke(app, ["estimate", str(path)])
        assert result.exit_code == 0, result.output
        assert "WARNINGS" in result.output
        assert "tablet" in result.output

    def test_unrecognized_method_strict(self, tmp_path):
        path = tmp_path / "in.yml"
        path.write_text("salaryIncome: 6000000\ndeclarationMethod: tablet\n")
        result = runner.invoke(app, ["estimate", str(path), "--strict"])
        assert result.exit_code == 1
        assert "tablet" in result.output


class TestSavingsCommand:
    def test_table(self, sample_input_file):
        result = runner.invoke(
            app, ["savings", str(sample_input_file), "-a", "20000", "-a", "60000"]
        )
        assert result.exit_code == 0, result.output
        assert "Donation Savings" in result.output
        assert "Donation limit: ¥44,287" in result.output
        assert "above the limit" in result.output

    def test_requires_amount(self, sample_input_file):
        result = runner.invoke(app, ["savings", str(sample_input_file)])
        assert result.exit_code != 0

    def test_unrecognized_method_warns(self, tmp_path):
        path = tmp_path / "in.yml"
        path.write_text("salaryIncome: 6000000\nbusinessIncome: 300000\ndeclarationMethod: tablet\n")
        result = runner.invoke(app, ["savings", str(path), "-a", "20000"])
        assert result.exit_code == 0, result.output
        assert "Warning" in result.output
        assert "tablet" in result.output
