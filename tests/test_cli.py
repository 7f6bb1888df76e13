import json

from click.testing import CliRunner

from six_cities.cli import cli


def test_no_arguments_prints_help():
    result = CliRunner().invoke(cli, [])

    assert result.exit_code == 0
    assert "--import <path>" in result.output


def test_help_flag_reaches_help_command():
    result = CliRunner().invoke(cli, ["--help"])

    assert result.exit_code == 0
    assert "Six Cities" in result.output


def test_unknown_flag_prints_help():
    result = CliRunner().invoke(cli, ["--bogus"])

    assert result.exit_code == 0
    assert "COMMANDS" in result.output


def test_version_flag(tmp_path):
    runner = CliRunner()
    with runner.isolated_filesystem(temp_dir=tmp_path):
        with open("package.json", "w", encoding="utf-8") as f:
            json.dump({"version": "1.0.0"}, f)
        result = runner.invoke(cli, ["--version"])

    assert result.exit_code == 0
    assert "1.0.0" in result.output


def test_import_flag(offers_file):
    result = CliRunner().invoke(cli, ["--import", str(offers_file)])

    assert result.exit_code == 0
    assert "Imported 2 offer(s)" in result.output


def test_import_missing_file_exits_cleanly(tmp_path):
    result = CliRunner().invoke(cli, ["--import", str(tmp_path / "nope.tsv")])

    assert result.exit_code == 0
    assert "Can't import data from file" in result.output


def test_double_dash_is_consumed_by_click(tmp_path):
    runner = CliRunner()
    with runner.isolated_filesystem(temp_dir=tmp_path):
        with open("package.json", "w", encoding="utf-8") as f:
            json.dump({"version": "1.0.0"}, f)
        result = runner.invoke(cli, ["--", "--version"])

    assert result.exit_code == 0
    assert "1.0.0" in result.output
    assert "COMMANDS" not in result.output
