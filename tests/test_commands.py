import json

import pytest

from six_cities.cli.commands import HelpCommand, ImportCommand, VersionCommand


def test_help_lists_commands(capsys):
    HelpCommand().execute()
    out = capsys.readouterr().out

    assert "--version" in out
    assert "--help" in out
    assert "--import <path>" in out


def test_version_reads_package_json(tmp_path, capsys):
    path = tmp_path / "package.json"
    path.write_text(json.dumps({"name": "six-cities", "version": "2.3.4"}), encoding="utf-8")

    VersionCommand(str(path)).execute()

    assert capsys.readouterr().out.strip() == "2.3.4"


@pytest.mark.parametrize("content", [
    "{not json",
    json.dumps({"name": "six-cities"}),
    json.dumps(["1.0.0"]),
])
def test_version_reports_bad_config(tmp_path, capsys, content):
    path = tmp_path / "package.json"
    path.write_text(content, encoding="utf-8")

    VersionCommand(str(path)).execute()
    captured = capsys.readouterr()

    assert captured.out == ""
    assert f"Failed to read version from {path}" in captured.err


def test_version_reports_missing_file(tmp_path, capsys):
    path = tmp_path / "missing.json"

    VersionCommand(str(path)).execute()

    assert f"Failed to read version from {path}" in capsys.readouterr().err


def test_import_without_path_reports_usage(capsys):
    ImportCommand().execute()
    captured = capsys.readouterr()

    assert "Please provide path to file" in captured.err
    assert captured.out == ""


def test_import_missing_file_does_not_raise(tmp_path, capsys):
    path = tmp_path / "missing.tsv"

    ImportCommand().execute(str(path))
    err = capsys.readouterr().err

    assert f"Can't import data from file: {path}" in err
    assert "No such file" in err


def test_import_prints_offers(offers_file, capsys):
    ImportCommand().execute(f"  {offers_file}  ")
    out = capsys.readouterr().out

    assert "Imported 2 offer(s)" in out
    assert "1. Loft" in out
    assert "2. Cottage" in out
    assert "City: Paris" in out
    assert "Amenities: Breakfast, Washer" in out
    assert "Location: 48.85, 2.35" in out


def test_import_lets_base_exceptions_propagate(monkeypatch, offers_file):
    def interrupted(self):
        raise KeyboardInterrupt

    monkeypatch.setattr("six_cities.readers.tsv.TSVFileReader.read", interrupted)

    with pytest.raises(KeyboardInterrupt):
        ImportCommand().execute(str(offers_file))


def test_version_reports_deeply_nested_json(tmp_path, capsys):
    path = tmp_path / "package.json"
    path.write_text("[" * 100000 + "]" * 100000, encoding="utf-8")

    VersionCommand(str(path)).execute()

    assert f"Failed to read version from {path}" in capsys.readouterr().err


def test_import_invalid_utf8_reports_error(tmp_path, capsys):
    path = tmp_path / "latin.tsv"
    path.write_bytes(b"\xff\xfe\tbad")

    ImportCommand().execute(str(path))
    captured = capsys.readouterr()

    assert f"Can't import data from file: {path}" in captured.err
    assert "utf-8" in captured.err
    assert captured.out == ""
