"""Unit tests for the command line entry point."""

import json
import logging

import pytest

from modcheck.cli import EXIT_CONFIG_ERROR, EXIT_OK, EXIT_VIOLATIONS, main


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def person_file(tmp_path):
    path = tmp_path / "Person.java"
    path.write_text("public class Person {\n    interface Address {\n    }\n}\n")
    return path


def test_violations_exit_code_and_plain_output(person_file, capsys):
    exit_code = main([str(person_file), "--log-level", "error"])

    out = capsys.readouterr().out.splitlines()
    assert exit_code == EXIT_VIOLATIONS
    assert out == [
        f"{person_file}:2:5: [error] Implied modifier 'static' should be explicit. "
        "[ClassMemberImpliedModifier]"
    ]


def test_clean_file_exits_zero(tmp_path, capsys):
    path = tmp_path / "Clean.java"
    path.write_text("public class Clean {\n    static interface Address {}\n}\n")

    assert main([str(path), "--log-level", "ERROR"]) == EXIT_OK
    assert capsys.readouterr().out == ""


def test_json_output(person_file, capsys):
    main([str(person_file), "--format", "json", "--log-level", "ERROR"])

    payload = json.loads(capsys.readouterr().out)
    assert payload[0]["line"] == 2
    assert payload[0]["args"] == ["static"]
    assert payload[0]["message"] == "Implied modifier 'static' should be explicit."


def test_config_file_disables_interface_check(person_file, tmp_path, capsys):
    config_file = tmp_path / "modcheck.yaml"
    config_file.write_text(
        "checks:\n"
        "  ClassMemberImpliedModifier:\n"
        "    options:\n"
        "      enforceStaticOnNestedInterface: false\n"
    )

    exit_code = main([str(person_file), "--config", str(config_file), "--log-level", "ERROR"])

    assert exit_code == EXIT_OK
    assert capsys.readouterr().out == ""


def test_invalid_config_exits_two(person_file, tmp_path, capsys):
    config_file = tmp_path / "modcheck.yaml"
    config_file.write_text("checks:\n  UnknownCheck: {}\n")

    exit_code = main([str(person_file), "--config", str(config_file), "--log-level", "CRITICAL"])

    assert exit_code == EXIT_CONFIG_ERROR
    assert "UnknownCheck" in capsys.readouterr().err


def test_unparseable_file_is_reported_on_stderr(tmp_path, capsys):
    path = tmp_path / "Broken.java"
    path.write_text("class Broken {\n")

    exit_code = main([str(path), "--log-level", "CRITICAL"])

    err = capsys.readouterr().err
    assert exit_code == EXIT_VIOLATIONS
    assert "Broken.java: error: Syntax error" in err


def test_invalid_environment_setting_exits_two(person_file, monkeypatch, capsys):
    monkeypatch.setenv("MODCHECK_MAX_WORKERS", "0")

    exit_code = main([str(person_file)])

    assert exit_code == EXIT_CONFIG_ERROR
    err = capsys.readouterr().err
    assert "modcheck: configuration error: Invalid settings" in err
    assert "max_workers" in err
