import logging

import pytest

from relurl import cli


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    for handler in list(cli.main_logger.handlers):
        cli.main_logger.removeHandler(handler)
        handler.close()
    cli.main_logger.setLevel(logging.NOTSET)


def test_prints_relative_path(capsys):
    assert cli.main(["http://example.com/a/b", "http://example.com/a"]) == 0
    assert capsys.readouterr().out == "b\n"


def test_domain_mismatch_exit_code(capsys):
    assert cli.main(["http://a.com/x", "http://b.com/y"]) == 1
    err = capsys.readouterr().err
    assert 'Error: Domain "http://a.com" doesn\'t equal to base "http://b.com".' in err


def test_path_error_exit_code(capsys):
    assert cli.main(["http://a.com/x", "http://a.com"]) == 1
    assert "Error: The absolute path" in capsys.readouterr().err


def test_prompts_for_missing_arguments(monkeypatch, capsys):
    answers = iter(["http://a.com/x/y", "http://a.com/x"])
    monkeypatch.setattr("builtins.input", lambda prompt: next(answers))
    assert cli.main([]) == 0
    assert capsys.readouterr().out == "y\n"


def test_prompts_only_for_base(monkeypatch, capsys):
    monkeypatch.setattr("builtins.input", lambda prompt: "/x")
    assert cli.main(["/x/y"]) == 0
    assert capsys.readouterr().out == "y\n"


def test_debug_writes_log_file(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert cli.main(["--debug", "http://a.com/a/b", "http://a.com/a"]) == 0
    assert capsys.readouterr().out == "b\n"

    logfile = tmp_path / cli.LOG_FILE
    assert logfile.exists()
    for handler in cli.main_logger.handlers:
        handler.flush()
    assert "relurl.urls - DEBUG" in logfile.read_text()


def test_configure_logging_replaces_handlers():
    cli.configureLogging()
    cli.configureLogging()
    assert len(cli.main_logger.handlers) == 1
    assert cli.main_logger.level == logging.WARNING


def test_closed_stdin_exit_code(monkeypatch, capsys):
    def closed(prompt):
        raise EOFError

    monkeypatch.setattr("builtins.input", closed)
    assert cli.main(["http://a.com/x"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Error: url and base url are required" in captured.err


def test_equal_urls_print_empty_line(capsys):
    assert cli.main(["http://a.com/x", "http://a.com/x"]) == 0
    assert capsys.readouterr().out == "\n"
