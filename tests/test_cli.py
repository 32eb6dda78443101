# tests/test_cli.py
# console menu driven through a scripted input function

import io

import pytest
from rich.console import Console

from keyboard_autocompleter import cli as cli_mod
from keyboard_autocompleter.cli import CLI, build_parser, main, make_log
from keyboard_autocompleter.core.autocompleter import AutoCompleter
from keyboard_autocompleter.utils.config_manager import Config
from keyboard_autocompleter.utils.logger_utils import Log


def scripted(*answers):
    """input_fn that replays answers, then behaves like Ctrl-D."""
    it = iter(answers)

    def _ask(_prompt=""):
        try:
            return next(it)
        except StopIteration:
            raise EOFError
    return _ask


def make_cli(*answers, cfg=None, **kw):
    console = Console(file=io.StringIO(), width=120, color_system=None)
    c = CLI(completer=AutoCompleter(), cfg=cfg or Config(), console=console,
            input_fn=scripted(*answers), **kw)
    return c


def output(c):
    return c.console.file.getvalue()


# -----------------------------------
# menu flow
# -----------------------------------
def test_train_then_suggest():
    c = make_cli("1", "The cat sat on the mat", "1", "the cat", "2", "CA", "0")
    c.run()
    out = output(c)
    assert "Suggestions:" in out
    assert "cat(2)" in out
    assert not c.running


def test_unknown_option():
    c = make_cli("9", "0")
    c.run()
    assert "Please enter an available option" in output(c)


def test_eof_exits_cleanly():
    c = make_cli("1", "hello")
    c.run()
    assert "bye." in output(c)
    assert not c.running


def test_no_suggestions_prints_empty_line():
    c = make_cli("2", "zzz", "0")
    c.run()
    out = output(c)
    assert "Suggestions:" in out
    assert "(" not in out.split("Suggestions:")[1]


def test_lowercase_can_be_disabled():
    cfg = Config()
    cfg.set("lowercase", False)
    c = make_cli(cfg=cfg)
    c.train_passage("Hello")
    assert [x.word for x in c.suggest("H")] == ["Hello"]
    assert c.suggest("h") == []


def test_max_suggestions_limits_output():
    cfg = Config()
    cfg.set("max_suggestions", 1)
    c = make_cli(cfg=cfg)
    c.train_passage("car car cat")
    shown = c.suggest("ca")
    assert [x.word for x in shown] == ["car"]
    assert "cat(" not in output(c)


def test_hide_confidence():
    cfg = Config()
    cfg.set("show_confidence", False)
    c = make_cli(cfg=cfg)
    c.train_passage("cat")
    c.suggest("c")
    assert "cat(" not in output(c)
    assert "cat" in output(c)


def test_table_output():
    c = make_cli(as_table=True)
    c.train_passage("cat cat cab")
    c.suggest("ca")
    out = output(c)
    assert "Confidence" in out
    assert "cat" in out and "cab" in out


def test_words_with_brackets_are_not_markup():
    c = make_cli()
    c.train_passage("[bold]x")
    c.suggest("[")
    assert "[bold]x(1)" in output(c)


# -----------------------------------
# file training
# -----------------------------------
def test_train_file(tmp_path):
    f = tmp_path / "corpus.txt"
    f.write_text("Apple apricot\n\napple pie\n", encoding="utf8")
    c = make_cli("3", str(f), "2", "ap", "0")
    c.run()
    out = output(c)
    assert "trained on 2 lines" in out
    assert "apple(2)" in out
    assert c.metrics.count("train_file_time") == 1


def test_train_file_missing(tmp_path):
    c = make_cli()
    assert c.train_file(str(tmp_path / "missing.txt")) == 0
    assert "Could not read" in output(c)


# -----------------------------------
# stats + settings
# -----------------------------------
def test_stats_table():
    c = make_cli("1", "a b", "4", "0")
    c.run()
    out = output(c)
    assert "Statistics" in out
    assert "words" in out
    assert "train_time (calls)" in out


def test_settings_change_and_list():
    c = make_cli("5", "max_suggestions 3", "0")
    c.run()
    assert c.cfg.get("max_suggestions") == 3
    assert "max_suggestions" in output(c)


def test_settings_bad_key():
    c = make_cli()
    c.settings("colour red")
    assert "no such option" in output(c)


# -----------------------------------
# entry point
# -----------------------------------
def test_parser_defaults():
    args = build_parser().parse_args([])
    assert args.train == [] and not args.tui and not args.table


def test_make_log_levels():
    cfg = Config()
    assert make_log(cfg).level == "WARNING"
    assert make_log(cfg, verbose=True).level == "DEBUG"


def test_main_runs_menu(tmp_path, monkeypatch, capsys):
    corpus = tmp_path / "c.txt"
    corpus.write_text("cat cat car\n", encoding="utf8")
    answers = iter(["2", "ca", "0"])
    monkeypatch.setattr("builtins.input", lambda *a: next(answers))

    assert main(["--train", str(corpus)]) == 0
    out = capsys.readouterr().out
    assert "trained on 1 lines" in out
    assert "cat(2)" in out


def test_main_tui_flag(monkeypatch):
    ran = {}

    class FakeTUI:
        def __init__(self, completer, cfg, log):
            ran["completer"] = completer

        def run(self):
            ran["run"] = True

    import keyboard_autocompleter.tui_app as tui_app
    monkeypatch.setattr(tui_app, "TUIAutocompleter", FakeTUI)
    assert main(["--tui"]) == 0
    assert ran["run"] is True
    assert isinstance(ran["completer"], AutoCompleter)


def test_module_exports_main():
    assert callable(cli_mod.main)


def test_train_file_bad_encoding_keeps_menu_alive(tmp_path):
    f = tmp_path / "latin1.txt"
    f.write_bytes("caf\xe9 cat\n".encode("latin-1"))
    c = make_cli("3", str(f), "1", "dog", "2", "d", "0")
    c.run()
    out = output(c)
    assert "Could not read" in out
    assert "dog(1)" in out
    assert c.completer.get_words("ca") == []


def test_main_survives_undecodable_train_file(tmp_path, monkeypatch, capsys):
    f = tmp_path / "bad.txt"
    f.write_bytes(b"\xff\xfe\xfa")
    monkeypatch.setattr("builtins.input", lambda *a: "0")
    assert main(["--train", str(f)]) == 0
    assert "Could not read" in capsys.readouterr().out


def test_settings_update_running_log(tmp_path):
    log = Log(level="WARNING")
    c = make_cli(log=log)
    c.settings("log_level debug")
    assert log.level == "DEBUG"

    path = tmp_path / "session.log"
    c.settings(f"log_file {path}")
    assert log.path == str(path)
    log.info("written")
    assert "written" in path.read_text(encoding="utf-8")

    c.settings("log_file ")
    assert log.path is None
