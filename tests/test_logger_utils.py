# tests/test_logger_utils.py

import io

import pytest

from keyboard_autocompleter.utils.logger_utils import Log


def test_writes_to_file_and_creates_folder(tmp_path):
    path = tmp_path / "logs" / "run.log"
    log = Log(path=str(path), level="DEBUG")
    log.info("hello")
    log.debug("detail")
    lines = path.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 2
    assert "INFO" in lines[0] and lines[0].endswith("| hello")
    assert "DEBUG" in lines[1]


def test_level_threshold(tmp_path):
    path = tmp_path / "run.log"
    log = Log(path=str(path), level="WARNING")
    log.info("dropped")
    log.warning("kept")
    log.error("kept too")
    text = path.read_text(encoding="utf-8")
    assert "dropped" not in text
    assert "kept" in text and "kept too" in text


def test_console_plain_and_colored():
    buf = io.StringIO()
    Log(console=True, use_color=False, stream=buf).info("plain")
    assert "\033[" not in buf.getvalue()
    assert "plain" in buf.getvalue()

    buf = io.StringIO()
    Log(console=True, use_color=True, stream=buf).error("loud")
    assert buf.getvalue().startswith(Log.COLORS["ERROR"])


def test_no_output_without_sinks(tmp_path, capsys):
    Log().info("nowhere")
    assert capsys.readouterr().out == ""


def test_unknown_level():
    with pytest.raises(ValueError):
        Log(level="TRACE")


def test_metric_and_time_block():
    buf = io.StringIO()
    log = Log(console=True, use_color=False, stream=buf)
    log.metric("lookup", 0.5, "s")
    with log.time_block("train") as t:
        pass
    out = buf.getvalue()
    assert "lookup: 0.5s" in out
    assert "train done:" in out
    assert t.elapsed >= 0.0


def test_time_block_propagates_errors():
    buf = io.StringIO()
    log = Log(console=True, use_color=False, stream=buf)
    with pytest.raises(RuntimeError):
        with log.time_block("boom"):
            raise RuntimeError("x")
    assert "boom done:" in buf.getvalue()


def test_quiet_is_warning_level():
    log = Log.quiet()
    assert log.level == "WARNING"
    assert not log.enabled_for("INFO")
    assert log.enabled_for("ERROR")


def test_no_log_file_unless_a_path_is_given(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    log = Log(level="DEBUG")
    log.error("kept in memory only")
    with log.time_block("quiet"):
        pass
    assert list(tmp_path.iterdir()) == []
