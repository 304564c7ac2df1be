"""CLI and REPL tests for commander."""

from __future__ import annotations

import io
import json
from datetime import timedelta

from commander import cli
from commander.context import ConsoleContext
from commander.output import ResultPrinter, format_result
from commander.repl import ConsoleREPL
from commander.result import CommandResult, ErrorKind


def _base_args(tmp_path):
    return ["--history", str(tmp_path / "history.txt")]


def test_single_command_success(tmp_path, capsys):
    rc = cli.main(_base_args(tmp_path) + ["-c", "echo hi"])
    assert rc == 0
    assert "Echo: hi" in capsys.readouterr().out


def test_single_command_unknown_returns_error(tmp_path, capsys):
    rc = cli.main(_base_args(tmp_path) + ["-c", "hlp"])
    assert rc == 1
    out = capsys.readouterr().out
    assert "error: unknown command 'hlp'. Did you mean: help?" in out


def test_multiple_commands_share_scene(tmp_path, capsys):
    scene = tmp_path / "scene.json"
    scene.write_text(json.dumps([{"name": "Cube", "position": [0, 0, 0]}]), encoding="utf-8")
    rc = cli.main(_base_args(tmp_path) + ["--scene", str(scene), "-c", "move Cube 1 2 3", "-c", "list"])
    assert rc == 0
    assert "Cube [object] at (1, 2, 3)" in capsys.readouterr().out


def test_missing_scene_file_exits_with_2(tmp_path, capsys):
    rc = cli.main(_base_args(tmp_path) + ["--scene", str(tmp_path / "missing.json"), "-c", "list"])
    assert rc == 2
    assert "cannot load scene" in capsys.readouterr().err


def test_strict_flag_reports_conversion_errors(tmp_path, capsys):
    rc = cli.main(_base_args(tmp_path) + ["--strict", "-c", "time fast"])
    assert rc == 1
    assert "invalid argument for 'time'" in capsys.readouterr().out


def test_json_mode_prints_result_document(tmp_path, capsys):
    rc = cli.main(_base_args(tmp_path) + ["--json", "-c", "nothing"])
    assert rc == 1
    payload = json.loads(capsys.readouterr().out)
    assert payload["status"] == "error"
    assert payload["kind"] == "unknown_command"


def test_format_result_includes_cause():
    result = CommandResult.error("error in command 'x': boom", exception=RuntimeError("boom"))
    assert format_result(result) == "error: error in command 'x': boom"
    result = CommandResult.error("command 'x' failed", exception=RuntimeError("disk"))
    assert format_result(result) == "error: command 'x' failed (disk)"


def test_result_printer_hides_success_by_default(capsys):
    printer = ResultPrinter(ConsoleContext())
    printer.on_command_executed(CommandResult.success("done", execution_time=timedelta(milliseconds=2)))
    assert capsys.readouterr().out == ""
    printer.on_command_executed(CommandResult.warning("careful"))
    assert capsys.readouterr().out.strip() == "warning: careful"


def test_result_to_dict():
    result = CommandResult.error("unknown command 'sp'", kind=ErrorKind.UNKNOWN_COMMAND, command="sp", suggestions=("spawn",))
    payload = result.to_dict()
    assert payload["kind"] == "unknown_command"
    assert payload["suggestions"] == ["spawn"]
    assert payload["execution_ms"] == 0.0


def test_repl_fallback_loop_handles_continuation_and_quit(tmp_path, monkeypatch, capsys):
    ctx = ConsoleContext(history_path=tmp_path / "history.txt")
    executor = cli.build_executor(ctx)
    monkeypatch.setattr("sys.stdin", io.StringIO('echo "hello \\\nworld"\nquit\necho never\n'))
    repl = ConsoleREPL(ctx, executor)
    assert repl.run() == 0
    out = capsys.readouterr().out
    assert "Echo: hello  world" in out
    assert "never" not in out
    assert ctx.history.snapshot() == ['echo "hello  world"', "quit"]


def test_repl_stops_on_eof(tmp_path, monkeypatch):
    ctx = ConsoleContext(history_path=tmp_path / "history.txt")
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert ConsoleREPL(ctx, cli.build_executor(ctx)).run() == 0
