from fwjs.cli import execute, main, repl
from fwjs.environment import Environment
from fwjs.values import IntVal


def feed(monkeypatch, lines):
    lines = iter(lines)

    def fakeInput(prompt):
        try:
            return next(lines)
        except StopIteration:
            raise EOFError

    monkeypatch.setattr("builtins.input", fakeInput)


def test_execute_file(tmp_path, capsys):
    path = tmp_path / "prog.js"
    path.write_text("var x = 20; print(x * 2 + 2);")
    env = Environment()
    assert execute(str(path), env) == IntVal(42)
    assert env.getVar("x") == IntVal(20)
    assert capsys.readouterr().out == "42\n"


def test_main_runs_file(tmp_path, capsys):
    path = tmp_path / "prog.js"
    path.write_text("print(1);")
    assert main([str(path)]) == 0
    assert capsys.readouterr().out == "1\n"


def test_main_reports_errors(tmp_path, capsys):
    path = tmp_path / "prog.js"
    path.write_text("print(1); 1 / 0; print(2);")
    assert main([str(path)]) == 1
    captured = capsys.readouterr()
    assert captured.out == "1\n"
    assert "Division by zero" in captured.err


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing.js")]) == 1
    assert "Cannot read" in capsys.readouterr().err


def test_repl_keeps_globals(monkeypatch, capsys):
    feed(monkeypatch, ["var x = 41", "", "x + 1", "var x = 0", "quit()", "x"])
    env = repl()
    assert env.getVar("x") == IntVal(41)
    assert capsys.readouterr().out == "41\n42\nVariable already defined: x\n"


def test_repl_stops_at_eof(monkeypatch, capsys):
    feed(monkeypatch, ["print(3)", "1 +"])
    repl()
    out = capsys.readouterr().out
    assert out.startswith("3\n3\nSyntax error")


def test_main_without_path_starts_repl(monkeypatch, capsys):
    feed(monkeypatch, ["2 * 21"])
    assert main([]) == 0
    assert capsys.readouterr().out == "42\n"


def test_main_runs_long_file(tmp_path, capsys):
    path = tmp_path / "prog.js"
    path.write_text("print(1);\n" * 1500)
    assert main([str(path)]) == 0
    assert capsys.readouterr().out == "1\n" * 1500


def test_main_rejects_undecodable_file(tmp_path, capsys):
    path = tmp_path / "prog.js"
    path.write_bytes(b"\xff\xfeprint(1);")
    assert main([str(path)]) == 1
    assert "Cannot decode" in capsys.readouterr().err


def test_repl_survives_runaway_recursion(monkeypatch, capsys):
    feed(monkeypatch, ["function f(n) { f(n + 1) }", "f(0)", "1 + 1"])
    repl()
    lines = capsys.readouterr().out.splitlines()
    assert lines[1].startswith("Maximum call depth exceeded")
    assert lines[2] == "2"
