import io

from pymal import repl
from pymal.interpreter import Interpreter


def run_lines(*lines, prompt="user> "):
    stdin = io.StringIO("".join(line + "\n" for line in lines))
    stdout = io.StringIO()
    repl.run(Interpreter(), stdin=stdin, stdout=stdout, prompt=prompt)
    return stdout.getvalue()


def test_prints_results_after_prompt():
    out = run_lines("(+ 1 2)", '"hi"')
    assert out == 'user> 3\nuser> "hi"\nuser> \n'


def test_empty_and_comment_lines_print_nothing():
    out = run_lines("", "; note", "1")
    assert out == "user> user> user> 1\nuser> \n"


def test_errors_do_not_end_the_loop():
    out = run_lines('(+ 1 "a")', "(def! g 5)", "g", "(undefined)", "(", "g")
    assert out.splitlines() == [
        "user> error: + expected a number but got string",
        "user> 5",
        "user> 5",
        "user> error: symbol not found: 'undefined'",
        "user> error: unexpected end of input, expected ')'",
        "user> 5",
        "user> ",
    ]


def test_definitions_persist_across_lines():
    out = run_lines("(def! sq (fn* (x) (* x x)))", "(sq 12)")
    assert out.splitlines()[1] == "user> 144"


def test_deep_recursion_is_reported_as_error():
    out = run_lines("(def! f (fn* (n) (f (+ n 1))))", "(f 0)", "(+ 1 1)")
    lines = out.splitlines()
    assert lines[1].startswith("user> error: maximum recursion depth exceeded")
    assert lines[2] == "user> 2"


def test_prompt_from_configuration(monkeypatch):
    monkeypatch.setenv("PYMAL_PROMPT", "> ")
    stdout = io.StringIO()
    repl.run(Interpreter(), stdin=io.StringIO("1\n"), stdout=stdout)
    assert stdout.getvalue() == "> 1\n> \n"


def test_main_runs_until_eof(monkeypatch, capsys):
    monkeypatch.setenv("PYMAL_PROMPT", "user> ")
    monkeypatch.setattr("sys.stdin", io.StringIO("(+ 40 2)\n"))
    assert repl.main() == 0
    assert capsys.readouterr().out == "user> 42\nuser> \n"
