import sys

import pytest

from sublisp import config
from sublisp.errors import RecursionDepthExceeded, SymbolTooLong, UndefinedVariable
from sublisp.interpreter import Interpreter


def test_read_returns_remainder(interp):
    expr, rest = interp.read("(a b) rest")
    assert interp.to_string(expr) == "(a b)"
    assert rest == " rest"


def test_eval_returns_last_result(run):
    assert run("(define x 2) (define y 3) (* x y)") == "6"


def test_eval_of_empty_source_is_nil(interp):
    assert interp.eval("   ") is None


def test_definitions_persist_across_calls(run):
    run("(define greeting \"hello\")")
    assert run("greeting") == '"hello"'


def test_interpreters_share_nothing():
    first = Interpreter(debug=False)
    second = Interpreter(debug=False)
    first.eval("(define only_here 1)")
    with pytest.raises(UndefinedVariable):
        second.eval("only_here")
    assert first.true is not second.true


def test_run_file(tmp_path, interp):
    script = tmp_path / "prog.lisp"
    script.write_text(
        "(define fact (lambda (n) (if (< n 2) 1 (* n (fact (- n 1))))))\n"
        "(list 1 2)\n"
        "(fact 5)\n"
    )
    result = interp.run_file(script)
    assert interp.to_string(result) == "120"
    assert interp.to_string(interp.eval("(fact 4)")) == "24"


def test_run_file_keeps_result_alive(tmp_path, interp):
    script = tmp_path / "list.lisp"
    script.write_text("(list 1 2 3)\n")
    result = interp.run_file(script)
    assert result in interp.store
    assert interp.to_string(result) == "(1 2 3)"


def test_deeply_nested_input_is_reported(interp):
    with pytest.raises(RecursionDepthExceeded):
        interp.read("(" * 30000 + ")" * 30000)


def test_unbounded_recursion(interp):
    interp.eval("(define loop (lambda (n) (loop n)))")
    with pytest.raises(RecursionDepthExceeded):
        interp.eval("(loop 0)")


def test_symbol_maxlen_from_environment(monkeypatch):
    monkeypatch.setenv("SUBLISP_SYMBOL_MAXLEN", "6")
    interp = Interpreter(prelude=False, debug=False)
    interp.eval("(quote abcdef)")
    with pytest.raises(SymbolTooLong):
        interp.eval("(quote abcdefg)")


def test_debug_default_from_environment(monkeypatch):
    monkeypatch.setenv("SUBLISP_DEBUG", "1")
    interp = Interpreter()
    assert interp.debug is True
    interp.set_debug(False)


def test_create_builtin(interp, run):
    interp.create_builtin("first", lambda i, args: args.head)
    assert run("(first 7 8)") == "7"
    assert run("first") == "[builtin first]"


DEEP = "(quote " + "(" * 30000 + ")" * 30000 + ")"


def test_eval_of_deeply_nested_source_is_reported(interp):
    with pytest.raises(RecursionDepthExceeded):
        interp.eval(DEEP)
    assert interp.to_string(interp.eval("(+ 1 2)")) == "3"


def test_run_file_of_deeply_nested_source_is_reported(tmp_path, interp):
    script = tmp_path / "deep.lisp"
    script.write_text("(define x 1)\n" + DEEP + "\n")
    with pytest.raises(RecursionDepthExceeded):
        interp.run_file(script)


def test_recursion_limit_is_raised_at_startup(interp):
    assert sys.getrecursionlimit() >= config.get_recursion_limit()


def _numbers(n):
    return "(list " + " ".join(str(i) for i in range(n)) + ")"


@pytest.mark.parametrize(
    "source,expected",
    [
        (f"(length {_numbers(500)})", "500"),
        (f"(length (map abs {_numbers(300)}))", "300"),
        (f"(member 299 {_numbers(300)})", "true"),
    ]
)
def test_library_functions_on_long_lists(run, source, expected):
    assert run(source) == expected


def test_equal_on_long_lists(run):
    run(f"(define big {_numbers(300)})")
    assert run("(equal big big)") == "true"
    assert run(f"(equal big {_numbers(300)})") == "true"
    assert run(f"(equal big {_numbers(299)})") == "false"
