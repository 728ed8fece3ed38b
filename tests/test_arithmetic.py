import pytest

from sublisp.errors import ArityMismatch, TypeMismatch


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(+ 1 1)", "2"),
        ("(+ 1 2 3)", "6"),
        ("(* 1 2 3)", "6"),
        ("(- 10 3 2)", "5"),
        ("(- 10 1 1 1)", "7"),
        ("(- 5)", "-5"),
        ("(/ 12 3 2)", "2"),
        ("(/ 2)", "0.5"),
        ("(/ 1 3)", "0.3333333333333333"),
        ("(^ 2 10)", "1024"),
        ("(^ 2 3 2)", "64"),
        ("(^ 9)", "9"),
        ("(^ 2 0.5)", "1.4142135623730951"),
        ("(+ 1.5 2.25)", "3.75"),
        ("(+ -1 5 -3)", "1"),
        ("(+)", "0"),
        ("(*)", "1"),
        ("(+ 1 (* 2 (+ 3 4) (- 10 6)))", "57"),
        ("(/ 1 0)", "inf"),
        ("(/ -1 0)", "-inf"),
        ("(/ 0 0)", "nan"),
    ]
)
def test_arithmetic(run, source, expected):
    assert run(source) == expected


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(< 3 4)", "true"),
        ("(< 4 3)", "false"),
        ("(< 3 3)", "false"),
        ("(= 2 2)", "true"),
        ("(= 2 (+ 1 1))", "true"),
        ("(= 2 3)", "false"),
    ]
)
def test_comparison(run, source, expected):
    assert run(source) == expected


@pytest.mark.parametrize(
    "source,error",
    [
        ('(+ 1 "a")', TypeMismatch),
        ("(* 2 (quote x))", TypeMismatch),
        ("(- (list 1))", TypeMismatch),
        ("(-)", ArityMismatch),
        ("(/)", ArityMismatch),
        ("(^)", ArityMismatch),
        ("(< 1)", ArityMismatch),
        ("(= 1 2 3)", ArityMismatch),
        ('(< 1 "a")', TypeMismatch),
        ("(= () 1)", TypeMismatch),
    ]
)
def test_arithmetic_errors(interp, source, error):
    with pytest.raises(error):
        interp.eval(source)
