import pytest

from sublisp.errors import ArityMismatch, InvalidTruthValue, TypeMismatch, UndefinedVariable


# -------------------------------
# quote
# -------------------------------
@pytest.mark.parametrize(
    "source,expected",
    [
        ("(quote (a b))", "(a b)"),
        ("(quote x)", "x"),
        ("'(1 (2 3))", "(1 (2 3))"),
        ("(quote (+ 1 2))", "(+ 1 2)"),
        ("(quote ())", "()"),
    ]
)
def test_quote(run, source, expected):
    assert run(source) == expected


def test_quote_returns_argument_verbatim(interp):
    form, _ = interp.read("(quote (a b))")
    assert interp.evaluate(form) is form.tail.head


@pytest.mark.parametrize("source", ["(quote)", "(quote a b)"])
def test_quote_arity(interp, source):
    with pytest.raises(ArityMismatch):
        interp.eval(source)


# -------------------------------
# define
# -------------------------------
def test_define_returns_nil_and_binds(run):
    assert run("(define x (+ 40 2))") == "()"
    assert run("x") == "42"
    run("(define x (quote redefined))")
    assert run("x") == "redefined"


def test_define_non_symbol(interp):
    with pytest.raises(TypeMismatch):
        interp.eval("(define 1 2)")
    with pytest.raises(TypeMismatch):
        interp.eval("(define (x) 2)")


@pytest.mark.parametrize("source", ["(define)", "(define x)", "(define x 1 2)"])
def test_define_arity(interp, source):
    with pytest.raises(ArityMismatch):
        interp.eval(source)


def test_define_can_rebind_builtins(run):
    run("(define car cdr)")
    assert run("(car (list 1 2))") == "(2)"


# -------------------------------
# lambda
# -------------------------------
def test_lambda_does_not_evaluate(run):
    assert run("(lambda (x) undefined_thing)") == "(lambda (x) undefined_thing)"


@pytest.mark.parametrize("source", ["(lambda)", "(lambda (x))", "(lambda (x) x x)"])
def test_lambda_arity(interp, source):
    with pytest.raises(ArityMismatch):
        interp.eval(source)


def test_lambda_is_self_evaluating(interp):
    fn = interp.eval("(lambda (x) x)")
    assert interp.evaluate(fn) is fn


# -------------------------------
# if
# -------------------------------
@pytest.mark.parametrize(
    "source,expected",
    [
        ("(if true 1 2)", "1"),
        ("(if false 1 2)", "2"),
        ("(if (< 1 2) (quote yes) (quote no))", "yes"),
        ("(if true 1 undefined_thing)", "1"),
        ("(if false undefined_thing 2)", "2"),
    ]
)
def test_if(run, source, expected):
    assert run(source) == expected


@pytest.mark.parametrize("source", ["(if 1 2 3)", "(if () 1 2)", "(if (quote (true)) 1 2)"])
def test_if_requires_truth_symbol(interp, source):
    with pytest.raises(InvalidTruthValue):
        interp.eval(source)


def test_quoted_truth_symbol_is_the_truth_symbol(run):
    assert run("(if (quote true) 1 2)") == "1"
    assert run("(eq (quote false) false)") == "true"


@pytest.mark.parametrize("source", ["(if true 1)", "(if true 1 2 3)"])
def test_if_arity(interp, source):
    with pytest.raises(ArityMismatch):
        interp.eval(source)


# -------------------------------
# and / or
# -------------------------------
@pytest.mark.parametrize(
    "source,expected",
    [
        ("(and)", "true"),
        ("(and true true)", "true"),
        ("(and true false)", "false"),
        ("(and false undefined_thing)", "false"),
        ("(or)", "false"),
        ("(or false false)", "false"),
        ("(or false true)", "true"),
        ("(or true undefined_thing)", "true"),
        # results other than the truth symbols pass through silently
        ("(and 1 2)", "true"),
        ("(or 1 2)", "false"),
        ("(and 1 false)", "false"),
    ]
)
def test_and_or(run, source, expected):
    assert run(source) == expected


def test_and_evaluates_operands_in_order(interp):
    with pytest.raises(UndefinedVariable):
        interp.eval("(and true undefined_thing false)")
