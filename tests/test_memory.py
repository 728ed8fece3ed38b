import pytest

from sublisp.errors import InternalInvariantViolation
from sublisp.memory import ValueStore
from sublisp.types.pair import from_iterable
from sublisp.types.symbol import SymbolTable


@pytest.fixture
def store():
    return ValueStore()


def test_alloc_registers_with_zero_refs(store):
    n = store.make_number(1)
    assert n.refs == 0
    assert n in store
    assert len(store) == 1


def test_pair_retains_children(store):
    a = store.make_number(1)
    b = store.make_number(2)
    p = store.make_pair(a, b)
    assert (a.refs, b.refs, p.refs) == (1, 1, 0)
    # nil children are not counted
    store.make_pair(None, None)


def test_collect_cascades_through_lists(store):
    lst = from_iterable(store, [store.make_number(i) for i in range(3)])
    assert len(store) == 6
    assert store.collect() == 6
    assert len(store) == 0
    assert lst.freed
    assert lst not in store


def test_retained_root_keeps_children_alive(store):
    lst = from_iterable(store, [store.make_number(i) for i in range(3)])
    store.retain(lst)
    garbage = store.make_string("x")
    assert store.collect() == 1
    assert garbage.freed
    assert garbage.text is None
    assert len(store) == 6

    store.release(lst)
    assert store.collect() == 6


def test_collect_is_idempotent(store):
    keep = store.make_pair(store.make_number(1), None)
    store.retain(keep)
    from_iterable(store, [store.make_number(i) for i in range(5)])
    store.collect()
    assert store.collect() == 0
    assert store.collect() == 0
    assert keep in store


def test_zero_ref_values_are_gone_after_collect(store):
    keep = from_iterable(store, [store.make_number(i) for i in range(4)])
    store.retain(keep)
    store.make_pair(store.make_string("a"), store.make_number(9))
    zero = [v for v in store if v.refs == 0]
    assert zero
    store.collect()
    assert all(v not in store for v in zero)
    assert all(v.refs > 0 for v in store)


def test_shared_child_survives_one_parent(store):
    shared = store.make_number(1)
    left = store.make_pair(shared, None)
    right = store.make_pair(shared, None)
    store.retain(right)
    store.collect()
    assert left.freed
    assert shared in store
    assert shared.refs == 1


def test_release_below_zero_is_an_invariant_violation(store):
    n = store.make_number(1)
    with pytest.raises(InternalInvariantViolation):
        store.release(n)


def test_retain_and_release_accept_nil(store):
    store.retain(None)
    store.release(None)


def test_lambda_body_is_not_released_when_lambda_is_freed(store):
    params = store.make_pair(store.make_number(0), None)
    body = store.make_pair(store.make_number(1), None)
    fn = store.make_lambda(params, body)
    assert body.refs == 1
    store.collect()
    assert fn.freed
    # known leak: params and body stay registered
    assert body in store
    assert params in store
    assert body.refs == 1


def test_interned_symbols_are_never_collected(store):
    symbols = SymbolTable(store, 30)
    sym = symbols.intern("forever")
    store.collect()
    assert sym in store
    assert symbols.intern("forever") is sym


def test_stats(store):
    store.make_number(1)
    keep = store.make_number(2)
    store.retain(keep)
    store.collect()
    stats = store.stats()
    assert (stats.live, stats.allocated, stats.freed) == (1, 2, 1)


# -------------------------------
# Interaction with the interpreter
# -------------------------------
def test_discarded_results_are_collected(interp):
    result = interp.eval("(list 1 2 3)")
    assert result in interp.store
    interp.collect()
    assert result not in interp.store


def test_defined_values_survive_collection(interp, run):
    interp.eval("(define xs (list 1 2 3))")
    interp.collect()
    xs = interp.eval("xs")
    assert xs in interp.store
    assert xs.refs == 1
    assert run("(length xs)") == "3"


def test_redefinition_releases_old_value(interp):
    interp.eval("(define xs (list 1 2))")
    old = interp.eval("xs")
    interp.collect()
    interp.eval("(define xs 5)")
    interp.collect()
    assert old.freed
    assert old not in interp.store


def test_defined_lambda_body_survives_collection(interp, run):
    interp.eval("(define sq (lambda (x) (* x x)))")
    interp.collect()
    fn = interp.eval("sq")
    assert fn.body in interp.store
    assert run("(sq 5)") == "25"


def test_collect_after_evaluation_leaves_no_garbage(interp):
    interp.eval("(map (lambda (x) (* x x)) (list 1 2 3 4))")
    zero = [v for v in interp.store if v.refs == 0]
    interp.collect()
    assert all(v not in interp.store for v in zero)
    assert interp.collect() == 0
