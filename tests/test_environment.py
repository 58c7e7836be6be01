import pytest

from lisk.errors import LiskInvalidSymbol, LiskUnboundSymbol
from lisk.types.environment import Environment
from lisk.types.symbol import Symbol


@pytest.fixture
def chain():
    root = Environment()
    root.define(Symbol("a"), 1)
    root.define(Symbol("b"), 2)
    child = Environment(outer=root)
    child.define(Symbol("b"), 20)
    return root, child


def test_lookup_walks_outward(chain):
    root, child = chain
    assert child.lookup(Symbol("a")) == 1
    assert child.lookup(Symbol("b")) == 20
    assert root.lookup(Symbol("b")) == 2
    with pytest.raises(LiskUnboundSymbol):
        child.lookup(Symbol("c"))


def test_find_returns_the_owning_scope(chain):
    root, child = chain
    assert child.find(Symbol("a")) is root
    assert child.find(Symbol("b")) is child
    assert child.find(Symbol("c")) is None


def test_define_shadows_without_touching_outer(chain):
    root, child = chain
    child.define(Symbol("a"), 100)
    assert child.lookup(Symbol("a")) == 100
    assert root.lookup(Symbol("a")) == 1


def test_set_updates_owning_scope_only(chain):
    root, child = chain
    child.set(Symbol("a"), 10)
    assert root.vars[Symbol("a")] == 10
    assert Symbol("a") not in child.vars
    child.set(Symbol("b"), 30)
    assert child.lookup(Symbol("b")) == 30
    assert root.lookup(Symbol("b")) == 2


def test_set_unbound_raises(chain):
    _, child = chain
    with pytest.raises(LiskUnboundSymbol):
        child.set(Symbol("c"), 1)
    assert child.find(Symbol("c")) is None


def test_siblings_share_one_parent(chain):
    root, child = chain
    sibling = Environment(outer=root)
    child.set(Symbol("a"), 5)
    assert sibling.lookup(Symbol("a")) == 5


def test_names_must_be_symbols():
    env = Environment()
    with pytest.raises(LiskInvalidSymbol):
        env.define("a", 1)
    with pytest.raises(LiskInvalidSymbol):
        env.update({"a": 1})


def test_update_and_str(chain):
    root, child = chain
    child.update({Symbol("c"): 3})
    assert child.lookup(Symbol("c")) == 3
    assert str(root) == "{a: 1, b: 2}"
    assert str(child) == "{b: 20, c: 3} -> ..."
    assert repr(child) == "<Environment chain: {b: 20, c: 3} -> {a: 1, b: 2}>"
