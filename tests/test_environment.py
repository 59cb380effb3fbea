import pytest

from ember.types.environment import Environment
from ember.types.errors import EmberArityError, EmberInvalidSymbol, EmberUnboundSymbol
from ember.types.symbol import Symbol

x, y, z = Symbol("x"), Symbol("y"), Symbol("z")


@pytest.fixture
def chain():
    root = Environment()
    root.define(x, 1)
    middle = Environment(outer=root)
    middle.define(y, 2)
    inner = Environment(outer=middle)
    return root, middle, inner


def test_lookup_walks_outward(chain):
    root, middle, inner = chain
    assert inner.lookup(x) == 1
    assert inner.lookup(y) == 2
    assert x not in inner.vars
    assert inner.root is root


def test_lookup_miss_raises_unbound(chain):
    _, _, inner = chain
    with pytest.raises(EmberUnboundSymbol):
        inner.lookup(z)


def test_inner_binding_shadows_outer(chain):
    root, middle, inner = chain
    inner.define(x, 99)
    assert inner.lookup(x) == 99
    assert middle.lookup(x) == 1


def test_bind_global_targets_root_from_any_depth(chain):
    root, middle, inner = chain
    inner.bind_global(z, 3)
    assert z in root.vars
    assert z not in inner.vars
    assert middle.lookup(z) == 3


def test_bind_global_overwrites(chain):
    root, _, inner = chain
    inner.bind_global(x, 10)
    assert root.lookup(x) == 10


def test_extend_pushes_one_frame(chain):
    root, middle, _ = chain
    frame = middle.extend([x, z], [5, 6])
    assert frame.outer is middle
    assert frame.lookup(x) == 5
    assert frame.lookup(z) == 6
    assert frame.lookup(y) == 2
    # the captured chain itself is untouched
    assert middle.lookup(x) == 1


def test_extend_with_no_params():
    root = Environment()
    assert root.extend([], []).vars == {}


@pytest.mark.parametrize("args", [[], [1, 2, 3]])
def test_extend_arity_mismatch(args):
    with pytest.raises(EmberArityError):
        Environment().extend([x, y], args)


def test_define_rejects_non_symbol():
    with pytest.raises(EmberInvalidSymbol):
        Environment().define("x", 1)


def test_repr_elides_global_frame(chain):
    _, _, inner = chain
    inner.define(z, 3)
    text = repr(inner)
    assert text.startswith("<Environment chain: {z: 3}")
    assert "<global 1 bindings>" in text
