from dataclasses import dataclass

import pytest

from beakerlang.symbol import IdentifierSymbol
from beakerlang.tokens import TokenKind
from beakerlang.typesys import (
    FunctionType,
    ReferenceType,
    get_boolean_type,
    get_function_type,
    get_function_type_from_decls,
    get_id_type,
    get_integer_type,
    get_record_type,
    get_reference_type,
    is_less,
)


@dataclass
class _Decl:
    type: object


class _Record:
    pass


def test_scalar_types_are_unique():
    assert get_boolean_type() is get_boolean_type()
    assert get_integer_type() is get_integer_type()
    assert get_boolean_type() is not get_integer_type()


def test_function_types_are_canonical():
    b, i = get_boolean_type(), get_integer_type()
    f1 = get_function_type([b, i], i)
    f2 = get_function_type((b, i), i)
    assert f1 is f2
    assert isinstance(f1, FunctionType)
    assert f1.parameter_types == (b, i)
    assert f1.return_type is i


def test_distinct_function_types_differ():
    b, i = get_boolean_type(), get_integer_type()
    assert get_function_type([b], i) is not get_function_type([i], i)
    assert get_function_type([b], i) is not get_function_type([b], b)
    assert get_function_type([], i) is not get_function_type([b], i)


def test_id_types_are_not_canonical_but_equivalent():
    sym = IdentifierSymbol("T", TokenKind.IDENTIFIER)
    t1, t2 = get_id_type(sym), get_id_type(sym)
    assert t1 is not t2
    assert t1.symbol is sym
    assert not is_less(t1, t2) and not is_less(t2, t1)
    i = get_integer_type()
    assert get_function_type([t1], i) is get_function_type([t2], i)


def test_reference_types():
    i = get_integer_type()
    r = i.ref()
    assert isinstance(r, ReferenceType)
    assert r is get_reference_type(i)
    assert r.ref() is r
    assert r.nonref() is i
    assert i.nonref() is i


def test_record_types_are_per_declaration():
    d1, d2 = _Record(), _Record()
    assert get_record_type(d1) is get_record_type(d1)
    assert get_record_type(d1) is not get_record_type(d2)
    assert get_record_type(d1).declaration is d1


def test_function_type_from_decls():
    b, i = get_boolean_type(), get_integer_type()
    decls = [_Decl(b), _Decl(i)]
    assert get_function_type_from_decls(decls, b) is get_function_type([b, i], b)


def test_is_less_irreflexive():
    b, i = get_boolean_type(), get_integer_type()
    for t in (b, i, get_function_type([b], i), i.ref()):
        assert not is_less(t, t)


def test_is_less_total_on_distinct_types():
    b, i = get_boolean_type(), get_integer_type()
    types = [b, i, get_function_type([b], i), get_function_type([i], b), b.ref(), i.ref()]
    for a in types:
        for c in types:
            if a is not c:
                assert is_less(a, c) != is_less(c, a)


def test_is_less_parameter_prefix_orders_first():
    b, i = get_boolean_type(), get_integer_type()
    short = get_function_type([b], i)
    longer = get_function_type([b, i], i)
    assert is_less(short, longer)
    assert not is_less(longer, short)


def test_is_less_return_type_breaks_ties():
    b, i = get_boolean_type(), get_integer_type()
    f_b = get_function_type([i], b)
    f_i = get_function_type([i], i)
    assert is_less(f_b, f_i) == is_less(b, i)


def test_is_less_rejects_non_types():
    with pytest.raises(TypeError):
        is_less(get_integer_type(), 3)