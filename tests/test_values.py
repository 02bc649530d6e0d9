import pytest

from dragonir.irtypes import IntegerType
from dragonir.values import (
    IR_GLOBAL_VARNAME_PREFIX,
    Constant,
    GlobalValue,
    Linkage,
    Use,
    User,
    Value,
    Visibility,
)


@pytest.fixture
def int_type():
    return IntegerType.get_int()


def _value(int_type, name):
    value = Value(int_type)
    value.name = name
    return value


def test_add_operand_links_both_ends(int_type):
    a = _value(int_type, "a")
    user = User(int_type)
    user.add_operand(a)
    assert user.operand_count() == 1
    assert user.get_operand(0) is a
    assert len(a.uses) == 1
    assert a.uses[0] is user.operands[0]
    assert a.uses[0].user is user


def test_operand_values_keep_order(int_type):
    a, b, c = (_value(int_type, n) for n in "abc")
    user = User(int_type)
    for v in (a, b, c):
        user.add_operand(v)
    assert user.operand_values() == [a, b, c]


def test_set_operand_moves_edge(int_type):
    a, b = _value(int_type, "a"), _value(int_type, "b")
    user = User(int_type)
    user.add_operand(a)
    user.set_operand(0, b)
    assert user.get_operand(0) is b
    assert a.uses == []
    assert len(b.uses) == 1 and b.uses[0].user is user


def test_set_operand_out_of_range_is_ignored(int_type):
    a, b = _value(int_type, "a"), _value(int_type, "b")
    user = User(int_type)
    user.add_operand(a)
    user.set_operand(3, b)
    assert user.operand_values() == [a]
    assert b.uses == []


def test_get_operand_out_of_range_returns_none(int_type):
    user = User(int_type)
    assert user.get_operand(0) is None
    assert user.get_operand(-1) is None


def test_remove_operand_by_value_removes_first_match(int_type):
    a, b = _value(int_type, "a"), _value(int_type, "b")
    user = User(int_type)
    user.add_operand(a)
    user.add_operand(b)
    user.add_operand(a)
    user.remove_operand(a)
    assert user.operand_values() == [b, a]
    assert len(a.uses) == 1


def test_remove_operand_at(int_type):
    a, b = _value(int_type, "a"), _value(int_type, "b")
    user = User(int_type)
    user.add_operand(a)
    user.add_operand(b)
    user.remove_operand_at(0)
    assert user.operand_values() == [b]
    assert a.uses == []
    user.remove_operand_at(5)
    assert user.operand_values() == [b]


def test_clear_operands_empties_both_sides(int_type):
    a, b = _value(int_type, "a"), _value(int_type, "b")
    user = User(int_type)
    user.add_operand(a)
    user.add_operand(b)
    user.clear_operands()
    assert user.operand_count() == 0
    assert a.uses == [] and b.uses == []


def test_use_remove_detaches(int_type):
    a = _value(int_type, "a")
    user = User(int_type)
    user.add_operand(a)
    use = user.operands[0]
    use.remove()
    assert user.operands == []
    assert a.uses == []


def test_use_set_usee(int_type):
    a, b = _value(int_type, "a"), _value(int_type, "b")
    user = User(int_type)
    user.add_operand(a)
    use = user.operands[0]
    use.set_usee(b)
    assert use.usee is b
    assert b.uses == [use]
    assert a.uses == []


def test_remove_use_of_foreign_edge_leaves_operands(int_type):
    a = _value(int_type, "a")
    user = User(int_type)
    other = User(int_type)
    user.add_operand(a)
    foreign = Use(a, other)
    user.remove_use(foreign)
    assert user.operand_values() == [a]
    assert len(a.uses) == 1


def test_remove_use_of_own_operand(int_type):
    a = _value(int_type, "a")
    user = User(int_type)
    user.add_operand(a)
    user.remove_use(user.operands[0])
    assert user.operand_count() == 0
    assert a.uses == []


def test_ir_name_round_trip(int_type):
    value = Value(int_type)
    value.ir_name = "%t1"
    assert value.ir_name == "%t1"


def test_global_value_naming_and_defaults(int_type):
    gv = GlobalValue(int_type, "counter")
    assert gv.name == "counter"
    assert gv.ir_name == IR_GLOBAL_VARNAME_PREFIX + "counter"
    assert gv.ir_name == "@counter"
    assert gv.alignment == 4
    assert gv.is_function() is False
    assert gv.is_global_variable() is False
    assert gv.linkage is Linkage.EXTERNAL
    assert gv.visibility is Visibility.DEFAULT


def test_constant_holds_operands(int_type):
    a = _value(int_type, "a")
    const = Constant(int_type)
    const.add_operand(a)
    assert const.operand_values() == [a]
    assert a.uses[0].user is const