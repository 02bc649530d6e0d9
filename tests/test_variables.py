import pytest

from dragonir.irtypes import ArrayType, IntegerType, VoidType
from dragonir.values import User
from dragonir.variables import (
    ConstInt,
    FormalParam,
    GlobalVariable,
    LocalVariable,
    MemVariable,
    RegVariable,
)


@pytest.mark.parametrize("number", [0, 7, -12, 2147483647])
def test_const_int_names_itself_by_value(number):
    const = ConstInt(number)
    assert const.value == number
    assert const.name == str(number)
    assert const.ir_name == str(number)


def test_const_int_has_int_type():
    assert ConstInt(3).type is IntegerType.get_int()


def test_const_int_load_register_round_trip():
    const = ConstInt(5)
    assert const.load_reg_id == -1
    const.load_reg_id = 4
    assert const.load_reg_id == 4
    assert ConstInt(5).load_reg_id == -1


def test_const_int_can_be_an_operand():
    const = ConstInt(9)
    user = User(VoidType.get())
    user.add_operand(const)
    assert user.operand_values() == [const]
    assert len(const.uses) == 1
    assert const.uses[0].user is user


def test_formal_param_defaults():
    param = FormalParam(IntegerType.get_int(), "x")
    assert param.name == "x"
    assert param.reg_id() == -1
    assert param.memory_addr() is None
    assert param.load_reg_id == -1


def test_formal_param_addresses():
    param = FormalParam(IntegerType.get_int(), "x")
    param.set_memory_addr(11, -8)
    assert param.memory_addr() == (11, -8)
    param.register = 2
    assert param.reg_id() == 2
    param.load_reg_id = 3
    assert param.load_reg_id == 3


def test_global_variable_basics():
    var = GlobalVariable(IntegerType.get_int(), "g")
    assert var.name == "g"
    assert var.ir_name == "@g"
    assert var.is_global_variable() is True
    assert var.is_function() is False
    assert var.scope_level() == 0
    assert var.alignment == 4
    assert var.in_bss_section is True
    assert var.init_value is None


def test_global_variable_declare_scalar():
    var = GlobalVariable(IntegerType.get_int(), "g")
    assert var.to_declare_string() == "declare i32 @g"


def test_global_variable_declare_array():
    arr = ArrayType.get(IntegerType.get_int(), [4, 2])
    var = GlobalVariable(arr, "arr")
    assert var.to_declare_string() == "declare i32 @arr[4][2]"


def test_global_variable_declare_with_initial_value():
    var = GlobalVariable(IntegerType.get_int(), "g")
    plain = var.to_declare_string()
    var.init_value = ConstInt(3)
    assert var.to_declare_string() == plain + " = 3"


def test_global_variable_load_register():
    var = GlobalVariable(IntegerType.get_int(), "g")
    var.load_reg_id = 6
    assert var.load_reg_id == 6


def test_local_variable():
    var = LocalVariable(IntegerType.get_int(), "a", 2)
    assert var.name == "a"
    assert var.scope_level() == 2
    assert var.reg_id() == -1
    assert var.memory_addr() is None
    var.set_memory_addr(13, 16)
    assert var.memory_addr() == (13, 16)
    var.register = 5
    assert var.reg_id() == 5


def test_mem_variable_always_in_memory():
    var = MemVariable(IntegerType.get_int())
    assert var.memory_addr() == (-1, 0)
    var.set_memory_addr(11, 24)
    assert var.memory_addr() == (11, 24)
    var.load_reg_id = 1
    assert var.load_reg_id == 1


def test_reg_variable():
    var = RegVariable(IntegerType.get_int(), "r0", 0)
    assert var.reg_id() == 0
    assert var.ir_name == "r0"
    assert var.memory_addr() is None