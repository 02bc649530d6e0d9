"""Concrete IR values: integer constants, parameters and variables."""

from __future__ import annotations

from .irtypes import ArrayType, IntegerType, Type
from .values import IR_KEYWORD_DECLARE, Constant, GlobalValue, Value


class ConstInt(Constant):
    """A 32-bit integer constant; its IR name is its decimal value."""

    def __init__(self, value: int) -> None:
        super().__init__(IntegerType.get_int())
        self.value = value
        self.name = str(value)

    @property
    def ir_name(self) -> str:
        return self.name

    @ir_name.setter
    def ir_name(self, value: str) -> None:
        self._ir_name = value


class FormalParam(Value):
    """A formal parameter of a function."""

    def __init__(self, type: Type | None, name: str) -> None:
        super().__init__(type)
        self.name = name
        self.register = -1

    def reg_id(self) -> int:
        return self.register

    def set_memory_addr(self, reg_id: int, offset: int) -> None:
        """Address the parameter as ``offset`` from base register ``reg_id``."""
        self._memory = None if reg_id == -1 else (reg_id, offset)

    def memory_addr(self) -> tuple[int, int] | None:
        """Return ``(base_register, offset)`` once addressed, else None."""
        return self._memory


class GlobalVariable(GlobalValue):
    """A global variable, addressed through its symbol name."""

    def __init__(self, type: Type | None, name: str) -> None:
        super().__init__(type, name)
        self.alignment = 4
        self.init_value: Value | None = None
        self.in_bss_section = True

    def is_global_variable(self) -> bool:
        return True

    def scope_level(self) -> int:
        return 0

    def to_declare_string(self) -> str:
        """Return the ``declare`` line describing this variable."""
        if isinstance(self.type, ArrayType):
            dims = "".join(f"[{dim}]" for dim in self.type.dims)
            text = f"{IR_KEYWORD_DECLARE} {self.type.element_type} {self.ir_name}{dims}"
        else:
            text = f"{IR_KEYWORD_DECLARE} {self.type} {self.ir_name}"
        if self.init_value is not None:
            text += f" = {self.init_value.name}"
        return text


class LocalVariable(Value):
    """A local variable declared at some scope level of a function."""

    def __init__(self, type: Type | None, name: str, scope_level: int) -> None:
        super().__init__(type)
        self.name = name
        self._scope_level = scope_level
        self.register = -1

    def scope_level(self) -> int:
        return self._scope_level

    def reg_id(self) -> int:
        return self.register

    def set_memory_addr(self, reg_id: int, offset: int) -> None:
        """Address the variable as ``offset`` from base register ``reg_id``."""
        self._memory = None if reg_id == -1 else (reg_id, offset)

    def memory_addr(self) -> tuple[int, int] | None:
        """Return ``(base_register, offset)`` once addressed, else None."""
        return self._memory


class MemVariable(Value):
    """A value that always lives in memory."""

    def __init__(self, type: Type | None) -> None:
        super().__init__(type)
        self._memory = (-1, 0)

    def set_memory_addr(self, reg_id: int, offset: int) -> None:
        """Address the value as ``offset`` from base register ``reg_id``."""
        self._memory = (reg_id, offset)

    def memory_addr(self) -> tuple[int, int]:
        """Return ``(base_register, offset)``; always present."""
        base_reg, offset = self._memory
        return base_reg, offset


class RegVariable(Value):
    """A value bound to a fixed register; its IR name is the register name."""

    def __init__(self, type: Type | None, name: str, reg_id: int) -> None:
        super().__init__(type)
        self.name = name
        self._reg_id = reg_id

    def reg_id(self) -> int:
        return self._reg_id

    @property
    def ir_name(self) -> str:
        return self.name

    @ir_name.setter
    def ir_name(self, value: str) -> None:
        self._ir_name = value