"""Values, users and the def-use edges that connect them."""

from __future__ import annotations

import enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .irtypes import Type

IR_GLOBAL_VARNAME_PREFIX = "@"
IR_LOCAL_VARNAME_PREFIX = "%l"
IR_TEMP_VARNAME_PREFIX = "%t"
IR_MEM_VARNAME_PREFIX = "%m"
IR_LABEL_PREFIX = ".L"

IR_KEYWORD_DECLARE = "declare"
IR_KEYWORD_DEFINE = "define"
IR_KEYWORD_ADD_I = "add"
IR_KEYWORD_SUB_I = "sub"


class Use:
    """A def-use edge from a used value (``usee``) to the ``user`` that reads it.

    Creating a Use does not register it with either end; the caller does that.
    """

    def __init__(self, usee: "Value", user: "User") -> None:
        self.usee = usee
        self.user = user

    def set_usee(self, value: "Value") -> None:
        """Point this edge at ``value`` instead of the current usee."""
        self.usee.remove_use(self)
        self.usee = value
        self.usee.add_use(self)

    def remove(self) -> None:
        """Detach the edge from both ends."""
        self.usee.remove_use(self)
        self.user.remove_operand_raw(self)

    def __repr__(self) -> str:
        return f"<Use {self.usee!r} -> {self.user!r}>"


def _index_of(items: list[Use], use: Use) -> int | None:
    for index, item in enumerate(items):
        if item is use:
            return index
    return None


class Value:
    """Anything that can be computed or referenced: variables, constants, instructions."""

    def __init__(self, type: "Type | None") -> None:
        self.type = type
        self.name = ""
        self._ir_name = ""
        self.uses: list[Use] = []
        # Register used to load this value, -1 when none is assigned.
        self.load_reg_id = -1
        # (base_register, offset) for values kept in memory.
        self._memory: tuple[int, int] | None = None

    @property
    def ir_name(self) -> str:
        """Name used in the textual IR."""
        return self._ir_name

    @ir_name.setter
    def ir_name(self, value: str) -> None:
        self._ir_name = value

    def add_use(self, use: Use) -> None:
        """Record a new edge that uses this value."""
        self.uses.append(use)

    def remove_use(self, use: Use) -> None:
        """Forget an edge that used this value, if it is recorded."""
        index = _index_of(self.uses, use)
        if index is not None:
            del self.uses[index]

    def scope_level(self) -> int:
        """Return the scope level of the variable, or -1."""
        return -1

    def reg_id(self) -> int:
        """Return the allocated register number, or -1 when there is none."""
        return -1

    def memory_addr(self) -> tuple[int, int] | None:
        """Return ``(base_register, offset)`` for values kept in memory, else None."""
        return self._memory

    def __repr__(self) -> str:
        label = self.ir_name or self.name
        return f"<{type(self).__name__} {label!r}>"


class User(Value):
    """A value computed from operand values; each operand is held through a Use."""

    def __init__(self, type: "Type | None") -> None:
        super().__init__(type)
        self.operands: list[Use] = []

    def add_operand(self, value: Value) -> None:
        """Append ``value`` as a new operand."""
        use = Use(value, self)
        self.operands.append(use)
        value.add_use(use)

    def set_operand(self, pos: int, value: Value) -> None:
        """Replace the operand at ``pos``; positions out of range are ignored."""
        if 0 <= pos < len(self.operands):
            self.operands[pos].set_usee(value)

    def get_operand(self, pos: int) -> Value | None:
        """Return the operand at ``pos``, or None when out of range."""
        if 0 <= pos < len(self.operands):
            return self.operands[pos].usee
        return None

    def remove_operand(self, value: Value) -> None:
        """Remove the first operand that refers to ``value``."""
        for use in self.operands:
            if use.usee is value:
                use.remove()
                break

    def remove_operand_at(self, pos: int) -> None:
        """Remove the operand at ``pos``; positions out of range are ignored."""
        if 0 <= pos < len(self.operands):
            self.operands[pos].remove()

    def remove_operand_raw(self, use: Use) -> None:
        """Drop ``use`` from the operand list without touching the usee."""
        index = _index_of(self.operands, use)
        if index is not None:
            del self.operands[index]

    def remove_use(self, use: Use) -> None:
        """Detach ``use`` from both ends when it is one of this user's operands."""
        if _index_of(self.operands, use) is not None:
            use.remove()
        else:
            super().remove_use(use)

    def clear_operands(self) -> None:
        """Remove every operand."""
        while self.operands:
            self.operands[0].remove()

    def operand_values(self) -> list[Value]:
        """Return the operand values in order."""
        return [use.usee for use in self.operands]

    def operand_count(self) -> int:
        """Return the number of operands."""
        return len(self.operands)


class Constant(User):
    """A value that cannot change at run time."""


class Linkage(enum.Enum):
    """Whether a global is visible to other modules."""

    EXTERNAL = 0
    INTERNAL = 1


class Visibility(enum.Enum):
    """Visibility style of a global."""

    DEFAULT = 0
    HIDDEN = 1
    PROTECTED = 2


class GlobalValue(Constant):
    """A named global entity such as a function or a global variable."""

    def __init__(self, type: "Type | None", name: str) -> None:
        super().__init__(type)
        self.name = name
        self.ir_name = IR_GLOBAL_VARNAME_PREFIX + name
        self.linkage = Linkage.EXTERNAL
        self.visibility = Visibility.DEFAULT
        self.alignment = 4

    def is_function(self) -> bool:
        """Return whether this global is a function."""
        return False

    def is_global_variable(self) -> bool:
        """Return whether this global is a variable."""
        return False