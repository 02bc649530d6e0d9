"""IR type descriptions: void, label, integers, pointers, arrays and functions."""

from __future__ import annotations

import abc
import enum
from typing import ClassVar, Iterable, Sequence


class TypeID(enum.Enum):
    """Kind of an IR type."""

    FLOAT = enum.auto()
    VOID = enum.auto()
    LABEL = enum.auto()
    TOKEN = enum.auto()
    INTEGER = enum.auto()
    FUNCTION = enum.auto()
    POINTER = enum.auto()
    ARRAY = enum.auto()


class Type(abc.ABC):
    """Base of all IR types. Types compare by identity."""

    def __init__(self, type_id: TypeID = TypeID.VOID) -> None:
        self.type_id = type_id

    def is_void_type(self) -> bool:
        """Return whether this is the void type."""
        return self.type_id is TypeID.VOID

    def is_label_type(self) -> bool:
        """Return whether this is the label type."""
        return self.type_id is TypeID.LABEL

    def is_function_type(self) -> bool:
        """Return whether this is a function type."""
        return self.type_id is TypeID.FUNCTION

    def is_integer_type(self) -> bool:
        """Return whether this is an integer type of any width."""
        return self.type_id is TypeID.INTEGER

    def is_float_type(self) -> bool:
        """Return whether this is the single precision float type."""
        return self.type_id is TypeID.FLOAT

    def is_int1_byte(self) -> bool:
        """Return whether this is the one-bit boolean integer type."""
        return False

    def is_int32_type(self) -> bool:
        """Return whether this is the 32-bit integer type."""
        return False

    def is_pointer_type(self) -> bool:
        """Return whether this is a pointer type."""
        return self.type_id is TypeID.POINTER

    def is_array_type(self) -> bool:
        """Return whether this is an array type."""
        return self.type_id is TypeID.ARRAY

    def size(self) -> int:
        """Return the size in bytes, or -1 when the type has no size."""
        return -1

    @abc.abstractmethod
    def __str__(self) -> str:
        """Return the IR spelling of the type."""

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self}>"


class VoidType(Type):
    """The single void type."""

    _instance: ClassVar["VoidType | None"] = None

    def __init__(self) -> None:
        super().__init__(TypeID.VOID)

    @classmethod
    def get(cls) -> "VoidType":
        """Return the shared void type."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def __str__(self) -> str:
        return "void"


class LabelType(Type):
    """The single type of labels and basic blocks."""

    _instance: ClassVar["LabelType | None"] = None

    def __init__(self) -> None:
        super().__init__(TypeID.LABEL)

    @classmethod
    def get(cls) -> "LabelType":
        """Return the shared label type."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def __str__(self) -> str:
        return "void"


class IntegerType(Type):
    """Integer type of a given bit width; only i1 and i32 are shared instances."""

    _bool: ClassVar["IntegerType | None"] = None
    _int: ClassVar["IntegerType | None"] = None

    def __init__(self, bit_width: int) -> None:
        super().__init__(TypeID.INTEGER)
        self.bit_width = bit_width

    @classmethod
    def get_bool(cls) -> "IntegerType":
        """Return the shared one-bit integer type."""
        if cls._bool is None:
            cls._bool = cls(1)
        return cls._bool

    @classmethod
    def get_int(cls) -> "IntegerType":
        """Return the shared 32-bit integer type."""
        if cls._int is None:
            cls._int = cls(32)
        return cls._int

    def is_int1_byte(self) -> bool:
        return self.bit_width == 1

    def is_int32_type(self) -> bool:
        return self.bit_width == 32

    def size(self) -> int:
        return 4

    def __str__(self) -> str:
        return f"i{self.bit_width}"


class PointerType(Type):
    """Pointer to another type; one instance exists per pointee."""

    _interned: ClassVar[dict[Type, "PointerType"]] = {}

    def __init__(self, pointee: Type) -> None:
        super().__init__(TypeID.POINTER)
        self.pointee_type = pointee
        if isinstance(pointee, PointerType):
            self.root_type: Type = pointee.root_type
            self.depth: int = pointee.depth + 1
        else:
            self.root_type = pointee
            self.depth = 1

    @classmethod
    def get(cls, pointee: Type) -> "PointerType":
        """Return the shared pointer type to ``pointee``."""
        found = cls._interned.get(pointee)
        if found is None:
            found = cls(pointee)
            cls._interned[pointee] = found
        return found

    def __str__(self) -> str:
        return f"{self.pointee_type}*"


class ArrayType(Type):
    """Array of an element type with one or more dimensions."""

    def __init__(self, element_type: Type, dims: Iterable[int]) -> None:
        if element_type is None:
            raise ValueError("array element type must not be None")
        super().__init__(TypeID.ARRAY)
        self.element_type = element_type
        self.dims: tuple[int, ...] = tuple(dims)

    @classmethod
    def get(cls, element_type: Type, dims: Sequence[int]) -> "ArrayType":
        """Create an array type, e.g. dims ``[4, 2]`` for ``int[4][2]``."""
        return cls(element_type, dims)

    def total_element_count(self) -> int:
        """Return the number of elements over all dimensions."""
        total = 1
        for dim in self.dims:
            total *= dim
        return total

    def size(self) -> int:
        return self.total_element_count() * self.element_type.size()

    def __str__(self) -> str:
        return str(self.element_type) + "".join(f"[{dim}]" for dim in self.dims)


class FunctionType(Type):
    """Function type made of a return type and the parameter types."""

    def __init__(self, return_type: Type, arg_types: Iterable[Type]) -> None:
        super().__init__(TypeID.FUNCTION)
        self.return_type = return_type
        self.arg_types: tuple[Type, ...] = tuple(arg_types)

    def __str__(self) -> str:
        args = ", ".join(str(arg) for arg in self.arg_types)
        return f"{self.return_type} (*)({args})"