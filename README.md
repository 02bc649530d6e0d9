# dragonir

`dragonir` is the data model behind the textual intermediate representation
of a small compiler. It has IR types, values, def-use edges, concrete
variables, a stack of nested scopes for looking up names, and a few general
helpers. It has no dependencies outside the standard library.

## Installation

Install the project directory with pip. The `test` extra adds pytest, which
runs the test suite in `tests/`.

## Modules

### `dragonir.common`

- `int2str(num)` writes a number in decimal as an unsigned 64-bit value.
- `double2str(num)` writes a float with six fractional digits, for example `1.500000`.
- `is_letter`, `is_digit`, `is_letter_or_digit`, `is_identifier_char` and
  `is_identifier_start` classify single ASCII characters.
- `trim(text)` removes leading and trailing spaces. A string made only of
  spaces comes back unchanged.
- `log_message(level, message)` prints a message. A `LogLevel.ERROR` message
  goes to standard output and other levels go to standard error.

### `dragonir.bitmap`

`BitMap(capacity)` is a fixed bit array with `set`, `reset` and `test`.
An index outside the allocated bytes, or a negative index, raises `IndexError`.

### `dragonir.indexset`

`IndexSet` is a set of non-negative integers with a universe size `count`.

- Operators: `&`, `|`, `-` and `^`. Each result keeps the larger `count` of its two operands.
- `~` gives the complement within `0 .. count-1`.
- `init(count, value)` and `init_range(start, stop, value)` fill ranges.
- `get`, `set` and `reset` work on single members. `clear` and `is_empty` work on the whole set.
- `min` and `max` raise `ValueError` on an empty set.
- Iteration goes in ascending order. `str()` lists the members, each followed by a space.
- Equality compares members only.

### `dragonir.irtypes`

`Type` is the base class, and `TypeID` names each kind. The concrete types are:

- `VoidType.get()` and `LabelType.get()` return the single shared instance of each.
- `IntegerType.get_bool()` returns the shared `i1` and `IntegerType.get_int()` the shared `i32`.
- `PointerType.get(pointee)` interns one pointer per pointee. It tracks `root_type` and `depth`.
- `ArrayType.get(element_type, dims)` builds a multi-dimensional array type, for example `i32[4][2]`. It has `total_element_count()` and `size()`.
- `FunctionType(return_type, arg_types)` prints as `i32 (*)(i32, i32*)`.

### `dragonir.values`

- `Value` has `name`, `ir_name`, `type` and `uses`. It also has `scope_level()`,
  `reg_id()` and `memory_addr()`. `memory_addr()` returns a
  `(base_register, offset)` pair, or `None`.
- `User` holds its operands through `Use` edges. It has `add_operand`,
  `set_operand`, `get_operand`, `remove_operand`, `remove_operand_at`,
  `clear_operands`, `operand_values` and `operand_count`. Each change keeps
  both ends of the edge consistent.
- `Constant` is the base for values that do not change.
- `GlobalValue` (with `Linkage` and `Visibility`) takes the IR name `@name`.
- The module also defines the IR name prefixes and keywords, for example
  `IR_GLOBAL_VARNAME_PREFIX` and `IR_KEYWORD_DECLARE`.

### `dragonir.variables`

- `ConstInt`: its IR name is its decimal value.
- `FormalParam`, `LocalVariable` and `MemVariable`: `set_memory_addr` gives
  them a stack address.
- `GlobalVariable`: has `init_value` and `to_declare_string()`.
- `RegVariable`: bound to a fixed register.

### `dragonir.scopes`

`ScopeStack` manages nested scopes. It has `enter_scope`, `leave_scope`,
`insert_value`, `find_current_scope`, `find_all_scopes` and `current_level`.
`find_all_scopes` searches from the innermost scope outwards. Using the
innermost scope when none has been entered raises `IndexError`.

## Example

```python
from dragonir.irtypes import ArrayType, IntegerType
from dragonir.variables import ConstInt, GlobalVariable
from dragonir.scopes import ScopeStack

i32 = IntegerType.get_int()
counter = GlobalVariable(i32, "counter")
counter.init_value = ConstInt(3)
print(counter.to_declare_string())      # declare i32 @counter = 3

table = GlobalVariable(ArrayType.get(i32, [4, 2]), "table")
print(table.to_declare_string())        # declare i32 @table[4][2]

scopes = ScopeStack()
scopes.enter_scope()
scopes.insert_value(counter)
assert scopes.find_all_scopes("counter") is counter
```

## What this package does not do

This package is a library of building blocks and not a compiler. It has:

- no command-line program;
- no lexer or parser for source code;
- no instruction classes, functions or module-level symbol table;
- no IR text output beyond `GlobalVariable.to_declare_string()`;
- no assembly generation.