# beakerlang

A front end for Beaker, a small statically typed teaching language. The
package turns source text into tokens and parses the tokens into a syntax
tree. It also supplies the type system and the value model that later stages
work with.

## What is inside

- `beakerlang.strings`: character classes (`is_space`, `is_newline`,
  `is_binary_digit`, `is_decimal_digit`), `char_to_int`, `string_to_int` and
  `StringBuilder`, which holds at most 128 characters.
- `beakerlang.location`: `Location`, `LocationMap` (keyed on node identity),
  `Line` and `LineMap`.
- `beakerlang.symbol`: `Symbol`, `BooleanSymbol`, `IntegerSymbol`,
  `IdentifierSymbol` and `SymbolTable`. `SymbolTable` interns spellings and
  raises `SymbolRedefinitionError` when a spelling is put again as a
  different kind of symbol.
- `beakerlang.tokens`: `TokenKind`, `Token`, `TokenStream`, `spelling` and
  `init_symbols`, which installs the punctuators, the keywords and `true` and
  `false`.
- `beakerlang.lexer`: `InputBuffer`, which tracks line starts, and `Lexer`.
- `beakerlang.typesys`: `IdType`, `BooleanType`, `IntegerType`,
  `FunctionType`, `ReferenceType`, `RecordType`, the constructors
  `get_id_type`, `get_boolean_type`, `get_integer_type`, `get_function_type`,
  `get_function_type_from_decls`, `get_reference_type` and `get_record_type`,
  and the `is_less` ordering.
- `beakerlang.syntax`: the expression, declaration and statement nodes.
- `beakerlang.printer`: `format_type` and `format_expr`.
- `beakerlang.value`: `ValueKind` and `Value` (error, integer, function and
  reference values).
- `beakerlang.parser`: `Parser`, `ParseError` and `parse_module`.

## The language

```
struct Point {
  x : int;
  y : int;
}

def add(a : int, b : int) -> int {
  return a + b;
}

def main() -> int {
  var n : int = add(1, 2);
  while (n < 10) {
    n = n * 2;
  }
  return n;
}
```

Comments run from `//` to the end of the line. Identifiers are ASCII letters
followed by letters or digits; integers are decimal digits.

## Usage

```python
from beakerlang.symbol import SymbolTable
from beakerlang.tokens import init_symbols
from beakerlang.parser import parse_module

symbols = SymbolTable()
init_symbols(symbols)

module = parse_module("def main() -> int { return 1 + 2; }", symbols)
```

`parse_module` raises `ParseError` on any error. For a syntax error it is the
first error found, carrying the location of the offending token. For a
lexical error the message names the location and the invalid symbol. While
parsing, `Parser.block_stmt` and `Parser.module` recover from errors in their
elements: they print the error to standard error and skip past the current
statement terminator. `Parser.errors` keeps every error found.

Types are canonical, except for `IdType`: asking twice for the same function,
reference or record type yields the same object.

```python
from beakerlang.typesys import get_function_type, get_integer_type
from beakerlang.printer import format_type

i = get_integer_type()
f = get_function_type([i, i], i)
assert f is get_function_type([i, i], i)
print(format_type(f))  # (int,int) -> int
```

`format_expr` prints literals and identifiers by their spelling, and
initializers and conversions as pseudo-calls such as `__copy_init(int,1)`.
Operator and call expressions print as the empty string.

## What it does not do

The package stops at the syntax tree. It does not resolve names, check
types or run programs. `Value` models the values an interpreter would use,
but nothing in the package produces them. There is no command-line program.

## Tests

```
pip install -e .[test]
pytest
```