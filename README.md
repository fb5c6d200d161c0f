# souplang

A parser for the soup language. Source text is split into words, with the
bracket pairs `{}`, `()` and `[]` nested into groups. A grammar built from
small combinable parsers turns the words into a syntax tree. Where the source
has mistakes, the parser records what it expected and what it found, and the
error report underlines the place in the source.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Command line

```
souplang program.soup
```

The command reads the file as UTF-8 and parses it. It writes the syntax tree
to `output.txt` and the full list of parse errors to `errors.txt`, both in the
current directory and both as pretty-printed Python values. It then prints
each error that is not marked unlikely: the offending source line with its
line number, and below it a red `^` marker under the offending word followed
by a message of the form `Expected X or Y but got Z`.

Errors that come with no word (the input ended too early) are printed as
`???? | Expected ... but got <<nothing>>`. Errors on the first line of the
file are printed in the same `????` form, without the source line.

The command also turns on the parser's debug trace, which goes to standard
error. When no file is given, it prints `No input file given` and stops. If
the file cannot be read, it exits with a message.

## Using the library

```python
from souplang.grammar import split_source, parse_program
from souplang.errors import show_errors

code = "let answer = 42"
result = parse_program(split_source(code))
declaration = result.value.items[0]   # a LetDeclaration
print(declaration.be)                 # 42
show_errors(code, result.errors, True)
```

`parse_program` accepts a list of `Word`s or a `VecWindow` over one. Its
result's `value` is an `Ast` whose `items` are the declarations that parsed;
declarations that did not parse contribute only their errors.

The syntax tree classes live in `souplang.grammar`: declarations
(`UseDeclaration`, `DocDeclaration`, `TypeDeclaration`, `HasDeclaration`,
`DefDeclaration`, `LetDeclaration`), type references (`FunctionTypeRef`,
`ParenTypeRef`, `TypeRefWithDependencies`, `RawTypeRef`), types
(`UnionType`, `TupleType`, `MatchType`) and values (`ParenValue`,
`ListValue`, `MatchSequence`, `CallSequence`, `FunctionValue`, plain
`bool`, `int`, `float`, `str` and `ValueName`), among others.

`souplang.errors.ErrorFile` collects errors, merges those at the same place
into one message, and `render()` returns the report as a string;
`show_errors(code, errors, skip_unlikely)` prints it.

### Building blocks

- `souplang.words.split_words(text, brackets)` splits text into `Word`s,
  nesting each `BracketPair` it is given. `//` starts a comment.
- `souplang.vec_window.VecWindow` is a view over part of a word list that
  parsers consume from.
- `souplang.basics` holds parsers for single words: `StringParser`,
  `IntegerParser`, `FloatParser`, `BooleanParser`, `TypeNameParser`,
  `ValueNameParser`, `AnyWordParser` and `NothingParser`.
- `souplang.collections` holds `OptionalParser`, `ManyParser`,
  `NonEmptyParser` and `PairParser`.
- `souplang.brackets` holds `BracketsParser` and the shortcuts
  `square_brackets`, `curly_brackets` and `parentheses`.
- `souplang.separators` holds `SeparatedBy`, `SeparatedOnce` and
  `StatementVec`.
- `souplang.derive` holds `Struct`, `Enum`, `Field` and `Lazy` for
  describing grammars of records and alternatives, with keyword fields.

Every parser has a `parse(words)` method that returns a `ParseResult` with
`value`, `rest` (the words left over), `errors` (the `ParseError`s collected)
and `ok` (False when nothing was parsed, in which case `value` is None).

Call `souplang.core.setup_logging()` to print a trace of each parsing step to
standard error.

## What it does not do

The package parses and reports syntax errors only. It does not check types,
resolve `use` imports, evaluate or compile programs.