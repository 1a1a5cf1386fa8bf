# afrilang

A small interpreter for Afrilang, a toy language with French keywords.
Code is read one line at a time. Each line is tokenized and run against a
set of numeric variables that lasts for the whole session or file.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Usage

Start an interactive session:

```
afrilang
```

When standard output is a terminal, the screen is cleared first. A welcome
message is printed, then each line typed at the `>> ` prompt is run. The
session ends on a line that is exactly `quit`, or at the end of input.

Run a program file, whose name must end in `.afr`:

```
afrilang program.afr
```

Every line of the file is run in order, sharing the same variables. A file
with another extension, or one that cannot be opened, is reported on
standard error. Passing more than one argument prints the expected usage on
standard error.

## The language

```
x = 4
y = x + 1
afficher("bonjour")
afficher(y)
afficher(42)
if (x) { afficher("x est positif") }
```

- `name = expression` assigns a number to a variable. Expressions combine
  integers and variables with `+`, `-`, `*` and `/`. Division by zero gives
  an infinity or `nan` rather than an error.
- `afficher(...)` prints a quoted string, the value of a variable, or an
  integer. Variable values are printed with six decimals, e.g. `5.000000`.
- `if (cond) { statement }` runs the single statement inside the braces
  when the condition, an integer or a variable, is greater than zero;
  otherwise it is skipped.
- `quit` abandons the rest of the current line; in the interactive session
  a line that is exactly `quit` also ends the session.

Spaces and newlines outside quoted strings are ignored. Errors in a line are
reported on standard error in French, and the rest of that line is skipped.
Using an unknown variable inside an expression stops the run: the command
reports it and exits with status 1.

## Library use

```python
from afrilang.lexer import tokenize
from afrilang.parser import Parser

parser = Parser()
parser.run_line("x = 3 + 4")
parser.run_line("afficher(x)")      # prints 7.000000
print(parser.variables)             # {'x': 7.0}

parser.parse(tokenize('afficher("salut")'))
```

`Parser(stdout, stderr)` takes optional text streams for output and error
messages; by default it writes to `sys.stdout` and `sys.stderr`.
`Parser.parse` raises `ValueError` when a value in an expression is not a
number. `afrilang.lexer.Lexer(code).generate_tokens()` and `tokenize(code)`
return a list of `afrilang.tokens.Token` values (a `TokenType` and its
text), always ending with a `TokenType.FIN` token.

The entry points in `afrilang.cli` can also be called directly:
`run_file(file_name, stdout, stderr)`, `run_console(stdin, stdout, stderr)`
and `main(argv)`.

`afrilang.arith_lexer.ArithLexer` is a separate, minimal tokenizer for
arithmetic expressions made of integers, `+`, `*` and parentheses. Its
`current` attribute holds the latest `Lexeme`, `next_token()` advances, and
iterating over it yields the tokens up to and including `ArithToken.END`.

## What it does not do

There is no compiler or code generator, no `else`, no loops, no functions
and no string variables: variables only hold numbers, and an `if` block
holds a single statement on the same line.