# cctr

`cctr` is a small command-line filter in the spirit of `tr`. It reads text from
standard input, translates or deletes characters, and writes the result to
standard output.

## Installation

```
pip install .
```

## Usage

```
cctr [-d] TARGET [TRANSLATION]
```

Each character in `TARGET` is replaced by the character at the same position
in `TRANSLATION`. When `TRANSLATION` is shorter than `TARGET`, its last
character is used for every remaining target character.

```
$ echo "Coding Challenges" | cctr C c
coding challenges

$ printf 'hello123' | cctr lo12 bo34
hebbo343
```

Input is processed line by line. The output lines are joined with newlines,
and no newline is written after the last line. A carriage return at the end of
an input line is dropped.

The `-d` flag may also be written `--d`, `-d=true` or `-d=false`. An argument
of `--` ends the flags. An unknown flag, a missing argument or too many
arguments makes the command print `couldn't load config ...` and exit with
status 1.

### Ranges

A `start-end` range expands to every character from `start` to `end`. If
`start` is greater than `end`, the expression is used as plain characters.
Only the first `-` in an expression is treated as a range.

```
$ echo "abcdefghijklmnop" | cctr abc-f ghi-l
ghijklghijklmnop
```

### Character classes

These class names are accepted: `[:alpha:]`, `[:upper:]`, `[:lower:]`,
`[:digit:]`, `[:print:]`, `[:punct:]` and `[:space:]`. An unknown class name
is reported as `class specifier not found` and the command exits with status 1.

```
$ echo "Coding Challenge" | cctr '[:lower:]' '[:upper:]'
CODING CHALLENGE

$ echo "Coding HELLO Goodbye 123" | cctr od '[:upper:]'
CODing HELLO GOODbye 123
```

When a class is the translation, each character is converted into the class:

- `alpha`: letters are kept, anything else becomes `a` plus its code point modulo 26.
- `upper` / `lower`: the case is changed.
- `digit`: digits are kept, letters `a`–`i` (either case) become `0`–`8`, anything else becomes `9`.
- `punct`: punctuation is kept, anything else becomes `.`.
- `space`: white space is kept, anything else becomes a space.
- `print`: printable characters are kept, anything else becomes `x`.

When a class is mapped onto plain characters, each new character that matches
the class gets the next character of the translation. It keeps that mapping
from then on. Once the translation has run out, its last character is used for
every later match.

```
$ echo "coding HELLO abc Good 123" | cctr '[:lower:]' xyz
xyzzzz HELLO zzx Gyyz 123
```

### Deleting

With `-d`, the characters in `TARGET` are removed. A translation, if given, is
ignored.

```
$ echo "hello..." | cctr -d e.
hllo

$ echo "hello..." | cctr -d '[:punct:]'
hello
```

## Library use

```python
import io
from cctr.translator import Translator

tr = Translator("a-d", "e-h", False)
print(tr.translate_line("Coding Challenges"))  # Cohing Chellenges

out = io.StringIO()
Translator("[:lower:]", "[:upper:]", False).translate_stream(io.StringIO("one\ntwo"), out)
print(out.getvalue())  # ONE\nTWO
```

`Translator.translate_char` returns the replacement for one character, or
`None` when it is deleted. `cctr.translator.parse_args` turns an argument list
into `(target, translation, delete)` and raises `UsageError` on bad input.
`cctr.substitution` holds the expression parsing (`classify_expression`,
`expand_expression`, `load_char_class`, `build_substitution_map`), and
`cctr.classes` holds the character classes and their conversion functions.

## What it does not do

There is no squeezing of repeated characters and no complementing of the
target set. Only the seven classes listed above are known, and only one range
per expression is expanded.

## Running the tests

```
pip install .[test]
pytest
```