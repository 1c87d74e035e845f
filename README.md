# chromatic

Building blocks for syntax highlighting:

- **Token types** (`chromatic.types`): the `TokenType` hierarchy (keywords,
  names, literals, operators, comments, generic and text tokens), grouped in
  ranges of 1000 for categories and 100 for sub-categories, so every type knows
  its `category()`, `sub_category()` and `parent()`. A `Token` is a frozen pair
  of a type and the text it covers.
- **Lexers** (`chromatic.lexer`, `chromatic.mutators`, `chromatic.remap`,
  `chromatic.registry`): a regular-expression state machine that turns text
  into `Token`s, mutators that push, pop, include and combine states, a lexer
  wrapper that remaps token types, and a registry that finds a lexer by name,
  alias, file name, MIME type or by scoring the text.
- **Styles** (`chromatic.style`, `chromatic.styles`): Pygments-style entries
  such as `"bold noitalic #f00 bg:#001"`, inheritance from parent token types,
  and a set of ready-made colour schemes.

## Installing

```
pip install chromatic
```

The only runtime dependency is `regex`. The `test` extra adds `pytest`.

## Token types

```python
from chromatic.types import TokenType

tt = TokenType.from_name("NameVariableGlobal")
tt.category()        # TokenType.NAME
tt.sub_category()    # TokenType.NAME
str(tt)              # "NameVariableGlobal"
```

`TokenType.from_name` raises `ValueError` for an unknown name. Short aliases
such as `TokenType.STRING` or `TokenType.WHITESPACE` are the same members as
`LITERAL_STRING` and `TEXT_WHITESPACE`. `chromatic.types.STANDARD_TYPES` maps
types to their short CSS-style class names (`"k"`, `"nf"`, `"s2"`, ...).

## Lexing

A lexer is a `RegexLexer` built from a `Config` and a function returning the
rules: a mapping from state name to a list of `Rule(pattern, type, mutator)`.
There must be a `root` state.

```python
from chromatic.lexer import Config, RegexLexer, Rule, tokenise
from chromatic.mutators import pop, push
from chromatic.types import TokenType as T


def rules():
    return {
        "root": [
            Rule(r"\s+", T.WHITESPACE),
            Rule(r'"', T.STRING, push("string")),
            Rule(r"\w+", T.NAME),
        ],
        "string": [
            Rule(r'[^"]+', T.STRING),
            Rule(r'"', T.STRING, pop(1)),
        ],
    }


lexer = RegexLexer(Config(name="Toy", aliases=["toy"], filenames=["*.toy"]), rules)
for token in tokenise(lexer, None, 'say "hi"'):
    print(token.type, repr(token.value))
```

How it behaves:

- Patterns are compiled on first use, multi-line by default; `Config` can make
  them case-insensitive (`case_insensitive`), let `.` match newlines
  (`dot_all`) or turn multi-line off (`not_multiline`). A pattern that does not
  compile, a missing `root` state or an invalid file-name glob raises
  `LexerError`.
- `lexer.tokenise(options, text)` returns a `LexerState`, which is an iterator
  of tokens; `tokenise(lexer, options, text)` collects them into a list.
- `TokeniseOptions` sets the starting state (`state`, default `"root"`),
  whether `\r\n` and `\r` are rewritten to `\n` (`ensure_lf`, default on) and
  whether the run is `nested`. With `Config(ensure_nl=True)` a missing final
  newline is added for matching but not lexed as extra input.
- Text no rule matches comes out one character at a time as `Error` tokens; an
  unmatched newline outside the starting state resets the stack to it.
- `lexer.trace(True)` prints each step to standard error.

Mutators from `chromatic.mutators`: `push(*states)` (no states pushes the
current one; `"#pop"` pops), `pop(n)`, `include(state)` (a rule replaced by
another state's rules), `combined(*states)` (pushes a new state made of
several), `mutators(*ms)` and `default(*ms)` (a rule that applies mutators
without matching text). `MutatorFunc` wraps a plain function of the state.
`stringify(*tokens)` joins the tokens' text.

Helpers: `words(prefix, suffix, *words)` builds a pattern matching any of the
literal words, longest first; `ensure_lf(text)` rewrites line endings.
`Rules` offers `clone`, `rename` and `merge`.

### Remapping token types

```python
from chromatic.remap import TypeMap, type_remapping_lexer

keywords = type_remapping_lexer(lexer, [TypeMap(T.NAME, T.KEYWORD, ("if", "else"))])
```

A `TypeMap` with no words remaps every token of its `from_` type.
`RemappingLexer(lexer, mapper)` is the general form: `mapper` turns each token
into any number of tokens.

### Finding a lexer

```python
from chromatic.registry import LexerRegistry

registry = LexerRegistry()
registry.register(lexer)
registry.get("toy")          # by name or alias (also lower-cased), else by extension
registry.match("src/a.toy")  # by file-name glob; backups like "a.toy.bak" match too
```

`match_mime_type` looks lexers up by `Config.mime_types`, and `analyse(text)`
returns the lexer whose analyser (set with `set_analyser`) scores the text
highest. Where several lexers match, the highest `Config.priority` wins.
`names(with_aliases)` lists everything registered, sorted.

## Styles

```python
from chromatic.styles.api import get, names
from chromatic.style import parse_style_entry
from chromatic.types import TokenType

print(names())                  # every built-in scheme, sorted

monokai = get("monokai")        # unknown names give FALLBACK ("swapoff")
print(monokai.get(TokenType.NAME_VARIABLE))   # inherits from Name, Text, Background

print(parse_style_entry("bold noitalic #f00 bg:#001"))
```

Entries understand `bold`/`nobold`, `italic`/`noitalic`,
`underline`/`nounderline`, `inherit`/`noinherit`, `#rgb` or `#rrggbb`
colours, ANSI colour names such as `#ansired`, `bg:` and `border:` colours.
An unknown word or bad colour raises `ValueError`; `new_style` and
`StyleBuilder.build` raise it for any bad entry.

A `Style` is immutable. `style.builder()` gives a `StyleBuilder` deriving from
it: `add`, `add_entry`, `add_all`, `transform` (apply a function to every
entry, for instance `Colour.clamp_brightness`) and `build`. Line-number and
line-highlight entries are synthesised from the background when a style does
not define them, so `style.has(TokenType.LINE_NUMBERS)` is always true.

Colours are `Colour` values from `parse_colour`, with `brightness`,
`brighten_or_darken` and `clamp_brightness`. Register your own scheme with
`chromatic.styles.api.register`; the built-in ones live as constants in
`chromatic.styles.set_one` to `set_four`.

## What is not included

There are no lexers for particular languages: every lexer is one you define
with `Rules`. There is also no formatter that renders tokens as HTML or
terminal colours, and no command-line program; the package is a library of
token types, the lexing engine and colour schemes.