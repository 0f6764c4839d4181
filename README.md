# fzfkit

Building blocks for an interactive fuzzy finder: scoring match algorithms,
folding of accented Latin letters, ANSI color extraction, chunked item
storage with a per-query result cache, and a file-backed query history.
The package has no dependencies outside the standard library.

## Installation

```
pip install fzfkit
```

To also install what the test suite needs:

```
pip install "fzfkit[test]"
```

## Matching

Every algorithm takes the same arguments:

```
(case_sensitive, normalize, forward, text, pattern, with_pos=False, scheme=None)
```

and returns a `MatchResult` (`start`, `end`, `score`) together with a list
of matched positions or `None`. A miss is `MatchResult(-1, -1, 0)`.
When matching without case sensitivity, pass the pattern in lower case;
when `normalize` is on, pass it already normalized.

```python
from fzfkit.algo.scheme import default_scheme
from fzfkit.algo.fuzzy import fuzzy_match_v1, fuzzy_match_v2
from fzfkit.algo.exact import (
    exact_match_naive,
    exact_match_boundary,
    prefix_match,
    suffix_match,
    equal_match,
)

scheme = default_scheme()
result, positions = fuzzy_match_v2(False, False, True, "foo bar baz", "fbb", True, scheme)
print(result.start, result.end, result.score, positions)
```

In `fzfkit.algo.fuzzy`:

- `fuzzy_match_v2` examines every alignment and returns the one with the
  highest score; with `with_pos` it traces back the matched positions.
- `fuzzy_match_v1` takes the first occurrence, shortens it from the end and
  scores it; with `with_pos` it also returns positions.
- `ascii_fuzzy_index` narrows the range of an ASCII text worth scanning.

In `fzfkit.algo.exact` (these never return positions):

- `exact_match_naive` finds a contiguous occurrence, preferring the one
  whose first character has the best bonus.
- `exact_match_boundary` accepts only occurrences that start and end on
  word boundaries.
- `prefix_match` and `suffix_match` anchor the pattern at the start or end,
  ignoring leading or trailing whitespace unless the pattern begins or ends
  with a space.
- `equal_match` matches when the text, stripped of surrounding whitespace,
  equals the pattern.

`forward=False` makes the scanning algorithms prefer the last occurrence.

### Scoring schemes

`fzfkit.algo.scheme` holds `CharClass`, `MatchResult`, `ScoringScheme`,
`default_scheme()` and `calculate_score`. `ScoringScheme.from_name`
accepts `"default"`, `"path"` and `"history"` and raises `ValueError` for
any other name. A scheme exposes `char_class_of`, `bonus_for` and
`bonus_at`.

### Normalization

`fzfkit.algo.normalize` provides `normalize_rune(char)` and
`normalize_runes(text)`, which fold accented and variant Latin letters to
their plain base letter (for example `"Danço"` becomes `"Danco"`).

## ANSI colors

```python
from fzfkit.ansi import extract_color

text, offsets, state = extract_color("hello \x1b[34;45;1mworld", None, None)
# text == "hello world"
# offsets == [AnsiOffset(start=6, end=11, color=AnsiState(fg=4, bg=5, attr=Attr.BOLD, ...))]
```

`extract_color(text, state, proc)` strips escape sequences, returns the
plain text, the colored spans (or `None`) and the state in effect at the
end, which can be passed in for the next line. The optional `proc` callback
sees each plain piece with its state and can stop the extraction by
returning `False`.

Lower-level pieces: `next_ansi_escape_sequence(text)` returns the span of
the first escape sequence or `(-1, -1)`; `parse_ansi_code` splits off one
SGR parameter; `interpret_code(code, prev_state)` applies one sequence to a
state; `AnsiState.to_string()` writes a state back out as an escape
sequence, and `AnsiState.colored()` tells whether it differs from the
terminal default. OSC 8 hyperlinks are tracked as `Url` values.

## Items, chunks and caching

`fzfkit.item.Item` holds the matched `text`, its `index`, the optional
`orig_text` it was derived from and its color spans. `Item.as_string(strip_ansi)`
returns the original line, without escape sequences if asked.

`fzfkit.chunklist.ChunkList(cache, builder)` collects items in `Chunk`s of
100. The builder turns each pushed record into an `Item`, or returns `None`
to leave it out:

```python
from fzfkit.cache import ChunkCache
from fzfkit.chunklist import ChunkList, count_items
from fzfkit.item import Item

chunks = ChunkList(ChunkCache(), lambda line: Item(text=line))
chunks.push("hello")
chunks.push("world")
snapshot, count, changed = chunks.snapshot()
```

`snapshot(tail)` returns a view that later pushes do not alter; with a
positive `tail` only the last `tail` items are kept and the rest are dropped
for good, and `changed` reports that this happened.

`fzfkit.cache.ChunkCache` remembers small result lists (at most 20) for
full chunks: `add`, `lookup` for an exact query, `search` for the longest
cached prefix or suffix of a query, `retire` for dropping chunks and `clear`.

## History

```python
from fzfkit.history import History

history = History("/tmp/finder-history", 1000)
history.append("query")
history.previous()
```

The file is created when missing. A path that cannot be read or written
raises `PermissionError` or `ValueError`. `override` changes the entry under
the cursor in memory only; `current`, `previous` and `next` browse entries.

## Other helpers

`fzfkit.functions.write_temporary_file(data, print_sep)` writes lines to a
new temporary file and returns its path, or `None` on failure;
`remove_files` deletes files, ignoring errors. `fzfkit.constants` holds the
tuning constants and the `Event` and `ExitCode` enumerations.

## What this package does not do

It has no command-line program, no interactive terminal screen, no input
reader, and no parallel matcher or result merger. It provides the matching,
color, storage and history pieces that such a program would be built from.