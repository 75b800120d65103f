# wish

A small library, not a framework, for making checks in tests, showing
differences between lists of lines, and keeping expected test data in
readable text files.

## Installing

From a checkout of the package:

```
pip install .
```

To run the package's own tests:

```
pip install ".[test]"
pytest
```

## Checks: `wish` and `require`

`wish.assertions` holds the check functions.

A checker is a callable `check(actual, desired)` that returns a pair
`(problem, passed)`. When `passed` is false, `problem` describes how the
values differ.

`wish(t, actual, check, desired)` runs the checker. On a mismatch it logs
`"<name> check rejected:"` followed by the tab-indented problem through
`t.log`, calls `t.fail()`, and returns `False`; execution carries on. On a
match it returns `True`. The name is the checker's unqualified name.

`require(t, actual, check, desired)` runs the checker the same way, but on
a mismatch logs `"halting: critical <name> check rejected:"` with the
problem, calls `t.fail_now()`, and raises `RequirementFailed` (a subclass
of `AssertionError`) should `fail_now` return.

`t` is any object with the methods of `wish.assertions.T`: `helper`,
`fail`, `fail_now`, `skip_now`, `log` and `name`. `T` itself records what
happens:

- `T(name="test")` starts with an empty `logs` list and `failed` false.
- `log(*args)` appends the arguments, joined by spaces, to `logs`.
- `fail()` sets `failed`.
- `fail_now()` sets `failed` and raises `RequirementFailed` with the last
  log line.
- `skip_now()` raises `unittest.SkipTest`.
- `name()` returns the name.

```python
from wish.assertions import T, wish

def should_be(actual, desired):
    if actual is desired or actual == desired:
        return "", True
    return f"expected {desired!r}, got {actual!r}", False

t = T()
wish(t, 2 + 2, should_be, 4)   # True
wish(t, 2 + 2, should_be, 5)   # False; t.failed is now True
t.logs[-1]                     # "should_be check rejected:\n\texpected 5, got 4"
```

`wish.util.checker_short_name(fn)` gives the name used in those messages.

## Indentation helpers

`wish.indent` normalises heredoc-style strings:

- `indent(s)` puts one tab in front of every non-empty line; an empty
  string becomes a single tab.
- `dedent(s)` drops one leading line holding only a line break, then
  removes from every line as many leading tabs as start the first line,
  taking away only tabs.

`indent_bytes` and `dedent_bytes` do the same on `bytes`.

```python
from wish.indent import dedent, indent

dedent("\n\tone\n\t\ttwo\n")   # "one\n\ttwo\n"
indent("a\nb")                 # "\ta\n\tb"
```

## Sequence matching

`wish.matcher.SequenceMatcher(a, b, is_junk=None, auto_junk=True)`
compares two sequences of strings by finding the longest contiguous
junk-free matching block and recursing on either side of it.

- `get_matching_blocks()` returns `Match(a, b, size)` tuples, merged where
  adjacent and ending with the sentinel `Match(len(a), len(b), 0)`.
- `get_opcodes()` returns `OpCode(tag, i1, i2, j1, j2)` tuples with tags
  `"r"` (replace), `"d"` (delete), `"i"` (insert) and `"e"` (equal).
- `get_grouped_opcodes(n=3)` clusters changes with up to `n` lines of
  context; a negative `n` means three.
- `ratio()`, `quick_ratio()` and `real_quick_ratio()` give the similarity
  `2*M/T` and two cheaper upper bounds on it.
- `set_seqs`, `set_seq1` and `set_seq2` replace the compared sequences.

Elements for which `is_junk` returns true are collected in `b_junk`. With
`auto_junk` on and a second sequence of 200 or more items, elements that
occur in it more than `len(b) // 100 + 1` times are treated as popular and
collected in `b_popular`.

## Text diffs

`wish.textdiff` renders diffs from a `UnifiedDiff` (or `ContextDiff`,
which has the same fields): `a`, `b`, `from_file`, `from_date`, `to_file`,
`to_date`, `eol` and `context`. An empty `eol` means a line feed; a
negative `context` means three lines. The `context` field defaults to 0.

```python
from wish.textdiff import UnifiedDiff, split_lines, unified_diff_string

diff = UnifiedDiff(
    a=split_lines("one\ntwo\nthree"),
    b=split_lines("zero\none\nthree"),
    from_file="Original",
    to_file="Current",
    context=3,
)
print(unified_diff_string(diff))
```

- File header lines are written only when `from_file` or `to_file` is
  set; a date follows its file name after a tab when given.
- Body lines carry a two-character prefix: `"  "`, `"- "` and `"+ "` in
  unified diffs, with `"! "` for replaced lines in context diffs.
- `write_unified_diff(writer, diff)` and `write_context_diff(writer, diff)`
  write to any text stream; `unified_diff_string` and
  `context_diff_string` return a string.
- `format_range_unified(start, stop)` and `format_range_context(start,
  stop)` give the range notation used in hunk headers.
- `split_lines(s)` splits after each line feed and ends every piece,
  including the last, with one.

## Fixture files

`wish.wishfix` reads and writes a plain-text format holding a title and a
list of titled sections, each with optional `## ` comment lines and a
tab-indented body:

```
# file header

---
# section baz
## this will be a comment

	it's all just
	free text

---
```

`Hunks(title, sections)` holds the parsed data as a list of `Section`
objects (`title`, `comment`, `body`).

- `section_list()` returns the section titles in order.
- `get_section(title)` returns the body as bytes, `b""` for an empty
  section and `None` when there is no such section.
- `get_section_comment(title)` returns the comment lines, or `""`.
- `put_section(title, body)` updates an existing section's body in place,
  keeping its comment and position, or appends a new section.

```python
from wish.wishfix import Hunks, dumps, loads

hunks = Hunks(title="file header")
hunks.put_section("section baz", b"free text\n")
data = dumps(hunks)                  # bytes
again = loads(data)                  # accepts bytes or str
again.section_list()                 # ["section baz"]
again.get_section("section baz")     # b"free text\n"
```

`marshal_hunks(writer, hunks)` and `unmarshal_hunks(reader)` work on
binary streams; `save_file(path, hunks)` and `load_file(path)` on paths.
Parsing is lenient about blank lines and missing trailing separators.
When the first line, or the first line of a section, is not a `# title`,
`HunksFormatError` (a `ValueError`) is raised; its message and its `line`
attribute name the line, and its `hunks` attribute holds what was parsed
up to that point.

## What the package does not do

The package ships no ready-made checkers: there is no built-in equality
or structural comparison to pass to `wish` or `require`, so you supply
your own checker functions. It has no command-line tool.