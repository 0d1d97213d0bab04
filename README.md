# yamlls

Building blocks for YAML editor support in the style of a language server.
The functions work on plain document text. They report positions the way
editors expect them: 0-based lines and 0-based UTF-16 character offsets.
Internally they use parser coordinates, which are 1-based lines and 1-based
UTF-8 byte columns.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

### `yamlls.positions`

- `Position`, `Range` and `TextEdit` are frozen dataclasses. Each has a
  `to_dict()` method that returns the JSON shape an editor expects.
- `line_text_of(src, line)` returns the text of a 1-based line without its
  newline. A line past the end returns `""`.
- `byte_col_to_utf16(line, byte_col)` converts a 1-based byte column into a
  UTF-16 offset.
- `lsp_pos_from_parser(src, line, byte_col)` converts parser coordinates
  into a `Position`.
- `lsp_pos_line_end(src, line)` returns the position just past the end of a
  line.

### `yamlls.documents`

`DocumentStore` is a thread-safe store that keeps the latest text of each
URI.

- `set(uri, text, version)` writes the text and returns `True`. A write whose
  version is older than the stored version is dropped and returns `False`.
  Negative versions are treated as 0.
- `get(uri)` returns the stored text, or `None` if the URI is not stored.
- `delete(uri)` removes the text and its version.
- `warned()` reports whether the soft-limit warning is armed.

The store also supports `len()` and `in`. When it first holds more than 1024
documents it logs a warning to the `yaml-lsp` logger. It never evicts
documents.

### `yamlls.config`

- `parse_init_options(raw)` builds a `Config` from a client's initialization
  options. It reads `format.indentation` and `format.normalizeStrings` into
  a `FormatConfig` with the fields `indentation` and `normalize_strings`.
  Unknown fields are ignored. A malformed payload gives the defaults.
- `resolve_indentation(value)` maps the indentation option to an integer.
  It returns 0, meaning "detect", for strings, for absent values and for
  numbers below 1. It returns the truncated integer for numbers of 1 or more.
- `server_capabilities()` returns the capabilities dictionary that an
  initialize response would carry.

### `yamlls.anchor_names`

`validate_anchor_name(name)` returns the name if it is valid. It raises
`InvalidAnchorNameError`, a `ValueError`, when the name is empty or contains
any of the following:

- whitespace
- a flow indicator: `, [ ] { }`
- a sigil: `& * !`

### `yamlls.completion`

Helpers for completing alias names after `*`:

- `alias_prefix_at(text, line, col)` returns `(prefix, prefix_start_col)`.
  It returns `None` when the cursor is not in a `*name` context.
- `mask_alias_context(text, line, name_start_col, prefix)` blanks out the
  `*prefix` span. The byte length of the text stays the same.
- `is_anchor_name_char(c)` reports whether a character or byte value may
  appear in an anchor name.
- `anchor_detail(line)` returns a label such as `"anchor at line 3"`.
- `byte_offset_of(text, line, col)` converts parser coordinates into a byte
  offset.

### `yamlls.rangeformat`

`range_edits(text, formatted, rng)` takes the original text, an already
formatted version of it and a `Range`. It snaps the range to whole lines and
returns one `TextEdit` for each contiguous run of changed lines inside it. If
formatting changed the number of lines, it returns a single edit that
replaces the whole document instead.

The module also exposes the helpers that `range_edits` uses:

- `split_keep_empty`
- `slice_terminator`
- `whole_document_range`
- `snap_range_to_lines`
- `extract_line_slice`
- `line_start_byte`

### `yamlls.folding`

`folding_ranges(text)` returns one `FoldingRange(start_line, end_line)` for
each mapping entry or sequence element that spans more than one line, across
all documents in the stream. Text that does not parse gives an empty list.

`node_start` and `max_node_line` work on the module's internal node tree.

### `yamlls.diagnostics`

`compute_diagnostics(text)` parses the text with PyYAML and returns a list of
`Diagnostic` values.

- A clean parse gives an empty list.
- A parse error, or an alias to an undefined anchor, gives a single
  error-severity diagnostic at the reported position.
- If the error has no position, the diagnostic covers the first line
  instead.

## What the package does not do

- It does not run a server. There is no JSON-RPC transport and no command to
  start one.
- It has no request handlers for hover, go-to-definition, references,
  rename or document symbols.
- It does not reformat YAML itself. `range_edits` expects the formatted text
  to be supplied.

## Example

```python
from yamlls.completion import alias_prefix_at
from yamlls.diagnostics import compute_diagnostics
from yamlls.folding import folding_ranges

text = "defaults: &d\n  timeout: 30\nserver:\n  <<: *d\n"

for fold in folding_ranges(text):
    print(fold.start_line, fold.end_line)

for diag in compute_diagnostics("foo:\n\tbar: 1\n"):
    print(diag.to_dict())

# Cursor just after "*" on line 4 (parser coordinates: 1-based).
print(alias_prefix_at(text, 4, 8))  # ('', 8)
```