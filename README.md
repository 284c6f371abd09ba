# sqlinlist

`sqlinlist` takes a column of values, one per line, and turns it into text you
can paste into a SQL query.

- Up to 980 lines give a quoted, comma-separated list:

  ```
  'A001','A002','A003'
  ```

- More than 980 lines need a column name. The values are then split into
  `IN (...)` groups, one for each run of 980 input lines. The groups are joined
  with `OR`, which keeps each list under the size limit that some databases set:

  ```
  ITEM_CODE IN ('A001','A002',...) OR ITEM_CODE IN ('A981',...,'A1200' )
  ```

The program trims the whitespace around each line and skips empty lines. Line
breaks may be `\n`, `\r\n` or `\r`. The output starts with the first line, so
if that line is empty the output begins with a comma, and in the grouped form
the first `column IN (` is missing.

## Installation

```
pip install .
```

## Command line

```
sqlinlist values.txt
sqlinlist < values.txt
```

The formatted text is written to standard output.

Options:

- `-c NAME`, `--column NAME`: the column name to use when the input has more
  than 980 lines. If you leave it out, a file input makes the program ask
  `Column name:` at the terminal. Standard-input input stops with an error
  instead.
- `-r OLD NEW`, `--replace OLD NEW`: replaces every `OLD` with `NEW` in the
  result. You can give this option more than once, and the replacements run in
  order.
- `-s FILE`, `--snippet FILE`: prints the given UTF-8 file in place of
  formatting any input. `--replace` still applies to it.

## Library use

```python
from sqlinlist.formatting import (
    format_value_list, format_in_clauses, needs_column, format_text, split_lines,
)

format_value_list(["A001", "A002"])     # "'A001','A002'"
needs_column(lines)                     # True when len(lines) > 980
format_in_clauses(lines, "ITEM_CODE")   # "ITEM_CODE IN ('A001',...) OR ITEM_CODE IN (...)"
format_text(text, column)               # splits text into lines and picks the form
```

`format_text` raises `ValueError` when the text has more than 980 lines and no
column is given. `BATCH_SIZE` holds the limit of 980.

`sqlinlist.editor.Editor` holds a text buffer (`text`) and a `SnippetStore`
(`snippets`). It has these methods:

- `clear()` empties the text.
- `format(column=None)` replaces the text with its formatted form and returns it.
- `replace(old, new)` replaces every `old` and returns the number of
  replacements. An empty `old` changes nothing.
- `show_snippet(index)` puts a stored snippet into the text. An unknown index
  gives empty text.

`sqlinlist.snippets.SnippetStore` keeps texts by number:

- `load(path, index)` reads a UTF-8 file into a slot. Invalid bytes are
  replaced.
- `add(index, text)` stores a text in a slot.
- `get(index)` returns the text in a slot, or `""` if the slot is empty.

`decode_utf8(data)` decodes UTF-8 bytes. It also accepts a string whose
characters hold raw byte values.

`sqlinlist.editor.write_help_page(content, directory=None)` writes `content` to
a new temporary `.html` file and returns its path. `open_in_browser(path)`
opens an existing file in the default web browser. It raises
`FileNotFoundError` if the file is missing, and `OSError` if no browser could
open it.

## What it does not do

There is no graphical window. Everything runs from the command line or from
Python. The package ships no SQL snippets and no help page of its own. Snippets
come only from files you load, and help pages only from content you pass in.