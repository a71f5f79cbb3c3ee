# terrier

A small command-line tool for getting a quick look at source files written in
Python, Rust or JavaScript (`.py`, `.rs` and `.js` files).

## Installation

```
pip install .
```

## Usage

Terrier has three subcommands: `grep`, `func` and `link`. Each one takes a path
with `-p` / `--paths`.

### grep: fuzzy keyword search in one file

```
terrier grep -p path/to/file.py -k keyword
```

The file must exist and have a supported extension. Terrier prints a table
titled `<keyword> in <file name>`. The table gives the file's total line count,
the number of lines that fuzzily match the keyword, and the match density as a
percentage with two decimals. An empty file gives a density of `NaN%`.

A line matches when the keyword's characters appear in it in order, though not
necessarily next to each other. Matching ignores case unless the keyword
contains an uppercase letter.

### func: count functions in one file

```
terrier func -p path/to/file.rs
```

Prints a table titled with the file name. It gives the total line count and
the number of lines that contain the language's function keyword: `def` for
Python, `fn` for Rust and `function` for JavaScript. This is a plain substring
count, so a line such as `# define` also counts for Python. A file without an
extension prints nothing after the header line.

### link: find where function definitions appear across a directory

```
terrier link -p path/to/project
```

Walks the path in name order. It skips hidden entries (names starting with
`.`) and entries named `venv`, `env`, `uv.lock`, `node_modules`,
`__pycache__`, `site-packages`, `dist`, `build` or `target`. It reads every
`.py`, `.rs` and `.js` file it finds. Files are keyed by their bare file name,
so a later file with the same name replaces an earlier one.

In every file, terrier finds function signatures: `def name(...)`,
`fn name(...)` or `function name(...)` up to the first closing parenthesis. It
then lists each file whose text contains that signature followed by
whitespace or `(`. The output is a grid table with the columns
*Source File*, *Function Name* (the matched signature text) and
*References*, sorted by source file and signature.

### Errors

A missing file, an unsupported extension, or a file that cannot be read or
decoded as UTF-8 prints `error: ...` to standard error. The command then exits
with status 1.

## Library use

The same features can be used from Python:

```python
from terrier.link import CodeLinkAnalyzer

analyzer = CodeLinkAnalyzer()
analyzer.file_content_extractor("path/to/project")
analyzer.function_extractor()
analyzer.overlaps()
for source_file, signature, references in analyzer.link_rows():
    print(source_file, signature, references)
print(analyzer.link_builder())  # the rendered table
```

- `terrier.grep.search_file_for_keyword(keyword, filename)` returns a
  `GrepSummary` with `total_lines`, `matches` and `match_density`.
  `terrier.grep.fuzzy_match` and `terrier.grep.count_matches` expose the
  matching on its own.
- `terrier.func.func_identification(filename)` returns a `FuncSummary` with
  `language`, `total_lines` and `functions`. It returns `None` for a file
  without an extension. `terrier.func.function_keyword(extension)` gives the
  keyword for an extension.
- Both summaries have a `render()` method that returns the table text.
- `terrier.utils.get_extension_from_filename` checks a path. A path with an
  unsupported extension raises `UnsupportedFileTypeError` (a `ValueError`),
  and a missing path raises `FileNotFoundError`.
- `terrier.utils.render_table(rows, title=None, style="simple_grid")` is the
  table helper the commands use.

## Running the tests

```
pip install .[test]
pytest
```