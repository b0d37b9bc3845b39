# filescout

filescout searches files, directories and ZIP archives for a string and
prints the lines that contain it. If no search string is given, it prints
the contents of the files instead.

## Installation

    pip install .

To run the tests as well:

    pip install ".[test]"
    pytest

## Command line

    filescout [options] <file-or-directory>

Options:

- `-s TEXT`: the string to search for. Leave it out to print file contents.
- `-i`: ignore case when matching.
- `-n`: put the line number in front of each matching line, as `12: line`.
- `-r`: go into subdirectories when the path is a directory.
- `-o`: in a directory, only show files that contain a match. For a single
  file, it turns off the "no matches" message.
- `-ext LIST` (or `--ext LIST`): only look at files with these extensions,
  separated by commas, for example `.html,.txt,.zip`. Extensions are compared
  without regard to case.

If no path is given, a usage message is printed. If the path does not exist,
an error goes to standard error and the exit status is 1.

How files are handled:

- Files are read line by line. Bytes that are not valid UTF-8 are replaced.
- A file whose name ends in `.zip` is treated as a ZIP archive. filescout
  searches every member of the archive and prints a heading before the
  matches of each member that contains a match.
- If no search string is given, a ZIP archive's members are listed with their
  uncompressed sizes.
- If more than 5% of a file's bytes are control characters (other than tab,
  newline, carriage return and form feed), the file is reported as binary and
  its contents are not printed.
- In a directory, files are visited in sorted name order. Symbolic links and
  other files that are not regular files are skipped.

Examples:

    filescout -s TODO -n -r -ext .py,.txt ./project
    filescout -s error -i logs.zip
    filescout notes.txt

## Web front end

    filescout-server [--host HOST] [--port PORT] [--frontend DIR]

This starts an HTTP server, by default on port 8080. It serves the static
files in the `frontend` directory (`/` serves `index.html`). At
`/api/search` it answers GET and POST with JSON, and OPTIONS with an empty
response. These answers carry CORS headers.

## Library use

`filescout.search` holds the search functions:

- `parse_extensions`
- `has_valid_extension`
- `is_text`
- `file_contains`
- `zip_contains`
- `search_in_file`
- `search_in_zip_file`
- `print_file_content`
- `print_zip_content`
- `search_in_directory`, which takes a `SearchRequest`

Each function that prints takes an optional `out` text stream. If it is not
given, output goes to standard output.

`filescout.domain` holds the data types `SearchRequest`, `SearchResult`,
`Match` and `FileContent`, and the `FileRepository` and `DataExtractor`
protocols.

`filescout.cli.run(argv, out)` runs the command and returns its exit status.

## What it does not do

- `/api/search` does not search anything. It always returns the same single
  sample entry, from `filescout.server.search_results()`.
- `FileRepository` and `DataExtractor` are interfaces only. The package does
  not implement either of them.