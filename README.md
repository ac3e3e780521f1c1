# lnpkg

`lnpkg` turns a Node.js project into one standalone executable. It takes the
project's `index.js` and the `node` binary of the current environment and
writes a small C launcher that embeds both, then compiles it with `gcc`. When
the finished program runs, it unpacks `node` and `index.js` into an `lnpkg/`
directory in the current working directory, runs `node lnpkg/index.js` and
then removes that directory again.

## Requirements

- A POSIX system with `gcc` on the `PATH`.
- The `PREFIX` environment variable must point at the installation that holds
  `bin/node`. Termux sets this variable already. If `PREFIX` is unset or
  `bin/node` cannot be copied, an error line is printed and the build goes on
  without it.

## Project layout

The project folder must contain:

- `index.js`: the entry point.
- `package.json`.
- `lnpkg_config`: the first line holds the application name and ends with `;`.
  For example:

  ```
  myapp;
  ```

A `node_modules/` directory is copied into the build if it is present.

## Usage

```
pip install .
lnpkg path/to/project
```

Run it from the directory where the build should go. It removes any existing
`lnpkg-build/` directory there and creates a new one:

```
lnpkg-build/
  source/
    app.c
    lnpkg.h
    node.s
    node
    index.js
    package.json
    node_modules/
  myapp          <- the compiled executable
```

Every step prints a coloured progress line. The command exits with status 1
when no project folder is given, when the build folders cannot be created, when
a generated source cannot be written, when `index.js`, `package.json` or
`node_modules/` cannot be copied, or when `lnpkg_config` is missing or its first
line has no `;`. A failed `gcc` run prints an error line, but the command still
prints its success line and exits with status 0.

## Library use

The building blocks can also be imported:

- `lnpkg.builder`: `write_main`, `write_node_s` and `write_lnpkg_h` write
  `app.c`, `node.s` and `lnpkg.h` into a source directory and return the path
  written; `BuildError` is raised when a file cannot be written.
  `write_node(source_dir, prefix)` copies `<prefix>/bin/node` into the source
  directory and reports the outcome instead of raising.
- `lnpkg.fsutil`: `make_dir`, `remove_dir`, `have_dir`, `list_dir` (returns
  `DirEntry` items tagged with a `FileType`; an unreadable directory gives an
  empty list) and `remove_tree`, which removes a directory tree and ignores
  failures.
- `lnpkg.cli`: `read_app_name` reads the application name from a config file,
  raising `OSError` if it cannot be read and `ValueError` if the first line has
  no `;`. `main` is the command-line entry point and returns the exit status.
- `lnpkg.color`: `colorize`, `red_print`, `green_print` and `yellow_print`,
  with colours from the `Color` enum.

## Tests

```
pip install ".[test]"
pytest
```