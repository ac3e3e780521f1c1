"""Writers for the generated launcher sources and the bundled node binary."""

from __future__ import annotations

import os
import shutil
import textwrap
from pathlib import Path
from string import Template
from typing import Optional, Union

from lnpkg.color import red_print, yellow_print

PathLike = Union[str, "os.PathLike[str]"]

# Each embedded blob: (symbol stem, file name inside the extraction folder).
_BLOBS = (("node", "node"), ("indexjs", "index.js"))
_RUNTIME_DIR = "lnpkg"


class BuildError(Exception):
    """Raised when a build file cannot be written."""


def _includes(*headers: str) -> str:
    return "\n".join(f"#include {header}" for header in headers)


def _symbol(stem: str, edge: str) -> str:
    return f"_binary_{stem}_{edge}"


def _render_main() -> str:
    statements = [f'lnpkg_mkdir("{_RUNTIME_DIR}")']
    statements += [f"lnpkg_write{stem}()" for stem, _ in _BLOBS]
    statements += [
        f'system("chmod +x {_RUNTIME_DIR}/node")',
        f'system("./{_RUNTIME_DIR}/node {_RUNTIME_DIR}/index.js")',
        "lnpkg_cleanup()",
        "return 0",
    ]
    body = "".join(f"  {statement};\n" for statement in statements)
    header = _includes("<stdlib.h>", "<stdio.h>", '"lnpkg.h"')
    return f"{header}\n\nint main(){{\n{body}}}"


def _render_node_s(source: str) -> str:
    lines = [
        f".global {_symbol(stem, edge)}"
        for stem, _ in _BLOBS
        for edge in ("start", "end")
    ]
    lines += ["", ".section .rodata"]
    for stem, filename in _BLOBS:
        lines += [
            f"{_symbol(stem, 'start')}:",
            f'    .incbin "{source}/{filename}"',
            f"{_symbol(stem, 'end')}:",
        ]
    return "\n".join(lines) + "\n"


_DIR_WRAPPER = Template(
    textwrap.dedent(
        """\
        int lnpkg_${op}(char* dir) {
          return ${call};
        }"""
    )
)

_BLOB_WRITER = Template(
    textwrap.dedent(
        """\
        static int lnpkg_write${stem}() {
          const unsigned char* ${stem} = ${start};
          size_t ${stem}_len = (size_t)(${end} - ${start});

          FILE* ${stem}_f = fopen("${dir}/${filename}", "wb");

          if (!${stem}_f) {
            perror("fopen");
            return 1;
          }

          size_t written = fwrite(${stem}, 1, ${stem}_len, ${stem}_f);
          fclose(${stem}_f);

          if (written != ${stem}_len) {
            fprintf(stderr, "Error: failed to write full ${stem} (wrote %zu of %zu bytes)\\n",
                    written, ${stem}_len);
            return 1;
          }

          return 0;
        }"""
    )
)


def _render_lnpkg_h() -> str:
    externs = "\n".join(
        f"extern const unsigned char {_symbol(stem, edge)}[];"
        for stem, _ in _BLOBS
        for edge in ("start", "end")
    )
    writers = [
        _BLOB_WRITER.substitute(
            stem=stem,
            start=_symbol(stem, "start"),
            end=_symbol(stem, "end"),
            dir=_RUNTIME_DIR,
            filename=filename,
        )
        for stem, filename in _BLOBS
    ]
    removals = "".join(
        f'  remove("{_RUNTIME_DIR}/{filename}");\n' for _, filename in reversed(_BLOBS)
    )
    cleanup = (
        "void lnpkg_cleanup() {\n"
        f"{removals}"
        f'  lnpkg_rmdir("{_RUNTIME_DIR}");\n'
        "}"
    )
    sections = [
        _includes("<stdio.h>", "<stdlib.h>"),
        externs,
        _includes("<sys/stat.h>", "<unistd.h>"),
        _DIR_WRAPPER.substitute(op="mkdir", call="mkdir(dir, 0755)"),
        _DIR_WRAPPER.substitute(op="rmdir", call="rmdir(dir)"),
        *writers,
        cleanup,
    ]
    return "\n\n".join(sections)


def _write(path: Path, content: str, error: str) -> Path:
    try:
        path.write_text(content)
    except OSError as exc:
        raise BuildError(error) from exc
    return path


def write_main(source_dir: PathLike) -> Path:
    """Write the launcher's app.c into *source_dir* and return its path."""
    path = _write(
        Path(source_dir) / "app.c",
        _render_main(),
        "Writing app in lnpkg-build failed.",
    )
    yellow_print("[Log]: Application created successfully.\n")
    return path


def write_node_s(source_dir: PathLike) -> Path:
    """Write node.s, which embeds node and index.js, into *source_dir*."""
    source = Path(source_dir)
    return _write(
        source / "node.s",
        _render_node_s(source.as_posix()),
        "Writing node.s in lnpkg-build failed.",
    )


def write_lnpkg_h(source_dir: PathLike) -> Path:
    """Write the launcher's lnpkg.h into *source_dir* and return its path."""
    return _write(
        Path(source_dir) / "lnpkg.h",
        _render_lnpkg_h(),
        "Writing lnpkg.h in lnpkg-build failed.",
    )


def write_node(source_dir: PathLike, prefix: Optional[str]) -> None:
    """Copy ``<prefix>/bin/node`` into *source_dir*, reporting the outcome."""
    if prefix is None:
        red_print("[Error]:  Failed to get NODE Bin\n")
        return
    try:
        shutil.copy(Path(prefix) / "bin" / "node", Path(source_dir) / "node")
    except OSError:
        red_print(
            "[Error]:  Unable to move node file in target folder, file may not "
            "exist.\n"
        )
    else:
        yellow_print("[Log]: added node in source folder.\n")