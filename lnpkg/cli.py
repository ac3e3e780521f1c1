"""Command line entry point: bundle a Node.js project into one executable."""

from __future__ import annotations

import os
import shutil
import subprocess
import sys
from pathlib import Path
from typing import Optional, Sequence, Union

from lnpkg.builder import (
    BuildError,
    write_lnpkg_h,
    write_main,
    write_node,
    write_node_s,
)
from lnpkg.color import green_print, red_print, yellow_print
from lnpkg.fsutil import have_dir, make_dir, remove_tree

BUILD_DIR = Path("lnpkg-build")
SOURCE_DIR = BUILD_DIR / "source"
CONFIG_NAME = "lnpkg_config"


def read_app_name(config_path: Union[str, "os.PathLike[str]"]) -> str:
    """Return the application name: the first line of the config up to ';'.

    Raises OSError if the file cannot be read and ValueError if the first
    line holds no ';' before its end.
    """
    with open(config_path) as config:
        line = config.readline()
    for terminator in ("\r", "\n"):
        line = line.split(terminator, 1)[0]
    name, separator, _ = line.partition(";")
    if not separator:
        raise ValueError(f"{config_path}: application name must end with ';'")
    return name


def _copy_project_file(project: Path, name: str) -> bool:
    try:
        shutil.copy(project / name, SOURCE_DIR / name)
    except OSError:
        print(
            f"[Error]: Unable to move {name} file in target folder, file may "
            "not exist."
        )
        return False
    yellow_print(f"[Log]: Added {name} in source folder.\n")
    return True


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Build the project folder named in *argv* into ``lnpkg-build``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print("Please provide project folder.")
        return 1
    project = Path(args[0])

    yellow_print("[Log]: Making Builder folder...\n")
    remove_tree(BUILD_DIR)
    try:
        make_dir(BUILD_DIR)
    except OSError:
        print(
            "[Error]: Builder folder (lnpkg-build) may already exist or failed "
            "to create."
        )
        return 1
    yellow_print("[Log]: Builder folder (lnpkg-build) created successfully.\n")

    yellow_print("[Log]: Making Source folder...\n")
    try:
        make_dir(SOURCE_DIR)
    except OSError:
        print(
            "[Error]: Source folder (lnpkg-build) may already exist or failed "
            "to create."
        )
        return 1
    yellow_print("[Log]: Source folder (lnpkg-build/source) created successfully.\n")

    try:
        write_main(SOURCE_DIR)
        write_node(SOURCE_DIR, os.environ.get("PREFIX"))
        write_node_s(SOURCE_DIR)
        write_lnpkg_h(SOURCE_DIR)
    except BuildError as exc:
        red_print(f"[Error]: {exc}\n")
        return 1

    for name in ("index.js", "package.json"):
        if not _copy_project_file(project, name):
            return 1

    modules = project / "node_modules"
    if have_dir(modules):
        try:
            shutil.copytree(modules, SOURCE_DIR / "node_modules")
        except OSError:
            print(
                "[Error]: Unable to move node modules file in target folder, "
                "file may not exist."
            )
            return 1
    yellow_print("[Log]: Added node modules in source folder.\n")

    try:
        app_name = read_app_name(project / CONFIG_NAME)
    except OSError:
        red_print("[Error]: Config file (lnpkg_config) not found.\n")
        return 1
    except ValueError as exc:
        red_print(f"[Error]: {exc}\n")
        return 1

    command = [
        "gcc",
        str(SOURCE_DIR / "app.c"),
        str(SOURCE_DIR / "node.s"),
        "-o",
        str(BUILD_DIR / app_name),
    ]
    try:
        compiled = subprocess.run(command).returncode == 0
    except OSError:
        compiled = False
    if compiled:
        yellow_print("[Log]: Added application executable in build folder.\n")
    else:
        red_print("[Error]: Unable to add application executable in build folder.\n")

    green_print("[Success]: Project compiled successfully.\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())