"""Walk a data directory and turn every known resource into C headers."""

from __future__ import annotations

import os
import shlex
import subprocess
import sys
from typing import Mapping, Optional, Sequence, Union

from .scanconfig import (
    ContentType,
    FiletypeConfig,
    OutputRegistry,
    escape_filepath,
    map_file_types,
    read_config,
)

MAGIC_CODE = 42
DEFAULT_MAKER = "resource-maker"
USAGE = "Usage : \n\tscanner <datadir> <configFile> [ressource-maker]"

Command = Union[str, Sequence[str]]


def _command(maker: Command) -> list[str]:
    if isinstance(maker, str):
        return shlex.split(maker)
    return list(maker)


def make_label(path: Union[str, os.PathLike], root_offset: int, extension: str) -> str:
    """C identifier for a resource: its path below the data root, escaped."""
    relevant = os.fspath(path)[root_offset:]
    return escape_filepath(relevant, extension)


def _run_maker(maker: Command, mode: str, path: str, label: str, output_file: str) -> None:
    with open(output_file, "a") as out:
        subprocess.run([*_command(maker), mode, path, label], stdout=out, check=False)


def _process(
    entry_path: str,
    config: FiletypeConfig,
    extension: str,
    registry: OutputRegistry,
    maker: Command,
    root_offset: int,
) -> None:
    label = make_label(entry_path, root_offset, extension)
    if config.content_type is ContentType.IMAGE:
        _run_maker(maker, "img", entry_path, label, config.output_file)
    elif config.content_type is ContentType.TEXT:
        label = f"{label}_{extension}"
        _run_maker(maker, "txt", entry_path, label, config.output_file)
        label = f"file_{label}"
    if config.use_indexing:
        # Every entry is written as an independent "if": the shared config is
        # never marked as past its first line.
        keyword = "if" if config.first_line else "else if"
        registry.write_index(config, f"\t{keyword}")
        registry.write_index(config, f'(file == "data/{entry_path[root_offset:]}")', True)
        registry.write_index(config, f"\t\treturn {label};", True)


def scan_directory(
    directory: Union[str, os.PathLike],
    file_types: Mapping[str, FiletypeConfig],
    registry: OutputRegistry,
    maker: Command,
    root_offset: int,
) -> None:
    """Recursively convert every file whose extension has a configuration."""
    directory = os.fspath(directory)
    if not os.path.isdir(directory):
        return
    print(f'Scanning   "{directory}"  ... ')
    with os.scandir(directory) as entries:
        ordered = sorted(entries, key=lambda entry: entry.name)
    for entry in ordered:
        if entry.is_dir():
            scan_directory(entry.path, file_types, registry, maker, root_offset)
            continue
        print(f'Proccess "{entry.name}"')
        suffix = os.path.splitext(entry.name)[1]
        if not suffix:
            continue
        extension = suffix[1:]
        config = file_types.get(extension)
        if config is not None:
            _process(entry.path, config, extension, registry, maker, root_offset)


def _maker_ok(maker: Command) -> bool:
    try:
        result = subprocess.run(
            [*_command(maker), "-magic_code"],
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            check=False,
        )
    except (OSError, ValueError):
        return False
    return result.returncode == MAGIC_CODE


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 2:
        print(USAGE)
        return 0

    registry = OutputRegistry()
    try:
        configs = read_config(args[1], registry)
    except OSError as exc:
        print(f"[ERROR] {exc}")
        return 0
    file_types = map_file_types(configs)

    maker = args[2] if len(args) >= 3 else DEFAULT_MAKER
    if not _maker_ok(maker):
        if len(args) >= 4:
            print(f"{maker} : No such executable file !")
        else:
            print("Cannot find resource-maker in PATH ! ")
        registry.close(False)
        return 0

    data = args[0]
    root_offset = len(data)
    if not data.endswith("/"):
        root_offset += 1

    try:
        if os.path.exists(data):
            if os.path.isdir(data):
                scan_directory(data, file_types, registry, maker, root_offset)
            else:
                print(f'"{data}" is not a directory !')
        else:
            print(f'"{data}" : no such file or directory !')
    except OSError as exc:
        print(f"An error occured : {exc}")

    registry.close(True)
    return 0


if __name__ == "__main__":
    sys.exit(main())