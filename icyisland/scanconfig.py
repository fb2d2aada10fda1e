"""Resource scanner configuration and the header files it writes."""

from __future__ import annotations

import enum
import os
from dataclasses import dataclass
from pathlib import Path
from typing import IO, Iterable, Iterator, Optional

INDEX_FOOTER = "\t return 0;\n}\n\n#endif\n"


class ContentType(enum.Enum):
    NONE = 0
    IMAGE = 1
    TEXT = 2


@dataclass
class FiletypeConfig:
    """How files with one extension are turned into headers."""

    extension: str = ""
    content_type: ContentType = ContentType.NONE
    output_file: str = ""
    use_indexing: bool = False
    output_indexing: str = ""
    first_line: bool = True


def parse_content_type(line: str) -> ContentType:
    if line in ("IMAGE", "image", "img"):
        return ContentType.IMAGE
    if line in ("TEXT", "text", "txt"):
        return ContentType.TEXT
    return ContentType.NONE


def parse_boolean(line: str) -> bool:
    return line in ("TRUE", "True", "true", "1", "yes")


def escape_filepath(filepath: str, extension: str, separator: str = os.sep) -> str:
    """Replace '-' and path separators by '_' and cut off ``.extension``."""
    escaped = filepath.replace("-", "_").replace(separator, "_")
    keep = len(escaped) - len(extension) - 1
    return escaped if keep < 0 else escaped[:keep]


def make_constant(filename: str, extension: str) -> str:
    """Include-guard name: ``data_manager.h`` becomes ``__DATA_MANAGER__``."""
    return "__" + escape_filepath(filename, extension).upper() + "__"


class OutputRegistry:
    """Index files kept open for writing and raw data files already started."""

    def __init__(self) -> None:
        self.started: list[str] = []
        self.opened: dict[str, IO[str]] = {}

    def open_index(self, config: FiletypeConfig, header: str) -> None:
        """Create the index file of ``config`` once and write its preamble."""
        name = config.output_indexing
        if name in self.opened:
            return
        try:
            stream = open(name, "w")
        except OSError as exc:
            self.close(False)
            print(f"[ERROR] Cannot open : {name}")
            raise OSError(f"Cannot open : {name}") from exc
        self.opened[name] = stream
        constant = make_constant(name, config.extension)
        self.write_index(config, f"#ifndef {constant}", True)
        self.write_index(config, f"#define {constant}\n", True)
        self.write_index(config, header, True)

    def start_raw(self, config: FiletypeConfig) -> None:
        """Write the include guard opening of the raw data file once."""
        name = config.output_file
        if name in self.started:
            return
        constant = make_constant(name, config.extension)
        Path(name).write_text(f"#ifndef {constant}\n")
        self.append_raw(name, f"#define {constant}")
        self.append_raw(name, "")
        self.started.append(name)

    def write_index(self, config: FiletypeConfig, content: str, newline: bool = False) -> None:
        stream = self.opened[config.output_indexing]
        stream.write(content)
        if newline:
            stream.write("\n")

    def append_raw(self, filename: str, content: str) -> None:
        with open(filename, "a") as stream:
            stream.write(content + "\n")

    def close(self, success: bool) -> None:
        """Close all files, writing their endings when ``success`` is true."""
        for stream in self.opened.values():
            if not stream.closed:
                if success:
                    stream.write(INDEX_FOOTER)
                stream.close()
        self.opened.clear()
        if success:
            for name in self.started:
                self.append_raw(name, "")
                self.append_raw(name, "#endif")
                self.append_raw(name, "")
        self.started.clear()


def _lines(text: str) -> Iterator[str]:
    if not text:
        return iter(())
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return iter(lines)


def _field(lines: Iterator[str]) -> Optional[str]:
    line = next(lines, None)
    if line is None:
        print("[WARN] Uncomplete field !")
    return line


def _parse_text(lines: Iterator[str]) -> str:
    text = ""
    for line in lines:
        if line.endswith("\\"):
            text += line[:-1] + "\n"
        else:
            text += line
            break
    return text


def read_config(path: str | Path, registry: OutputRegistry) -> list[FiletypeConfig]:
    """Read file type entries, opening their output files in ``registry``."""
    try:
        content = Path(path).read_text()
    except OSError as exc:
        raise OSError(f"Cannot open {path}") from exc
    lines = _lines(content)
    configs: list[FiletypeConfig] = []
    for extension in lines:
        config = FiletypeConfig(extension=extension)
        line = _field(lines)
        if line is None:
            break
        config.content_type = parse_content_type(line)
        if config.content_type is ContentType.NONE:
            print(f"[WARN] Skip {extension} : Invalid content type !")
            continue
        line = _field(lines)
        if line is None:
            break
        config.output_file = line
        line = _field(lines)
        if line is None:
            break
        config.use_indexing = parse_boolean(line)
        if config.use_indexing:
            line = _field(lines)
            if line is None:
                break
            config.output_indexing = line
            registry.open_index(config, _parse_text(lines))
        registry.start_raw(config)
        configs.append(config)
        print(f"[INFO] Configuration saved for : .{extension}")
    return configs


def map_file_types(configs: Iterable[FiletypeConfig]) -> dict[str, FiletypeConfig]:
    """Map extensions to configs; the first config for an extension wins."""
    mapping: dict[str, FiletypeConfig] = {}
    for config in configs:
        mapping.setdefault(config.extension, config)
    return mapping