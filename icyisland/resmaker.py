"""Turn images and text files into C source arrays and strings."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional, Sequence

from PIL import Image

MAGIC_CODE = 42
TRANSPARENT = 0xF81F
IMAGE_MAGIC = 0x2A01
_ROW_LENGTH = 8

USAGE = (
    "Usage : \n"
    "\tresource-scanner img img1 lbl1 [img2 lbl2] ...\n"
    "\tresource-scanner txt txt1 lbl1 [txt2 lbl2] ...\n"
)


def rgb565(r: int, g: int, b: int, a: int) -> int:
    """Pack a colour as RRRRRGGGGGGBBBBB; fully transparent becomes magenta."""
    if a == 0:
        return TRANSPARENT
    return ((r & 0xFF) >> 3) << 11 | ((g & 0xFF) >> 2) << 5 | ((b & 0xFF) >> 3)


def image_to_array(path: str | Path, label: str) -> str:
    """C declaration of an unsigned short array holding the image in RGB565."""
    with Image.open(path) as image:
        rgba = image.convert("RGBA")
    width, height = rgba.size
    parts = [
        f"static unsigned short {label}[] = {{\n",
        f"\t0x{IMAGE_MAGIC:x}, 0x{width:x}, 0x{height:x}, 0x0000",
    ]
    column = 4
    for pixel in rgba.getdata():
        if column % _ROW_LENGTH == 0:
            column = 0
            parts.append("\n\t")
        parts.append(f", 0x{rgb565(*pixel):x}")
        column += 1
    parts.append("\n};\n\n\n")
    return "".join(parts)


def _split_lines(data: str) -> list[str]:
    if not data:
        return []
    lines = data.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def text_to_string(path: str | Path, label: str) -> str:
    """C declaration of a string holding the file, quotes escaped, CRs dropped."""
    content = Path(path).read_bytes().decode("latin-1")
    parts = [f'static const char *file_{label} = "']
    for line in _split_lines(content):
        escaped = line.replace("\r", "").replace("\xff", "").replace('"', '\\"')
        parts.append(escaped + "\\n\\\n")
    parts.append('";\n\n')
    return "".join(parts)


def _pairs(args: Sequence[str]):
    for index in range(0, len(args) - 1, 2):
        yield args[index], args[index + 1]


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 0
    command = args[0]
    if command == "-magic_code":
        return MAGIC_CODE
    if command in ("--help", "-help", "-h", "--usage"):
        sys.stdout.write(USAGE)
        return 0
    if command == "img":
        for path, label in _pairs(args[1:]):
            try:
                sys.stdout.write(image_to_array(path, label))
            except OSError as exc:
                print(f"Cannot load {path}: {exc}", file=sys.stderr)
                return 1
    elif command == "txt":
        for path, label in _pairs(args[1:]):
            try:
                sys.stdout.write(text_to_string(path, label))
            except OSError:
                continue
    return 0


if __name__ == "__main__":
    sys.exit(main())