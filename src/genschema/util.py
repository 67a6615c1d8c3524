import sys
from pathlib import Path


def read_bytes(input_path: Path) -> bytes:
    """Read bytes from `input_path`. If it's '-', read from stdin."""
    if input_path.name == "-":
        return sys.stdin.buffer.read()
    else:
        return input_path.read_bytes()


def write_bytes(data: bytes, output_path: Path) -> None:
    """Write `data` to `output_path` with a trailing newline. If it's '-', print to
    stdout."""
    if output_path.name == "-":
        sys.stdout.buffer.write(data + b"\n")
        sys.stdout.buffer.flush()
    else:
        output_path.write_bytes(data + b"\n")
