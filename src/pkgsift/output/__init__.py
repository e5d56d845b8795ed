"""JSON output helpers."""

from pkgsift.output.writer import (
    OutputError,
    OutputWriteError,
    SerializeError,
    dumps_pretty,
    write_json_to_file,
)

__all__ = ["OutputError", "OutputWriteError", "SerializeError", "dumps_pretty", "write_json_to_file"]
