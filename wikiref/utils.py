import io
import json
from pathlib import Path

import zstandard as zstd

from . import config


def open_text(path, errors="strict", newline=None):
    """Open a UTF-8 text file for reading, decompressing ``.zst`` files on the fly."""
    path = Path(path)
    if path.suffix == config.ZSTD_SUFFIX:
        raw = open(path, "rb")
        try:
            reader = zstd.ZstdDecompressor().stream_reader(raw, closefd=True)
        except Exception:
            raw.close()
            raise
        return io.TextIOWrapper(reader, encoding="utf-8-sig", errors=errors, newline=newline)
    return open(path, "r", encoding="utf-8-sig", errors=errors, newline=newline)


def read_text(path, newline=None):
    """Return the whole decoded contents of a (possibly compressed) text file."""
    with open_text(path, newline=newline) as fh:
        return fh.read()


def append_jsonl_record(file_handle, record):
    """Append a single JSONL record to an open file handle."""
    file_handle.write(json.dumps(record, ensure_ascii=True))
    file_handle.write("\n")
