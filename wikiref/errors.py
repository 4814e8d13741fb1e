from __future__ import annotations

import json
from enum import Enum
from typing import Any, Optional


class ParseErrorKind(Enum):
    TITLE = "title"
    QID = "QID"
    TSV = "TSV line"


class MissingColumnError(ValueError):
    def __init__(self, column: str, path: Any = None) -> None:
        message = f"Cannot find '{column}' column"
        if path is not None:
            message = f"{message} in {path}"
        super().__init__(message)
        self.column = column
        self.path = path


def _error_chain(error: BaseException) -> list[str]:
    chain = []
    seen = set()
    current: Optional[BaseException] = error
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        chain.append(str(current) or type(current).__name__)
        current = current.__cause__
    return chain


class ParseLineError(Exception):
    """A single unparseable line or row of an input file.

    The message is rendered once, at construction, and includes every error in
    the ``__cause__`` chain of ``error`` so nothing is lost when it is logged.
    """

    def __init__(
        self,
        text: str,
        line: int,
        kind: ParseErrorKind,
        error: BaseException,
        osm_id: Optional[int] = None,
    ) -> None:
        self.text = text
        self.line = line
        self.kind = kind
        self.error = error
        self.osm_id = osm_id
        self.causes = _error_chain(error)
        self.message = self._render()
        super().__init__(self.message)

    def _render(self) -> str:
        out = f"on line {self.line}"
        if self.osm_id is not None:
            out += f" ({self.osm_id})"
        out += f": {self.kind.value} {json.dumps(self.text, ensure_ascii=False)}"
        for cause in self.causes:
            out += f": {cause}"
        return out

    def __str__(self) -> str:
        return self.message

    def to_dict(self) -> dict[str, Any]:
        return {
            "line": self.line,
            "osm_id": self.osm_id,
            "kind": self.kind.name,
            "text": self.text,
            "error": ": ".join(self.causes),
        }
