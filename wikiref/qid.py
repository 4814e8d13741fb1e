from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from . import config


class QidErrorKind(Enum):
    EMPTY = "value is empty or whitespace"
    PREFIX = "missing 'Q' prefix"
    NO_NUMBER = "no number after 'Q' prefix"
    NOT_NUMBER = "id is not a number"
    LEADING_ZERO = "id is zero or has a leading zero"


class ParseQidError(ValueError):
    def __init__(self, kind: QidErrorKind) -> None:
        super().__init__(kind.value)
        self.kind = kind

    def __str__(self) -> str:
        return self.kind.value


@dataclass(frozen=True, order=True)
class Qid:
    """Wikidata item id, e.g. ``Q42``.

    Compares and sorts by its numeric value. Build from text with :meth:`Qid.parse`;
    the constructor only accepts positive ints.
    """

    id: int

    def __post_init__(self) -> None:
        if isinstance(self.id, bool) or not isinstance(self.id, int):
            raise TypeError(f"QID number must be an int, got {type(self.id).__name__}")
        if self.id < 1:
            raise ParseQidError(QidErrorKind.LEADING_ZERO)

    @classmethod
    def parse(cls, text: str) -> Qid:
        text = text.strip()
        if not text:
            raise ParseQidError(QidErrorKind.EMPTY)
        if not text.startswith(config.QID_PREFIXES):
            raise ParseQidError(QidErrorKind.PREFIX)
        body = text[1:]
        if not body:
            raise ParseQidError(QidErrorKind.NO_NUMBER)
        if not config.QID_BODY_PATTERN.fullmatch(body):
            raise ParseQidError(QidErrorKind.NOT_NUMBER)
        if body.startswith("0"):
            raise ParseQidError(QidErrorKind.LEADING_ZERO)
        return cls(int(body))

    def __str__(self) -> str:
        return f"Q{self.id}"

    def get_dir(self, base) -> Path:
        return Path(base) / config.WIKIDATA_DIR / str(self)
