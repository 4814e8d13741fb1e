from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from urllib.parse import quote, unquote, urlsplit

from . import config


class TitleErrorKind(Enum):
    EMPTY = "value is empty or whitespace"
    NO_TITLE = "title is empty or whitespace"
    TITLE_LONG = "title is too long"
    NO_LANG = "lang is empty or whitespace"
    LANG_BAD_CHAR = "lang contains character that is not alphabetic or '-'"
    MISSING_COLON = "no ':' separating lang and title"

    # url-specific
    URL = "cannot parse url"
    URL_DECODE = "cannot decode url"
    NO_HOST = "no host in url"
    NO_SUBDOMAIN = "no subdomain in url"
    BAD_DOMAIN = "url base domain is not wikipedia.org"
    BAD_PATH = "url base path is not /wiki/"
    SHORT_PATH = "path has less than 2 segments"


class ParseTitleError(ValueError):
    """Raised when text cannot be read as a Wikipedia title.

    The wrapped library error, if any, is available as ``__cause__``.
    """

    def __init__(self, kind: TitleErrorKind) -> None:
        super().__init__(kind.value)
        self.kind = kind

    def __str__(self) -> str:
        return self.kind.value


def _is_lang_char(char: str) -> bool:
    return (char.isascii() and char.isalpha()) or char == "-"


@dataclass(frozen=True, order=True)
class Title:
    """Normalized Wikipedia article title.

    Compares equal across its different spellings:
      - titles ``Spatial Database`` with a separate lang ``en``
      - urls ``https://en.wikipedia.org/wiki/Spatial_database#Geodatabase``
      - osm-style tags ``en:Spatial Database``

    Build with :meth:`from_title`, :meth:`from_url` or :meth:`from_osm_tag`.
    The constructor only accepts an already normalized lang and name.
    """

    lang: str
    name: str

    def __post_init__(self) -> None:
        if not self.name:
            raise ParseTitleError(TitleErrorKind.NO_TITLE)
        if len(self.name.encode("utf-8")) >= config.MAX_TITLE_BYTES:
            raise ParseTitleError(TitleErrorKind.TITLE_LONG)
        if not self.lang:
            raise ParseTitleError(TitleErrorKind.NO_LANG)
        if not all(_is_lang_char(c) for c in self.lang):
            raise ParseTitleError(TitleErrorKind.LANG_BAD_CHAR)
        if self.lang != self.lang.lower() or self.name != self.normalize_title(self.name):
            raise ValueError(f"{self.lang}:{self.name!r} is not normalized, use Title.from_title")

    def __str__(self) -> str:
        return f"{self.lang}:{self.name}"

    @staticmethod
    def normalize_title(title: str) -> str:
        return title.strip().replace(" ", "_")

    @classmethod
    def from_title(cls, title: str, lang: str) -> Title:
        title = title.strip()
        if not title:
            raise ParseTitleError(TitleErrorKind.NO_TITLE)
        if len(title.encode("utf-8")) >= config.MAX_TITLE_BYTES:
            raise ParseTitleError(TitleErrorKind.TITLE_LONG)

        # Namespaced and percent-encoded titles are accepted as-is.

        lang = lang.strip()
        if not lang:
            raise ParseTitleError(TitleErrorKind.NO_LANG)
        if not all(_is_lang_char(c) for c in lang):
            raise ParseTitleError(TitleErrorKind.LANG_BAD_CHAR)

        return cls(lang=lang.lower(), name=cls.normalize_title(title))

    # https://en.wikipedia.org/wiki/Article_Title/More_Title
    @classmethod
    def from_url(cls, url: str) -> Title:
        url = url.strip()
        if not url:
            raise ParseTitleError(TitleErrorKind.EMPTY)

        try:
            parts = urlsplit(url)
            host = parts.hostname
        except ValueError as exc:
            raise ParseTitleError(TitleErrorKind.URL) from exc
        if not parts.scheme:
            raise ParseTitleError(TitleErrorKind.URL)
        if not host:
            raise ParseTitleError(TitleErrorKind.NO_HOST)

        lang, dot, domain = host.partition(".")
        if not dot:
            raise ParseTitleError(TitleErrorKind.NO_SUBDOMAIN)
        domain = domain.removeprefix(config.MOBILE_PREFIX)
        if domain != config.WIKIPEDIA_DOMAIN:
            raise ParseTitleError(TitleErrorKind.BAD_DOMAIN)

        root, slash, encoded = parts.path.removeprefix("/").partition("/")
        if not slash:
            raise ParseTitleError(TitleErrorKind.SHORT_PATH)
        if root != config.WIKI_PATH_ROOT:
            raise ParseTitleError(TitleErrorKind.BAD_PATH)
        if not encoded:
            raise ParseTitleError(TitleErrorKind.SHORT_PATH)

        try:
            title = unquote(encoded, errors="strict")
        except UnicodeDecodeError as exc:
            raise ParseTitleError(TitleErrorKind.URL_DECODE) from exc

        return cls.from_title(title, lang)

    # en:Article Title
    @classmethod
    def from_osm_tag(cls, tag: str) -> Title:
        tag = tag.strip()
        if not tag:
            raise ParseTitleError(TitleErrorKind.EMPTY)
        lang, colon, title = tag.partition(":")
        if not colon:
            raise ParseTitleError(TitleErrorKind.MISSING_COLON)

        lang = lang.lstrip()
        title = title.lstrip()

        if lang in config.URL_SCHEMES:
            return cls.from_url(tag)

        # The url's own subdomain wins over the tag's lang prefix.
        if title.startswith(config.URL_PREFIXES):
            return cls.from_url(title)

        return cls.from_title(title, lang)

    def url(self) -> str:
        return f"https://{self.lang}.{config.WIKIPEDIA_DOMAIN}/{config.WIKI_PATH_ROOT}/{quote(self.name)}"

    def get_dir(self, base) -> Path:
        """Return ``<base>/<lang>.wikipedia.org/wiki/<name>`` without touching the filesystem."""
        return Path(base) / f"{self.lang}.{config.WIKIPEDIA_DOMAIN}" / config.WIKI_PATH_ROOT / self.name
