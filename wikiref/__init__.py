"""Parse and normalize Wikidata QIDs and Wikipedia titles from list and tag files."""

from .errors import MissingColumnError, ParseErrorKind, ParseLineError
from .qid import ParseQidError, Qid, QidErrorKind
from .readers import (
    TagFileScan,
    parse_osm_tag_file,
    parse_wikidata_file,
    parse_wikipedia_file,
    scan_osm_tag_file,
    scan_wikidata_file,
    scan_wikipedia_file,
)
from .title import ParseTitleError, Title, TitleErrorKind

__all__ = [
    "MissingColumnError",
    "ParseErrorKind",
    "ParseLineError",
    "ParseQidError",
    "ParseTitleError",
    "Qid",
    "QidErrorKind",
    "TagFileScan",
    "Title",
    "TitleErrorKind",
    "parse_osm_tag_file",
    "parse_wikidata_file",
    "parse_wikipedia_file",
    "scan_osm_tag_file",
    "scan_wikidata_file",
    "scan_wikipedia_file",
]
