import re

# Wikipedia URL shape
WIKIPEDIA_DOMAIN = "wikipedia.org"
MOBILE_PREFIX = "m."
WIKI_PATH_ROOT = "wiki"
URL_SCHEMES = ("http", "https")
URL_PREFIXES = ("http://", "https://")

# Titles must be less than 256 bytes of UTF-8.
# See: https://en.wikipedia.org/wiki/Wikipedia:Naming_conventions_(technical_restrictions)#Title_length
MAX_TITLE_BYTES = 256

# Wikidata item ids
QID_PREFIXES = ("Q", "q")
QID_BODY_PATTERN = re.compile(r"[0-9]+")
WIKIDATA_DIR = "wikidata"

# OSM tag file layout
TSV_DELIMITER = "\t"
QID_COLUMN = "wikidata"
TITLE_COLUMN = "wikipedia"
OSM_ID_COLUMN = "@id"
OSM_ID_PATTERN = re.compile(r"[0-9]+")

# Compressed inputs
ZSTD_SUFFIX = ".zst"

# Run logging
LOG_FORMAT = "%(asctime)s %(levelname)s %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"
