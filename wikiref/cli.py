import argparse
import logging
import sys
from pathlib import Path

from tqdm import tqdm

from . import config
from .readers import parse_osm_tag_file, parse_wikidata_file, parse_wikipedia_file
from .utils import append_jsonl_record

logger = logging.getLogger(__name__)


def _collect_tag_files(paths, qids, titles):
    """Parse every tag file into the shared sets and return (path, error) pairs."""
    collected = []
    for path in tqdm(paths, desc="Parsing tag files", unit="file", disable=not sys.stderr.isatty()):
        errors = parse_osm_tag_file(path, qids, titles)
        if errors:
            logger.warning("[!] %s: %s rows with unparseable tags.", path, len(errors))
        collected.extend((path, error) for error in errors)
    return collected


def _write_lines(path, lines):
    if path is None or str(path) == "-":
        for line in lines:
            sys.stdout.write(line)
            sys.stdout.write("\n")
        return
    with open(Path(path), "w", encoding="utf-8") as fh:
        for line in lines:
            fh.write(line)
            fh.write("\n")


def run_ids(args):
    qids = set()
    titles = set()

    if args.wikidata_ids:
        qids.update(parse_wikidata_file(args.wikidata_ids))
        logger.info("[*] Loaded %s QIDs from %s", len(qids), args.wikidata_ids)
    if args.wikipedia_urls:
        titles.update(parse_wikipedia_file(args.wikipedia_urls))
        logger.info("[*] Loaded %s titles from %s", len(titles), args.wikipedia_urls)

    tag_errors = _collect_tag_files(args.osm_tags, qids, titles)

    _write_lines(args.qids_out, [str(qid) for qid in sorted(qids)])
    if args.titles_out is not None:
        _write_lines(args.titles_out, [title.url() for title in sorted(titles)])

    if args.errors_out is not None:
        with open(Path(args.errors_out), "w", encoding="utf-8") as fh:
            for path, error in tag_errors:
                record = {"file": str(path)}
                record.update(error.to_dict())
                append_jsonl_record(fh, record)

    logger.info("[+] %s QIDs, %s titles, %s tag errors.", len(qids), len(titles), len(tag_errors))
    return 0


def _tsv_cell(value):
    if value is None:
        return ""
    return str(value).replace("\t", " ").replace("\n", " ")


def run_check_tags(args):
    qids = set()
    titles = set()
    tag_errors = _collect_tag_files(args.tag_files, qids, titles)

    sys.stdout.write("file\tline\tosm_id\tkind\ttext\terror\n")
    for path, error in tag_errors:
        record = error.to_dict()
        cells = [path, record["line"], record["osm_id"], record["kind"], record["text"], record["error"]]
        sys.stdout.write("\t".join(_tsv_cell(cell) for cell in cells))
        sys.stdout.write("\n")

    logger.info(
        "[+] Checked %s files: %s QIDs, %s titles, %s errors.",
        len(args.tag_files),
        len(qids),
        len(titles),
        len(tag_errors),
    )
    return 0


def build_parser():
    parser = argparse.ArgumentParser(description="Extract and normalize Wikidata QIDs and Wikipedia titles.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every unparseable tag.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    ids = subparsers.add_parser("ids", help="Merge QIDs and titles from list and tag files.")
    ids.add_argument("--wikidata-ids", type=Path, help="File with one QID per line.")
    ids.add_argument("--wikipedia-urls", type=Path, help="File with one Wikipedia article url per line.")
    ids.add_argument(
        "--osm-tags",
        type=Path,
        action="append",
        default=[],
        help=f"Tab-separated tag file with '{config.QID_COLUMN}' and '{config.TITLE_COLUMN}' columns. Repeatable.",
    )
    ids.add_argument("--qids-out", default="-", help="Output file for QIDs ('-' for stdout).")
    ids.add_argument("--titles-out", help="Output file for article urls ('-' for stdout).")
    ids.add_argument("--errors-out", help="JSONL file for tag parse errors.")
    ids.set_defaults(func=run_ids)

    check = subparsers.add_parser("check-tags", help="Print tag parse errors as TSV.")
    check.add_argument("tag_files", type=Path, nargs="+", help="Tab-separated tag files.")
    check.set_defaults(func=run_check_tags)
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format=config.LOG_FORMAT,
        datefmt=config.LOG_DATEFMT,
    )
    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
