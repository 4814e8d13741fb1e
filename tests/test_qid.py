import unittest
from pathlib import Path

from wikiref.qid import ParseQidError, Qid, QidErrorKind


class QidTests(unittest.TestCase):
    def assertKind(self, text: str, kind: QidErrorKind) -> None:
        with self.assertRaises(ParseQidError) as ctx:
            Qid.parse(text)
        self.assertEqual(ctx.exception.kind, kind)

    def test_parse_trims_and_accepts_lowercase(self) -> None:
        self.assertEqual(Qid.parse("Q42"), Qid.parse("  q42\t"))
        self.assertEqual(str(Qid.parse(" q42 ")), "Q42")

    def test_ordering_is_numeric(self) -> None:
        qids = [Qid.parse(text) for text in ("Q10", "Q9", "Q100")]
        self.assertEqual([str(qid) for qid in sorted(qids)], ["Q9", "Q10", "Q100"])

    def test_hashable_and_deduplicated(self) -> None:
        self.assertEqual(len({Qid.parse("Q1"), Qid.parse("q1"), Qid.parse("Q2")}), 2)

    def test_empty(self) -> None:
        self.assertKind("   ", QidErrorKind.EMPTY)

    def test_missing_prefix(self) -> None:
        self.assertKind("42", QidErrorKind.PREFIX)
        self.assertKind("P31", QidErrorKind.PREFIX)

    def test_no_number(self) -> None:
        self.assertKind("Q", QidErrorKind.NO_NUMBER)

    def test_not_number(self) -> None:
        self.assertKind("Q12a", QidErrorKind.NOT_NUMBER)
        self.assertKind("Q-1", QidErrorKind.NOT_NUMBER)
        self.assertKind("Q١٢", QidErrorKind.NOT_NUMBER)

    def test_leading_zero(self) -> None:
        self.assertKind("Q0", QidErrorKind.LEADING_ZERO)
        self.assertKind("Q042", QidErrorKind.LEADING_ZERO)

    def test_error_message(self) -> None:
        with self.assertRaises(ValueError) as ctx:
            Qid.parse("x")
        self.assertEqual(str(ctx.exception), "missing 'Q' prefix")

    def test_constructor_validates(self) -> None:
        self.assertEqual(Qid(42), Qid.parse("Q42"))
        with self.assertRaises(ParseQidError) as ctx:
            Qid(0)
        self.assertEqual(ctx.exception.kind, QidErrorKind.LEADING_ZERO)
        with self.assertRaises(TypeError):
            Qid("42")
        with self.assertRaises(TypeError):
            Qid(True)

    def test_get_dir(self) -> None:
        self.assertEqual(Qid.parse("Q42").get_dir("/data"), Path("/data/wikidata/Q42"))


if __name__ == "__main__":
    unittest.main()
