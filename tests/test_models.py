"""
Unit tests for the memo, session and settings models.
"""

import unittest

from pydantic import ValidationError

from flomo_importer.errors import InvalidInputError
from flomo_importer.models import FRAGMENT_SEPARATOR, FlomoCore, ImportSettings, Memo


class TestMemo(unittest.TestCase):
    """Test memo validation."""

    def test_memo_creation(self):
        memo = Memo(date=" 2024-05-23 ", time="09:30:15", title="2024_05_23_09_30_15", content="hi")

        self.assertEqual(memo.date, "2024-05-23")
        self.assertEqual(memo.attachments, [])
        self.assertIsNone(memo.file_path)

    def test_date_must_be_path_safe(self):
        for bad in ("", "  ", "..", "2024/05/23", "a\\b"):
            with self.subTest(date=bad):
                with self.assertRaises(ValidationError):
                    Memo(date=bad, title="t", content="c")

    def test_title_must_be_path_safe(self):
        with self.assertRaises(ValidationError):
            Memo(date="2024-05-23", title="../up", content="c")


class TestFlomoCore(unittest.TestCase):
    """Test the import session buckets."""

    def test_buckets_keep_insertion_order(self):
        core = FlomoCore()
        core.add_fragment("b.md", "1")
        core.add_fragment("a.md", "2")
        core.add_fragment("b.md", "3")

        self.assertEqual(list(core.files), ["b.md", "a.md"])
        self.assertEqual(core.render_file("b.md"), f"1{FRAGMENT_SEPARATOR}3")

    def test_sealed_core_rejects_fragments(self):
        core = FlomoCore()
        core.seal()

        self.assertTrue(core.sealed)
        with self.assertRaises(RuntimeError):
            core.add_fragment("a.md", "x")

    def test_latest(self):
        memos = [Memo(date="2024-01-0%d" % day, title="t%d" % day, content="") for day in (3, 2, 1)]
        core = FlomoCore(memos=memos)

        self.assertEqual([memo.date for memo in core.latest(2)], ["2024-01-03", "2024-01-02"])
        self.assertEqual(core.latest(0), [])
        self.assertEqual(core.latest(-1), [])


class TestImportSettings(unittest.TestCase):
    """Test import settings validation."""

    def test_aliases_and_field_names(self):
        by_alias = ImportSettings.from_mapping({"flomoTarget": "inbox", "expOptionAllowbilink": False})
        by_name = ImportSettings(flomo_target="inbox", allow_bilink=False)

        self.assertEqual(by_alias, by_name)
        self.assertEqual(by_alias.memo_root, "inbox/memos")

    def test_targets_are_trimmed(self):
        settings = ImportSettings(flomoTarget="/flomo/", memoTarget="memos/")
        self.assertEqual(settings.memo_root, "flomo/memos")

    def test_targets_must_stay_inside_vault(self):
        for bad in ("", "/", "../flomo", "a/../../b", "a\\b"):
            with self.subTest(target=bad):
                with self.assertRaises(InvalidInputError):
                    ImportSettings.from_mapping({"flomoTarget": bad})

    def test_unknown_keys_are_rejected(self):
        with self.assertRaises(InvalidInputError):
            ImportSettings.from_mapping({"flomoTarget": "flomo", "theme": "dark"})


if __name__ == '__main__':
    unittest.main(verbosity=2)
