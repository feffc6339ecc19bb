import sys
import unittest
from datetime import date, datetime
from pathlib import Path

# Ensure src/ is on sys.path so we can import the package without installation
PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_DIR = PROJECT_ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from gitdata.errors import InvalidEnumValue  # noqa: E402
from gitdata.resources.tags_types import (  # noqa: E402
    TAG_TYPES,
    VALID_TAG_PARAM_NAMES,
    _normalize_tag_params,
    _normalize_tag_type,
    _normalize_tagger_date,
)


class TagsTypesTests(unittest.TestCase):
    def test_allow_list(self):
        self.assertEqual(
            VALID_TAG_PARAM_NAMES,
            ("tag", "message", "object", "type", "name", "email", "date"),
        )
        self.assertEqual(TAG_TYPES, ("blob", "tree", "commit"))

    def test_normalize_tag_type_valid(self):
        self.assertEqual(_normalize_tag_type("tree"), "tree")

    def test_normalize_tag_type_invalid(self):
        with self.assertRaises(InvalidEnumValue) as ctx:
            _normalize_tag_type("COMMIT")
        self.assertEqual(ctx.exception.value, "COMMIT")
        self.assertIn("blob, tree, commit", str(ctx.exception))

    def test_normalize_tag_type_non_string(self):
        with self.assertRaises(InvalidEnumValue):
            _normalize_tag_type(None)

    def test_normalize_tagger_date(self):
        self.assertEqual(_normalize_tagger_date(datetime(2011, 6, 17, 14, 53, 3)), "2011-06-17T14:53:03")
        self.assertEqual(_normalize_tagger_date(date(2011, 6, 17)), "2011-06-17")
        self.assertEqual(_normalize_tagger_date("2011-06-17T14:53:3"), "2011-06-17T14:53:3")

    def test_normalize_tag_params_filters(self):
        payload, dropped = _normalize_tag_params(
            {"tag": "v1", "message": "m", "object": "abc", "type": "commit", "extra": 1}
        )
        self.assertEqual(payload, {"tag": "v1", "message": "m", "object": "abc", "type": "commit"})
        self.assertEqual(dropped, ["extra"])

    def test_normalize_tag_params_nothing_dropped(self):
        payload, dropped = _normalize_tag_params({"tag": "v1"})
        self.assertEqual(payload, {"tag": "v1"})
        self.assertIsNone(dropped)

    def test_normalize_tag_params_none_values_skipped(self):
        payload, dropped = _normalize_tag_params({"tag": "v1", "message": None, "email": None})
        self.assertEqual(payload, {"tag": "v1"})
        self.assertIsNone(dropped)

    def test_normalize_tag_params_flat_tagger_wins(self):
        payload, _ = _normalize_tag_params(
            {"name": "Flat", "tagger": {"name": "Nested", "email": "n@example.com"}}
        )
        self.assertEqual(payload, {"tagger": {"name": "Flat", "email": "n@example.com"}})

    def test_normalize_tag_params_bad_tagger(self):
        payload, dropped = _normalize_tag_params({"tag": "v1", "tagger": "Scott"})
        self.assertEqual(payload, {"tag": "v1"})
        self.assertEqual(dropped, ["tagger"])

    def test_normalize_tag_params_nested_unknown(self):
        _, dropped = _normalize_tag_params({"tagger": {"login": "x"}})
        self.assertEqual(dropped, ["tagger.login"])

    def test_normalize_tag_params_type_none_rejected(self):
        with self.assertRaises(InvalidEnumValue) as ctx:
            _normalize_tag_params({"tag": "v1", "type": None})
        self.assertIsNone(ctx.exception.value)

    def test_normalize_tag_params_invalid_type(self):
        with self.assertRaises(InvalidEnumValue):
            _normalize_tag_params({"type": "branch"})

    def test_normalize_tag_params_empty(self):
        self.assertEqual(_normalize_tag_params({}), ({}, None))
