import sys
import unittest
from enum import Enum
from pathlib import Path

# Ensure src/ is on sys.path so we can import the package without installation
PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_DIR = PROJECT_ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from gitdata.utils import is_blank, normalize_keys  # noqa: E402


class Field(Enum):
    TAG = "tag"


class UtilsTests(unittest.TestCase):
    def test_normalize_keys_none(self):
        self.assertEqual(normalize_keys(None), {})

    def test_normalize_keys_casing_and_dashes(self):
        self.assertEqual(normalize_keys({"Per-Page": 1, " SHA ": "x"}), {"per_page": 1, "sha": "x"})

    def test_normalize_keys_enum(self):
        self.assertEqual(normalize_keys({Field.TAG: "v1"}), {"tag": "v1"})

    def test_normalize_keys_nested(self):
        self.assertEqual(normalize_keys({"Tagger": {"EMAIL": "a@b"}}), {"tagger": {"email": "a@b"}})

    def test_normalize_keys_does_not_mutate(self):
        params = {"TAG": "v1"}
        normalize_keys(params)
        self.assertEqual(params, {"TAG": "v1"})

    def test_normalize_keys_invalid(self):
        with self.assertRaises(TypeError):
            normalize_keys(["tag"])  # type: ignore[arg-type]

    def test_is_blank(self):
        self.assertTrue(is_blank(None))
        self.assertTrue(is_blank(" "))
        self.assertFalse(is_blank("abc"))
        self.assertFalse(is_blank(0))
