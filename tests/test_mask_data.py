import json
import os
import sys
import tempfile
import unittest

# Add project root to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from collision.mask_data import Mask, dump_mask, load_mask, save_mask
from core.errors import MaskWriteError


class TestMask(unittest.TestCase):
    def test_rejects_wrong_row_count(self):
        with self.assertRaises(ValueError):
            Mask(width=2, height=2, data=[[True, False]])

    def test_rejects_wrong_row_length(self):
        with self.assertRaises(ValueError):
            Mask(width=2, height=2, data=[[True, False], [True]])

    def test_rejects_non_bool_cells(self):
        with self.assertRaises(ValueError):
            Mask(width=2, height=1, data=[[1, 0]])

    def test_preview_lines(self):
        mask = Mask(width=3, height=2, data=[[True, False, True], [False, False, True]])
        self.assertEqual(mask.preview_lines(), ["#.#", "..#"])
        self.assertEqual(mask.solid_count(), 3)

    def test_to_dict_has_exactly_three_fields(self):
        mask = Mask(width=1, height=1, data=[[True]])
        self.assertEqual(list(mask.to_dict().keys()), ["width", "height", "data"])


class TestMaskFile(unittest.TestCase):
    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.dir = self.tmp.name

    def tearDown(self):
        self.tmp.cleanup()

    def test_dump_format(self):
        mask = Mask(width=2, height=1, data=[[True, False]])
        expected = (
            '{\n'
            '  "width": 2,\n'
            '  "height": 1,\n'
            '  "data": [\n'
            '    [\n'
            '      true,\n'
            '      false\n'
            '    ]\n'
            '  ]\n'
            '}'
        )
        self.assertEqual(dump_mask(mask), expected)

    def test_round_trip(self):
        mask = Mask(
            width=3,
            height=3,
            data=[[True, False, True], [False, True, False], [True, True, False]],
        )
        path = os.path.join(self.dir, "mask.json")
        save_mask(mask, path)

        loaded = load_mask(path)
        self.assertEqual(loaded, mask)

        with open(path, "r", encoding="utf-8") as f:
            raw = json.load(f)
        self.assertEqual(raw["data"], mask.data)

    def test_write_into_missing_folder_fails(self):
        mask = Mask(width=1, height=1, data=[[False]])
        path = os.path.join(self.dir, "no_such_folder", "mask.json")
        with self.assertRaises(MaskWriteError) as ctx:
            save_mask(mask, path)
        self.assertIsInstance(ctx.exception, OSError)
        self.assertEqual(ctx.exception.path, path)

    def test_load_missing_file(self):
        with self.assertRaises(FileNotFoundError):
            load_mask(os.path.join(self.dir, "nope.json"))


if __name__ == '__main__':
    unittest.main()
