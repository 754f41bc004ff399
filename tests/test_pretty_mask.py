import json
import os
import sys
import tempfile
import unittest

# Add project root to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from collision.mask_data import Mask, load_mask, save_mask
from utils.pretty_mask import main, write_pretty_mask


class TestPrettyMask(unittest.TestCase):
    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.mask = Mask(width=3, height=2, data=[[True, False, True], [False, False, False]])

    def tearDown(self):
        self.tmp.cleanup()

    def test_one_row_per_line(self):
        path = os.path.join(self.tmp.name, "pretty.json")
        write_pretty_mask(self.mask, path)

        with open(path, "r", encoding="utf-8") as f:
            text = f.read()
        self.assertIn("    [true, false, true],\n", text)
        self.assertIn("    [false, false, false]\n", text)
        self.assertEqual(load_mask(path), self.mask)
        self.assertEqual(json.loads(text)["width"], 3)

    def test_main_rewrites_in_place(self):
        path = os.path.join(self.tmp.name, "mask.json")
        save_mask(self.mask, path)

        self.assertEqual(main([path]), 0)
        with open(path, "r", encoding="utf-8") as f:
            self.assertEqual(len(f.read().splitlines()), 8)
        self.assertEqual(load_mask(path), self.mask)

    def test_usage(self):
        self.assertEqual(main([]), 2)


if __name__ == '__main__':
    unittest.main()
