# utils/pretty_mask.py
# จัดรูปแบบไฟล์ mask ใหม่ให้ 1 แถวของ grid อยู่บรรทัดเดียว อ่านง่ายกว่า indent=2
#
#   python -m utils.pretty_mask sprites/masks/papa-john.json [output.json]

from __future__ import annotations

import sys
from typing import List, Optional, TextIO

from collision.mask_data import Mask, load_mask
from core.errors import MaskWriteError


def write_2d_array(f: TextIO, key: str, arr: List[List[bool]], indent: str = "  ") -> None:
    f.write(f'{indent}"{key}": [\n')
    for i, row in enumerate(arr):
        row_str = ", ".join("true" if v else "false" for v in row)
        f.write(f'{indent}  [{row_str}]')
        if i < len(arr) - 1:
            f.write(',')      # ใส่ , คั่นระหว่างแถว
        f.write('\n')
    f.write(f'{indent}]\n')


def write_pretty_mask(mask: Mask, path: str) -> None:
    try:
        with open(path, "w", encoding="utf-8") as f:
            f.write('{\n')
            f.write(f'  "width": {mask.width},\n')
            f.write(f'  "height": {mask.height},\n')
            write_2d_array(f, "data", mask.data)
            f.write('}\n')
    except OSError as exc:
        raise MaskWriteError(path, exc.strerror or str(exc)) from exc


def main(argv: Optional[List[str]] = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    if not argv or len(argv) > 2:
        print("usage: python -m utils.pretty_mask INPUT [OUTPUT]", file=sys.stderr)
        return 2

    input_path = argv[0]
    output_path = argv[1] if len(argv) > 1 else input_path

    mask = load_mask(input_path)
    write_pretty_mask(mask, output_path)
    print("saved", output_path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
