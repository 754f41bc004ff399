# collision/mask_data.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List
import json

from core.errors import MaskWriteError


@dataclass(frozen=True)
class Mask:
    """
    collision mask ของ sprite หนึ่งตัว

    data[y][x] = True  -> ช่องนี้ทึบ (ชนได้)
               = False -> โปร่งใส
    เรียงแถวจากบนลงล่าง แต่ละแถวจากซ้ายไปขวา
    """
    width: int
    height: int
    data: List[List[bool]]

    def __post_init__(self) -> None:
        if self.width < 1 or self.height < 1:
            raise ValueError(f"mask size must be positive, got {self.width}x{self.height}")
        if len(self.data) != self.height:
            raise ValueError(f"expected {self.height} rows, got {len(self.data)}")
        for y, row in enumerate(self.data):
            if len(row) != self.width:
                raise ValueError(f"row {y}: expected {self.width} cells, got {len(row)}")
            for cell in row:
                # ต้องเป็น bool จริง ๆ (0/1 ไม่นับ)
                if not isinstance(cell, bool):
                    raise ValueError(f"row {y}: cell {cell!r} is not a bool")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "width": self.width,
            "height": self.height,
            "data": [list(row) for row in self.data],
        }

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "Mask":
        return cls(
            width=raw["width"],
            height=raw["height"],
            data=[list(row) for row in raw["data"]],
        )

    def preview_lines(self) -> List[str]:
        return ["".join("#" if cell else "." for cell in row) for row in self.data]

    def solid_count(self) -> int:
        return sum(cell for row in self.data for cell in row)


def dump_mask(mask: Mask) -> str:
    # indent 2 -> หน้าตาเดียวกับไฟล์ mask ที่เกมอ่านอยู่
    return json.dumps(mask.to_dict(), indent=2)


def save_mask(mask: Mask, path: str) -> None:
    try:
        with open(path, "w", encoding="utf-8") as f:
            f.write(dump_mask(mask))
    except OSError as exc:
        raise MaskWriteError(path, exc.strerror or str(exc)) from exc


def load_mask(path: str) -> Mask:
    with open(path, "r", encoding="utf-8") as f:
        raw: Dict[str, Any] = json.load(f)
    return Mask.from_dict(raw)
