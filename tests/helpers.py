# tests/helpers.py
# ตัวช่วยสร้าง sprite ปลอมสำหรับเทสต์

from __future__ import annotations

from typing import Optional, Tuple

import numpy as np
from PIL import Image


def make_sprite(
    path: str,
    size: Tuple[int, int] = (64, 64),
    alpha: int = 255,
    solid_box: Optional[Tuple[int, int, int, int]] = None,
) -> str:
    """
    สร้าง PNG RGBA
    - solid_box=None -> ทั้งรูปมี alpha เท่ากับ alpha
    - solid_box=(x0, y0, x1, y1) -> โปร่งใสทั้งรูป ยกเว้นกล่องนี้ที่ alpha=255
    """
    if solid_box is None:
        img = Image.new("RGBA", size, (200, 40, 40, alpha))
    else:
        img = Image.new("RGBA", size, (200, 40, 40, 0))
        img.paste((200, 40, 40, 255), solid_box)
    img.save(path)
    return path


def alpha_array(width: int, height: int, value: int = 255) -> np.ndarray:
    return np.full((height, width), value, dtype=np.uint8)


def make_palette_sprite(path: str, size: Tuple[int, int] = (8, 8)) -> str:
    """
    PNG แบบ palette: index 0 = โปร่งใส (tRNS), index 1 = แดงทึบ
    ครึ่งซ้ายเป็น index 1 ครึ่งขวาเป็น index 0
    """
    w, h = size
    img = Image.new("P", size, 0)
    img.putpalette([0, 0, 0, 255, 0, 0] + [0, 0, 0] * 254)
    img.paste(1, (0, 0, w // 2, h))
    img.save(path, transparency=0)
    return path
