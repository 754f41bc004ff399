# collision/mask_generator.py
"""
สร้าง collision mask จาก alpha ของ sprite

วิธี sample (ต้องได้ผลตรงกันทุกบิตกับไฟล์ mask เดิม):
- แบ่งรูปเป็น grid R x R, แต่ละ cell กว้าง width / R, สูง height / R (ทศนิยม)
- ใช้พิกเซลใกล้จุดกลาง cell เพียงจุดเดียว:
      sx = floor((x + 0.5) * cell_w)
      sy = floor((y + 0.5) * cell_h)
- alpha >= threshold -> ทึบ

เป็นการ sample จุดเดียว ไม่ได้เฉลี่ยทั้ง cell
รายละเอียดที่เล็กกว่า 1 cell อาจหายหรือใหญ่เกินจริงได้
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, List

from config.settings import ALPHA_THRESHOLD, RESOLUTION
from core.alpha_source import AlphaSource
from core.errors import DecodeError, SamplingError
from .mask_data import Mask, save_mask

if TYPE_CHECKING:  # type hints only
    from config.mask_config import MaskConfig
    from core.message_log import MessageLog
    from core.resource_manager import ResourceManager


def sample_mask(
    source: AlphaSource,
    resolution: int = RESOLUTION,
    alpha_threshold: int = ALPHA_THRESHOLD,
) -> Mask:
    if resolution < 1:
        raise ValueError(f"resolution must be >= 1, got {resolution}")

    width, height = source.width, source.height
    if width <= 0 or height <= 0:
        raise DecodeError("<image>", f"empty image ({width}x{height})")

    cell_w = width / resolution
    cell_h = height / resolution

    data: List[List[bool]] = []
    for y in range(resolution):
        sy = math.floor((y + 0.5) * cell_h)
        if sy >= height:
            raise SamplingError(f"sample row {sy} outside image height {height}")

        row: List[bool] = []
        for x in range(resolution):
            sx = math.floor((x + 0.5) * cell_w)
            if sx >= width:
                raise SamplingError(f"sample column {sx} outside image width {width}")

            row.append(bool(source.alpha_at(sx, sy) >= alpha_threshold))
        data.append(row)

    return Mask(width=resolution, height=resolution, data=data)


def generate_mask(
    resources: "ResourceManager",
    sprite_name: str,
    output_path: str,
    config: "MaskConfig",
    log: "MessageLog",
) -> Mask:
    """โหลด sprite -> sample -> เขียน JSON -> พิมพ์ preview"""
    source = resources.load_alpha(sprite_name)
    mask = sample_mask(source, config.resolution, config.alpha_threshold)

    save_mask(mask, output_path)
    log.info(f"Generated: {output_path}")
    log.preview(mask)
    return mask
