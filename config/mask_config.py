# config/mask_config.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional
import os

from config.settings import (
    RESOLUTION,
    ALPHA_THRESHOLD,
    SPRITES,
    SPRITES_DIR_NAME,
    MASKS_DIR_NAME,
    MASK_EXT,
    DEFAULT_DECODER,
    DECODERS,
)


def _get_project_root() -> str:
    """
    หา root ของโปรเจ็กต์จากตำแหน่งไฟล์นี้
        project/
          main.py
          config/mask_config.py
          sprites/papa-john.png
    """
    here = os.path.dirname(os.path.abspath(__file__))
    return os.path.dirname(here)


@dataclass
class MaskConfig:
    """
    ค่าที่ส่งเข้า batch runner แทนการอ่าน constant ตรง ๆ
    (เทสต์จะได้ส่ง resolution / threshold / โฟลเดอร์อื่นเข้ามาได้)
    """
    source_dir: str
    output_dir: str
    resolution: int = RESOLUTION
    alpha_threshold: int = ALPHA_THRESHOLD
    input_list: List[str] = field(default_factory=lambda: list(SPRITES))

    # ตัว decode รูป: "pillow" (default) หรือ "pygame"
    decoder: str = DEFAULT_DECODER
    # True = DecodeError / write error หยุดทั้ง batch เหมือนสคริปต์ต้นฉบับ
    strict: bool = False

    @classmethod
    def default(cls, project_root: Optional[str] = None) -> "MaskConfig":
        root = project_root or _get_project_root()
        source_dir = os.path.join(root, SPRITES_DIR_NAME)
        return cls(
            source_dir=source_dir,
            output_dir=os.path.join(source_dir, MASKS_DIR_NAME),
        )

    def validate(self) -> None:
        if self.resolution < 1:
            raise ValueError(f"resolution must be >= 1, got {self.resolution}")
        if not 0 <= self.alpha_threshold <= 255:
            raise ValueError(
                f"alpha_threshold must be in 0..255, got {self.alpha_threshold}"
            )
        if self.decoder not in DECODERS:
            raise ValueError(
                f"unknown decoder {self.decoder!r} (expected one of {', '.join(DECODERS)})"
            )

    def mask_path_for(self, sprite_name: str) -> str:
        # papa-john.png -> <output_dir>/papa-john.json
        stem, _ext = os.path.splitext(os.path.basename(sprite_name))
        return os.path.join(self.output_dir, stem + MASK_EXT)
