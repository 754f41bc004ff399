# core/resource_manager.py
from __future__ import annotations

import os

import numpy as np

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
import pygame
from PIL import Image, UnidentifiedImageError

from config.settings import DEFAULT_DECODER, DECODERS
from .alpha_source import AlphaSource, ArrayAlphaSource, SurfaceAlphaSource
from .errors import DecodeError, MissingSourceError


class ResourceManager:
    def __init__(self, base_path: str = "sprites", decoder: str = DEFAULT_DECODER) -> None:
        """
        base_path : โฟลเดอร์ที่เก็บ sprite
        decoder   : "pillow" -> PIL.Image + numpy
                    "pygame" -> pygame.image.load (ไม่ต้องเปิดหน้าต่าง)
        """
        if decoder not in DECODERS:
            raise ValueError(f"unknown decoder: {decoder!r}")
        self.base_path = base_path
        self.decoder = decoder

    # ------------------------------------------------------------------
    # Utils
    # ------------------------------------------------------------------
    def resolve(self, *parts: str) -> str:
        return os.path.join(self.base_path, *parts)

    def exists(self, name: str) -> bool:
        return os.path.isfile(self.resolve(name))

    # ------------------------------------------------------------------
    # Images
    # ------------------------------------------------------------------
    def load_alpha(self, name: str) -> AlphaSource:
        """
        โหลด sprite แล้วคืนเฉพาะ alpha ที่ตัว sample ใช้

        - ไม่มีไฟล์        -> MissingSourceError
        - ไฟล์เสีย/ขนาด 0 -> DecodeError
        """
        full_path = self.resolve(name)
        if not os.path.isfile(full_path):
            raise MissingSourceError(full_path)

        if self.decoder == "pygame":
            source = self._load_with_pygame(full_path)
        else:
            source = self._load_with_pillow(full_path)

        if source.width <= 0 or source.height <= 0:
            raise DecodeError(full_path, f"empty image ({source.width}x{source.height})")
        return source

    def _load_with_pillow(self, full_path: str) -> ArrayAlphaSource:
        try:
            with Image.open(full_path) as img:
                rgba = img.convert("RGBA")
        except (
            UnidentifiedImageError,
            Image.DecompressionBombError,
            OSError,
            SyntaxError,
            ValueError,
        ) as exc:
            raise DecodeError(full_path, str(exc) or type(exc).__name__) from exc

        # เอาเฉพาะ alpha channel มาใช้ shape: (h, w)
        alpha = np.array(rgba.getchannel("A"), dtype=np.uint8)
        if alpha.ndim != 2:
            # รูปขนาด 0 บางแบบได้ array ที่ไม่ใช่ 2D กลับมา
            raise DecodeError(full_path, f"empty image {rgba.size}")
        return ArrayAlphaSource(alpha)

    def _load_with_pygame(self, full_path: str) -> SurfaceAlphaSource:
        try:
            surface = pygame.image.load(full_path)
        except (pygame.error, OSError, ValueError) as exc:
            raise DecodeError(full_path, str(exc) or type(exc).__name__) from exc
        return SurfaceAlphaSource(surface)
