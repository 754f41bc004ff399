# core/alpha_source.py
"""
แหล่งค่า alpha ของรูป สำหรับตัว sample mask

ตัว sample ไม่สนว่ารูปมาจาก Pillow, pygame หรือ decoder อื่น
ขอแค่มี:
    width, height        : ขนาดรูปเป็นพิกเซล
    alpha_at(x, y) -> int: ค่า alpha 0..255 ของพิกเซล (x, y)
"""

from __future__ import annotations

import os
from typing import Callable, Protocol

import numpy as np

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
import pygame
import pygame.surfarray


class AlphaSource(Protocol):
    width: int
    height: int

    def alpha_at(self, x: int, y: int) -> int:
        ...


def alpha_from_packed(color: int) -> int:
    # สีแบบ 0xRRGGBBAA -> alpha อยู่ byte ล่างสุด
    return color & 0xFF


class ArrayAlphaSource:
    """alpha channel เป็น numpy array shape (h, w)"""

    def __init__(self, alpha: np.ndarray) -> None:
        if alpha.ndim != 2:
            raise ValueError(f"alpha array must be 2D, got shape {alpha.shape}")
        self.alpha = alpha
        self.height, self.width = alpha.shape

    def alpha_at(self, x: int, y: int) -> int:
        # numpy index เป็น [row, col] = [y, x]
        return int(self.alpha[y, x])


class PackedColorAlphaSource:
    """
    adapter สำหรับ lookup ที่คืนสีเป็นเลขจำนวนเต็มแบบ 0xRRGGBBAA
    get_pixel_color(x, y) -> int

    ResourceManager ไม่ได้สร้างตัวนี้เอง ใช้ตอนมีแค่ฟังก์ชันอ่านสีแบบ packed
    """

    def __init__(
        self,
        width: int,
        height: int,
        get_pixel_color: Callable[[int, int], int],
    ) -> None:
        self.width = width
        self.height = height
        self._get_pixel_color = get_pixel_color

    def alpha_at(self, x: int, y: int) -> int:
        return alpha_from_packed(self._get_pixel_color(x, y))


class SurfaceAlphaSource:
    """
    pygame.Surface ที่โหลดจาก pygame.image.load

    PNG แบบ palette ที่มีสีโปร่งใส pygame จะโหลดมาเป็น colorkey
    ไม่ใช่ per-pixel alpha -> get_at().a ได้ 255 ทุกจุด
    กรณีนี้อ่านจาก array_colorkey แทน (colorkey = 0, สีอื่น = 255)
    """

    def __init__(self, surface: pygame.Surface) -> None:
        self.surface = surface
        self.width, self.height = surface.get_size()

        # surfarray เป็น [x, y]
        self._colorkey_alpha = None
        if surface.get_colorkey() is not None:
            self._colorkey_alpha = pygame.surfarray.array_colorkey(surface)

    def alpha_at(self, x: int, y: int) -> int:
        if self._colorkey_alpha is not None:
            return int(self._colorkey_alpha[x, y])
        return self.surface.get_at((x, y)).a
