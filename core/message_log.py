# core/message_log.py
# ตัวพิมพ์ข้อความ progress / warning ลง console และจำไว้ให้เทสต์ตรวจได้

from __future__ import annotations

import sys
from collections import deque
from typing import TYPE_CHECKING

if TYPE_CHECKING:  # type hints only
    from collision.mask_data import Mask


class MessageLog:
    def __init__(self, max_messages: int = 500, quiet: bool = False) -> None:
        # (level, text)
        self.messages = deque(maxlen=max_messages)
        self.quiet = quiet

    def add(self, text: str, level: str = "info") -> None:
        self.messages.append((level, text))
        if self.quiet:
            return

        # warn / error ไป stderr เหมือน console.warn
        stream = sys.stdout if level == "info" else sys.stderr
        print(text, file=stream)

    def info(self, text: str) -> None:
        self.add(text, "info")

    def warn(self, text: str) -> None:
        self.add(text, "warning")

    def error(self, text: str) -> None:
        self.add(text, "error")

    def preview(self, mask: "Mask") -> None:
        self.info("Preview:")
        for line in mask.preview_lines():
            self.info(line)
        self.info("")

    def get_messages(self, level: str | None = None) -> list[str]:
        return [text for lvl, text in self.messages if level is None or lvl == level]

    @property
    def warnings(self) -> list[str]:
        return self.get_messages("warning")

    @property
    def errors(self) -> list[str]:
        return self.get_messages("error")
