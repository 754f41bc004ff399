# core/errors.py
# exception ของตัวสร้าง mask ทั้งหมด


class MaskError(Exception):
    """base class ของ error ทั้งหมดในโปรเจ็กต์นี้"""


class MissingSourceError(MaskError, FileNotFoundError):
    """sprite ที่อยู่ในรายการไม่มีไฟล์จริง -> batch จะเตือนแล้วข้ามไป"""

    def __init__(self, path: str) -> None:
        super().__init__(f"Sprite not found: {path}")
        self.path = path


class DecodeError(MaskError):
    """ไฟล์รูปเสีย / อ่านไม่ได้ / ขนาด 0"""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Cannot decode {path}: {reason}")
        self.path = path
        self.reason = reason


class MaskWriteError(MaskError, OSError):
    """เขียนไฟล์ mask ไม่ได้ (permission, โฟลเดอร์ไม่มี ฯลฯ)"""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Cannot write {path}: {reason}")
        self.path = path
        self.reason = reason


class SamplingError(MaskError, RuntimeError):
    """จุด sample หลุดนอกรูป ไม่ควรเกิดขึ้นได้ ถ้าเกิดแปลว่ามี bug"""
