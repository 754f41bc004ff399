# collision/batch_runner.py
# วนสร้าง mask ให้ sprite ทุกตัวในรายการ ทีละตัวตามลำดับ

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from config.mask_config import MaskConfig
from core.errors import DecodeError, MaskWriteError, MissingSourceError
from core.message_log import MessageLog
from core.resource_manager import ResourceManager
from .mask_generator import generate_mask


@dataclass
class BatchResult:
    # path ของไฟล์ mask ที่เขียนสำเร็จ
    generated: List[str] = field(default_factory=list)
    # path ของ sprite ที่หาไม่เจอ
    missing: List[str] = field(default_factory=list)
    # (path ของ sprite, ข้อความ error)
    failed: List[Tuple[str, str]] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        # sprite ที่หาไม่เจอเป็นแค่ warning ไม่นับว่าพัง
        return not self.failed


def run_batch(config: MaskConfig, log: Optional[MessageLog] = None) -> BatchResult:
    """
    - สร้างโฟลเดอร์ output ถ้ายังไม่มี
    - sprite ไม่มีไฟล์     -> warning แล้วข้าม
    - decode / เขียนไม่ได้ -> log error แล้วทำตัวถัดไป
      (config.strict=True จะปล่อย exception ออกไปแล้วหยุดทั้ง batch)
    - sprite สองตัวได้ไฟล์ mask ชื่อเดียวกัน -> ตัวหลังถือว่า failed ไม่เขียนทับ
    """
    config.validate()
    log = log or MessageLog()
    resources = ResourceManager(base_path=config.source_dir, decoder=config.decoder)
    result = BatchResult()

    os.makedirs(config.output_dir, exist_ok=True)

    # output path -> sprite ที่จองไว้แล้ว (a/x.png กับ b/x.png ได้ masks/x.json เหมือนกัน)
    claimed: Dict[str, str] = {}

    for sprite in config.input_list:
        sprite_path = resources.resolve(sprite)
        output_path = config.mask_path_for(sprite)

        if not resources.exists(sprite):
            log.warn(f"Warning: Sprite not found: {sprite_path}")
            result.missing.append(sprite_path)
            continue

        if output_path in claimed:
            message = f"Error: {sprite_path} would overwrite {output_path} (already written for {claimed[output_path]})"
            log.error(message)
            result.failed.append((sprite_path, message))
            continue
        claimed[output_path] = sprite_path

        try:
            generate_mask(resources, sprite, output_path, config, log)
        except MissingSourceError as exc:
            # ไฟล์หายไประหว่างเช็คกับตอนเปิด
            log.warn(f"Warning: {exc}")
            result.missing.append(sprite_path)
            continue
        except (DecodeError, MaskWriteError) as exc:
            if config.strict:
                raise
            log.error(f"Error: {exc}")
            result.failed.append((sprite_path, str(exc)))
            continue

        result.generated.append(output_path)

    log.info(f"Done! Mask files generated in {config.output_dir}")
    return result
