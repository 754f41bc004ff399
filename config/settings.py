# config/settings.py
# ค่าตั้งค่าหลักของตัวสร้าง collision mask

# ขนาด grid ของ mask (กว้าง = สูง)
RESOLUTION = 32
# pixel ที่ alpha >= 128 ถือว่า "ทึบ" (ชนได้)
ALPHA_THRESHOLD = 128

# sprite ที่ต้องสร้าง mask (อยู่ใน sprites/)
SPRITES = [
    "papa-john.png",
    "papa-john-2.png",
    "papa-john-3.png",
    "papa-john-4.png",
    "papa-john-5.png",
    "papa-john-6.png",
]

SPRITES_DIR_NAME = "sprites"
MASKS_DIR_NAME = "masks"
MASK_EXT = ".json"

# "pillow" หรือ "pygame"
DEFAULT_DECODER = "pillow"
DECODERS = ("pillow", "pygame")
