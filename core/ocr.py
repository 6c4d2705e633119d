import pytesseract
from PIL import Image, ImageEnhance
import numpy as np
import cv2
import os

from utils.config import config, debug_print

# Use bundled trained data (e.g. jpn.traineddata) when the project ships it
tessdata_dir = os.path.join(os.path.dirname(os.path.dirname(__file__)), 'tessdata')
if os.path.isdir(tessdata_dir):
    os.environ['TESSDATA_PREFIX'] = tessdata_dir

OCR_LANGUAGES = config.get("ocr_languages", "eng+jpn")
OCR_WIDTH = config.get("ocr_width", 1080)

# Try to find tesseract executable automatically
if config.get("tesseract_cmd"):
    pytesseract.pytesseract.tesseract_cmd = config["tesseract_cmd"]
elif os.name == 'nt':
    possible_paths = [
        r'C:\Program Files\Tesseract-OCR\tesseract.exe',
        r'C:\Program Files (x86)\Tesseract-OCR\tesseract.exe',
        r'C:\Users\{}\AppData\Local\Programs\Tesseract-OCR\tesseract.exe'.format(os.getenv('USERNAME', ''))
    ]
    for path in possible_paths:
        if os.path.exists(path):
            pytesseract.pytesseract.tesseract_cmd = path
            break

def prepare_for_ocr(pil_img: Image.Image, width=OCR_WIDTH) -> Image.Image:
    """Resize to a fixed width (keeping aspect ratio), then grayscale and boost contrast"""
    img_np = np.array(pil_img.convert("RGB"))
    height, current_width = img_np.shape[:2]
    if width and current_width != width:
        new_height = max(1, int(round(height * width / current_width)))
        interpolation = cv2.INTER_AREA if width < current_width else cv2.INTER_CUBIC
        img_np = cv2.resize(img_np, (width, new_height), interpolation=interpolation)

    gray = cv2.cvtColor(img_np, cv2.COLOR_RGB2GRAY)
    pil_gray = Image.fromarray(gray)
    return ImageEnhance.Contrast(pil_gray).enhance(1.5)

def extract_text(pil_img: Image.Image, languages=OCR_LANGUAGES) -> str:
    """Extract free-form text from a full screenshot using Tesseract OCR"""
    try:
        prepared = prepare_for_ocr(pil_img)
        if config.get("debug_mode", False):
            prepared.save("debug_ocr_input.png")
            debug_print("[DEBUG] Saved OCR input to debug_ocr_input.png")

        text = pytesseract.image_to_string(np.array(prepared), config='--oem 3 --psm 6', lang=languages)
        debug_print(f"[DEBUG] OCR result: {text!r}")
        return text.strip()
    except Exception as e:
        print(f"[WARNING] OCR extraction failed: {e}")
        return ""
