from PIL import Image
import mss
import numpy as np

def capture_region(region=None) -> Image.Image:
  """Grab (left, top, width, height) from the desktop, or the whole primary monitor when region is None"""
  with mss.mss() as sct:
    if region:
      monitor = {
        "left": region[0],
        "top": region[1],
        "width": region[2],
        "height": region[3]
      }
    else:
      monitor = sct.monitors[1]
    img = sct.grab(monitor)
    img_np = np.array(img)
    # BGRA -> RGB
    img_rgb = img_np[:, :, :3][:, :, ::-1]
    return Image.fromarray(img_rgb)

def screen_capture(region=None):
  """Build a no-argument capture callable for the analysis pipeline"""
  def capture():
    return capture_region(region)
  return capture
