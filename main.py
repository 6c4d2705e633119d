import time

from core.app import run_app
from core.logic import parse_distance, parse_strategy
from core.state import AppState
from utils.config import config
from utils.screenshot import screen_capture

def find_game_region(title):
  """Return the (left, top, width, height) of the game window, or None if it is not open"""
  try:
    import pygetwindow as gw
  except NotImplementedError:
    print("[WARNING] Window lookup is not supported on this platform, capturing the full screen.")
    return None

  windows = gw.getWindowsWithTitle(title)
  if not windows:
    print(f"[WARNING] {title} window not found, capturing the full screen.")
    return None
  win = windows[0]
  if win.isMinimized:
    win.restore()
    time.sleep(0.5)
  return (win.left, win.top, win.width, win.height)

def main():
  print("Uma Stat Calculator!")

  state = AppState(
    distance=parse_distance(config.get("default_distance", "middle")),
    strategy=parse_strategy(config.get("default_strategy", "front-runner"))
  )

  region = config.get("capture_region")
  if not region:
    region = find_game_region(config.get("game_window_title", "Umamusume"))
  if region:
    print(f"[INFO] Capture region: {tuple(region)}")

  run_app(state, screen_capture(region), config.get("overlay"))

if __name__ == "__main__":
  main()
