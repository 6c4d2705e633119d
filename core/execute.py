from core.ocr import extract_text
from core.state import StatBlock, parse_stats
from utils.config import debug_print

def show_alert(title, message):
    """Show a blocking message box, falling back to the console when no GUI is available"""
    from pymsgbox import alert
    try:
        alert(text=message, title=title, button="OK")
    except Exception as e:
        print(f"[ERROR] Failed to show GUI popup: {e}")
        print(f"[INFO] {title}: {message}")

def analyze_image(image, recognize=extract_text):
    """OCR a screenshot and read the stat panel. Returns None when the numbers could not be read."""
    try:
        text = recognize(image)
    except Exception as e:
        print(f"[WARNING] OCR failed: {e}")
        return None
    return parse_stats(text)

def capture_and_analyze(state, capture, recognize=extract_text, alert=show_alert):
    """
    Run one capture -> OCR -> parse -> evaluate pass and store the outcome in state.

    Only one pass runs at a time; a request arriving while state.busy is set
    is dropped. A capture error aborts the pass without touching the current
    stats. Unreadable OCR output leaves zeroed stats for manual entry.

    Returns True when stats were read from the screen.
    """
    if state.busy:
        print("[INFO] Capture already in progress, ignoring request")
        return False

    state.busy = True
    try:
        try:
            image = capture()
        except Exception as e:
            print(f"[ERROR] Screen capture failed: {e}")
            alert("Error", "Failed to capture the screen")
            return False

        state.captured_image = image
        debug_print(f"[DEBUG] Captured {image.size[0]}x{image.size[1]} screenshot")

        stats = analyze_image(image, recognize)
        if stats is None:
            print("[WARNING] Not enough stat numbers found, switching to manual entry")
            state.set_stats(StatBlock.zeroed())
            alert("Read failed", "Could not read stats, please enter them manually")
            return False

        result = state.set_stats(stats)
        print(f"[INFO] Stats read: {stats}")
        print(f"[INFO] Total {result.total} ({result.rating}) for {state.distance.value} / {state.strategy.value}")
        return True
    finally:
        state.busy = False

def check_and_request_permission(state, overlay, confirm):
    """Refresh state.has_permission, asking the user to grant it when missing"""
    state.has_permission = overlay.has_permission()
    if not state.has_permission and overlay.is_supported:
        if confirm("Overlay permission required",
                   "Allow the calculator to draw over other windows so the capture button can float above the game."):
            overlay.request_permission()
            state.has_permission = overlay.has_permission()
    return state.has_permission

def start_overlay(state, overlay, confirm, alert=show_alert):
    if not overlay.is_supported:
        alert("Overlay", "The floating overlay is not available on this system")
        return False

    if not state.has_permission:
        # Ask for permission only; the user presses start again once granted
        check_and_request_permission(state, overlay, confirm)
        return False

    try:
        overlay.start()
    except Exception as e:
        print(f"[ERROR] Failed to start overlay: {e}")
        alert("Error", "Failed to start the overlay")
        return False

    state.overlay_enabled = True
    alert("Overlay started", "Open Umamusume and use the floating button to read your stats.")
    return True

def stop_overlay(state, overlay):
    try:
        overlay.stop()
    except Exception as e:
        print(f"[ERROR] Failed to stop overlay: {e}")
    state.overlay_enabled = False
