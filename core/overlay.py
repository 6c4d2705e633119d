"""
Floating capture button shown on top of the game window.

Two variants share one interface so the calculator never depends on a
windowing system:

- TkOverlay: a small borderless, always-on-top Tk window with a drag handle
  and a "Capture" button.
- UnsupportedOverlay: used when there is no display (or the overlay is
  disabled in config.json); every action is a no-op.

Both expose has_permission(), request_permission(), start(), stop() and an
on_capture_requested callback that re-enters the analysis pipeline.
"""

from utils.constants import OVERLAY_OFFSET_X, OVERLAY_OFFSET_Y


def drag_position(initial, touch_start, pointer):
    """
    New overlay offset after dragging.

    x is measured from the right edge of the screen, so moving the pointer
    right makes it smaller; y is measured from the top.
    """
    initial_x, initial_y = initial
    start_x, start_y = touch_start
    pointer_x, pointer_y = pointer
    return (initial_x + int(start_x - pointer_x), initial_y + int(pointer_y - start_y))


class UnsupportedOverlay:
    is_supported = False

    def __init__(self, on_capture_requested=None):
        self.on_capture_requested = on_capture_requested

    def has_permission(self):
        return False

    def request_permission(self):
        print("[WARNING] Floating overlay is not supported on this system")

    def start(self):
        return False

    def stop(self):
        pass


class TkOverlay:
    is_supported = True

    def __init__(self, root, on_capture_requested=None, x=OVERLAY_OFFSET_X, y=OVERLAY_OFFSET_Y):
        self.root = root
        self.on_capture_requested = on_capture_requested
        self.x = x
        self.y = y
        self.window = None
        self.button = None
        self._drag_initial = None
        self._drag_start = None

    # Desktop windows can always draw on top of other windows
    def has_permission(self):
        return True

    def request_permission(self):
        pass

    def start(self):
        import tkinter as tk

        if self.window is not None:
            return True

        self.window = tk.Toplevel(self.root)
        self.window.overrideredirect(True)
        self.window.attributes("-topmost", True)
        try:
            self.window.attributes("-alpha", 0.85)
        except tk.TclError:
            pass

        frame = tk.Frame(self.window, bg="#8B5CF6")
        frame.pack()
        handle = tk.Label(frame, text="⠿", bg="#8B5CF6", fg="white", cursor="fleur", padx=4)
        handle.pack(side="left", fill="y")
        self.button = tk.Button(frame, text="Capture", command=self._request_capture,
                                bg="#8B5CF6", fg="white", relief="flat", padx=8, pady=4)
        self.button.pack(side="left")

        handle.bind("<ButtonPress-1>", self._on_drag_start)
        handle.bind("<B1-Motion>", self._on_drag_move)

        self._place()
        print("[INFO] Overlay started")
        return True

    def stop(self):
        if self.window is not None:
            self.window.destroy()
            self.window = None
            self.button = None
            print("[INFO] Overlay stopped")

    def set_enabled(self, enabled):
        if self.button is not None:
            self.button.configure(state="normal" if enabled else "disabled")

    def _request_capture(self):
        if self.on_capture_requested:
            self.on_capture_requested()

    def _place(self):
        self.window.update_idletasks()
        screen_width = self.window.winfo_screenwidth()
        left = screen_width - self.window.winfo_reqwidth() - self.x
        self.window.geometry(f"+{left}+{self.y}")

    def _on_drag_start(self, event):
        self._drag_initial = (self.x, self.y)
        self._drag_start = (event.x_root, event.y_root)

    def _on_drag_move(self, event):
        if self._drag_start is None:
            return
        self.x, self.y = drag_position(self._drag_initial, self._drag_start, (event.x_root, event.y_root))
        self._place()


def create_overlay(root, overlay_config=None, on_capture_requested=None):
    """Pick the overlay variant for this environment"""
    overlay_config = overlay_config or {}
    if root is None or not overlay_config.get("enabled", True):
        return UnsupportedOverlay(on_capture_requested)
    return TkOverlay(root, on_capture_requested,
                     x=overlay_config.get("x", OVERLAY_OFFSET_X),
                     y=overlay_config.get("y", OVERLAY_OFFSET_Y))
