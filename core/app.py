import tkinter as tk
from tkinter import ttk, messagebox

from PIL import ImageTk

from core.execute import capture_and_analyze, check_and_request_permission, start_overlay, stop_overlay
from core.logic import DistanceCategory, StrategyCategory
from core.overlay import create_overlay
from utils.constants import STAT_KEYS, STAT_LABELS, STAT_LABELS_JP, DISTANCE_LABELS, STRATEGY_LABELS

PREVIEW_HEIGHT = 300

class CalculatorApp:
    """Main window: overlay controls, capture preview, race conditions, editable stats and the rating."""

    def __init__(self, root, state, capture, overlay_config=None, title="Uma Stat Calculator"):
        self.root = root
        self.state = state
        self.capture = capture
        self._updating_fields = False
        self._preview_photo = None

        root.title(title)
        self.overlay = create_overlay(root, overlay_config, on_capture_requested=self.on_capture)

        self.distance_var = tk.StringVar(value=state.distance.value)
        self.strategy_var = tk.StringVar(value=state.strategy.value)
        self.stat_vars = {}
        self.score_vars = {stat: tk.StringVar(value="-") for stat in STAT_KEYS}
        self.rating_var = tk.StringVar(value="-")
        self.total_var = tk.StringVar(value="Total: -")
        self.status = tk.StringVar(value="Ready")

        self._build()
        self.refresh()

    def _build(self):
        root = self.root
        ttk.Label(root, text="Uma Stat Calculator", font=("Segoe UI", 18, "bold")).pack(anchor="w", padx=12, pady=(12, 0))

        # Overlay controls
        overlay_frame = ttk.LabelFrame(root, text="Overlay")
        overlay_frame.pack(fill="x", padx=12, pady=6)
        self.btn_overlay = ttk.Button(overlay_frame, text="Start overlay", command=self.on_toggle_overlay)
        self.btn_overlay.pack(side="left", padx=6, pady=6)
        self.btn_permission = ttk.Button(overlay_frame, text="Grant permission", command=self.on_request_permission)
        self.lbl_overlay = ttk.Label(overlay_frame, text="")
        self.lbl_overlay.pack(side="left", padx=6)

        self.btn_capture = ttk.Button(root, text="Capture now", command=self.on_capture)
        self.btn_capture.pack(fill="x", padx=12, pady=6)

        self.preview = ttk.Label(root)
        self.preview.pack(padx=12)

        # Everything below only appears once stats exist
        self.details = ttk.Frame(root)

        race = ttk.LabelFrame(self.details, text="Race conditions")
        race.pack(fill="x", pady=6)
        ttk.Label(race, text="Distance").grid(row=0, column=0, sticky="w", padx=6)
        for col, distance in enumerate(DistanceCategory, start=1):
            ttk.Radiobutton(race, text=DISTANCE_LABELS[distance.value], variable=self.distance_var,
                            value=distance.value, command=self.on_distance_change).grid(row=0, column=col, sticky="w")
        ttk.Label(race, text="Strategy").grid(row=1, column=0, sticky="w", padx=6)
        for col, strategy in enumerate(StrategyCategory, start=1):
            ttk.Radiobutton(race, text=STRATEGY_LABELS[strategy.value], variable=self.strategy_var,
                            value=strategy.value, command=self.on_strategy_change).grid(row=1, column=col, sticky="w")

        stats = ttk.LabelFrame(self.details, text="Stats")
        stats.pack(fill="x", pady=6)
        for row, stat in enumerate(STAT_KEYS):
            ttk.Label(stats, text=f"{STAT_LABELS[stat]} ({STAT_LABELS_JP[stat]})", width=16).grid(row=row, column=0, sticky="w", padx=6)
            for col, field in ((1, "current"), (3, "max")):
                var = tk.StringVar(value="0")
                var.trace_add("write", lambda *args, s=stat, f=field: self.on_stat_edit(s, f))
                ttk.Entry(stats, textvariable=var, width=7, justify="center").grid(row=row, column=col, pady=2)
                self.stat_vars[(stat, field)] = var
            ttk.Label(stats, text="/").grid(row=row, column=2, padx=4)

        result = ttk.LabelFrame(self.details, text="Evaluation")
        result.pack(fill="x", pady=6)
        ttk.Label(result, textvariable=self.rating_var, font=("Segoe UI", 40, "bold"), foreground="#8B5CF6").pack()
        ttk.Label(result, textvariable=self.total_var, font=("Segoe UI", 14, "bold")).pack()
        scores = ttk.Frame(result)
        scores.pack(pady=6)
        for col, stat in enumerate(STAT_KEYS):
            ttk.Label(scores, text=STAT_LABELS[stat], foreground="#6B7280").grid(row=0, column=col, padx=8)
            ttk.Label(scores, textvariable=self.score_vars[stat], font=("Segoe UI", 12, "bold")).grid(row=1, column=col, padx=8)

        ttk.Label(root, textvariable=self.status, anchor="w").pack(side="bottom", fill="x")

    # Event handlers
    def on_capture(self):
        if self.state.busy:
            return
        self.status.set("Capturing...")
        self._set_capture_enabled(False)
        self.root.update_idletasks()
        try:
            capture_and_analyze(self.state, self.capture, alert=self.alert)
        finally:
            self._set_capture_enabled(True)
        self.status.set("Ready")
        self.refresh()

    def on_toggle_overlay(self):
        if self.state.overlay_enabled:
            stop_overlay(self.state, self.overlay)
        else:
            start_overlay(self.state, self.overlay, confirm=self.confirm, alert=self.alert)
        self.refresh()

    def on_request_permission(self):
        check_and_request_permission(self.state, self.overlay, confirm=self.confirm)
        self.refresh()

    def on_distance_change(self):
        self.state.set_distance(self.distance_var.get())
        self.refresh_result()

    def on_strategy_change(self):
        self.state.set_strategy(self.strategy_var.get())
        self.refresh_result()

    def on_stat_edit(self, stat, field):
        if self._updating_fields:
            return
        self.state.set_stat(stat, field, self.stat_vars[(stat, field)].get())
        self.refresh_result()

    def alert(self, title, message):
        messagebox.showinfo(title=title, message=message, parent=self.root)

    def confirm(self, title, message):
        return messagebox.askokcancel(title=title, message=message, parent=self.root)

    # Rendering
    def refresh(self):
        state = self.state
        self.btn_overlay.configure(text="Stop overlay" if state.overlay_enabled else "Start overlay")
        if state.overlay_enabled:
            self.lbl_overlay.configure(text="Overlay running. Open the game and press the floating button.")
        elif not self.overlay.is_supported:
            self.lbl_overlay.configure(text="Overlay not available")
        else:
            self.lbl_overlay.configure(text="")

        if self.overlay.is_supported and not state.has_permission:
            self.btn_permission.pack(side="left", padx=6)
        else:
            self.btn_permission.pack_forget()

        self._render_preview()

        if state.stats is None:
            self.details.pack_forget()
        else:
            self.details.pack(fill="x", padx=12)
            self._updating_fields = True
            try:
                for stat, value in state.stats.items():
                    self.stat_vars[(stat, "current")].set(str(value.current))
                    self.stat_vars[(stat, "max")].set(str(value.max))
            finally:
                self._updating_fields = False
        self.refresh_result()

    def refresh_result(self):
        result = self.state.result
        if result is None:
            self.rating_var.set("-")
            self.total_var.set("Total: -")
            for var in self.score_vars.values():
                var.set("-")
            return
        self.rating_var.set(result.rating)
        self.total_var.set(f"Total: {result.total}")
        for stat, score in result.display_scores.items():
            self.score_vars[stat].set(str(score))
        self.status.set(f"{DISTANCE_LABELS[self.state.distance.value]} / {STRATEGY_LABELS[self.state.strategy.value]}: {result.total} ({result.rating})")

    def _render_preview(self):
        image = self.state.captured_image
        if image is None:
            return
        width = max(1, int(image.width * PREVIEW_HEIGHT / image.height))
        self._preview_photo = ImageTk.PhotoImage(image.resize((width, PREVIEW_HEIGHT)))
        self.preview.configure(image=self._preview_photo)

    def _set_capture_enabled(self, enabled):
        self.btn_capture.configure(state="normal" if enabled else "disabled")
        if hasattr(self.overlay, "set_enabled"):
            self.overlay.set_enabled(enabled)


def run_app(state, capture, overlay_config=None):
    root = tk.Tk()
    app = CalculatorApp(root, state, capture, overlay_config)
    # Ask for the overlay permission up front, like the first launch on a phone
    if app.overlay.is_supported:
        check_and_request_permission(state, app.overlay, confirm=app.confirm)
        app.refresh()

    def on_close():
        if state.overlay_enabled:
            stop_overlay(state, app.overlay)
        root.destroy()

    root.protocol("WM_DELETE_WINDOW", on_close)
    root.mainloop()
