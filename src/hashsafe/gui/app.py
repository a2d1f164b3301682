"""Main GUI application for HashSafe."""

from __future__ import annotations

import logging
import tkinter as tk
from pathlib import Path
from tkinter import filedialog
from typing import Dict, Optional

try:
    from tkinterdnd2 import DND_FILES, TkinterDnD
except ImportError:
    TkinterDnD = None  # Fallback if tkinterdnd2 not installed

from hashsafe.config import HashSafeConfig, load_config
from hashsafe.constants import APP_NAME

from .file_types import display_name, file_type_for
from .ui_components import (
    THEMES,
    apply_theme,
    draw_spinner,
    setup_file_section,
    setup_footer,
    setup_header,
    setup_progress,
    setup_result,
)
from .worker import HashOutcome, HashWorker

SPINNER_STEP = 0.5  # Radians per poll tick


class HashSafeGUI:
    """Main HashSafe GUI application."""

    def __init__(self, config_path: Optional[Path] = None, config: Optional[HashSafeConfig] = None):
        """Initialize GUI."""
        # Load config
        self.config = config or load_config(config_path)

        self.worker = HashWorker(chunk_size=self.config.hash.chunk_size)
        self.selected_file: Optional[Path] = None
        self.hash_result: Optional[str] = None
        self._spinner_angle = 0.0
        self._poll_id: Optional[str] = None

        # Create window
        if TkinterDnD:
            self.root = TkinterDnD.Tk()
            logging.info("TkinterDnD enabled")
        else:
            self.root = tk.Tk()
            logging.warning("tkinterdnd2 not available, drag & drop disabled")

        gui = self.config.gui
        self.root.title(APP_NAME)
        self.root.geometry(f"{gui.width}x{gui.height}")
        self.root.minsize(gui.min_width, gui.min_height)

        # Register drag & drop on entire window
        if TkinterDnD:
            self.root.drop_target_register(DND_FILES)
            self.root.dnd_bind("<<Drop>>", self.on_drop)
            logging.info("Drag & drop registered on root window")

        self.theme_var = tk.StringVar(master=self.root, value=gui.theme)
        self.widgets: Dict[str, tk.Widget] = {}

        self.setup_ui()
        self.bind_events()
        self.on_theme()

    def setup_ui(self) -> None:
        """Setup UI components."""
        main_frame = tk.Frame(self.root)
        main_frame.pack(fill="both", expand=True, padx=20)
        self.widgets["main_frame"] = main_frame
        self.widgets["footer"] = setup_footer(main_frame)

        self.widgets.update(setup_header(main_frame, self.theme_var, self.on_theme))
        self.widgets.update(
            setup_file_section(
                main_frame,
                on_select=self.on_select,
                on_drop=self.on_drop if TkinterDnD else None,
                on_calculate=self.on_calculate,
                has_dnd=TkinterDnD is not None,
            )
        )
        self.widgets.update(setup_progress(main_frame, self.on_cancel))
        self.widgets.update(setup_result(main_frame, self.on_copy))

    def bind_events(self) -> None:
        """Bind keyboard and window events."""
        self.root.protocol("WM_DELETE_WINDOW", self.on_close)

    def on_theme(self) -> None:
        """Apply the selected theme."""
        theme = self.theme_var.get()
        self.root.configure(bg=THEMES[theme]["bg"])
        apply_theme(self.widgets, theme)

    def on_drop(self, event) -> None:
        """Handle drag & drop (first file wins)."""
        files = self.root.tk.splitlist(event.data)
        logging.info(f"Dropped {len(files)} file(s): {files}")
        if files:
            # Strip curly braces that Windows sometimes adds
            self.select_file(Path(files[0].strip("{}")))

    def on_select(self) -> None:
        """Handle Select File button."""
        file_path = filedialog.askopenfilename(title="Select a file")
        if file_path:
            self.select_file(Path(file_path))

    def select_file(self, path: Path) -> None:
        """Remember the file and clear any previous result."""
        if self.worker.is_running():
            logging.info("Calculation in progress, ignoring new file")
            return
        logging.info(f"Selected file: {path}")
        self.selected_file = path
        self.hash_result = None

        file_type = file_type_for(path)
        self.widgets["icon_label"].config(text=file_type.icon, fg=file_type.color)
        self.widgets["name_label"].config(text=display_name(path))
        self.widgets["calculate_btn"].pack(pady=(10, 0))
        self._hide_outcome()

    def on_calculate(self) -> None:
        """Start hashing the selected file."""
        if self.selected_file is None or self.worker.is_running():
            return
        self._hide_outcome()
        self.worker.start(self.selected_file)
        self.widgets["calculate_btn"].pack_forget()
        self.widgets["progress_frame"].pack(pady=(10, 0))
        self._poll()

    def on_cancel(self) -> None:
        """Drop the pending calculation."""
        self.worker.cancel()
        self._stop_polling()
        self._show_idle()

    def on_copy(self) -> None:
        """Copy the digest to the clipboard."""
        if self.hash_result:
            self.root.clipboard_clear()
            self.root.clipboard_append(self.hash_result)
            logging.info("Hash copied to clipboard")

    def on_close(self) -> None:
        """Handle window close."""
        self.worker.cancel()
        self._stop_polling()
        self.root.destroy()

    def _poll(self) -> None:
        """Check the worker without blocking (runs in main thread)."""
        self._poll_id = None
        if not self.worker.is_running():
            return
        outcome = self.worker.poll()
        if outcome is None:
            self._spinner_angle += SPINNER_STEP
            draw_spinner(
                self.widgets["spinner"], self._spinner_angle, THEMES[self.theme_var.get()]
            )
            self._poll_id = self.root.after(self.config.gui.poll_interval_ms, self._poll)
            return
        self._show_outcome(outcome)

    def _show_outcome(self, outcome: HashOutcome) -> None:
        """Render a finished calculation."""
        self._show_idle()
        if outcome.ok:
            self.hash_result = outcome.digest
            entry = self.widgets["hash_entry"]
            entry.config(state="normal")
            entry.delete(0, "end")
            entry.insert(0, outcome.digest)
            entry.config(state="readonly")
            self.widgets["result_frame"].pack(fill="x", pady=(20, 0))
        else:
            self.widgets["error_label"].config(text=outcome.error)
            self.widgets["error_frame"].pack(fill="x", pady=(20, 0))

    def _stop_polling(self) -> None:
        if self._poll_id is not None:
            self.root.after_cancel(self._poll_id)
            self._poll_id = None

    def _show_idle(self) -> None:
        self.widgets["progress_frame"].pack_forget()
        if self.selected_file is not None:
            self.widgets["calculate_btn"].pack(pady=(10, 0))

    def _hide_outcome(self) -> None:
        self.widgets["result_frame"].pack_forget()
        self.widgets["error_frame"].pack_forget()

    def run(self) -> None:
        """Run the GUI main loop."""
        logging.info("Starting HashSafe GUI")
        self.root.mainloop()
