"""UI component builders for HashSafe GUI."""

from __future__ import annotations

import logging
import math
import tkinter as tk
from typing import Callable, Dict, Optional

try:
    from tkinterdnd2 import DND_FILES
except ImportError:
    DND_FILES = None

from hashsafe.constants import APP_NAME, APP_SUBTITLE, FOOTER_TEXT

FONT = "Segoe UI"
MONO_FONT = "Courier"

THEMES: Dict[str, Dict[str, str]] = {
    "dark": {
        "bg": "#1e1e1e",
        "fg": "#dcdcdc",
        "muted": "#b4b4b4",
        "panel": "#2d2d2d",
        "border": "#646464",
        "field": "#1e1e1e",
        "button": "#3c3c3c",
    },
    "light": {
        "bg": "#f5f5f7",
        "fg": "#323232",
        "muted": "#646464",
        "panel": "#ffffff",
        "border": "#dcdcdc",
        "field": "#ebebeb",
        "button": "#e0e0e0",
    },
}

ERROR_COLORS = {"bg": "#fcebeb", "border": "#dc9696", "title": "#c83c3c", "fg": "#963c3c"}
FOOTER_COLOR = "#969696"


def setup_header(parent: tk.Frame, theme_var: tk.StringVar, on_theme: Callable) -> Dict[str, tk.Widget]:
    """
    Setup title, subtitle and theme selector.

    Args:
        parent: Parent frame
        theme_var: Variable holding "dark" or "light"
        on_theme: Called when the theme radio buttons change

    Returns:
        Dict with widgets: title, subtitle, theme_frame, dark_radio, light_radio
    """
    title = tk.Label(parent, text=APP_NAME, font=(FONT, 28, "bold"))
    title.pack(pady=(20, 0))

    subtitle = tk.Label(parent, text=APP_SUBTITLE, font=(FONT, 13))
    subtitle.pack()

    theme_frame = tk.Frame(parent)
    theme_frame.pack(fill="x", pady=(10, 0), padx=10)
    theme_label = tk.Label(theme_frame, text="Theme:", font=(FONT, 10))
    theme_label.pack(side="left")

    dark_radio = tk.Radiobutton(
        theme_frame, text="Dark", value="dark", variable=theme_var, command=on_theme
    )
    light_radio = tk.Radiobutton(
        theme_frame, text="Light", value="light", variable=theme_var, command=on_theme
    )
    dark_radio.pack(side="left", padx=5)
    light_radio.pack(side="left", padx=5)

    return {
        "title": title,
        "subtitle": subtitle,
        "theme_frame": theme_frame,
        "theme_label": theme_label,
        "dark_radio": dark_radio,
        "light_radio": light_radio,
    }


def setup_file_section(
    parent: tk.Frame,
    on_select: Callable,
    on_drop: Optional[Callable],
    on_calculate: Callable,
    has_dnd: bool,
) -> Dict[str, tk.Widget]:
    """
    Setup file selection area and Calculate button.

    Args:
        parent: Parent frame
        on_select: Select File button callback
        on_drop: Drag & drop callback (or None if DnD not available)
        on_calculate: Calculate Hash button callback
        has_dnd: Whether tkinterdnd2 is available

    Returns:
        Dict with widgets: file_frame, select_btn, icon_label, name_label, calculate_btn
    """
    file_frame = tk.Frame(parent)
    file_frame.pack(fill="x", pady=(20, 0))

    select_btn = create_button(file_frame, "Select File", on_select, size=14, width=16)
    select_btn.pack()

    # Register drag & drop
    if has_dnd and on_drop:
        file_frame.drop_target_register(DND_FILES)
        file_frame.dnd_bind("<<Drop>>", on_drop)
        logging.info("Drag & drop registered on file area")

    name_frame = tk.Frame(file_frame)
    name_frame.pack(pady=(10, 0))
    icon_label = tk.Label(name_frame, text="", font=(FONT, 14))
    icon_label.pack(side="left")
    name_label = tk.Label(name_frame, text="", font=(FONT, 11, "bold"))
    name_label.pack(side="left", padx=(4, 0))

    # Packed once a file is selected
    calculate_btn = create_button(file_frame, "Calculate Hash", on_calculate, size=12, width=14)

    return {
        "file_frame": file_frame,
        "name_frame": name_frame,
        "select_btn": select_btn,
        "icon_label": icon_label,
        "name_label": name_label,
        "calculate_btn": calculate_btn,
    }


def setup_progress(parent: tk.Frame, on_cancel: Callable) -> Dict[str, tk.Widget]:
    """
    Setup spinner, status text and Cancel button (hidden until calculating).

    Returns:
        Dict with widgets: progress_frame, spinner, status_label, cancel_btn
    """
    progress_frame = tk.Frame(parent)

    spinner = tk.Canvas(progress_frame, width=30, height=30, highlightthickness=0)
    spinner.pack(pady=(10, 0))
    status_label = tk.Label(progress_frame, text="Calculating hash...", font=(FONT, 11))
    status_label.pack()
    cancel_btn = create_button(progress_frame, "Cancel", on_cancel, size=10, width=10)
    cancel_btn.config(fg=ERROR_COLORS["title"])
    cancel_btn.pack(pady=(5, 0))

    return {
        "progress_frame": progress_frame,
        "spinner": spinner,
        "status_label": status_label,
        "cancel_btn": cancel_btn,
    }


def setup_result(parent: tk.Frame, on_copy: Callable) -> Dict[str, tk.Widget]:
    """
    Setup result and error boxes (both hidden until there is an outcome).

    Args:
        parent: Parent frame
        on_copy: Copy to Clipboard button callback

    Returns:
        Dict with widgets: result_frame, result_title, hash_entry, copy_btn,
                          error_frame, error_title, error_label
    """
    result_frame = tk.Frame(parent, relief="solid", bd=1, padx=10, pady=10)
    result_title = tk.Label(result_frame, text="SHA-256 Hash", font=(FONT, 14, "bold"))
    result_title.pack()

    hash_entry = tk.Entry(result_frame, font=(MONO_FONT, 9), relief="flat", justify="center")
    hash_entry.config(state="readonly")
    hash_entry.pack(fill="x", pady=(5, 5), ipady=6)

    copy_btn = create_button(result_frame, "Copy to Clipboard", on_copy, size=10, width=16)
    copy_btn.pack()

    error_frame = tk.Frame(
        parent,
        bg=ERROR_COLORS["bg"],
        highlightbackground=ERROR_COLORS["border"],
        highlightthickness=1,
        padx=10,
        pady=10,
    )
    error_title = tk.Label(
        error_frame,
        text="Error",
        bg=ERROR_COLORS["bg"],
        fg=ERROR_COLORS["title"],
        font=(FONT, 12, "bold"),
    )
    error_title.pack()
    error_label = tk.Label(
        error_frame, text="", bg=ERROR_COLORS["bg"], fg=ERROR_COLORS["fg"], wraplength=360
    )
    error_label.pack()

    return {
        "result_frame": result_frame,
        "result_title": result_title,
        "hash_entry": hash_entry,
        "copy_btn": copy_btn,
        "error_frame": error_frame,
        "error_title": error_title,
        "error_label": error_label,
    }


def setup_footer(parent: tk.Frame) -> tk.Label:
    """Setup footer label at the bottom of the window."""
    footer = tk.Label(parent, text=FOOTER_TEXT, fg=FOOTER_COLOR, font=(FONT, 8))
    footer.pack(side="bottom", pady=(0, 10))
    return footer


def draw_spinner(canvas: tk.Canvas, angle: float, colors: Dict[str, str]) -> None:
    """Redraw the spinner at the given angle (radians)."""
    canvas.delete("all")
    cx, cy, r = 15, 15, 10
    canvas.create_oval(cx - r, cy - r, cx + r, cy + r, outline=colors["border"], width=2)
    canvas.create_line(
        cx, cy, cx + r * math.cos(angle), cy + r * math.sin(angle), fill=colors["fg"], width=2
    )


def apply_theme(widgets: Dict[str, tk.Widget], theme: str) -> None:
    """
    Recolour themed widgets.

    Args:
        widgets: Widgets to recolour (error box widgets are skipped)
        theme: "dark" or "light"
    """
    colors = THEMES[theme]
    for name, widget in widgets.items():
        if name.startswith("error_"):
            continue
        if isinstance(widget, tk.Button):
            fg = ERROR_COLORS["title"] if name == "cancel_btn" else colors["fg"]
            widget.config(bg=colors["button"], fg=fg, activebackground=colors["border"])
        elif isinstance(widget, tk.Radiobutton):
            widget.config(
                bg=colors["bg"], fg=colors["fg"], selectcolor=colors["panel"],
                activebackground=colors["bg"],
            )
        elif isinstance(widget, tk.Entry):
            widget.config(readonlybackground=colors["field"], fg=colors["fg"])
        elif isinstance(widget, tk.Canvas):
            widget.config(bg=colors["bg"])
        elif name == "result_frame":
            widget.config(bg=colors["panel"], highlightbackground=colors["border"])
        elif name == "result_title":
            widget.config(bg=colors["panel"], fg=colors["fg"])
        elif name == "icon_label":
            # Foreground is the file type colour
            widget.config(bg=colors["bg"])
        elif name in ("subtitle", "footer", "theme_label"):
            fg = FOOTER_COLOR if name == "footer" else colors["muted"]
            widget.config(bg=colors["bg"], fg=fg)
        elif isinstance(widget, tk.Label):
            widget.config(bg=colors["bg"], fg=colors["fg"])
        else:
            widget.config(bg=colors["bg"])


def create_button(
    parent: tk.Frame,
    text: str,
    command: Callable,
    size: int = 11,
    width: int = 12,
) -> tk.Button:
    """
    Create a styled button.

    Args:
        parent: Parent frame
        text: Button text
        command: Click callback
        size: Font size
        width: Button width in characters

    Returns:
        Configured Button widget
    """
    return tk.Button(
        parent,
        text=text,
        command=command,
        font=(FONT, size),
        width=width,
        relief="flat",
        bd=0,
        padx=10,
        pady=6,
        cursor="hand2",
    )
