"""Secondary windows of the flash programmer: progress, about and info."""

from __future__ import annotations

import tkinter as tk
from tkinter import ttk

from sambaflash.mainframe import Control, MainFrameLayout

_BITMAP = "bitmap"
_LABEL = "label"
_BUTTON = "button"
_CHECKBOX = "checkbox"
_ENTRY = "entry"
_GAUGE = "gauge"
_SEPARATOR = "separator"
_TEXT = "text"

_BODY = "body"
_BUTTONS = "buttons"

GAUGE_RANGE = 100
DISCLAIMER_WRAP = 280

# A size of -1 in either direction leaves that dimension to the toolkit.
DEFAULT_SIZE = (-1, -1)


def progress_dialog_layout() -> MainFrameLayout:
    """Return the layout of the progress dialog."""
    controls = (
        Control("info", _LABEL, _BODY),
        Control("gauge", _GAUGE, _BODY),
        Control("cancel", _BUTTON, _BUTTONS, "Cancel"),
    )
    return MainFrameLayout(title="Progress", size=(300, 150), status_fields=0, controls=controls)


def about_dialog_layout() -> MainFrameLayout:
    """Return the layout of the about dialog."""
    controls = (
        Control("bossa_bitmap", _BITMAP, _BODY),
        Control("title", _LABEL, _BODY, "qNimble's Basic Open Source SAM-BA Application"),
        Control("version", _LABEL, _BODY),
        Control("toolkit", _LABEL, _BODY),
        Control("line1", _SEPARATOR, _BODY),
        Control("logo_bitmap", _BITMAP, _BODY),
        Control("line2", _SEPARATOR, _BODY),
        Control(
            "disclaimer", _LABEL, _BODY,
            "This program is distributed in the hope that it will be useful, but "
            "WITHOUT ANY WARRANTY; without even the implied warranty of "
            "MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.",
        ),
        Control("line3", _SEPARATOR, _BODY),
        Control("ok", _BUTTON, _BUTTONS, "OK"),
    )
    return MainFrameLayout(title="About BOSSA", size=(300, -1), status_fields=0, controls=controls)


def info_dialog_layout() -> MainFrameLayout:
    """Return the layout of the device information dialog."""
    controls = (
        Control("device_label", _LABEL, "device", "Device:"),
        Control("device", _ENTRY, "device"),
        Control("version_label", _LABEL, "version", "Version:"),
        Control("version", _ENTRY, "version"),
        Control("pages_label", _LABEL, "Flash", "Pages:"),
        Control("pages", _ENTRY, "Flash"),
        Control("page_size_label", _LABEL, "Flash", "Page Size:"),
        Control("page_size", _ENTRY, "Flash"),
        Control("total_size_label", _LABEL, "Flash", "Total Size:"),
        Control("total_size", _ENTRY, "Flash"),
        Control("planes_label", _LABEL, "Flash", "Planes:"),
        Control("planes", _ENTRY, "Flash"),
        Control("boot", _CHECKBOX, "Options", "Boot to flash"),
        Control("bod", _CHECKBOX, "Options", "Brownout detect"),
        Control("security", _CHECKBOX, "Options", "Security"),
        Control("bor", _CHECKBOX, "Options", "Brownout reset"),
        Control("lock_label", _LABEL, "Options", "Lock Regions:"),
        Control("lock", _TEXT, "Options"),
        Control("ok", _BUTTON, _BUTTONS, "OK"),
    )
    return MainFrameLayout(title="Info", size=DEFAULT_SIZE, status_fields=0, controls=controls)


class _Dialog(tk.Toplevel):
    """A top-level window built from a layout.

    Widgets are kept in ``widgets`` and their values in ``variables``, keyed
    by control name.
    """

    def __init__(self, master, layout: MainFrameLayout, title: str | None) -> None:
        super().__init__(master)
        self.layout = layout
        self.widgets: dict[str, tk.Widget] = {}
        self.variables: dict[str, tk.Variable] = {}
        self.title(title if title is not None else layout.title)
        width, height = layout.size
        if width > 0 and height > 0:
            self.geometry(f"{width}x{height}")
        elif width > 0:
            self.minsize(width, 1)
        self.resizable(False, False)
        self.body = ttk.Frame(self, padding=5)
        self.body.pack(side=tk.TOP, fill=tk.BOTH, expand=True)

    def _controls(self, section: str) -> list[Control]:
        return [control for control in self.layout if control.section == section]

    def _make(self, parent, control: Control) -> tk.Widget:
        if control.kind in (_BITMAP, _LABEL):
            widget = ttk.Label(parent, text=control.label)
        elif control.kind == _BUTTON:
            widget = ttk.Button(parent, text=control.label)
        elif control.kind == _ENTRY:
            var = tk.StringVar(parent)
            self.variables[control.name] = var
            widget = ttk.Entry(parent, textvariable=var, state="readonly")
        elif control.kind == _CHECKBOX:
            var = tk.BooleanVar(parent, value=False)
            self.variables[control.name] = var
            widget = ttk.Checkbutton(parent, text=control.label, variable=var)
        elif control.kind == _GAUGE:
            var = tk.IntVar(parent, value=0)
            self.variables[control.name] = var
            widget = ttk.Progressbar(
                parent, orient=tk.HORIZONTAL, maximum=GAUGE_RANGE, variable=var
            )
        elif control.kind == _SEPARATOR:
            widget = ttk.Separator(parent, orient=tk.HORIZONTAL)
        elif control.kind == _TEXT:
            widget = tk.Text(parent, height=3, width=20, state=tk.DISABLED)
        else:
            raise ValueError(f"unknown control kind: {control.kind}")
        self.widgets[control.name] = widget
        return widget

    def _build_stack(self) -> None:
        for control in self._controls(_BODY):
            widget = self._make(self.body, control)
            fill = tk.X if control.kind in (_SEPARATOR, _GAUGE) else tk.NONE
            widget.pack(side=tk.TOP, fill=fill, padx=5, pady=5)

    def _build_buttons(self) -> None:
        row = ttk.Frame(self.body)
        for control in self._controls(_BUTTONS):
            self._make(row, control).pack(side=tk.LEFT, padx=5, pady=5)
        row.pack(side=tk.TOP, pady=10)


class ProgressDialog(_Dialog):
    """Shows the state of a running operation with a cancel button."""

    def __init__(self, master=None, title: str | None = None) -> None:
        super().__init__(master, progress_dialog_layout(), title)
        self.cancelled = False
        self._build_stack()
        self._build_buttons()
        self.widgets["cancel"].configure(command=self._cancel)

    def _cancel(self) -> None:
        self.cancelled = True

    def set_info(self, text: str) -> None:
        """Set the line of text above the gauge."""
        self.widgets["info"].configure(text=text)

    def set_progress(self, value: int) -> None:
        """Set the gauge, from 0 to 100."""
        if not 0 <= value <= GAUGE_RANGE:
            raise ValueError(f"progress out of range: {value}")
        self.variables["gauge"].set(value)


class AboutDialog(_Dialog):
    """Shows the name and version of the program."""

    def __init__(self, master=None, title: str | None = None) -> None:
        super().__init__(master, about_dialog_layout(), title)
        self._build_stack()
        self._build_buttons()
        self.widgets["disclaimer"].configure(wraplength=DISCLAIMER_WRAP)
        self.widgets["ok"].configure(command=self.destroy)


class InfoDialog(_Dialog):
    """Shows the flash geometry and option bits of the connected device."""

    def __init__(self, master=None, title: str | None = None) -> None:
        super().__init__(master, info_dialog_layout(), title)
        for section in ("device", "version"):
            row = ttk.Frame(self.body)
            for control in self._controls(section):
                widget = self._make(row, control)
                expand = control.kind == _ENTRY
                widget.pack(side=tk.LEFT, fill=tk.X if expand else tk.NONE,
                            expand=expand, padx=5, pady=5)
            row.pack(side=tk.TOP, fill=tk.X, padx=5, pady=5)

        middle = ttk.Frame(self.body)
        flash = ttk.LabelFrame(middle, text="Flash")
        for index, control in enumerate(self._controls("Flash")):
            widget = self._make(flash, control)
            widget.grid(row=index // 2, column=index % 2, sticky=tk.W, padx=5, pady=5)
        flash.pack(side=tk.LEFT, fill=tk.Y, padx=5, pady=5)

        options = ttk.LabelFrame(middle, text="Options")
        grid = ttk.Frame(options)
        for index, control in enumerate(c for c in self._controls("Options")
                                        if c.kind == _CHECKBOX):
            widget = self._make(grid, control)
            widget.grid(row=index // 2, column=index % 2, sticky=tk.W, padx=5, pady=5)
        grid.pack(side=tk.TOP, fill=tk.X)
        for control in self._controls("Options"):
            if control.kind == _CHECKBOX:
                continue
            widget = self._make(options, control)
            fill = tk.X if control.kind == _TEXT else tk.NONE
            widget.pack(side=tk.TOP, anchor=tk.W, fill=fill, padx=5, pady=5)
        options.pack(side=tk.LEFT, fill=tk.Y, padx=5, pady=5)
        middle.pack(side=tk.TOP, fill=tk.X)

        self._build_buttons()
        self.widgets["ok"].configure(command=self.destroy)