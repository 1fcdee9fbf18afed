"""Main window of the flash programmer: its layout and its Tk widgets."""

from __future__ import annotations

import tkinter as tk
from collections.abc import Iterator
from dataclasses import dataclass
from tkinter import filedialog, ttk

_BITMAP = "bitmap"
_LABEL = "label"
_BUTTON = "button"
_COMBOBOX = "combobox"
_FILEPICKER = "filepicker"
_CHECKBOX = "checkbox"
_ENTRY = "entry"

_TITLE_ROW = "title"
_BUTTON_ROW = "buttons"
_OPTION_SECTIONS = ("Write Options", "Read Options", "General Options")


@dataclass(frozen=True)
class Control:
    """One widget of a window: its kind, text, tool tip and section."""

    name: str
    kind: str
    section: str
    label: str = ""
    tooltip: str | None = None


@dataclass(frozen=True)
class MainFrameLayout:
    """Static description of the main window."""

    title: str
    size: tuple[int, int]
    status_fields: int
    controls: tuple[Control, ...]
    file_dialog_title: str = "Select a file"
    file_wildcard: str = "*.*"

    def __getitem__(self, name: str) -> Control:
        for control in self.controls:
            if control.name == name:
                return control
        raise KeyError(name)

    def __iter__(self) -> Iterator[Control]:
        return iter(self.controls)

    @property
    def sections(self) -> tuple[str, ...]:
        """Section names in the order they appear in the window."""
        return tuple(dict.fromkeys(control.section for control in self.controls))


def main_frame_layout() -> MainFrameLayout:
    """Return the layout of the main window."""
    controls = (
        Control("bossa_bitmap", _BITMAP, _TITLE_ROW),
        Control("title_text", _LABEL, _TITLE_ROW, "Flash Programmer for Atmel SAM Devices"),
        Control("about", _BUTTON, _TITLE_ROW, "About", "Display information about BOSSA"),
        Control("port", _COMBOBOX, "Serial Port"),
        Control(
            "refresh", _BUTTON, "Serial Port", "Refresh",
            "Refresh the list of available serial ports",
        ),
        Control(
            "file", _FILEPICKER, "File", "",
            "Select the file to use for write/verify/read operations",
        ),
        Control(
            "erase", _CHECKBOX, "Write Options", "Erase all",
            "Erase entire flash before writing (recommended)",
        ),
        Control(
            "boot", _CHECKBOX, "Write Options", "Boot to flash",
            "Boot processor to flash instead of SAM-BA (if supported)",
        ),
        Control(
            "bod", _CHECKBOX, "Write Options", "Brownout detect",
            "Enable the brownout detection circuitry",
        ),
        Control(
            "bor", _CHECKBOX, "Write Options", "Brownout reset",
            "Enable processor reset on brownout detect",
        ),
        Control("lock", _CHECKBOX, "Write Options", "Lock", "Lock access to the flash"),
        Control("security", _CHECKBOX, "Write Options", "Security", "Set the security bit"),
        Control("size_text", _LABEL, "Read Options", "Size:"),
        Control("size", _ENTRY, "Read Options", "", "Specify the amount of flash to read"),
        Control("offset_text", _LABEL, "General Options", "Flash Offset:"),
        Control(
            "offset", _ENTRY, "General Options", "",
            "Specify the offset into the flash for operations",
        ),
        Control("write", _BUTTON, _BUTTON_ROW, "Write", "Write the flash with the file above"),
        Control(
            "verify", _BUTTON, _BUTTON_ROW, "Verify", "Verify the flash matches the file above"
        ),
        Control("read", _BUTTON, _BUTTON_ROW, "Read", "Read the flash into the file above"),
        Control(
            "info", _BUTTON, _BUTTON_ROW, "Info",
            "Display information about the connected processor",
        ),
        Control("exit", _BUTTON, _BUTTON_ROW, "Exit", "Exit and close BOSSA"),
    )
    return MainFrameLayout(title="BOSSA", size=(550, 400), status_fields=2, controls=controls)


class ToolTip:
    """A small window with help text shown while the pointer is over a widget."""

    def __init__(self, widget, text: str) -> None:
        self.widget = widget
        self.text = text
        self.window: tk.Toplevel | None = None
        widget.bind("<Enter>", self.show)
        widget.bind("<Leave>", self.hide)

    def show(self, event=None) -> None:
        """Show the tip just below the widget."""
        if self.window is not None:
            return
        x = self.widget.winfo_rootx() + 20
        y = self.widget.winfo_rooty() + self.widget.winfo_height() + 2
        window = tk.Toplevel(self.widget)
        window.wm_overrideredirect(True)
        window.wm_geometry(f"+{x}+{y}")
        tk.Label(
            window, text=self.text, background="#ffffe0", relief=tk.SOLID, borderwidth=1
        ).pack(ipadx=2, ipady=1)
        self.window = window

    def hide(self, event=None) -> None:
        """Remove the tip if it is shown."""
        if self.window is not None:
            self.window.destroy()
            self.window = None


class MainFrame(ttk.Frame):
    """The main window: port, file, options, action buttons and status bar.

    Widgets are kept in ``widgets`` and their values in ``variables``, both
    keyed by the control names of :func:`main_frame_layout`.
    """

    def __init__(self, master=None, title: str | None = None) -> None:
        if master is None:
            master = tk.Tk()
        super().__init__(master, padding=5)
        self.layout = main_frame_layout()
        self.widgets: dict[str, tk.Widget] = {}
        self.variables: dict[str, tk.Variable] = {}
        self.tooltips: list[ToolTip] = []

        width, height = self.layout.size
        master.title(title if title is not None else self.layout.title)
        master.geometry(f"{width}x{height}")
        master.resizable(False, False)

        self._build_title_row()
        self._build_section("Serial Port", expand=True)
        self._build_section("File", expand=True)
        self._build_options()
        self._build_button_row()
        self.pack(side=tk.TOP, fill=tk.BOTH, expand=True)
        self.status_labels = self._build_status_bar(master)

    def _controls(self, section: str) -> list[Control]:
        return [control for control in self.layout if control.section == section]

    def _make(self, parent, control: Control) -> tk.Widget:
        if control.kind == _BITMAP:
            widget = ttk.Label(parent)
        elif control.kind == _LABEL:
            widget = ttk.Label(parent, text=control.label)
        elif control.kind == _BUTTON:
            widget = ttk.Button(parent, text=control.label)
        elif control.kind == _COMBOBOX:
            var = tk.StringVar(parent)
            self.variables[control.name] = var
            widget = ttk.Combobox(parent, state="readonly", textvariable=var)
        elif control.kind == _CHECKBOX:
            var = tk.BooleanVar(parent, value=False)
            self.variables[control.name] = var
            widget = ttk.Checkbutton(parent, text=control.label, variable=var)
        elif control.kind == _ENTRY:
            var = tk.StringVar(parent)
            self.variables[control.name] = var
            widget = ttk.Entry(parent, textvariable=var)
        elif control.kind == _FILEPICKER:
            widget = self._make_file_picker(parent, control)
        else:
            raise ValueError(f"unknown control kind: {control.kind}")
        self.widgets[control.name] = widget
        if control.tooltip:
            self.tooltips.append(ToolTip(widget, control.tooltip))
        return widget

    def _make_file_picker(self, parent, control: Control) -> tk.Widget:
        frame = ttk.Frame(parent)
        var = tk.StringVar(parent)
        self.variables[control.name] = var
        ttk.Entry(frame, textvariable=var).pack(side=tk.LEFT, fill=tk.X, expand=True)

        def browse() -> None:
            path = filedialog.askopenfilename(
                parent=self,
                title=self.layout.file_dialog_title,
                filetypes=[("All files", self.layout.file_wildcard)],
            )
            if path:
                var.set(path)

        ttk.Button(frame, text="Browse...", command=browse).pack(side=tk.LEFT, padx=5)
        return frame

    def _build_title_row(self) -> None:
        row = ttk.Frame(self)
        for control in self._controls(_TITLE_ROW):
            widget = self._make(row, control)
            side = tk.RIGHT if control.kind == _BUTTON else tk.LEFT
            widget.pack(side=side, padx=5, pady=5)
        row.pack(side=tk.TOP, fill=tk.X, padx=5, pady=5)

    def _build_section(self, section: str, expand: bool) -> None:
        box = ttk.LabelFrame(self, text=section)
        for control in self._controls(section):
            widget = self._make(box, control)
            if control.kind == _FILEPICKER:
                widget.pack(side=tk.LEFT, fill=tk.X, expand=True, padx=5, pady=5)
            elif control.kind == _BUTTON:
                widget.pack(side=tk.RIGHT, padx=5, pady=5)
            else:
                widget.pack(side=tk.LEFT, padx=5, pady=5)
        box.pack(side=tk.TOP, fill=tk.BOTH, expand=expand, padx=5, pady=5)

    def _build_options(self) -> None:
        row = ttk.Frame(self)
        for section in _OPTION_SECTIONS:
            box = ttk.LabelFrame(row, text=section)
            controls = self._controls(section)
            if section == "Write Options":
                for index, control in enumerate(controls):
                    widget = self._make(box, control)
                    widget.grid(row=index // 2, column=index % 2, sticky=tk.W, padx=5, pady=5)
                box.pack(side=tk.LEFT, fill=tk.BOTH, expand=True, padx=5, pady=5)
            else:
                for control in controls:
                    self._make(box, control).pack(side=tk.TOP, anchor=tk.W, padx=5, pady=5)
                box.pack(side=tk.LEFT, fill=tk.Y, padx=5, pady=5)
        row.pack(side=tk.TOP, fill=tk.BOTH, expand=True)

    def _build_button_row(self) -> None:
        row = ttk.Frame(self)
        for control in self._controls(_BUTTON_ROW):
            self._make(row, control).pack(side=tk.LEFT, expand=True, padx=5, pady=5)
        row.pack(side=tk.TOP, fill=tk.X, padx=5, pady=5)

    def _build_status_bar(self, master) -> list[ttk.Label]:
        bar = ttk.Frame(master, relief=tk.SUNKEN)
        labels = []
        for _ in range(self.layout.status_fields):
            label = ttk.Label(bar, anchor=tk.W)
            label.pack(side=tk.LEFT, fill=tk.X, expand=True, padx=2)
            labels.append(label)
        bar.pack(side=tk.BOTTOM, fill=tk.X)
        return labels