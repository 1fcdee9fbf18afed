"""The about dialog of the flash programmer."""

from __future__ import annotations

import tkinter as tk

from sambaflash.dialogs import AboutDialog


def version_text(version: str) -> str:
    """Text of the version line."""
    return f"Version: {version}"


def built_with_text(toolkit_version: str) -> str:
    """Text of the line naming the GUI toolkit."""
    return f"Built with {toolkit_version}"


class BossaAbout(AboutDialog):
    """About dialog showing the program and toolkit versions."""

    def __init__(self, master, version: str) -> None:
        super().__init__(master)
        self.widgets["version"].configure(text=version_text(version))
        toolkit = f"Tk {self.tk.call('info', 'patchlevel')}"
        if not toolkit.strip("Tk "):
            toolkit = f"Tk {tk.TkVersion}"
        self.widgets["toolkit"].configure(text=built_with_text(toolkit))