"""Information about the connected device and the dialog that shows it."""

from __future__ import annotations

import tkinter as tk
from collections.abc import Iterable
from dataclasses import dataclass

from sambaflash.dialogs import InfoDialog


def _value(obj, attr: str):
    """Read ``attr`` from ``obj``, calling it if it is a method."""
    value = getattr(obj, attr)
    return value() if callable(value) else value


def format_lock_regions(regions: Iterable[bool]) -> str:
    """Comma-separated indices of the locked regions."""
    return ",".join(str(index) for index, locked in enumerate(regions) if locked)


@dataclass(frozen=True)
class DeviceInfo:
    """What the info dialog shows about a device's flash."""

    name: str
    version: str
    pages: int
    page_size: int
    planes: int
    boot_flash: bool = False
    security: bool = False
    bod: bool = False
    bor: bool = False
    lock_regions: tuple[bool, ...] = ()

    @classmethod
    def from_device(cls, flash, samba_version: str) -> DeviceInfo:
        """Collect the information from a flash object.

        The flash object provides ``name``, ``num_pages``, ``page_size``,
        ``num_planes``, ``boot_flash``, ``security``, ``bod``, ``bor`` and
        ``lock_regions``, as attributes or as methods without arguments.
        """
        return cls(
            name=str(_value(flash, "name")),
            version=samba_version,
            pages=int(_value(flash, "num_pages")),
            page_size=int(_value(flash, "page_size")),
            planes=int(_value(flash, "num_planes")),
            boot_flash=bool(_value(flash, "boot_flash")),
            security=bool(_value(flash, "security")),
            bod=bool(_value(flash, "bod")),
            bor=bool(_value(flash, "bor")),
            lock_regions=tuple(bool(r) for r in _value(flash, "lock_regions")),
        )

    def total_size_text(self) -> str:
        """Total flash size in whole kilobytes."""
        return f"{self.pages * self.page_size // 1024} KB"

    def page_size_text(self) -> str:
        """Page size in bytes."""
        return f"{self.page_size} bytes"


class BossaInfo(InfoDialog):
    """Info dialog filled in from a :class:`DeviceInfo`; all read-only."""

    def __init__(self, master, info: DeviceInfo) -> None:
        super().__init__(master)
        self.info = info
        values = {
            "device": info.name,
            "version": info.version,
            "pages": str(info.pages),
            "page_size": info.page_size_text(),
            "total_size": info.total_size_text(),
            "planes": str(info.planes),
        }
        for name, text in values.items():
            self.variables[name].set(text)

        flags = {
            "boot": info.boot_flash,
            "security": info.security,
            "bod": info.bod,
            "bor": info.bor,
        }
        for name, flag in flags.items():
            self.variables[name].set(flag)
            self.widgets[name].state(["disabled"])

        lock = self.widgets["lock"]
        lock.configure(state=tk.NORMAL)
        lock.insert(tk.END, format_lock_regions(info.lock_regions))
        lock.configure(state=tk.DISABLED)