"""Small programs loaded into device SRAM and run through SAM-BA."""

from __future__ import annotations

from typing import Protocol


class SambaTarget(Protocol):
    """The SAM-BA operations an applet needs."""

    def write(self, addr: int, data: bytes) -> None: ...

    def write_word(self, addr: int, value: int) -> None: ...

    def go(self, addr: int) -> None: ...


class Applet:
    """Machine code placed at ``addr`` in device SRAM.

    ``start`` is the entry point, ``stack`` the address of the stack word
    (the first reset vector) and ``reset`` the address of the reset vector.
    The code is written to the device when the applet is created.
    """

    def __init__(
        self,
        samba: SambaTarget,
        addr: int,
        code: bytes,
        start: int,
        stack: int,
        reset: int,
    ) -> None:
        self._samba = samba
        self._addr = addr
        self._size = len(code)
        self._start = start
        self._stack = stack
        self._reset = reset
        samba.write(addr, bytes(code))

    @property
    def size(self) -> int:
        """Size of the applet code in bytes."""
        return self._size

    @property
    def addr(self) -> int:
        """SRAM address the applet is loaded at."""
        return self._addr

    def set_stack(self, stack: int) -> None:
        """Store the initial stack pointer for the applet."""
        self._samba.write_word(self._stack, stack)

    def run(self) -> None:
        """Run on a Thumb-1 device (ARM7TDMI, ARM9)."""
        # The low bit selects Thumb mode.
        self._samba.go(self._start + 1)

    def runv(self) -> None:
        """Run on a Thumb-2 device (Cortex-M) through its vector table."""
        self._samba.write_word(self._reset, self._start + 1)
        self._samba.go(self._stack)