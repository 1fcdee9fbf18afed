"""Discovery and creation of serial ports."""

from __future__ import annotations

import abc
import os
from collections.abc import Callable, Iterator

from sambaflash.serialport import SerialPort

PortClass = Callable[[str, bool], SerialPort]

BSD_PORT_PREFIX = "cua"
BSD_DEFAULT_PORT = "/dev/cuaU0"


def is_usb_name(name: str) -> bool:
    """Guess from a BSD device name whether the port is a USB port."""
    return "U" in name


class PortFactoryBase(abc.ABC):
    """Lists the serial ports of a system and creates port objects."""

    @abc.abstractmethod
    def __iter__(self) -> Iterator[str]:
        """Yield the names of the available ports."""

    @abc.abstractmethod
    def default(self) -> str:
        """The port used when none is given."""

    @abc.abstractmethod
    def create(self, name: str, is_usb: bool | None = None) -> SerialPort:
        """Create a port; ``is_usb`` is guessed from the name when None."""


class BSDPortFactory(PortFactoryBase):
    """Port factory for the BSDs, listing ``cua*`` devices.

    ``port_class`` is called as ``port_class(name, is_usb)`` to build a port.
    Created ports get ``auto_flush`` set, which avoids upload errors.
    """

    def __init__(self, directory: str = "/dev", port_class: PortClass | None = None) -> None:
        self.directory = directory
        self.port_class = port_class

    def __iter__(self) -> Iterator[str]:
        try:
            with os.scandir(self.directory) as entries:
                names = sorted(
                    entry.name for entry in entries if entry.name.startswith(BSD_PORT_PREFIX)
                )
        except OSError:
            return
        yield from names

    def default(self) -> str:
        return BSD_DEFAULT_PORT

    def create(self, name: str, is_usb: bool | None = None) -> SerialPort:
        if self.port_class is None:
            raise TypeError("no port class configured for this factory")
        if is_usb is None:
            is_usb = is_usb_name(name)
        port = self.port_class(name, is_usb)
        port.auto_flush = True
        return port