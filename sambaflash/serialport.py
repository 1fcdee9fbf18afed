"""Abstract serial port used to talk to a SAM-BA boot loader."""

from __future__ import annotations

import abc
import enum


class Parity(enum.Enum):
    """Parity setting of a serial line."""

    NONE = "none"
    ODD = "odd"
    EVEN = "even"


class StopBit(enum.Enum):
    """Number of stop bits on a serial line."""

    ONE = "1"
    ONE_FIVE = "1.5"
    TWO = "2"


DEFAULT_BAUD = 115200
DEFAULT_DATA_BITS = 8


class SerialPort(abc.ABC):
    """A named serial port.

    Concrete ports implement ``_open`` and the I/O methods. The port can be
    used as a context manager; leaving the block closes it.
    """

    def __init__(self, name: str) -> None:
        self._name = name

    @property
    def name(self) -> str:
        """The name the port was created with."""
        return self._name

    def open(
        self,
        baud: int = DEFAULT_BAUD,
        data: int = DEFAULT_DATA_BITS,
        parity: Parity = Parity.NONE,
        stop: StopBit = StopBit.ONE,
    ) -> None:
        """Open the port with the given line settings.

        Raises ValueError for an unknown parity or stop-bit setting and
        OSError (from the concrete port) when the port cannot be opened.
        """
        self._open(baud, data, Parity(parity), StopBit(stop))

    @abc.abstractmethod
    def _open(self, baud: int, data: int, parity: Parity, stop: StopBit) -> None:
        """Open the underlying device."""

    @abc.abstractmethod
    def close(self) -> None:
        """Close the port."""

    @abc.abstractmethod
    def is_usb(self) -> bool:
        """Whether the port is a USB CDC port rather than a UART."""

    @abc.abstractmethod
    def read(self, size: int) -> bytes:
        """Read up to ``size`` bytes; fewer are returned on timeout."""

    @abc.abstractmethod
    def write(self, data: bytes) -> int:
        """Write ``data`` and return the number of bytes written."""

    @abc.abstractmethod
    def get(self) -> int:
        """Read one byte, returning -1 on timeout."""

    @abc.abstractmethod
    def put(self, c: int) -> int:
        """Write one byte, returning it, or -1 on failure."""

    @abc.abstractmethod
    def timeout(self, millisecs: int) -> bool:
        """Set the read timeout; return whether it was accepted."""

    @abc.abstractmethod
    def flush(self) -> None:
        """Wait until written data has been sent."""

    @abc.abstractmethod
    def set_dtr(self, dtr: bool) -> None:
        """Set the DTR line."""

    @abc.abstractmethod
    def set_rts(self, rts: bool) -> None:
        """Set the RTS line."""

    def __enter__(self) -> SerialPort:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()