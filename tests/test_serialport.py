import pytest

from sambaflash.serialport import Parity, SerialPort, StopBit


class FakePort(SerialPort):
    def __init__(self, name, usb=False):
        super().__init__(name)
        self.usb = usb
        self.opened_with = None
        self.closed = False
        self.buffer = bytearray()
        self.incoming = bytearray()
        self.dtr = None
        self.rts = None
        self.ms = None

    def _open(self, baud, data, parity, stop):
        self.opened_with = (baud, data, parity, stop)

    def close(self):
        self.closed = True

    def is_usb(self):
        return self.usb

    def read(self, size):
        chunk = bytes(self.incoming[:size])
        del self.incoming[:size]
        return chunk

    def write(self, data):
        self.buffer.extend(data)
        return len(data)

    def get(self):
        if not self.incoming:
            return -1
        return self.incoming.pop(0)

    def put(self, c):
        self.buffer.append(c)
        return c

    def timeout(self, millisecs):
        self.ms = millisecs
        return True

    def flush(self):
        pass

    def set_dtr(self, dtr):
        self.dtr = dtr

    def set_rts(self, rts):
        self.rts = rts


def test_abstract_port_cannot_be_created():
    with pytest.raises(TypeError):
        SerialPort("/dev/ttyACM0")


def test_name_is_kept():
    port = FakePort("/dev/ttyACM0")
    assert SerialPort.name.fget(port) == "/dev/ttyACM0"


def test_open_defaults():
    port = FakePort("p")
    SerialPort.open(port)
    assert port.opened_with == (115200, 8, Parity.NONE, StopBit.ONE)


def test_open_explicit_settings():
    port = FakePort("p")
    SerialPort.open(port, 9600, 7, Parity.EVEN, StopBit.TWO)
    assert port.opened_with == (9600, 7, Parity.EVEN, StopBit.TWO)


def test_open_accepts_enum_values():
    port = FakePort("p")
    SerialPort.open(port, parity="odd", stop="1.5")
    assert port.opened_with[2] is Parity.ODD
    assert port.opened_with[3] is StopBit.ONE_FIVE


def test_open_rejects_unknown_parity():
    port = FakePort("p")
    with pytest.raises(ValueError):
        SerialPort.open(port, parity="mark")
    assert port.opened_with is None


def test_context_manager_closes():
    port = FakePort("p")
    entered = SerialPort.__enter__(port)
    assert entered is port
    assert not port.closed
    SerialPort.__exit__(port, None, None, None)
    assert port.closed


def test_context_manager_closes_on_error():
    port = FakePort("p")
    error = RuntimeError("boom")
    suppressed = SerialPort.__exit__(port, RuntimeError, error, None)
    assert not suppressed
    assert port.closed


def test_fake_round_trip_through_interface():
    port = FakePort("p", usb=True)
    entered = SerialPort.__enter__(port)
    assert entered.is_usb() is True
    assert entered.write(b"N#") == 2
    assert entered.put(0x23) == 0x23
    assert bytes(port.buffer) == b"N##"
    port.incoming.extend(b"\n\r")
    assert entered.get() == 0x0A
    assert entered.read(4) == b"\r"
    assert entered.get() == -1
    SerialPort.__exit__(port, None, None, None)
    assert port.closed