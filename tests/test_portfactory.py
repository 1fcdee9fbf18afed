import pytest

from sambaflash.portfactory import BSDPortFactory, PortFactoryBase, is_usb_name


class RecordingPort:
    def __init__(self, name, is_usb):
        self.name = name
        self.usb = is_usb
        self.auto_flush = False


def test_is_usb_name():
    assert is_usb_name("/dev/cuaU0") is True
    assert is_usb_name("/dev/cua00") is False


def test_base_is_abstract():
    with pytest.raises(TypeError):
        PortFactoryBase()


def test_lists_only_cua_entries_sorted(tmp_path):
    for name in ["ttyU0", "cuaU1", "cua00", "cuaU0", "null"]:
        (tmp_path / name).touch()
    factory = BSDPortFactory(str(tmp_path))
    assert list(factory) == ["cua00", "cuaU0", "cuaU1"]


def test_iteration_can_restart(tmp_path):
    (tmp_path / "cuaU0").touch()
    factory = BSDPortFactory(str(tmp_path))
    first = list(factory)
    second = list(factory)
    assert first == ["cuaU0"]
    assert second == ["cuaU0"]


def test_missing_directory_yields_nothing(tmp_path):
    factory = BSDPortFactory(str(tmp_path / "absent"))
    assert list(factory) == []


def test_default_port():
    assert BSDPortFactory().default() == "/dev/cuaU0"


def test_create_guesses_usb_from_name():
    factory = BSDPortFactory(port_class=RecordingPort)
    usb = factory.create("/dev/cuaU0")
    uart = factory.create("/dev/cua00")
    assert usb.usb is True
    assert uart.usb is False
    assert usb.name == "/dev/cuaU0"


def test_create_explicit_usb_overrides_guess():
    factory = BSDPortFactory(port_class=RecordingPort)
    assert factory.create("/dev/cuaU0", False).usb is False


def test_create_turns_on_auto_flush():
    factory = BSDPortFactory(port_class=RecordingPort)
    assert factory.create("/dev/cua00").auto_flush is True


def test_create_without_port_class_raises():
    with pytest.raises(TypeError):
        BSDPortFactory().create("/dev/cuaU0")