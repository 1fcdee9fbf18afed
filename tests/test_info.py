from types import SimpleNamespace

import pytest

from sambaflash.info import DeviceInfo, format_lock_regions


class MethodFlash:
    def name(self):
        return "ATSAMD21G18A"

    def num_pages(self):
        return 4096

    def page_size(self):
        return 64

    def num_planes(self):
        return 1

    def boot_flash(self):
        return True

    def security(self):
        return False

    def bod(self):
        return True

    def bor(self):
        return False

    def lock_regions(self):
        return [False, True, False, True]


def make_info(**overrides):
    fields = dict(name="dev", version="v1", pages=1024, page_size=1024, planes=2)
    fields.update(overrides)
    return DeviceInfo(**fields)


def test_format_lock_regions_lists_locked_indices():
    assert format_lock_regions([False, True, False, True]) == "1,3"


def test_format_lock_regions_none_locked():
    assert format_lock_regions([False, False, False]) == ""
    assert format_lock_regions([]) == ""


def test_format_lock_regions_all_locked_round_trip():
    regions = [True] * 5
    indices = [int(part) for part in format_lock_regions(regions).split(",")]
    assert indices == list(range(len(regions)))


def test_from_device_with_methods():
    info = DeviceInfo.from_device(MethodFlash(), "v2.0 [Arduino:XYZ]")
    assert info.name == "ATSAMD21G18A"
    assert info.version == "v2.0 [Arduino:XYZ]"
    assert info.pages == 4096
    assert info.page_size == 64
    assert info.planes == 1
    assert info.boot_flash is True
    assert info.security is False
    assert info.bod is True
    assert info.bor is False
    assert info.lock_regions == (False, True, False, True)


def test_from_device_with_attributes():
    flash = SimpleNamespace(
        name="dev", num_pages=8, page_size=256, num_planes=2,
        boot_flash=False, security=True, bod=False, bor=True, lock_regions=[True],
    )
    info = DeviceInfo.from_device(flash, "v1")
    assert info.pages == 8
    assert info.planes == 2
    assert info.security is True
    assert info.bor is True
    assert info.lock_regions == (True,)


def test_from_device_missing_attribute():
    with pytest.raises(AttributeError):
        DeviceInfo.from_device(SimpleNamespace(name="dev"), "v1")


def test_page_size_text():
    assert make_info(page_size=256).page_size_text() == "256 bytes"


def test_total_size_text_whole_kilobytes():
    assert make_info(pages=1024, page_size=1024).total_size_text() == "1024 KB"


def test_total_size_text_rounds_down():
    small = make_info(pages=1, page_size=512).total_size_text()
    assert small.endswith(" KB")
    assert int(small.split()[0]) == 0


def test_device_info_is_frozen():
    info = make_info(pages=1024)
    with pytest.raises(AttributeError):
        info.pages = 2
    assert info.pages == 1024