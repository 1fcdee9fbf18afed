import pytest

from sambaflash.mainframe import ToolTip, main_frame_layout


class FakeWidget:
    def __init__(self):
        self.bindings = {}

    def bind(self, sequence, handler):
        self.bindings[sequence] = handler


def test_window_title_and_size():
    layout = main_frame_layout()
    assert layout.title == "BOSSA"
    assert layout.size == (550, 400)
    assert layout.status_fields == 2


def test_about_button():
    control = main_frame_layout()["about"]
    assert control.label == "About"
    assert control.tooltip == "Display information about BOSSA"


def test_unknown_control_raises():
    with pytest.raises(KeyError):
        main_frame_layout()["missing"]


def test_write_options_order():
    layout = main_frame_layout()
    labels = [c.label for c in layout if c.section == "Write Options"]
    assert labels == [
        "Erase all",
        "Boot to flash",
        "Brownout detect",
        "Brownout reset",
        "Lock",
        "Security",
    ]


def test_sections_order():
    sections = main_frame_layout().sections
    assert sections.index("Serial Port") < sections.index("File")
    assert sections.index("File") < sections.index("Write Options")
    assert sections.index("Write Options") < sections.index("Read Options")
    assert sections.index("Read Options") < sections.index("General Options")


def test_control_names_unique():
    layout = main_frame_layout()
    names = [c.name for c in layout]
    assert len(names) == len(set(names))


def test_lookup_returns_same_control():
    layout = main_frame_layout()
    for control in layout:
        assert layout[control.name] is control


def test_every_button_has_tooltip():
    buttons = [c for c in main_frame_layout() if c.kind == "button"]
    assert [b.label for b in buttons] == ["About", "Refresh", "Write", "Verify", "Read", "Info", "Exit"]
    assert all(b.tooltip for b in buttons)


@pytest.mark.parametrize(
    "name, tooltip",
    [
        ("size", "Specify the amount of flash to read"),
        ("offset", "Specify the offset into the flash for operations"),
        ("refresh", "Refresh the list of available serial ports"),
        ("exit", "Exit and close BOSSA"),
    ],
)
def test_tooltips(name, tooltip):
    assert main_frame_layout()[name].tooltip == tooltip


def test_file_picker_settings():
    layout = main_frame_layout()
    assert layout["file"].kind == "filepicker"
    assert layout.file_dialog_title == "Select a file"
    assert layout.file_wildcard == "*.*"


def test_control_is_frozen():
    control = main_frame_layout()["about"]
    with pytest.raises(AttributeError):
        control.label = "Y"
    assert control.label == "About"


def test_tooltip_binds_enter_and_leave():
    widget = FakeWidget()
    tip = ToolTip(widget, "hello")
    assert widget.bindings["<Enter>"] == tip.show
    assert widget.bindings["<Leave>"] == tip.hide
    assert tip.text == "hello"


def test_tooltip_hide_without_show():
    widget = FakeWidget()
    tip = ToolTip(widget, "hello")
    tip.hide(None)
    assert tip.window is None
    assert tip.widget is widget