# sambaflash

Building blocks for talking to microcontrollers that run a SAM-BA boot
loader: an abstract serial port, serial port discovery on the BSDs,
loading small applets into device SRAM, the errors raised while moving
images between disk and flash, and Tk windows for a flashing front end.

The package depends only on the standard library; the windows use
`tkinter`.

## What is inside

| Module | Contents |
| --- | --- |
| `sambaflash.serialport` | `SerialPort`, the abstract port, with `Parity` and `StopBit` |
| `sambaflash.portfactory` | `PortFactoryBase`, `BSDPortFactory` and `is_usb_name` |
| `sambaflash.applet` | `Applet`, code copied into SRAM and started on the device |
| `sambaflash.errors` | `FileError` and its subclasses |
| `sambaflash.mainframe` | `MainFrame`, the main window, its layout (`main_frame_layout`, `MainFrameLayout`, `Control`) and `ToolTip` |
| `sambaflash.dialogs` | `ProgressDialog`, `AboutDialog`, `InfoDialog` and their layout functions |
| `sambaflash.info` | `DeviceInfo`, `format_lock_regions`, and the `BossaInfo` window |
| `sambaflash.about` | `version_text`, `built_with_text`, and the `BossaAbout` window |

## Serial ports

`SerialPort` is an abstract base class holding a port `name`. A concrete
port implements `_open(baud, data, parity, stop)`, `close`, `is_usb`,
`read`, `write`, `get`, `put`, `timeout`, `flush`, `set_dtr` and
`set_rts`. The public `open()` defaults to 115200 baud, 8 data bits,
no parity and one stop bit; it converts `parity` and `stop` to `Parity`
and `StopBit` and raises `ValueError` for unknown values. Every port is
a context manager that calls `close()` on exit:

```python
from sambaflash.serialport import Parity, StopBit

with port:  # an instance of a concrete SerialPort subclass
    port.open(115200, 8, Parity.NONE, StopBit.ONE)
    port.write(b"V#")
    reply = port.read(64)
```

## Finding ports

A port factory is iterable over the names of the ports it can see, has a
`default()` port name, and creates ports with `create(name, is_usb=None)`.

`BSDPortFactory(directory="/dev", port_class=None)` yields, in sorted
order, the entries of `directory` whose names start with `cua`; an
unreadable directory yields nothing. Its default port is `/dev/cuaU0`.
`create()` calls `port_class(name, is_usb)`, guessing `is_usb` from the
name when it is `None`, sets `auto_flush = True` on the new port and
returns it; without a `port_class` it raises `TypeError`.

`is_usb_name` tells whether a port name belongs to a USB device (names
containing `U`):

```python
from sambaflash.portfactory import is_usb_name

is_usb_name("cuaU0")   # True
is_usb_name("cua00")   # False
```

## Applets

`Applet(samba, addr, code, start, stack, reset)` writes `code` to `addr`
through `samba.write(addr, data)` as soon as it is built; `size` is the
length of the code and `addr` its load address. The `samba` object needs
`write`, `write_word` and `go`.

- `run()` jumps to `start + 1` (Thumb mode) on Thumb-1 cores (ARM7TDMI, ARM9).
- `runv()` stores `start + 1` at `reset` and jumps to `stack`, for
  Thumb-2 cores (Cortex-M).
- `set_stack(value)` writes the stack pointer word at `stack`.

## Errors

All file problems raise a subclass of `FileError`:

```python
from sambaflash.errors import FileOpenError, FileSizeError

str(FileOpenError())   # "Unable to open file"
str(FileSizeError())   # "File operation exceeds flash size"
```

`FileOpenError` and `FileIoError` accept an `errno` value and then report
`os.strerror` of it. `FileShortError` reports a short write.

## Windows

`MainFrame(master=None, title=None)` builds the main window: serial port
selection, file picker, write, read and general options, action buttons
and a two-field status bar. Its widgets are in `widgets` and their values
in `variables`, both keyed by the control names of `main_frame_layout()`.
`ToolTip` shows help text while the pointer is over a widget.

`ProgressDialog` has `set_info(text)`, `set_progress(value)` (0 to 100,
otherwise `ValueError`) and a `cancelled` flag set by its Cancel button.
`AboutDialog` and `InfoDialog` are the bare about and info windows;
`BossaAbout(master, version)` fills in the version and Tk version, and
`BossaInfo(master, info)` shows a `DeviceInfo` read-only.

## Device information

`DeviceInfo.from_device(flash, samba_version)` collects what the info
window shows. The flash object provides `name`, `num_pages`, `page_size`,
`num_planes`, `boot_flash`, `security`, `bod`, `bor` and `lock_regions`,
as attributes or as methods without arguments. `page_size_text()` and
`total_size_text()` give `"<n> bytes"` and `"<n> KB"`.
`format_lock_regions` turns lock flags into the comma separated numbers
of the locked regions:

```python
from sambaflash.info import format_lock_regions

format_lock_regions([False, True, False, True])   # "1,3"
```

## What the package does not do

- It has no concrete serial port: there is no class that opens a real
  device, so `SerialPort` must be subclassed and `BSDPortFactory` given a
  `port_class`.
- It does not speak the SAM-BA protocol itself, has no flash drivers, and
  does not read, write or verify flash; `Applet` relies on an object you
  supply for that.
- It has no command-line tool, and the windows are not wired to any flash
  operation: their buttons (other than Cancel and OK) do nothing until
  you connect them.