"""Errors raised by file operations on flash images."""

from __future__ import annotations

import os


class FileError(Exception):
    """Base class of file operation errors."""


class FileOpenError(FileError):
    """A file could not be opened."""

    def __init__(self, errnum: int = 0) -> None:
        super().__init__(errnum)
        self.errnum = errnum

    def __str__(self) -> str:
        if self.errnum == 0:
            return "Unable to open file"
        return os.strerror(self.errnum)


class FileIoError(FileError):
    """A read or write on a file failed."""

    def __init__(self, errnum: int = 0) -> None:
        super().__init__(errnum)
        self.errnum = errnum

    def __str__(self) -> str:
        if self.errnum == 0:
            return "File I/O operation failed"
        return os.strerror(self.errnum)


class FileShortError(FileError):
    """A write stored fewer bytes than requested."""

    def __str__(self) -> str:
        return "Operation ended with a short write"


class FileSizeError(FileError):
    """A file operation does not fit in the flash."""

    def __str__(self) -> str:
        return "File operation exceeds flash size"