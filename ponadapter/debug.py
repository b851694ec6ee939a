"""Levelled debug output for PON adapter modules."""

from __future__ import annotations

import inspect
import sys
from enum import IntEnum
from typing import Any, TextIO


class DbgLevel(IntEnum):
    """Debug levels; a message prints when its level is at or above the threshold."""

    MSG = 0
    PRN = 1
    WRN = 2
    ERR = 3
    OFF = 4

    @property
    def label(self) -> str:
        """Short tag printed in front of a message."""
        return _LABELS[self]


_LABELS = {
    DbgLevel.MSG: "MSG",
    DbgLevel.PRN: "PRN",
    DbgLevel.WRN: "WRN",
    DbgLevel.ERR: "ERR",
    DbgLevel.OFF: "",
}


def _format(fmt: str, args: tuple[Any, ...]) -> str:
    return fmt % args if args else fmt


def _fn_name(fn: Any) -> str:
    return getattr(fn, "__name__", None) or str(fn)


class Debugger:
    """Writes debug messages for one module, filtered by a threshold level."""

    def __init__(
        self,
        module: str,
        level: DbgLevel | int = DbgLevel.ERR,
        stream: TextIO | None = None,
        always: bool = False,
    ) -> None:
        self.module = module
        self.level = DbgLevel(level)
        self.stream = stream
        self.always = always

    @property
    def prefix(self) -> str:
        return f"[{self.module}]"

    def _write(self, text: str) -> None:
        stream = self.stream if self.stream is not None else sys.stderr
        stream.write(text)

    def enabled(self, lvl: DbgLevel | int) -> bool:
        """Whether a message at ``lvl`` would be printed."""
        return self.always or self.level <= int(lvl)

    def printf(self, lvl: DbgLevel | int, fmt: str, *args: Any) -> None:
        """Print a formatted string without any prefix."""
        if self.enabled(lvl):
            self._write(_format(fmt, args))

    def naked(self, lvl: DbgLevel | int, fmt: str, *args: Any) -> None:
        """Print a formatted string preceded only by the module prefix."""
        if self.enabled(lvl):
            self._write(f"{self.prefix} {_format(fmt, args)}")

    def log(
        self,
        lvl: DbgLevel | int,
        function: str | None,
        line: int | None,
        fmt: str,
        *args: Any,
    ) -> None:
        """Print a message tagged with level, function name and line number.

        When ``function`` or ``line`` is None, the caller's frame supplies it.
        """
        if function is None or line is None:
            frame = inspect.currentframe()
            caller = frame.f_back if frame is not None else None
            if function is None:
                function = caller.f_code.co_name if caller is not None else "?"
            if line is None:
                line = caller.f_lineno if caller is not None else 0
        self._log(DbgLevel(lvl), function, line, fmt, args)

    def _log(self, lvl: DbgLevel, function: str, line: int, fmt: str, args: tuple) -> None:
        if not self.enabled(lvl):
            return
        self._write(
            f"{self.prefix} {lvl.label} in {function}():{line} - {_format(fmt, args)}"
        )

    def _at(self, lvl: DbgLevel, fmt: str, args: tuple) -> None:
        # Two frames up: past this helper and the public shortcut.
        frame = inspect.currentframe()
        caller = frame.f_back.f_back if frame is not None and frame.f_back else None
        function = caller.f_code.co_name if caller is not None else "?"
        line = caller.f_lineno if caller is not None else 0
        self._log(lvl, function, line, fmt, args)

    def err(self, fmt: str, *args: Any) -> None:
        """Report an error."""
        self._at(DbgLevel.ERR, fmt, args)

    def wrn(self, fmt: str, *args: Any) -> None:
        """Report a warning."""
        self._at(DbgLevel.WRN, fmt, args)

    def prn(self, fmt: str, *args: Any) -> None:
        """Print information."""
        self._at(DbgLevel.PRN, fmt, args)

    def msg(self, fmt: str, *args: Any) -> None:
        """Print a verbose message."""
        self._at(DbgLevel.MSG, fmt, args)

    def enter(self, fmt: str | None = None, *args: Any) -> None:
        """Note that the calling function was entered, optionally with its arguments."""
        if fmt is None:
            self._at(DbgLevel.MSG, "called\n", ())
        else:
            self._at(DbgLevel.MSG, "called with (%s)\n", (_format(fmt, args),))

    def leave(self, fmt: str | None = None, *args: Any) -> None:
        """Note that the calling function returns, optionally with its result."""
        if fmt is None:
            self._at(DbgLevel.MSG, "return\n", ())
        else:
            self._at(DbgLevel.MSG, "return %s\n", (_format(fmt, args),))

    @staticmethod
    def _fn_args(fn: Any, ret: int | None) -> tuple[str, tuple]:
        if ret is None:
            return "%s() failed\n", (_fn_name(fn),)
        return "%s() failed with %d\n", (_fn_name(fn), ret)

    def err_fn(self, fn: Any, ret: int | None = None) -> None:
        """Report a failed call as an error."""
        self._at(DbgLevel.ERR, *self._fn_args(fn, ret))

    def wrn_fn(self, fn: Any, ret: int | None = None) -> None:
        """Report a failed call as a warning."""
        self._at(DbgLevel.WRN, *self._fn_args(fn, ret))

    def prn_fn(self, fn: Any, ret: int | None = None) -> None:
        """Report a failed call as a print."""
        self._at(DbgLevel.PRN, *self._fn_args(fn, ret))

    def msg_fn(self, fn: Any, ret: int | None = None) -> None:
        """Report a failed call as a verbose message."""
        self._at(DbgLevel.MSG, *self._fn_args(fn, ret))