# ponadapter

Building blocks shared by the layers of a PON (passive optical network)
adapter. The package provides:

- status codes and the exception that carries them,
- the OMCI CRC-32,
- levelled debug output,
- interfaces for optical transceivers, event callbacks and system control.

It has no dependencies beyond the standard library.

## Installation

```
pip install ponadapter
```

To run the tests:

```
pip install "ponadapter[test]"
pytest
```

## `ponadapter.errors`

`PonAdapterErrno` is an `IntEnum` of the adapter's status codes:

- `SUCCESS` is 0.
- `EAGAIN` (1) and `EUNCHANGED` (2) are positive.
- The failures run from `ERROR` (-1) to `ERR_OMCI_MSG_INVALID_TCI` (-29).

Each member has a `description` and an `is_error` property, which is true for
negative codes.

`PonAdapterError(code, message=None)` is the exception for a failing code:

- It stores `code`, as a `PonAdapterErrno` where the value is known and as a
  plain `int` otherwise.
- It stores `message`, which defaults to the code's description.

`check(code)` raises `PonAdapterError` for a negative code. Otherwise it
returns the code, as a `PonAdapterErrno` where possible.

```python
from ponadapter.errors import PonAdapterErrno, PonAdapterError, check

check(0)                                 # PonAdapterErrno.SUCCESS
try:
    check(PonAdapterErrno.ERR_NOT_FOUND)
except PonAdapterError as exc:
    print(exc.code, exc.message)         # ... Resource was not found
```

## `ponadapter.crc`

`omci_crc32(crc, data)` continues a CRC-32 over `data` and returns the new
32-bit value:

- The polynomial is 0x04C11DB7, processed most significant bit first.
- No initial inversion and no final XOR are applied. The caller picks the
  seed and any final complement.

```python
from ponadapter.crc import omci_crc32

value = omci_crc32(0xFFFFFFFF, b"\x00\x01\x02\x03")
```

## `ponadapter.debug`

`DbgLevel` lists the levels `MSG` < `PRN` < `WRN` < `ERR` < `OFF`.

`Debugger(module, level=DbgLevel.ERR, stream=None, always=False)` writes to
`stream`, or to `sys.stderr` when `stream` is `None`. A message is written
when its level is at or above `level`, or always when `always` is true.

The methods are:

- `printf(lvl, fmt, *args)` writes the text with no prefix.
- `naked(lvl, fmt, *args)` writes `[module] ` followed by the text.
- `log(lvl, function, line, fmt, *args)` writes
  `[module] LVL in function():line - text`. If `function` or `line` is
  `None`, it is taken from the caller.
- `err`, `wrn`, `prn` and `msg` do the same as `log` at a fixed level, with
  the calling function and line filled in.
- `enter(fmt=None, *args)` and `leave(fmt=None, *args)` write
  `called` / `called with (...)` and `return` / `return ...` at `MSG`.
- `err_fn(fn, ret=None)`, `wrn_fn`, `prn_fn` and `msg_fn` write
  `fn() failed`, or `fn() failed with ret` when `ret` is given. `fn` may be a
  callable or a name.

Formatting uses the `%` operator when arguments are given.

```python
import sys
from ponadapter.debug import Debugger, DbgLevel

dbg = Debugger("MYMOD", DbgLevel.WRN, sys.stderr)
dbg.err("value %d out of range\n", 7)
dbg.err_fn("some_other_function", -1)
```

## `ponadapter.optic`

`DdmiPage` selects the transceiver EEPROM page: `A0` or `A2`. Its
`i2c_address` is 0x50 or 0x51.

`OpticProperties` is a dataclass of static transceiver data. It checks the
lengths of the text fields and of the vendor OUI (at most 3 bytes).

`OpticStatus` holds raw readings and flags. Its converters are:

- `temperature_celsius()`
- `voltage_volts()`
- `bias_milliamps()`
- `tx_power_dbm()` and `rx_power_dbm()`. A raw power of `NO_POWER` (-32767)
  becomes minus infinity.

`OpticOps` is the access interface. Its public methods are
`eeprom_data_get(ddmi_page, offset, size)`, `optic_properties_get()` and
`optic_status_get()`.

A subclass supplies the device reads by overriding `_read_eeprom`,
`_read_properties` and `_read_status`. A read that is not overridden raises
`PonAdapterError` with `ERR_NOT_SUPPORTED`.

`eeprom_data_get` raises:

- `ERR_INVALID_VAL` for an unknown page,
- `ERR_OUT_OF_BOUNDS` for a negative offset or size,
- `ERR_SIZE` when the read returns the wrong number of bytes.

## `ponadapter.events`

`Event` names the events a lower layer reports. Examples are `ALARM`,
`LINK_STATE`, `MIB_RESET` and `PON_ALARM`. Each event's `params` property
gives its argument names.

`EventHandlers(caller=None, handlers=None, **named)` registers callbacks by
`Event` or by name:

- `handles(event)` tells whether a callback is registered for the event.
- `emit(event, *args)` calls `handler(caller, *args)` and returns `True`. It
  returns `False` when no handler is registered, and raises `TypeError` when
  the number of arguments is wrong.

```python
from ponadapter.events import Event, EventHandlers

seen = []
handlers = EventHandlers("ctx", loop_detect=lambda caller, inst: seen.append(inst))
handlers.emit(Event.LOOP_DETECT, 0x101)   # True; seen == [0x101]
```

`SystemOps` runs the lower-layer lifecycle: `init(init_data, config,
event_handler)`, `start()`, `reboot(timeout_ms)` and `shutdown()`.

- The device work comes from `on_init`, `on_start`, `on_reboot` and
  `on_shutdown` callables given to the constructor, or from a subclass that
  overrides `_on_init` and the related methods.
- The order is enforced with `PonAdapterError`:
  - a second `init` or `start` raises `ERR_RESOURCE_EXISTS`,
  - any call before `init` raises `ERR_NOT_AVAIL`,
  - a negative reboot timeout raises `ERR_INVALID_VAL`.
- `reboot` and `shutdown` release the stored configuration and handlers.

## What this package does not do

It contains no device driver. Nothing here talks to real PON or transceiver
hardware: EEPROM reads, status readings and system actions exist only when a
subclass or a callback supplies them. There is no command-line tool.