"""Optical transceiver access: DDMI pages, static properties and live status."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import IntEnum

from .errors import PonAdapterErrno, PonAdapterError

#: Raw power reading that stands for 0 mW.
NO_POWER = -32767

_TEXT_LIMITS = {
    "vendor_name": 16,
    "part_number": 16,
    "revision": 4,
    "serial_number": 16,
    "date_code": 8,
}
_OUI_LENGTH = 3


class DdmiPage(IntEnum):
    """DDMI memory page of the transceiver EEPROM."""

    A0 = 0
    A2 = 1

    @property
    def i2c_address(self) -> int:
        """Seven-bit bus address that serves this page."""
        return 0x50 if self is DdmiPage.A0 else 0x51


@dataclass
class OpticProperties:
    """Static information read from an optical transceiver."""

    vendor_name: str = ""
    vendor_oui: bytes = b""
    part_number: str = ""
    revision: str = ""
    serial_number: str = ""
    date_code: str = ""
    identifier: int = 0
    connector: int = 0
    signaling_rate: int = 0
    tx_wavelength: int = 0
    high_power_lvl_decl: bool = False
    paging_implemented_ind: bool = False
    retimer_ind: bool = False
    cooled_transceiver_decl: bool = False
    power_lvl_decl: bool = False
    linear_rx_output_impl: bool = False
    rx_decision_thr_impl: bool = False
    tunable_transmitter: bool = False
    rate_select: bool = False
    tx_disable: bool = False
    tx_fault: bool = False
    signal_detect: bool = False
    rx_los: bool = False
    digital_monitoring: bool = False
    int_calibrated: bool = False
    ext_calibrated: bool = False
    rx_power_measurement_type: bool = False
    address_change_req: bool = False
    optional_flags_impl: bool = False
    soft_tx_disable_monitor: bool = False
    soft_tx_fault_monitor: bool = False
    soft_rx_los_monitor: bool = False
    soft_rate_select_monitor: bool = False
    app_select_impl: bool = False
    soft_rate_select_ctrl_impl: bool = False
    compliance: int = 0
    pon_mode: int | None = None

    def __post_init__(self) -> None:
        for name, limit in _TEXT_LIMITS.items():
            if len(getattr(self, name)) > limit:
                raise ValueError(f"{name} is longer than {limit} characters")
        self.vendor_oui = bytes(self.vendor_oui)
        if len(self.vendor_oui) > _OUI_LENGTH:
            raise ValueError(f"vendor_oui is longer than {_OUI_LENGTH} bytes")


@dataclass
class OpticStatus:
    """Live measurements and status flags of an optical transceiver.

    Raw values keep their wire units: temperature in 1/256 degC, voltage in
    100 uV, bias in 2 uA and powers in 0.002 dB steps referred to 1 mW.
    """

    temperature: int = 0
    voltage: int = 0
    bias: int = 0
    tx_power: int = 0
    rx_power: int = 0
    rx_los: bool = False
    tx_disable: bool = False
    tx_fault: bool = False

    def temperature_celsius(self) -> float:
        """Temperature in degrees centigrade."""
        return self.temperature / 256

    def voltage_volts(self) -> float:
        """Supply voltage in volts."""
        return self.voltage / 10_000

    def bias_milliamps(self) -> float:
        """Transmit bias current in milliamperes."""
        return self.bias * 2 / 1000

    @staticmethod
    def _dbm(raw: int) -> float:
        return -math.inf if raw == NO_POWER else raw / 500

    def tx_power_dbm(self) -> float:
        """Transmit power in dBm; minus infinity for no power."""
        return self._dbm(self.tx_power)

    def rx_power_dbm(self) -> float:
        """Receive power in dBm; minus infinity for no power."""
        return self._dbm(self.rx_power)


class OpticOps:
    """Access to an optical interface.

    Subclasses provide the device reads by overriding ``_read_eeprom``,
    ``_read_properties`` and ``_read_status``; a read that is not provided
    fails with ``ERR_NOT_SUPPORTED``.
    """

    def eeprom_data_get(self, ddmi_page: DdmiPage | int, offset: int, size: int) -> bytes:
        """Read ``size`` bytes at ``offset`` from the given DDMI page."""
        try:
            page = DdmiPage(ddmi_page)
        except ValueError:
            raise PonAdapterError(
                PonAdapterErrno.ERR_INVALID_VAL, f"invalid DDMI page {ddmi_page!r}"
            ) from None
        if offset < 0 or size < 0:
            raise PonAdapterError(PonAdapterErrno.ERR_OUT_OF_BOUNDS)
        data = bytes(self._read_eeprom(page, offset, size))
        if len(data) != size:
            raise PonAdapterError(
                PonAdapterErrno.ERR_SIZE, f"expected {size} bytes, got {len(data)}"
            )
        return data

    def optic_properties_get(self) -> OpticProperties:
        """Return the static transceiver properties."""
        return self._read_properties()

    def optic_status_get(self) -> OpticStatus:
        """Return the current transceiver status."""
        return self._read_status()

    def _read_eeprom(self, page: DdmiPage, offset: int, size: int) -> bytes:
        raise PonAdapterError(PonAdapterErrno.ERR_NOT_SUPPORTED)

    def _read_properties(self) -> OpticProperties:
        raise PonAdapterError(PonAdapterErrno.ERR_NOT_SUPPORTED)

    def _read_status(self) -> OpticStatus:
        raise PonAdapterError(PonAdapterErrno.ERR_NOT_SUPPORTED)