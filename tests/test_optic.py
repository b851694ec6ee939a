import math

import pytest

from ponadapter.errors import PonAdapterErrno, PonAdapterError
from ponadapter.optic import (
    NO_POWER,
    DdmiPage,
    OpticOps,
    OpticProperties,
    OpticStatus,
)


class _MemoryOptic(OpticOps):
    def __init__(self, pages, properties=None, status=None, short=False):
        self.pages = pages
        self.properties = properties
        self.status = status
        self.short = short

    def _read_eeprom(self, page, offset, size):
        data = self.pages[page][offset:offset + size]
        return data[:-1] if self.short else data

    def _read_properties(self):
        return self.properties

    def _read_status(self):
        return self.status


@pytest.fixture
def optic():
    pages = {
        DdmiPage.A0: bytes(range(256)),
        DdmiPage.A2: bytes(reversed(range(256))),
    }
    props = OpticProperties(vendor_name="ACME", serial_number="SN0000TEST")
    status = OpticStatus(temperature=512, voltage=33000)
    return _MemoryOptic(pages, props, status)


def test_ddmi_page_addresses():
    assert DdmiPage(0).i2c_address == 0x50
    assert DdmiPage(1).i2c_address == 0x51
    with pytest.raises(ValueError):
        DdmiPage(2)


def test_eeprom_read_returns_page_slice(optic):
    assert optic.eeprom_data_get(DdmiPage.A0, 4, 3) == bytes([4, 5, 6])
    assert optic.eeprom_data_get(1, 0, 2) == bytes([255, 254])


def test_eeprom_read_rejects_bad_page(optic):
    with pytest.raises(PonAdapterError) as info:
        optic.eeprom_data_get(2, 0, 1)
    assert info.value.code == PonAdapterErrno.ERR_INVALID_VAL


@pytest.mark.parametrize("offset,size", [(-1, 4), (0, -2)])
def test_eeprom_read_rejects_bad_bounds(optic, offset, size):
    with pytest.raises(PonAdapterError) as info:
        optic.eeprom_data_get(DdmiPage.A0, offset, size)
    assert info.value.code == PonAdapterErrno.ERR_OUT_OF_BOUNDS


def test_eeprom_short_read_is_size_error():
    page = DdmiPage(0)
    short = _MemoryOptic({page: bytes(16)}, short=True)
    with pytest.raises(PonAdapterError) as info:
        short.eeprom_data_get(page, 0, 8)
    assert info.value.code == PonAdapterErrno.ERR_SIZE


def test_properties_and_status_passed_through(optic):
    assert optic.optic_properties_get().vendor_name == "ACME"
    assert optic.optic_status_get().voltage == 33000


@pytest.mark.parametrize(
    "call",
    [
        lambda ops: ops.eeprom_data_get(DdmiPage.A0, 0, 1),
        lambda ops: ops.optic_properties_get(),
        lambda ops: ops.optic_status_get(),
    ],
)
def test_base_ops_not_supported(call):
    with pytest.raises(PonAdapterError) as info:
        call(OpticOps())
    assert info.value.code == PonAdapterErrno.ERR_NOT_SUPPORTED


def test_properties_text_limits():
    with pytest.raises(ValueError):
        OpticProperties(revision="ABCDE")
    with pytest.raises(ValueError):
        OpticProperties(vendor_oui=b"\x00\x01\x02\x03")
    props = OpticProperties(vendor_oui=bytearray(b"\x00\x11\x22"))
    assert props.vendor_oui == b"\x00\x11\x22"


def test_voltage_full_scale():
    assert OpticStatus(voltage=65535).voltage_volts() == pytest.approx(6.5535)


def test_bias_full_scale():
    assert OpticStatus(bias=65535).bias_milliamps() == pytest.approx(131, abs=0.1)


def test_power_range_limits():
    status = OpticStatus(tx_power=4082, rx_power=-20000)
    assert status.tx_power_dbm() == pytest.approx(8.164)
    assert status.rx_power_dbm() == pytest.approx(-40.0)


def test_zero_power_is_minus_infinity():
    status = OpticStatus(tx_power=NO_POWER, rx_power=NO_POWER)
    assert math.isinf(status.tx_power_dbm()) and status.tx_power_dbm() < 0
    assert math.isinf(status.rx_power_dbm()) and status.rx_power_dbm() < 0


@pytest.mark.parametrize("raw", [-32767, -256, 0, 1, 3200, 32767])
def test_temperature_round_trip_and_range(raw):
    celsius = OpticStatus(temperature=raw).temperature_celsius()
    assert celsius * 256 == raw
    assert -128 < celsius < 128


def test_power_is_monotonic():
    readings = [OpticStatus(rx_power=raw).rx_power_dbm() for raw in (-20000, -5000, 0, 4082)]
    assert readings == sorted(readings)