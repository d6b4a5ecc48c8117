"""
Register transactions on top of I2CBus.

Every transaction selects the target address first; the chip's register
pointer is set by a one-byte write before every read.
"""
from enum import Enum

from .i2c_bus import BusError


class ReadMode(Enum):
    """How a 16-bit little-endian register pair is fetched.

    SPLIT issues two independent single-byte transactions (low, then high).
    If the chip refreshes its output registers between them the result mixes
    two samples (torn read).

    BURST sets the pointer once and reads both bytes in one transfer, relying
    on the chip's register auto-increment.
    """
    SPLIT = "split"
    BURST = "burst"


def _check(count, expected, operation, address, reg):
    if count != expected:
        raise BusError(operation, f"short transfer ({count}/{expected} bytes)",
                       address=address, register=reg)


def _write(bus, data, operation, address, reg):
    try:
        count = bus.transfer_write(data)
    except BusError as e:
        raise BusError(operation, e.detail, address=address, register=reg) from e
    _check(count, len(data), operation, address, reg)


def _read(bus, n, address, reg):
    buf = bytearray(n)
    try:
        count = bus.transfer_read(buf)
    except BusError as e:
        raise BusError("read", e.detail, address=address, register=reg) from e
    _check(count, n, "read", address, reg)
    return buf


def read_register(bus, address: int, reg: int) -> int:
    bus.select(address)
    _write(bus, bytes([reg]), "write(reg)", address, reg)
    return _read(bus, 1, address, reg)[0]


def write_register(bus, address: int, reg: int, value: int) -> None:
    bus.select(address)
    _write(bus, bytes([reg, value]), "write(reg,val)", address, reg)


def to_int16(lo: int, hi: int) -> int:
    v = lo | (hi << 8)
    return v - 0x10000 if v & 0x8000 else v


def read_register_pair_le(bus, address: int, reg_low: int,
                          mode: ReadMode = ReadMode.SPLIT,
                          auto_increment: int = 0x00) -> int:
    """Read a signed 16-bit value stored low byte first at reg_low.

    auto_increment is OR'ed into the register byte in BURST mode only; some
    chips need the sub-address MSB set to step through registers.
    """
    if mode is ReadMode.SPLIT:
        lo = read_register(bus, address, reg_low)
        hi = read_register(bus, address, (reg_low + 1) & 0xFF)
        return to_int16(lo, hi)

    bus.select(address)
    _write(bus, bytes([reg_low | auto_increment]), "write(reg)", address, reg_low)
    buf = _read(bus, 2, address, reg_low)
    return to_int16(buf[0], buf[1])
