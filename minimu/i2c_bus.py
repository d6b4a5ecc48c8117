"""
Linux i2c-dev bus handle.

One open device node shared by every chip on the bus. The slave address is
bound with the I2C_SLAVE ioctl and has to be re-asserted before each
transaction, because the handle is shared between chips.
"""
import errno
import fcntl
import os

from smbus2 import SMBus
from smbus2.smbus2 import I2C_SLAVE


class BusError(Exception):
    """Fatal bus failure: open, address select, or short/failed transfer."""

    def __init__(self, operation, detail, address=None, register=None):
        self.operation = operation
        self.detail = detail
        self.address = address
        self.register = register
        super().__init__(str(self))

    def __str__(self):
        ctx = []
        if self.address is not None:
            ctx.append(f"addr=0x{self.address:02X}")
        if self.register is not None:
            ctx.append(f"reg=0x{self.register:02X}")
        where = f" ({', '.join(ctx)})" if ctx else ""
        return f"{self.operation} failed{where}: {self.detail}"


class I2CBus:
    """Owns the open bus device; exposes select and raw transfer primitives."""

    def __init__(self, path):
        self.path = path
        self.address = None
        bus = SMBus()
        try:
            bus.open(path)
        except OSError as e:
            # smbus2 keeps the fd when the I2C_FUNCS probe fails after os.open
            bus.close()
            detail = e.strerror or str(e)
            if e.errno == errno.ENOTTY:
                detail = f"not an I2C adapter ({detail})"
            raise BusError(f"open {path}", detail) from e
        self._bus = bus

    @property
    def fd(self):
        return self._bus.fd

    def select(self, address):
        try:
            fcntl.ioctl(self.fd, I2C_SLAVE, address)
        except OSError as e:
            raise BusError("select slave", e.strerror or str(e), address=address) from e
        self.address = address

    def transfer_write(self, data):
        data = bytes(data)
        try:
            return os.write(self.fd, data)
        except OSError as e:
            raise BusError("write", e.strerror or str(e), address=self.address) from e

    def transfer_read(self, buffer):
        try:
            data = os.read(self.fd, len(buffer))
        except OSError as e:
            raise BusError("read", e.strerror or str(e), address=self.address) from e
        buffer[:len(data)] = data
        return len(data)

    def close(self):
        if self._bus is not None:
            self._bus.close()
            self._bus = None

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()
        return False
