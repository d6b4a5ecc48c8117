import pytest


class FakeBus:
    """In-memory i2c-dev stand-in with a per-chip register pointer.

    Records every primitive call in `ops`. The pointer ignores bit 7 of the
    sub-address (auto-increment flag) and steps on multi-byte reads.
    """

    def __init__(self, registers=None, short_write_at=None, short_read_at=None):
        self.registers = {addr: dict(regs) for addr, regs in (registers or {}).items()}
        self.ops = []
        self.address = None
        self.closed = False
        self._pointer = {}
        self._writes = 0
        self._reads = 0
        self.short_write_at = short_write_at
        self.short_read_at = short_read_at

    def select(self, address):
        self.ops.append(("select", address))
        self.address = address

    def transfer_write(self, data):
        data = bytes(data)
        self.ops.append(("write", self.address, data))
        self._writes += 1
        if self._writes == self.short_write_at:
            return len(data) - 1
        regs = self.registers.setdefault(self.address, {})
        if len(data) == 1:
            self._pointer[self.address] = data[0] & 0x7F
        else:
            regs[data[0]] = data[1]
        return len(data)

    def transfer_read(self, buffer):
        self.ops.append(("read", self.address, len(buffer)))
        self._reads += 1
        if self._reads == self.short_read_at:
            return 0
        regs = self.registers.get(self.address, {})
        ptr = self._pointer.get(self.address, 0)
        for i in range(len(buffer)):
            buffer[i] = regs.get(ptr + i, 0)
        self._pointer[self.address] = ptr + len(buffer)
        return len(buffer)

    def close(self):
        self.ops.append(("close",))
        self.closed = True

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()
        return False

    def transfers(self):
        return [op for op in self.ops if op[0] in ("write", "read")]

    def register_writes(self):
        return [(op[1], op[2]) for op in self.ops if op[0] == "write" and len(op[2]) == 2]


def _le(values, base):
    regs = {}
    for i, v in enumerate(values):
        raw = v & 0xFFFF
        regs[base + 2 * i] = raw & 0xFF
        regs[base + 2 * i + 1] = raw >> 8
    return regs


@pytest.fixture
def chip_registers():
    """Both chips with identity set and distinct output counts per axis."""
    imu = {0x0F: 0x69}
    imu.update(_le([100, -200, 300], 0x22))       # gyro
    imu.update(_le([-1, 16384, -32768], 0x28))    # accel
    mag = {0x0F: 0x3D}
    mag.update(_le([1234, -5678, 32767], 0x28))
    return {0x6B: imu, 0x1E: mag}


@pytest.fixture
def fake_bus(chip_registers):
    return FakeBus(chip_registers)
