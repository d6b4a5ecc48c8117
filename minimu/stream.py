"""Streaming loop: nine raw register-pair reads per record at a fixed cadence."""
import sys
import threading
from dataclasses import dataclass
from enum import Enum

from .lis3mdl import LIS3MDL
from .lsm6ds33 import LSM6DS33
from .registers import ReadMode, read_register_pair_le

HEADER = "  Gx     Gy     Gz  |  Ax     Ay     Az  |  Mx     My     Mz"
RULER = "-" * 65


class StreamState(Enum):
    IDLE = "idle"
    STREAMING = "streaming"
    STOPPED = "stopped"


@dataclass(frozen=True)
class RawRecord:
    """One iteration's raw counts. No timestamp or sequence number."""
    gx: int
    gy: int
    gz: int
    ax: int
    ay: int
    az: int
    mx: int
    my: int
    mz: int

    def format(self) -> str:
        return (f"{self.gx:6d} {self.gy:6d} {self.gz:6d}"
                f" | {self.ax:6d} {self.ay:6d} {self.az:6d}"
                f" | {self.mx:6d} {self.my:6d} {self.mz:6d}")


class Streamer:
    def __init__(self, bus, interval=0.05, read_mode=ReadMode.SPLIT,
                 imu=LSM6DS33, mag=LIS3MDL, out=None):
        self.bus = bus
        self.interval = interval
        self.read_mode = read_mode
        self.imu = imu
        self.mag = mag
        self.out = out if out is not None else sys.stdout
        self.state = StreamState.IDLE
        self.records = 0

    def _xyz(self, chip, base):
        return tuple(
            read_register_pair_le(self.bus, chip.address, base + 2 * i,
                                  mode=self.read_mode,
                                  auto_increment=chip.auto_increment)
            for i in range(3)
        )

    def read_record(self) -> RawRecord:
        gx, gy, gz = self._xyz(self.imu, self.imu.gyro_out)
        ax, ay, az = self._xyz(self.imu, self.imu.accel_out)
        mx, my, mz = self._xyz(self.mag, self.mag.mag_out)
        return RawRecord(gx, gy, gz, ax, ay, az, mx, my, mz)

    def run(self, stop=None, count=None):
        """Stream until `stop` is set or `count` records have been shown.

        BusError propagates; the caller owns the bus and closes it.
        """
        if stop is None:
            stop = threading.Event()
        print(HEADER, file=self.out)
        print(RULER, file=self.out)
        self.state = StreamState.STREAMING
        try:
            while not stop.is_set():
                if count is not None and self.records >= count:
                    break
                record = self.read_record()
                self.out.write(record.format() + "\r")
                self.out.flush()
                self.records += 1
                if count is not None and self.records >= count:
                    break
                stop.wait(self.interval)
        finally:
            self.state = StreamState.STOPPED
            if self.records:
                self.out.write("\n")
                self.out.flush()
        return self.records
