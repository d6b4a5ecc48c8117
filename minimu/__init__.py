"""Raw LSM6DS33 + LIS3MDL streaming over Linux i2c-dev."""

__version__ = "0.1.0"

from .i2c_bus import BusError, I2CBus
from .registers import (
    ReadMode,
    read_register,
    write_register,
    read_register_pair_le,
)
from .chips import ChipDescriptor
from .lsm6ds33 import LSM6DS33
from .lis3mdl import LIS3MDL
from .stream import RawRecord, Streamer, StreamState
