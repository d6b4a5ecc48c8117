"""Configuration dataclasses for the raw streamer."""
import os
from dataclasses import dataclass, field
from typing import Optional

from .registers import ReadMode

DEFAULT_BUS = "/dev/i2c-1"


def _default_bus() -> str:
    return os.environ.get("MINIMU_I2C_DEV", DEFAULT_BUS)


@dataclass
class StreamConfig:
    bus_path: str = field(default_factory=_default_bus)
    interval: float = 0.05          # 50 ms between records (~20 Hz display)
    read_mode: ReadMode = ReadMode.SPLIT
    count: Optional[int] = None     # None = run until stopped
    verbose: bool = False
