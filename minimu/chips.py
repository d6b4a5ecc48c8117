"""Static chip descriptors: register map, identity and startup configuration."""
from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class ChipDescriptor:
    name: str
    address: int
    who_am_i_reg: int
    who_am_i_expected: int
    config: Tuple[Tuple[int, int], ...]   # (register, value), written in order
    gyro_out: Optional[int] = None        # OUTX_L of each 3-axis block
    accel_out: Optional[int] = None
    mag_out: Optional[int] = None
    auto_increment: int = 0x00            # OR'ed into sub-address for burst reads
