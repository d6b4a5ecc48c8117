"""
LIS3MDL magnetometer register map
"""
from .chips import ChipDescriptor

_LIS3MDL_I2CADDR_DEFAULT = 0x1E

# Registers
_LIS3MDL_WHO_AM_I  = 0x0F
_LIS3MDL_CTRL_REG1 = 0x20
_LIS3MDL_CTRL_REG2 = 0x21
_LIS3MDL_CTRL_REG3 = 0x22
_LIS3MDL_OUT_X_L   = 0x28

_LIS3MDL_CHIP_ID   = 0x3D

# CTRL_REG1: TEMP_EN=0, OM=11 (ultra-high performance XY), DO=011 (5 Hz), FAST_ODR=0, ST=0
_CTRL_REG1_UHP_5HZ = 0b0110_1100
# CTRL_REG2: FS=00 -> ±4 gauss
_CTRL_REG2_4GAUSS  = 0x00
# CTRL_REG3: MD=00 -> continuous conversion
_CTRL_REG3_CONTINUOUS = 0x00

# Sub-address MSB enables auto-increment on multi-byte reads
_AUTO_INCREMENT = 0x80

LIS3MDL = ChipDescriptor(
    name="LIS3MDL",
    address=_LIS3MDL_I2CADDR_DEFAULT,
    who_am_i_reg=_LIS3MDL_WHO_AM_I,
    who_am_i_expected=_LIS3MDL_CHIP_ID,
    config=(
        (_LIS3MDL_CTRL_REG1, _CTRL_REG1_UHP_5HZ),
        (_LIS3MDL_CTRL_REG2, _CTRL_REG2_4GAUSS),
        (_LIS3MDL_CTRL_REG3, _CTRL_REG3_CONTINUOUS),
    ),
    mag_out=_LIS3MDL_OUT_X_L,
    auto_increment=_AUTO_INCREMENT,
)
