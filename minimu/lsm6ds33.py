# LSM6DS33 gyro + accel register map
from .chips import ChipDescriptor

ADDRESS    = 0x6B   # SA0 high; 0x6A when tied low

WHO_AM_I   = 0x0F
CTRL1_XL   = 0x10
CTRL2_G    = 0x11
CTRL3_C    = 0x12
OUTX_L_G   = 0x22
OUTX_L_XL  = 0x28

WHO_AM_I_VALUE = 0x69

# CTRL1_XL: [7:4]=ODR_XL 26 Hz (0010), [3:2]=FS_XL ±2g (00), [1:0]=BW 400 Hz (00)
CTRL1_XL_26HZ_2G = 0b0010_0000
# CTRL2_G:  [7:4]=ODR_G 26 Hz (0010), [3:2]=FS_G 500 dps (01)
CTRL2_G_26HZ_500DPS = 0b0010_0100

LSM6DS33 = ChipDescriptor(
    name="LSM6DS33",
    address=ADDRESS,
    who_am_i_reg=WHO_AM_I,
    who_am_i_expected=WHO_AM_I_VALUE,
    config=(
        (CTRL1_XL, CTRL1_XL_26HZ_2G),
        (CTRL2_G, CTRL2_G_26HZ_500DPS),
    ),
    gyro_out=OUTX_L_G,
    accel_out=OUTX_L_XL,
    # CTRL3_C.IF_INC resets to 1, so multi-byte reads step on their own
    auto_increment=0x00,
)
