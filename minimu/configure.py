"""Identity probe and startup register configuration."""
import logging

from .registers import read_register, write_register

logger = logging.getLogger(__name__)


def read_identity(bus, chip):
    """Read WHO_AM_I. A mismatch only warns, so chip revisions still run."""
    who = read_register(bus, chip.address, chip.who_am_i_reg)
    if who != chip.who_am_i_expected:
        logger.warning("%s WHO_AM_I 0x%02X, expected 0x%02X; continuing",
                       chip.name, who, chip.who_am_i_expected)
    return who


def configure(bus, chip):
    # no read-back; a failed write raises BusError and aborts startup
    for reg, value in chip.config:
        logger.debug("%s: reg 0x%02X <- 0x%02X", chip.name, reg, value)
        write_register(bus, chip.address, reg, value)
