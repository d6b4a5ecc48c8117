"""
Raw LSM6DS33 + LIS3MDL streamer.

Opens the I2C bus, prints both WHO_AM_I values, configures the chips and
streams raw gyro/accel/mag counts on one line rewritten in place.
"""
import argparse
import logging
import signal
import sys
import threading

from .config import StreamConfig
from .configure import configure, read_identity
from .i2c_bus import BusError, I2CBus
from .lis3mdl import LIS3MDL
from .lsm6ds33 import LSM6DS33
from .registers import ReadMode
from .stream import Streamer

logger = logging.getLogger(__name__)


def _positive_int(value):
    n = int(value)
    if n < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {n}")
    return n


def parse_args(argv=None):
    defaults = StreamConfig()

    parser = argparse.ArgumentParser(
        prog="minimu-stream",
        description="Stream raw LSM6DS33 + LIS3MDL counts over i2c-dev",
    )
    parser.add_argument(
        '--bus',
        default=defaults.bus_path,
        help=f'I2C device node (default: {defaults.bus_path}, env MINIMU_I2C_DEV)'
    )
    parser.add_argument(
        '--interval',
        type=float,
        default=defaults.interval,
        help=f'Seconds between records (default: {defaults.interval})'
    )
    parser.add_argument(
        '--read-mode',
        choices=[m.value for m in ReadMode],
        default=defaults.read_mode.value,
        help='split: two single-byte reads per value (may tear); '
             'burst: one two-byte read (default: %(default)s)'
    )
    parser.add_argument(
        '--count',
        type=_positive_int,
        default=None,
        help='Stop after N records (default: run until interrupted)'
    )
    parser.add_argument('-v', '--verbose', action='store_true', help='Debug logging')
    args = parser.parse_args(argv)

    return StreamConfig(
        bus_path=args.bus,
        interval=args.interval,
        read_mode=ReadMode(args.read_mode),
        count=args.count,
        verbose=args.verbose,
    )


def _install_stop_handlers(stop):
    previous = {}

    def _handler(signum, frame):
        stop.set()

    for sig in (signal.SIGINT, signal.SIGTERM):
        previous[sig] = signal.signal(sig, _handler)
    return previous


def _restore_handlers(previous):
    for sig, handler in previous.items():
        signal.signal(sig, handler)


def run(config, stop=None, out=None):
    """Open, identify, configure and stream. Returns the process exit status."""
    out = out if out is not None else sys.stdout
    stop = stop if stop is not None else threading.Event()
    try:
        with I2CBus(config.bus_path) as bus:
            who_imu = read_identity(bus, LSM6DS33)
            who_mag = read_identity(bus, LIS3MDL)
            print(f"LSM6DS33 WHO_AM_I = 0x{who_imu:02x}", file=out)
            print(f"LIS3MDL  WHO_AM_I = 0x{who_mag:02x}", file=out)
            print(file=out)

            configure(bus, LSM6DS33)
            configure(bus, LIS3MDL)
            print("Configured sensors. Streaming raw data...", file=out)
            print("Press Ctrl+C to stop.", file=out)
            print(file=out)

            streamer = Streamer(bus, interval=config.interval,
                                read_mode=config.read_mode, out=out)
            streamer.run(stop, count=config.count)
    except BusError as e:
        logger.error("%s", e)
        return 1
    return 0


def main(argv=None):
    config = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if config.verbose else logging.INFO,
        format='%(asctime)s %(levelname)s: %(message)s',
        stream=sys.stderr,
    )

    stop = threading.Event()
    previous = _install_stop_handlers(stop)
    try:
        return run(config, stop=stop)
    finally:
        _restore_handlers(previous)


if __name__ == '__main__':
    sys.exit(main())
