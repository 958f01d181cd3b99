"""
mysim.py


Replays a program meta-data file and logs what an operating system would
report while running each process to completion.


The configuration file names the meta-data file, the cycle time of every
device, memory and device pool sizes, and where the log goes (monitor,
file or both). Processes run one at a time, in file order; every
operation takes real (busy-waited) time proportional to its cycles.


Usage:
python mysim.py config.conf
python mysim.py config.conf --metadata program.mdf --boundaries


Exit status is 0 when every process ran, 1 on any configuration, parse
or validation error.
"""


import sys
import argparse

from core.errors import SimulatorError
from core.system import System
from core.timer import Timer
from simio.log import LogSink
from simio.parser import parse_config, parse_metadata


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description='mysim (scripted operating-system execution simulator)')
    parser.add_argument('config', help='Path to configuration file')
    parser.add_argument('--metadata', help='Meta-data file (overrides the config File Path)')
    parser.add_argument('--boundaries', action='store_true', help='Also log program and application boundaries')
    parser.add_argument('--fast', action='store_true', help='Skip the simulated delays')
    parser.add_argument('-v', '--verbose', action='store_true', help='Trace engine activity on stderr')
    args = parser.parse_args(argv)

    try:
        config = parse_config(args.config)
        metadata_path = args.metadata or config.metadata_path
        if not metadata_path:
            raise SimulatorError("Error. Missing Meta-Data File Path")
        operations = parse_metadata(metadata_path)
        sink = LogSink.from_config(config)
    except SimulatorError as exc:
        print(exc)
        return 1
    except OSError as exc:
        print(f"Error. Cannot Open File: {exc.filename}")
        return 1

    timer = Timer(scale=0 if args.fast else 1)
    s = System(operations, config, sink, timer=timer,
               log_boundaries=args.boundaries, verbose=args.verbose)
    return 0 if s.run() else 1


if __name__ == '__main__':
    sys.exit(main())
