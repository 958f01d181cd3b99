# Log sink (monitor and/or file) and a reader for rendered log lines
import re
import sys
from dataclasses import dataclass
from typing import Optional, TextIO

from core.config import LOG_BOTH, LOG_FILE, LOG_MONITOR
from core.errors import ConfigError

SEPARATOR = ' - '

LINE_RE = re.compile(
    r'^(?P<elapsed>\d+\.\d+) - '
    r'(?:Process (?P<pid>\d+): )?'
    r'(?P<edge>start|end) '
    r'(?:memory (?P<memory>\S+)|(?P<descriptor>.+?) (?P<kind>processing action|input|output))'
    r'(?: on (?P<device>(?:PRNTR|HDD) \d+))?'
    r'(?: at 0x(?P<address>[0-9A-F]{8}))?$'
)


class LogSink:
    def __init__(self, monitor: bool, path: Optional[str] = None, stream: TextIO = None):
        self.monitor = monitor
        self.stream = stream if stream is not None else sys.stdout
        self.path = path
        self.fh = open(path, 'w') if path else None

    @classmethod
    def from_config(cls, config, stream: TextIO = None) -> 'LogSink':
        mode = config.log_mode
        if mode not in (LOG_BOTH, LOG_FILE, LOG_MONITOR):
            raise ConfigError(f"Error. Invalid Logging Information: {mode}")
        path = None
        if mode in (LOG_BOTH, LOG_FILE):
            if not config.log_file_path:
                raise ConfigError("Error. Missing File Path")
            path = config.log_file_path
        return cls(monitor=mode != LOG_FILE, path=path, stream=stream)

    def write(self, line: str) -> None:
        if self.monitor:
            print(line, file=self.stream)
        if self.fh is not None:
            self.fh.write(line + '\n')

    def write_error(self, line: str) -> None:
        """Errors always reach the monitor stream, whatever the log mode."""
        print(line, file=self.stream)

    def close(self) -> None:
        if self.fh is not None:
            self.fh.close()
            self.fh = None

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()
        return False

    def __repr__(self):
        return f"LogSink(monitor={self.monitor}, file={self.path!r})"


def render_line(stamp: str, phrase: str, pid: Optional[int] = None) -> str:
    if pid is not None:
        phrase = f"Process {pid}: {phrase}"
    return f"{stamp}{SEPARATOR}{phrase}"


@dataclass
class LogLine:
    elapsed: float
    pid: Optional[int]
    edge: str
    descriptor: str
    kind: str
    device: Optional[str] = None
    address: Optional[str] = None


def parse_phrase(line: str) -> Optional[LogLine]:
    """Read back a start/end line for a process operation.

    Returns None for lines that are not operation phrases (errors and
    boundary messages).
    """
    m = LINE_RE.match(line.strip())
    if not m:
        return None
    pid = m.group('pid')
    if m.group('memory') is not None:
        descriptor, kind = m.group('memory'), 'memory'
    else:
        descriptor, kind = m.group('descriptor'), m.group('kind')
    return LogLine(
        elapsed=float(m.group('elapsed')),
        pid=int(pid) if pid else None,
        edge=m.group('edge'),
        descriptor=descriptor,
        kind=kind,
        device=m.group('device'),
        address=m.group('address'),
    )
