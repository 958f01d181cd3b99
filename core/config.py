from dataclasses import dataclass, field
from typing import Dict, Optional

from core.operation import Operation, OperationCategory

LOG_BOTH = 'Log to Both'
LOG_FILE = 'Log to File'
LOG_MONITOR = 'Log to Monitor'


@dataclass
class Config:
    version: str = ''
    metadata_path: str = ''
    # device name -> milliseconds per cycle
    cycle_times: Dict[str, float] = field(default_factory=dict)
    system_memory: int = 0   # kbytes
    block_size: int = 0      # kbytes
    printer_count: int = 1
    hard_drive_count: int = 1
    log_mode: str = LOG_MONITOR
    log_file_path: str = ''

    def cycle_time(self, op: Operation) -> Optional[float]:
        if op.category == OperationCategory.RUN:
            return self.cycle_times.get('processor')
        if op.category == OperationCategory.MEMORY:
            return self.cycle_times.get('memory')
        return self.cycle_times.get(op.descriptor)

    def __repr__(self):
        return (f"Config(log={self.log_mode!r}, memory={self.system_memory}k/{self.block_size}k, "
                f"printers={self.printer_count}, drives={self.hard_drive_count})")
