# Process segmentation and the FIFO ready queue
from collections import deque
from typing import List, Optional, Sequence

from core.operation import Operation
from core.process import Process, ProcessState


def split_operations(operations: Sequence[Operation]) -> List[Process]:
    """Group a flat operation stream into processes.

    Operations are buffered until an application end, which turns the buffer
    into the next process. A program end closes the previous process instead
    of starting a new buffer. Anything left buffered when the stream runs out
    never became a process and is dropped.
    """
    processes: List[Process] = []
    buffered: List[Operation] = []
    for op in operations:
        if op.is_program_end and processes:
            processes[-1].operations.append(op)
            continue
        buffered.append(op)
        if op.is_app_end:
            processes.append(Process(len(processes) + 1, buffered))
            buffered = []
    return processes


class Scheduler:
    def __init__(self):
        self.ready_queue: deque[Process] = deque()
        self.running: Optional[Process] = None

    def enqueue_ready(self, process: Process):
        process.change_state(ProcessState.READY)
        self.ready_queue.append(process)

    def has_ready(self) -> bool:
        return bool(self.ready_queue)

    def pick_next(self) -> Optional[Process]:
        if not self.ready_queue:
            self.running = None
            return None
        self.running = self.ready_queue.popleft()
        self.running.change_state(ProcessState.RUNNING)
        return self.running
