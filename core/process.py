from collections import deque
from enum import Enum
from typing import Iterable, Optional

from core.operation import Operation


class ProcessState(Enum):
    NEW = 'NEW'
    READY = 'READY'
    RUNNING = 'RUNNING'
    WAITING = 'WAITING'
    TERMINATED = 'TERMINATED'


# any live state may also move straight to TERMINATED (aborted run)
TRANSITIONS = {
    ProcessState.NEW: (ProcessState.READY, ProcessState.RUNNING),
    ProcessState.READY: (ProcessState.RUNNING,),
    ProcessState.RUNNING: (ProcessState.WAITING,),
    ProcessState.WAITING: (ProcessState.RUNNING,),
    ProcessState.TERMINATED: (),
}


class Process:
    def __init__(self, pid: int, operations: Iterable[Operation] = ()):
        self.pid = pid
        self.state = ProcessState.NEW
        self.operations = deque(operations)

    def change_state(self, state: ProcessState) -> None:
        if self.state == ProcessState.TERMINATED or (
                state != ProcessState.TERMINATED and state not in TRANSITIONS[self.state]):
            raise ValueError(f"pid={self.pid}: illegal transition {self.state.name} -> {state.name}")
        self.state = state

    def next_operation(self) -> Optional[Operation]:
        if self.operations:
            return self.operations.popleft()
        return None

    def terminate(self) -> None:
        self.operations.clear()
        if self.state != ProcessState.TERMINATED:
            self.state = ProcessState.TERMINATED

    def __repr__(self) -> str:
        return f"Process(pid={self.pid}, state={self.state.name}, pending={len(self.operations)})"
