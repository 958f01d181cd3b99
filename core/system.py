import sys
import threading
from typing import List, Optional, Sequence

from core.device import ResourceAllocator
from core.errors import SimulationAborted
from core.operation import Operation, OperationCategory, validate_operation
from core.process import Process, ProcessState
from core.scheduler import Scheduler, split_operations
from core.timer import SimulationClock, Timer
from simio.log import render_line


class IOTask(threading.Thread):
    """Runs the wait for one I/O operation away from the engine's thread."""

    def __init__(self, timer: Timer, cost: int, ms_per_cycle: float):
        super().__init__(daemon=True)
        self.timer = timer
        self.cost = cost
        self.ms_per_cycle = ms_per_cycle
        self.delta = 0.0
        self.error: Optional[BaseException] = None

    def run(self):
        try:
            self.delta = self.timer.elapse(self.cost, self.ms_per_cycle)
        except Exception as exc:
            self.error = exc


class System:
    def __init__(self, operations: Sequence[Operation], config, sink,
                 timer: Optional[Timer] = None, log_boundaries: bool = False,
                 verbose: bool = False):
        self.config = config
        self.sink = sink
        self.timer = timer or Timer()
        self.log_boundaries = log_boundaries
        self.verbose = verbose

        self.clock = SimulationClock()
        self.resources = ResourceAllocator(config)
        self.scheduler = Scheduler()
        # one I/O operation in flight at a time
        self.io_lock = threading.Lock()

        self.processes: List[Process] = split_operations(operations)

    def trace(self, message: str) -> None:
        if self.verbose:
            print(f"[t={self.clock.stamp()}] {message}", file=sys.stderr)

    def emit(self, phrase: str, pid: Optional[int] = None) -> None:
        self.sink.write(render_line(self.clock.stamp(), phrase, pid))

    # driver
    def run(self) -> bool:
        """Run every process in order. Returns False if the run was aborted."""
        self.trace(f"found {len(self.processes)} processes")
        try:
            for p in self.processes:
                self.scheduler.enqueue_ready(p)
            while self.scheduler.has_ready():
                p = self.scheduler.pick_next()
                self.trace(f"dispatching pid={p.pid} ({len(p.operations)} operations)")
                self.resources.begin_process()
                self.run_process(p)
                p.terminate()
                self.trace(f"pid={p.pid} -> {p.state.name}")
        except SimulationAborted as exc:
            self.trace(f"aborted: {exc}")
            self.scheduler.ready_queue.clear()
            for p in self.processes:
                p.terminate()
            return False
        finally:
            self.scheduler.running = None
            self.sink.close()
        return True

    # execution engine
    def run_process(self, process: Process) -> None:
        while True:
            op = process.next_operation()
            if op is None:
                break
            error = validate_operation(op, self.config)
            if error is not None:
                self.sink.write_error(error)
                raise SimulationAborted(error)

            pid = None if op.is_boundary else process.pid
            phrase = op.start_phrase(process.pid)
            if phrase is not None and (pid is not None or self.log_boundaries):
                self.emit(phrase, pid)

            if op.is_boundary:
                continue
            if op.is_io:
                suffix = self._run_io(process, op)
            else:
                suffix = self._run_inline(op)
            self.emit(op.end_phrase(suffix), pid)

    def _run_io(self, process: Process, op: Operation) -> str:
        process.change_state(ProcessState.WAITING)
        suffix = ''
        with self.io_lock:
            self.trace(f"pid={process.pid} acquired I/O lock for {op}")
            task = IOTask(self.timer, op.cost, self.config.cycle_time(op))
            task.start()
            task.join()
            if task.error is not None:
                raise task.error
            self.clock.advance(task.delta)
            device = self.resources.assign_device(op.descriptor)
            if device is not None:
                suffix = f" on {device}"
                self.trace(f"pid={process.pid} assigned {device}")
        process.change_state(ProcessState.RUNNING)
        return suffix

    def _run_inline(self, op: Operation) -> str:
        self.clock.advance(self.timer.elapse(op.cost, self.config.cycle_time(op)))
        if op.category == OperationCategory.MEMORY and op.descriptor == 'allocate':
            address = self.resources.allocate_memory()
            self.trace(f"allocated memory at {address}")
            return f" at 0x{address}"
        return ''
