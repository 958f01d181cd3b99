from enum import Enum, auto
from dataclasses import dataclass
from typing import Optional


class OperationCategory(Enum):
    META_START = auto()
    META_END = auto()
    APP_START = auto()
    APP_END = auto()
    PROC_START = auto()
    PROC_END = auto()
    INPUT = auto()
    OUTPUT = auto()
    RUN = auto()
    MEMORY = auto()
    OUTPUT_DEVICE = auto()


BOUNDARY_CATEGORIES = (
    OperationCategory.META_START,
    OperationCategory.META_END,
    OperationCategory.APP_START,
    OperationCategory.APP_END,
    OperationCategory.PROC_START,
    OperationCategory.PROC_END,
)
IO_CATEGORIES = (
    OperationCategory.INPUT,
    OperationCategory.OUTPUT,
    OperationCategory.OUTPUT_DEVICE,
)

# devices drawn from a counted pool
ALLOCATED_DEVICES = ('printer', 'hard drive')

DESCRIPTORS = {
    'S': ('begin', 'end'),
    'A': ('begin', 'end'),
    'P': ('run', 'cpu'),
    'I': ('hard drive', 'keyboard', 'scanner', 'mouse'),
    'O': ('hard drive', 'monitor', 'projector', 'printer', 'speaker'),
    'M': ('allocate', 'block'),
}

_CODES = {
    OperationCategory.PROC_START: 'S',
    OperationCategory.PROC_END: 'S',
    OperationCategory.APP_START: 'A',
    OperationCategory.APP_END: 'A',
    OperationCategory.RUN: 'P',
    OperationCategory.INPUT: 'I',
    OperationCategory.OUTPUT: 'O',
    OperationCategory.OUTPUT_DEVICE: 'O',
    OperationCategory.MEMORY: 'M',
}


def category_for(code: str, descriptor: str) -> Optional[OperationCategory]:
    """Map a meta-data code letter (and descriptor) to its category.

    Returns None for an unknown code letter. Descriptors are not checked
    here; that is the job of validate_operation.
    """
    if code == 'S':
        return OperationCategory.PROC_END if descriptor == 'end' else OperationCategory.PROC_START
    if code == 'A':
        return OperationCategory.APP_END if descriptor == 'end' else OperationCategory.APP_START
    if code == 'O':
        if descriptor in ALLOCATED_DEVICES:
            return OperationCategory.OUTPUT_DEVICE
        return OperationCategory.OUTPUT
    return {
        'P': OperationCategory.RUN,
        'I': OperationCategory.INPUT,
        'M': OperationCategory.MEMORY,
    }.get(code)


@dataclass(frozen=True)
class Operation:
    category: OperationCategory
    descriptor: str
    cost: int

    @property
    def code(self) -> Optional[str]:
        return _CODES.get(self.category)

    @property
    def is_boundary(self) -> bool:
        return self.category in BOUNDARY_CATEGORIES

    @property
    def is_io(self) -> bool:
        return self.category in IO_CATEGORIES

    @property
    def is_app_end(self) -> bool:
        return self.category == OperationCategory.APP_END and self.descriptor == 'end'

    @property
    def is_program_end(self) -> bool:
        return self.category == OperationCategory.PROC_END and self.descriptor == 'end'

    def start_phrase(self, pid: int) -> Optional[str]:
        """Text logged when the operation begins (without timestamp/prefix).

        Boundary markers of the meta-data file itself have no phrase.
        """
        c = self.category
        if c == OperationCategory.PROC_START:
            return 'Simulator program starting'
        if c == OperationCategory.PROC_END:
            return 'Simulator program ending'
        if c == OperationCategory.APP_START:
            return f'OS: starting process {pid}'
        if c == OperationCategory.APP_END:
            return f'OS: removing process {pid}'
        if c in (OperationCategory.META_START, OperationCategory.META_END):
            return None
        return f'start {self._action()}'

    def end_phrase(self, suffix: str = '') -> str:
        return f'end {self._action()}{suffix}'

    def _action(self) -> str:
        if self.category == OperationCategory.RUN:
            return f'{self.descriptor} processing action'
        if self.category == OperationCategory.MEMORY:
            return f'memory {self.descriptor}'
        if self.category == OperationCategory.INPUT:
            return f'{self.descriptor} input'
        return f'{self.descriptor} output'

    def __repr__(self):
        return f"Operation({self.category.name} {{{self.descriptor}}}{self.cost})"


def validate_operation(op: Operation, config) -> Optional[str]:
    """Check an operation against the loaded configuration.

    Returns None when the operation may run, otherwise the error line to log.
    """
    code = op.code
    if code is not None and op.descriptor not in DESCRIPTORS[code]:
        return f'Error. Invalid Meta-Data Descriptor: {op.descriptor}'
    if op.cost < 0:
        return f'Error. Negative Cycles For: {op.descriptor}'
    if not op.is_boundary and config.cycle_time(op) is None:
        return f'Error. Missing Cycle Time For: {op.descriptor}'
    return None
