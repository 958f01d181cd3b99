from core.config import Config
from core.operation import Operation, OperationCategory as C


def make_config(**overrides) -> Config:
    values = dict(
        cycle_times={
            'processor': 1.0, 'memory': 1.0, 'monitor': 1.0, 'hard drive': 1.0,
            'keyboard': 1.0, 'printer': 1.0, 'scanner': 1.0, 'projector': 1.0,
        },
        system_memory=512,
        block_size=128,
        printer_count=2,
        hard_drive_count=2,
    )
    values.update(overrides)
    return Config(**values)


def program(*body, apps=1):
    """S{begin} + `apps` copies of A{begin} body A{end} + S{end}."""
    ops = [Operation(C.PROC_START, 'begin', 0)]
    for _ in range(apps):
        ops.append(Operation(C.APP_START, 'begin', 0))
        ops.extend(body)
        ops.append(Operation(C.APP_END, 'end', 0))
    ops.append(Operation(C.PROC_END, 'end', 0))
    return ops
