import pytest

from core.operation import Operation, OperationCategory as C, category_for, validate_operation
from helpers import make_config


@pytest.mark.parametrize('code,descriptor,category', [
    ('S', 'begin', C.PROC_START),
    ('S', 'end', C.PROC_END),
    ('A', 'begin', C.APP_START),
    ('A', 'end', C.APP_END),
    ('P', 'run', C.RUN),
    ('I', 'keyboard', C.INPUT),
    ('O', 'monitor', C.OUTPUT),
    ('O', 'printer', C.OUTPUT_DEVICE),
    ('O', 'hard drive', C.OUTPUT_DEVICE),
    ('M', 'block', C.MEMORY),
    ('X', 'run', None),
])
def test_category_for(code, descriptor, category):
    assert category_for(code, descriptor) == category


def test_boundary_and_io_flags():
    assert Operation(C.META_START, '', 0).is_boundary
    assert Operation(C.APP_END, 'end', 0).is_app_end
    assert Operation(C.PROC_END, 'end', 0).is_program_end
    assert not Operation(C.PROC_END, 'begin', 0).is_program_end
    assert Operation(C.OUTPUT_DEVICE, 'printer', 1).is_io
    assert not Operation(C.MEMORY, 'allocate', 1).is_io


@pytest.mark.parametrize('op,error', [
    (Operation(C.RUN, 'run', 5), None),
    (Operation(C.RUN, 'cpu', 5), None),
    (Operation(C.APP_START, 'begin', 0), None),
    (Operation(C.META_END, '', 0), None),
    (Operation(C.INPUT, 'floppy', 5), 'Error. Invalid Meta-Data Descriptor: floppy'),
    (Operation(C.APP_START, 'start', 0), 'Error. Invalid Meta-Data Descriptor: start'),
    (Operation(C.MEMORY, 'free', 1), 'Error. Invalid Meta-Data Descriptor: free'),
    (Operation(C.OUTPUT, 'speaker', 2), 'Error. Missing Cycle Time For: speaker'),
    (Operation(C.RUN, 'run', -2), 'Error. Negative Cycles For: run'),
])
def test_validate_operation(op, error):
    assert validate_operation(op, make_config()) == error


def test_phrases():
    assert Operation(C.RUN, 'run', 1).start_phrase(1) == 'start run processing action'
    assert Operation(C.INPUT, 'keyboard', 1).end_phrase() == 'end keyboard input'
    assert Operation(C.OUTPUT_DEVICE, 'printer', 1).end_phrase(' on PRNTR 1') == 'end printer output on PRNTR 1'
    assert Operation(C.MEMORY, 'block', 1).start_phrase(1) == 'start memory block'
    assert Operation(C.APP_END, 'end', 0).start_phrase(4) == 'OS: removing process 4'
    assert Operation(C.META_START, '', 0).start_phrase(1) is None
