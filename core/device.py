# Device and memory allocation
from typing import Optional

HEX_DIGITS = '0123456789ABCDEF'
ADDRESS_WIDTH = 8


def to_hex(num: int) -> str:
    if num == 0:
        return '0'
    digits = []
    while num != 0:
        num, remainder = divmod(num, 16)
        digits.append(HEX_DIGITS[remainder])
    return ''.join(reversed(digits))


def format_address(num: int) -> str:
    return to_hex(num).rjust(ADDRESS_WIDTH, '0')


class DeviceAllocator:
    """Round-robin assignment of device indices.

    The cursor wraps when it reaches count + 1, so a pool of C devices hands
    out 0..C before starting over.
    """

    def __init__(self, name: str, label: str, count: int):
        self.name = name
        self.label = label
        self.count = count
        self.cursor = 0

    def assign(self) -> int:
        if self.cursor == self.count + 1:
            self.cursor = 0
        index = self.cursor
        self.cursor += 1
        return index

    def __repr__(self):
        return f"Device({self.name}, count={self.count}, cursor={self.cursor})"


class MemoryAllocator:
    def __init__(self, total: int, block_size: int):
        self.total = total
        self.block_size = block_size
        self.cursor: Optional[int] = None
        self.first_allocation = True

    def begin_process(self) -> None:
        self.first_allocation = True
        self.cursor = None

    def allocate(self) -> int:
        if self.first_allocation:
            self.first_allocation = False
            address = 0
        else:
            address = (self.cursor or 0) + self.block_size
            if address >= self.total:
                address = 0
        self.cursor = address
        return address


class ResourceAllocator:
    def __init__(self, config):
        self.printers = DeviceAllocator('printer', 'PRNTR', config.printer_count)
        self.hard_drives = DeviceAllocator('hard drive', 'HDD', config.hard_drive_count)
        self.memory = MemoryAllocator(config.system_memory, config.block_size)

    def assign_device(self, descriptor: str) -> Optional[str]:
        for device in (self.printers, self.hard_drives):
            if device.name == descriptor:
                return f"{device.label} {device.assign()}"
        return None

    def begin_process(self) -> None:
        self.memory.begin_process()

    def allocate_memory(self) -> str:
        return format_address(self.memory.allocate())
