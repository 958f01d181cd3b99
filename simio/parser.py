# Config + meta-data file parser
import os
import re
from typing import List

from core.config import Config
from core.errors import ConfigError, MetaDataError
from core.operation import Operation, category_for

CYCLE_KEYS = {
    'monitor display time': 'monitor',
    'processor cycle time': 'processor',
    'scanner cycle time': 'scanner',
    'hard drive cycle time': 'hard drive',
    'keyboard cycle time': 'keyboard',
    'memory cycle time': 'memory',
    'projector cycle time': 'projector',
    'printer cycle time': 'printer',
    'mouse cycle time': 'mouse',
    'speaker cycle time': 'speaker',
}
MEMORY_UNITS = {'kbytes': 1, 'mbytes': 1024, 'gbytes': 1024 * 1024}

KEY_RE = re.compile(r'^(?P<name>[^{:]+?)\s*(?:\{(?P<unit>[^}]*)\})?\s*$')
ENTRY_RE = re.compile(r'^(?P<code>[A-Za-z])\s*\{(?P<descriptor>[^}]*)\}\s*(?P<cost>-?\d+)$')


def _number(value: str, line: str) -> float:
    try:
        return float(value)
    except ValueError:
        raise ConfigError(f"Error. Invalid Configuration Value: {line}") from None


def _resolve(path: str, base: str) -> str:
    if not path or os.path.isabs(path):
        return path
    return os.path.join(base, path)


def parse_config(path: str) -> Config:
    config = Config()
    base = os.path.dirname(os.path.abspath(path))
    with open(path, 'r') as fh:
        for line in fh:
            line = line.strip()
            if not line or line.startswith('#'):
                continue
            if line.startswith('Start Simulator') or line.startswith('End Simulator'):
                continue
            if ':' not in line:
                raise ConfigError(f"Error. Invalid Configuration Line: {line}")
            key, value = line.split(':', 1)
            value = value.strip()
            m = KEY_RE.match(key)
            name = m.group('name').lower() if m else key.strip().lower()
            unit = (m.group('unit') or '').lower() if m else ''

            if name in CYCLE_KEYS:
                config.cycle_times[CYCLE_KEYS[name]] = _number(value, line)
            elif name in ('system memory', 'memory block size'):
                if unit and unit not in MEMORY_UNITS:
                    raise ConfigError(f"Error. Invalid Memory Unit: {unit}")
                size = int(_number(value, line) * MEMORY_UNITS.get(unit, 1))
                if name == 'system memory':
                    config.system_memory = size
                else:
                    config.block_size = size
            elif name == 'printer quantity':
                config.printer_count = int(_number(value, line))
            elif name == 'hard drive quantity':
                config.hard_drive_count = int(_number(value, line))
            elif name == 'version/phase':
                config.version = value
            elif name == 'file path':
                config.metadata_path = _resolve(value, base)
            elif name == 'log':
                config.log_mode = value
            elif name == 'log file path':
                config.log_file_path = _resolve(value, base)
    return config


def parse_metadata_text(text: str) -> List[Operation]:
    operations: List[Operation] = []
    body = []
    for line in text.splitlines():
        stripped = line.strip()
        if not stripped or stripped.startswith('#'):
            continue
        if stripped.startswith('Start Program Meta-Data') or stripped.startswith('End Program Meta-Data'):
            continue
        body.append(stripped)
    # entries are ';'-separated and the last one ends with '.'
    for raw in ' '.join(body).split(';'):
        entry = raw.strip().rstrip('.').strip()
        if not entry:
            continue
        m = ENTRY_RE.match(entry)
        if not m:
            raise MetaDataError(f"Error. Invalid Meta-Data Entry: {entry}")
        code = m.group('code').upper()
        descriptor = m.group('descriptor').strip()
        category = category_for(code, descriptor)
        if category is None:
            raise MetaDataError(f"Error. Invalid Meta-Data Code: {code}")
        operations.append(Operation(category, descriptor, int(m.group('cost'))))
    return operations


def parse_metadata(path: str) -> List[Operation]:
    with open(path, 'r') as fh:
        return parse_metadata_text(fh.read())
