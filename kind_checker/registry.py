"""Colour format auto-discovery and registration.

Scans kind_checker/formats/ for modules that define a `pattern` object of
type ColourPattern, compiles each once, and collects them into a read-only
table keyed by ColourFormat.

Falls back to the known module list when pkgutil.iter_modules finds
nothing (frozen binaries).
"""

import importlib
import logging
import pkgutil
import re
from types import MappingProxyType

from kind_checker.core.config import Config, load_config
from kind_checker.core.types import ColourFormat, ColourPattern

logger = logging.getLogger(__name__)

_table: MappingProxyType | None = None

# Known format module names — fallback for frozen binaries
_FORMAT_MODULES = [
    'hex',
    'hsl',
    'hsla',
    'rgb',
    'rgba',
]


def _format_patterns() -> list[ColourPattern]:
    import kind_checker.formats as pkg

    found_modules = [
        modname for _importer, modname, _ispkg in pkgutil.iter_modules(pkg.__path__) if not modname.startswith('_')
    ]
    if not found_modules:
        found_modules = _FORMAT_MODULES

    patterns = []
    for modname in found_modules:
        module = importlib.import_module(f'kind_checker.formats.{modname}')
        pattern = getattr(module, 'pattern', None)
        if isinstance(pattern, ColourPattern):
            patterns.append(pattern)
    return patterns


def build(config: Config) -> MappingProxyType:
    """Compile every discovered format under `config`, in ColourFormat order."""
    compiled: dict[ColourFormat, re.Pattern[str]] = {}
    for pattern in _format_patterns():
        if pattern.format in compiled:
            raise RuntimeError(f'Duplicate grammar for colour format {pattern.format.name}')
        compiled[pattern.format] = pattern.compile(config)

    missing = [fmt.name for fmt in ColourFormat if fmt not in compiled]
    if missing:
        raise RuntimeError(f'No grammar registered for: {", ".join(missing)}')

    return MappingProxyType({fmt: compiled[fmt] for fmt in ColourFormat})


def discover() -> MappingProxyType:
    """Build the process-wide format table on first use and return it."""
    global _table
    if _table is None:
        config = load_config()
        _table = build(config)
        logger.debug('Registered colour formats %s (%s)', [fmt.name for fmt in _table], config)
    return _table


def lookup(fmt: object) -> re.Pattern[str] | None:
    """Return the pattern for `fmt`, or None if it is not a ColourFormat."""
    if not isinstance(fmt, ColourFormat):
        return None
    return discover().get(fmt)


def get(fmt: ColourFormat) -> re.Pattern[str]:
    """Get the compiled pattern for a format."""
    pattern = lookup(fmt)
    if pattern is None:
        available = ', '.join(f.name for f in discover())
        raise KeyError(f'Unknown colour format: {fmt!r}. Available: {available}')
    return pattern


def all_formats() -> MappingProxyType:
    """Return the full format table."""
    return discover()
