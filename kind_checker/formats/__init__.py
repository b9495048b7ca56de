"""Colour format modules.

Every .py file in this package that defines a `pattern` object of type
ColourPattern is auto-registered by kind_checker.registry.discover().

The explicit imports below keep the modules visible to freezers that
hide them from pkgutil.iter_modules.
"""

# Keep this list in sync with format modules
import kind_checker.formats.hex as _hex  # noqa: F401
import kind_checker.formats.hsl as _hsl  # noqa: F401
import kind_checker.formats.hsla as _hsla  # noqa: F401
import kind_checker.formats.rgb as _rgb  # noqa: F401
import kind_checker.formats.rgba as _rgba  # noqa: F401
