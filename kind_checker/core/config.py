"""Environment configuration for kind-checker.

Only OS environment variables are read; the library never loads files.

  KIND_CHECKER_LEGACY_HSLA  Build hsl/hsla with the historical percentage
                            grammar (accepts e.g. '100.5%'). Off by default.

Read once, when the colour format registry is first built.
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass

_TRUTHY = {'1', 'true', 'yes', 'on'}


@dataclass(frozen=True)
class Config:
    legacy_hsla: bool = False


def _flag(environ: Mapping[str, str], key: str) -> bool:
    return environ.get(key, '').strip().lower() in _TRUTHY


def load_config(environ: Mapping[str, str] | None = None) -> Config:
    """Build a Config from `environ` (default: os.environ)."""
    if environ is None:
        environ = os.environ
    return Config(legacy_hsla=_flag(environ, 'KIND_CHECKER_LEGACY_HSLA'))
