from __future__ import annotations
import os
from typing import Literal

OutputMode = Literal['stdout', 'log', 'none']

# Defaults
_DEFAULT_OUTPUT: OutputMode = 'log'
_OUTPUT_MODES = ('stdout', 'log', 'none')
_TRUTHY = ('1', 'true', 'yes', 'on')


def flag_from_env(var: str, default: bool = False) -> bool:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in _TRUTHY


def get_output_mode() -> OutputMode:
    raw = os.environ.get('LIL_OUTPUT', '').strip().lower()
    if raw in _OUTPUT_MODES:
        return raw  # type: ignore[return-value]
    return _DEFAULT_OUTPUT


def host_builtins_enabled() -> bool:
    return flag_from_env('LIL_HOST_BUILTINS')
