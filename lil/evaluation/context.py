"""Per-run evaluation context.

An EvalContext travels alongside the environment through every evaluator
call and special form. It carries the output sink used by `print`, which is
the only externally visible effect of evaluation.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

from lil.config import get_output_mode

OutputSink = Callable[[str], None]

output_logger = logging.getLogger("lil.output")


def stdout_sink(text: str) -> None:
    print(text)


def log_sink(text: str) -> None:
    output_logger.info(text)


def null_sink(text: str) -> None:
    return None


SINKS: dict[str, OutputSink] = {
    "stdout": stdout_sink,
    "log": log_sink,
    "none": null_sink,
}


def default_output() -> OutputSink:
    """Sink selected by LIL_OUTPUT (see lil.config)."""
    return SINKS[get_output_mode()]


@dataclass
class EvalContext:
    output: OutputSink

    @classmethod
    def default(cls) -> EvalContext:
        return cls(output=default_output())
