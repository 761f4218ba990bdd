from __future__ import annotations

import sys
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Callable, Iterator

from biglisp.config import get_max_depth

# Interpreter frames used per unit of depth, worst case (a user function call).
FRAMES_PER_LEVEL = 4
# The recursion limit is never raised past this.
RECURSION_CEILING = 10_000


def _print_line(text: str) -> None:
    print(text)


@dataclass(frozen=True)
class RuntimeContext:
    """Per-evaluation settings threaded through every special form.

    `output` receives one line of text per println; `max_depth` caps the
    nesting of evaluation calls. Nothing here is process-global, so independent
    evaluations never share state.
    """
    output: Callable[[str], None] = _print_line
    max_depth: int = field(default_factory=get_max_depth)


@contextmanager
def stack_headroom(max_depth: int) -> Iterator[None]:
    """
    Raise the interpreter recursion limit so that `max_depth` nested levels fit
    on top of the caller's stack, restoring the previous limit on exit.
    """
    previous = sys.getrecursionlimit()
    wanted = min(previous + max_depth * FRAMES_PER_LEVEL, RECURSION_CEILING)
    if wanted <= previous:
        yield
        return
    sys.setrecursionlimit(wanted)
    try:
        yield
    finally:
        sys.setrecursionlimit(previous)
