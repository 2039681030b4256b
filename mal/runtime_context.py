from __future__ import annotations

import logging
import sys
from contextlib import contextmanager
from typing import Iterator

from mal.config import get_max_eval_depth
from mal.types.errors import MalEvaluationError

logger = logging.getLogger(__name__)

# Upper bound on Python frames one level of evaluate() nesting holds
# (evaluate, evaluate_list, apply, apply_closure, a comprehension).
FRAMES_PER_EVAL = 5
# Frames kept free for the caller, logging and the printer.
STACK_HEADROOM = 500
# Never raise the interpreter's recursion limit past this.
RECURSION_LIMIT_CEILING = 10_000

# NOTE: For now this is process-global. The interpreter is single-threaded;
# if threading is introduced, switch to contextvars or threading.local.
_eval_depth: int = 0


def get_eval_depth() -> int:
    return _eval_depth


def ensure_recursion_limit(max_depth: int) -> int:
    """Raise sys's recursion limit so `max_depth` evaluate levels fit.

    The limit is only ever raised, and never beyond RECURSION_LIMIT_CEILING.
    Returns the limit in force afterwards.
    """
    wanted = min(max_depth * FRAMES_PER_EVAL + STACK_HEADROOM, RECURSION_LIMIT_CEILING)
    current = sys.getrecursionlimit()
    if current < wanted:
        logger.debug("raising recursion limit from %d to %d", current, wanted)
        sys.setrecursionlimit(wanted)
        return wanted
    return current


@contextmanager
def eval_frame() -> Iterator[int]:
    """Count one level of evaluate() nesting for the duration of the block.

    Raises MalEvaluationError once the configured limit is passed. Should the
    Python stack run out first, the RecursionError is unwound to the
    outermost frame and reported there as a MalEvaluationError.
    """
    global _eval_depth
    limit = get_max_eval_depth()
    if _eval_depth >= limit:
        logger.warning("evaluation depth limit %d reached", limit)
        raise MalEvaluationError(f"maximum evaluation depth ({limit}) exceeded")
    depth = _eval_depth
    if depth == 0:
        ensure_recursion_limit(limit)
    _eval_depth = depth + 1
    try:
        yield _eval_depth
    except RecursionError:
        if depth > 0:
            raise
        logger.warning("Python stack exhausted below evaluation depth limit %d", limit)
        raise MalEvaluationError(
            f"maximum evaluation depth exceeded: Python stack exhausted before the limit ({limit})"
        ) from None
    finally:
        # restore the entry depth; frames unwound by RecursionError may skip theirs
        _eval_depth = depth
