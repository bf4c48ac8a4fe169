"""Fan-out/fan-in helper for independent blocking reads."""

import logging
from concurrent.futures import FIRST_EXCEPTION, ThreadPoolExecutor, wait
from typing import Any, Callable, Dict

log = logging.getLogger(__name__)


def run_all(tasks: Dict[str, Callable[[], Any]]) -> Dict[str, Any]:
    """Run every task concurrently and return {name: result}.

    All-or-nothing: if any task raises, the first failure observed is
    re-raised and no partial results are returned. Tasks already in flight
    are not cancelled; their results are simply discarded.

    Args:
        tasks: Mapping of result name -> zero-argument callable

    Returns:
        Dict[str, Any]: results keyed like `tasks`
    """
    if not tasks:
        return {}

    executor = ThreadPoolExecutor(max_workers=len(tasks))
    try:
        futures = {executor.submit(fn): name for name, fn in tasks.items()}
        done, _pending = wait(futures, return_when=FIRST_EXCEPTION)
        for future in done:
            error = future.exception()
            if error is not None:
                log.warning(f"Parallel read '{futures[future]}' failed: {error}")
                raise error
        # No failure among the finished ones: wait for the rest.
        return {name: future.result() for future, name in futures.items()}
    finally:
        executor.shutdown(wait=False)
