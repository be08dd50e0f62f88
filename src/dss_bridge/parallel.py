# src/dss_bridge/parallel.py
"""
Runs many independent scenarios on a pool of engine contexts.

A shared queue of inputs is drained by N worker threads. Each worker owns one
`DSSContext` for its whole life: it creates the context, runs the optional
setup callable once (loading a base circuit, redirecting output, ...) and then
evaluates one scenario per input it takes from the queue. Contexts are never
shared between threads, so engine calls from different workers run in
parallel without any locking beyond the per-context call guard.

Per-scenario engine and marshaling failures are captured as failed
`OperationResult`s and do not stop the run. A failing `setup` is a programming
or configuration error and is re-raised once all workers have finished.
"""
import logging
import os
import queue
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Callable, List, Optional, Sequence, TypeVar

from .api.dss import IDSS
from .config.settings import BindingConfig
from .context import DSSContext, OperationResult
from .native.library import NativeLibrary, load_library

logger = logging.getLogger(__name__)

T = TypeVar("T")

Worker = Callable[[IDSS, Any], T]
Setup = Callable[[IDSS], None]


def _default_num_workers(n_inputs: int) -> int:
    return max(1, min(n_inputs, os.cpu_count() or 1))


def _drain(
    worker_id: int,
    tasks: "queue.Queue",
    results: List[Optional[OperationResult]],
    library: NativeLibrary,
    config: BindingConfig,
    worker: Worker,
    setup: Optional[Setup],
) -> int:
    """Body of one worker thread; returns the number of scenarios it evaluated."""
    done = 0
    with IDSS(DSSContext.new(library)) as engine:
        engine.apply_config(config)
        # Workers share the process working directory.
        engine.allow_change_dir = False
        if setup is not None:
            setup(engine)
        logger.debug(f"Worker {worker_id} ready on {engine.context!r}.")
        while True:
            try:
                index, item = tasks.get_nowait()
            except queue.Empty:
                break
            results[index] = engine.context.attempt(worker, engine, item)
            if not results[index].ok:
                logger.debug(f"Worker {worker_id}: scenario {index} failed: {results[index].error}")
            done += 1
    logger.debug(f"Worker {worker_id} finished after {done} scenario(s).")
    return done


def run_parallel(
    inputs: Sequence[Any],
    worker: Worker,
    *,
    setup: Optional[Setup] = None,
    num_workers: Optional[int] = None,
    config: Optional[BindingConfig] = None,
    library: Optional[NativeLibrary] = None,
) -> List[OperationResult]:
    """
    Evaluates `worker(engine, item)` for every item of `inputs` on a pool of contexts.

    Args:
        inputs: Scenario descriptions; any objects understood by `worker`.
        worker: Called with a worker-owned `IDSS` and one input. Its return
            value becomes the `value` of the corresponding result.
        setup: Called once per worker, with its `IDSS`, before any scenario.
        num_workers: Number of threads (and contexts). Defaults to
            `config.num_workers`, then to the CPU count, capped by len(inputs).
        config: Library location and engine options for every worker context.
        library: An already-loaded library; overrides `config.library`.

    Returns:
        One `OperationResult` per input, in input order.

    Raises:
        Any exception raised by `setup` or by context creation in a worker.
    """
    items = list(inputs)
    if not items:
        return []
    config = config if config is not None else BindingConfig()
    if library is None:
        library = load_library(config.library.path, debug=config.library.debug)
    n_workers = num_workers or config.num_workers or _default_num_workers(len(items))
    n_workers = min(n_workers, len(items))

    tasks: "queue.Queue" = queue.Queue()
    for index, item in enumerate(items):
        tasks.put((index, item))
    results: List[Optional[OperationResult]] = [None] * len(items)

    logger.info(f"Running {len(items)} scenario(s) on {n_workers} worker context(s).")
    errors = []
    with ThreadPoolExecutor(max_workers=n_workers, thread_name_prefix="dss_bridge") as executor:
        futures = [
            executor.submit(_drain, worker_id, tasks, results, library, config, worker, setup)
            for worker_id in range(n_workers)
        ]
        for worker_id, future in enumerate(futures):
            try:
                future.result()
            except Exception as e:
                logger.error(f"Worker {worker_id} failed: {e}")
                errors.append(e)
    if errors:
        raise errors[0]
    return results
