"""A resizable pool of worker threads and the library-wide shared pool."""

from __future__ import annotations

import os
import threading
from collections import deque
from concurrent.futures import Future
from dataclasses import dataclass, field
from typing import Any, Callable

from knowhere.log import log_error, log_warning


@dataclass
class _Task:
    future: Future
    func: Callable[..., Any]
    args: tuple
    kwargs: dict

    def run(self) -> None:
        if not self.future.set_running_or_notify_cancel():
            return
        try:
            result = self.func(*self.args, **self.kwargs)
        except BaseException as exc:  # handed to whoever waits on the future
            self.future.set_exception(exc)
        else:
            self.future.set_result(result)


@dataclass
class _Worker:
    thread: threading.Thread | None = None
    stop_flag: threading.Event = field(default_factory=threading.Event)


class ThreadPool:
    """Runs submitted callables on a set of worker threads.

    Work is taken from one shared queue in submission order. The pool can be
    grown or shrunk while running, and stopped either after draining the
    queue or at once, dropping whatever has not started yet.
    """

    def __init__(self, num_threads: int = 0) -> None:
        self._cond = threading.Condition()
        self._queue: deque[_Task] = deque()
        self._workers: list[_Worker] = []
        self._is_done = False
        self._is_stop = False
        self._n_waiting = 0
        self.resize(num_threads)

    def __enter__(self) -> ThreadPool:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop(True)

    def push(self, func: Callable[..., Any], *args: Any, **kwargs: Any) -> Future:
        """Queue ``func(*args, **kwargs)`` and return a future for its result."""
        with self._cond:
            if self._is_done or self._is_stop:
                raise RuntimeError("cannot push to a stopped thread pool")
            future: Future = Future()
            self._queue.append(_Task(future, func, args, kwargs))
            self._cond.notify()
        return future

    def size(self) -> int:
        """Number of worker threads in the pool."""
        return len(self._workers)

    def n_idle(self) -> int:
        """Number of workers currently waiting for work."""
        with self._cond:
            return self._n_waiting

    def resize(self, num_threads: int) -> None:
        """Grow or shrink the pool to ``num_threads`` workers.

        Workers removed by shrinking finish the task they are running and
        then exit. Has no effect once the pool is stopped.
        """
        if num_threads < 0:
            raise ValueError("num_threads must not be negative")
        if self._is_stop or self._is_done:
            return
        old = len(self._workers)
        if num_threads >= old:
            for _ in range(num_threads - old):
                worker = _Worker()
                worker.thread = threading.Thread(target=self._work, args=(worker.stop_flag,), daemon=True)
                self._workers.append(worker)
                worker.thread.start()
            return
        for worker in self._workers[num_threads:]:
            worker.stop_flag.set()
        with self._cond:
            self._cond.notify_all()
        del self._workers[num_threads:]

    def clear_queue(self) -> None:
        """Drop every queued task that has not started; their futures are cancelled."""
        with self._cond:
            dropped = list(self._queue)
            self._queue.clear()
        for task in dropped:
            task.future.cancel()

    def stop(self, wait: bool = False) -> None:
        """Stop all workers and wait for them to exit.

        With ``wait`` the queued tasks are all run first; without it the
        queue is cleared and each worker exits after its current task.
        """
        if not wait:
            if self._is_stop:
                return
            self._is_stop = True
            for worker in self._workers:
                worker.stop_flag.set()
            self.clear_queue()
        else:
            if self._is_done or self._is_stop:
                return
            self._is_done = True
        with self._cond:
            self._cond.notify_all()
        current = threading.current_thread()
        for worker in self._workers:
            if worker.thread is not None and worker.thread is not current and worker.thread.is_alive():
                worker.thread.join()
        self.clear_queue()
        self._workers.clear()

    def _work(self, stop_flag: threading.Event) -> None:
        while True:
            with self._cond:
                self._n_waiting += 1
                self._cond.wait_for(lambda: bool(self._queue) or self._is_done or stop_flag.is_set())
                self._n_waiting -= 1
                if not self._queue:
                    return
                task = self._queue.popleft()
            task.run()
            if stop_flag.is_set():
                return


_global_pool_lock = threading.Lock()
_global_pool_size = 0
_global_pool: ThreadPool | None = None


def init_global_thread_pool(num_threads: int) -> None:
    """Set the size of the shared pool; only the first valid call has effect."""
    global _global_pool_size
    if num_threads <= 0:
        log_error("num_threads should be bigger than 0")
        return
    with _global_pool_lock:
        if _global_pool_size == 0:
            _global_pool_size = num_threads
            return
        size = _global_pool_size
    log_warning(f"Global ThreadPool has already been initialized with threads num: {size}")


def get_global_thread_pool() -> ThreadPool:
    """Return the shared pool, creating it on first use.

    If no size was set, one worker per CPU is used.
    """
    global _global_pool_size, _global_pool
    with _global_pool_lock:
        if _global_pool_size == 0:
            _global_pool_size = os.cpu_count() or 1
            log_warning(
                "Global ThreadPool has not been initialized yet, init it with threads num: "
                f"{_global_pool_size}"
            )
        if _global_pool is None:
            _global_pool = ThreadPool(_global_pool_size)
        return _global_pool