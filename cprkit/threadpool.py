"""A resizable pool of worker threads that runs submitted callables."""

from __future__ import annotations

import os
import threading
from collections import deque
from collections.abc import Callable
from concurrent.futures import Future
from datetime import timedelta
from enum import Enum
from typing import Any

DEFAULT_MIN_THREAD_NUM = 1
DEFAULT_MAX_IDLE_TIME = timedelta(milliseconds=250)


def _default_max_threads() -> int:
    return os.cpu_count() or 1


class _Status(Enum):
    STOP = "stop"
    RUNNING = "running"
    PAUSE = "pause"


class ThreadPool:
    """Worker threads that grow on demand up to a maximum and shrink back when idle.

    ``max_idle_time`` is a timedelta or a number of milliseconds; a worker that
    waits that long without work exits while more than ``min_thread_num`` remain.
    """

    def __init__(
        self,
        min_threads: int = DEFAULT_MIN_THREAD_NUM,
        max_threads: int | None = None,
        max_idle_time: timedelta | int = DEFAULT_MAX_IDLE_TIME,
    ) -> None:
        self.min_thread_num = min_threads
        self.max_thread_num = _default_max_threads() if max_threads is None else max_threads
        self.max_idle_time = max_idle_time
        self._status = _Status.STOP
        self._generation = 0
        self._cond = threading.Condition()
        self._tasks: deque[Callable[[], None]] = deque()
        self._threads: list[threading.Thread] = []
        self._retired: list[threading.Thread] = []
        self._cur = 0
        self._idle = 0

    def __enter__(self) -> ThreadPool:
        return self

    def __exit__(self, *exc_info: object) -> None:
        if not self.is_stopped():
            self.stop()

    def current_thread_num(self) -> int:
        """Number of live worker threads."""
        with self._cond:
            return self._cur

    def idle_thread_num(self) -> int:
        """Number of workers not running a task."""
        with self._cond:
            return self._idle

    def is_started(self) -> bool:
        return self._status is not _Status.STOP

    def is_stopped(self) -> bool:
        return self._status is _Status.STOP

    def start(self, start_threads: int = 0) -> None:
        """Start the pool with a thread count clamped to the configured bounds."""
        with self._cond:
            self._start_locked(start_threads)

    def stop(self) -> None:
        """Stop the pool and join every worker; queued tasks stay queued."""
        with self._cond:
            if self._status is _Status.STOP:
                raise RuntimeError("thread pool is already stopped")
            self._status = _Status.STOP
            self._generation += 1
            threads = self._threads + self._retired
            self._threads = []
            self._retired = []
            self._cur = 0
            self._idle = 0
            self._cond.notify_all()
        current = threading.current_thread()
        for thread in threads:
            if thread is not current:
                thread.join()

    def pause(self) -> None:
        """Stop handing out tasks until resumed."""
        with self._cond:
            if self._status is _Status.RUNNING:
                self._status = _Status.PAUSE

    def resume(self) -> None:
        """Hand out tasks again after a pause."""
        with self._cond:
            if self._status is _Status.PAUSE:
                self._status = _Status.RUNNING
                self._cond.notify_all()

    def wait(self) -> None:
        """Block until the queue is empty and every worker is idle, or the pool stops."""
        with self._cond:
            self._cond.wait_for(
                lambda: self._status is _Status.STOP or (not self._tasks and self._idle == self._cur)
            )

    def submit(self, fn: Callable[..., Any], *args: Any, **kwargs: Any) -> Future:
        """Queue ``fn(*args, **kwargs)``, starting the pool if needed; return its future."""
        future: Future = Future()

        def run() -> None:
            if not future.set_running_or_notify_cancel():
                return
            try:
                result = fn(*args, **kwargs)
            except BaseException as exc:
                future.set_exception(exc)
            else:
                future.set_result(result)

        with self._cond:
            if self._status is _Status.STOP:
                self._start_locked(0)
            if self._idle <= 0 and self._cur < self.max_thread_num:
                self._create_thread()
            self._tasks.append(run)
            self._cond.notify_all()
        return future

    def _start_locked(self, start_threads: int) -> None:
        if self._status is not _Status.STOP:
            raise RuntimeError("thread pool is already started")
        self._status = _Status.RUNNING
        count = min(max(start_threads, self.min_thread_num), self.max_thread_num)
        for _ in range(count):
            self._create_thread()

    def _idle_timeout(self) -> float:
        if isinstance(self.max_idle_time, timedelta):
            return self.max_idle_time.total_seconds()
        return self.max_idle_time / 1000

    def _create_thread(self) -> bool:
        if self._cur >= self.max_thread_num:
            return False
        thread = threading.Thread(
            target=self._run_worker,
            args=(self._generation,),
            name=f"ThreadPool-worker-{self._cur}",
            daemon=True,
        )
        self._threads.append(thread)
        self._cur += 1
        self._idle += 1
        thread.start()
        return True

    def _finished(self, generation: int) -> bool:
        return self._status is _Status.STOP or generation != self._generation

    def _retire(self, thread: threading.Thread) -> None:
        self._cur -= 1
        self._idle -= 1
        self._threads.remove(thread)
        self._retired = [t for t in self._retired if t.is_alive()]
        self._retired.append(thread)
        self._cond.notify_all()

    def _next_task(self, generation: int) -> Callable[[], None] | None:
        with self._cond:
            while True:
                self._cond.wait_for(
                    lambda: self._status is not _Status.PAUSE or generation != self._generation
                )
                if self._finished(generation):
                    return None
                self._cond.wait_for(
                    lambda: self._status is not _Status.RUNNING
                    or bool(self._tasks)
                    or generation != self._generation,
                    timeout=self._idle_timeout(),
                )
                if self._finished(generation):
                    return None
                if self._status is _Status.PAUSE:
                    continue
                if not self._tasks:
                    if self._cur > self.min_thread_num:
                        self._retire(threading.current_thread())
                        return None
                    continue
                self._idle -= 1
                return self._tasks.popleft()

    def _run_worker(self, generation: int) -> None:
        while (task := self._next_task(generation)) is not None:
            task()
            with self._cond:
                if generation == self._generation:
                    self._idle += 1
                    self._cond.notify_all()