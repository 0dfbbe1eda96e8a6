"""Contextos de ejecución para las variantes con callback.

- El trabajo (request + decodificación) corre en un `ThreadPoolExecutor`
  compartido, creado bajo demanda.
- El callback se entrega mediante un `CallbackDispatcher`:
  - `InlineDispatcher`: en el mismo hilo de trabajo.
  - `LoopDispatcher`: en un bucle asyncio (el "hilo principal" del llamador).
"""

from __future__ import annotations

import asyncio
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Any, Callable, TypeVar

R = TypeVar("R")

_executor: ThreadPoolExecutor | None = None
_executor_workers = 0
_executor_lock = threading.Lock()


class InlineDispatcher:
    """Invoca el callback directamente en el hilo de trabajo."""

    def dispatch(self, callback: Callable[..., Any], *args: Any) -> None:
        callback(*args)


class LoopDispatcher:
    """Programa el callback en `loop` (thread-safe)."""

    def __init__(self, loop: asyncio.AbstractEventLoop) -> None:
        self._loop = loop

    @classmethod
    def current(cls) -> "LoopDispatcher":
        """Dispatcher ligado al bucle asyncio en ejecución."""

        return cls(asyncio.get_running_loop())

    def dispatch(self, callback: Callable[..., Any], *args: Any) -> None:
        self._loop.call_soon_threadsafe(callback, *args)


def _current_pool(max_workers: int) -> ThreadPoolExecutor:
    # Llamar con `_executor_lock` tomado.
    global _executor, _executor_workers
    if _executor is None or _executor_workers != max_workers:
        previous = _executor
        _executor = ThreadPoolExecutor(
            max_workers=max_workers,
            thread_name_prefix="networkkit",
        )
        _executor_workers = max_workers
        if previous is not None:
            previous.shutdown(wait=False)
    return _executor


def background_executor(max_workers: int) -> ThreadPoolExecutor:
    """Pool compartido de `max_workers` hilos.

    Si `max_workers` cambia respecto al pool vigente, se crea uno nuevo; el
    anterior termina los trabajos ya enviados y se cierra.
    """

    with _executor_lock:
        return _current_pool(max_workers)


def submit_background(max_workers: int, fn: Callable[[], R]) -> "Future[R]":
    """Envía `fn` al pool compartido sin competir con un cambio de tamaño."""

    with _executor_lock:
        return _current_pool(max_workers).submit(fn)


def shutdown_background_executor(wait: bool = True) -> None:
    """Cierra el pool (se vuelve a crear en el siguiente uso)."""

    global _executor
    with _executor_lock:
        executor, _executor = _executor, None
    if executor is not None:
        executor.shutdown(wait=wait)
