"""Contrato del contexto donde se invocan los callbacks."""

from __future__ import annotations

from typing import Any, Callable, Protocol, runtime_checkable


@runtime_checkable
class CallbackDispatcher(Protocol):
    """Entrega el resultado de un request al código del llamador.

    Las implementaciones deciden en qué hilo/bucle corre `callback`; el
    request en sí siempre se ejecuta en segundo plano.
    """

    def dispatch(self, callback: Callable[..., Any], *args: Any) -> None:
        ...
