"""Interfaces/abstracciones del Core.

Por qué:
- Define contratos (Protocol) que implementan adaptadores concretos.
- Las capacidades opcionales del host (códec de imágenes, contexto de
  ejecución de callbacks) se inyectan sin acoplar el Core a ellas.
"""

from networkkit.core.interfaces.dispatcher import CallbackDispatcher
from networkkit.core.interfaces.image_encoder import ImageEncoder

__all__ = ["CallbackDispatcher", "ImageEncoder"]
