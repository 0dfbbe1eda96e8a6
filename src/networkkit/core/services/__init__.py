"""Servicios: orquestan codificación, ejecución y decodificación por operación."""
