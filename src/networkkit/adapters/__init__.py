"""Adaptadores de I/O: httpx, sistema de ficheros, Pillow e hilos."""
