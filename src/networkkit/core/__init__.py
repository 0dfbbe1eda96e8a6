"""Core: dominio, configuración, codificadores y servicios (sin I/O directo)."""
