"""CLI de diagnóstico (Typer + Rich)."""
