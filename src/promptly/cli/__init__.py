"""CLI de diagnóstico (Typer + Rich). No forma parte de la API del SDK."""
