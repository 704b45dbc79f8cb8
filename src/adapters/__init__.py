"""Adaptadores de infraestructura (escritura de ficheros)."""
