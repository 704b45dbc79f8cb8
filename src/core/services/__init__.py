"""Servicios de aplicación.

- Orquestan el dominio (runner de comandos, nombres de salida, plan de exportación).
- No imprimen: la presentación vive en la CLI.
"""
