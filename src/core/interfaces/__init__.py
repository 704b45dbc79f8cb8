"""Interfaces/abstracciones del Core.

- Define contratos (Protocol) que implementan la CLI y los servicios.
- El Core depende de abstracciones, no de implementaciones concretas.
"""
