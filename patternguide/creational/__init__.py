"""
Creational design patterns.

Each module is self-contained: domain objects, the pattern mechanics and a
``demo(transcript)`` routine used by the catalog.
"""

from . import abstract_factory, builder, factory_method, prototype, singleton

__all__ = [
    "singleton",
    "factory_method",
    "abstract_factory",
    "builder",
    "prototype",
]
