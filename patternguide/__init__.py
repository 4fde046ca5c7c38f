"""
PatternGuide - runnable demonstrations of the creational design patterns

Singleton, Factory Method, Abstract Factory, Builder and Prototype, each as a
self-contained module with a demo, plus a catalog, a harness and a CLI to
list and run them.
"""

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "DemoCatalog",
    "DemoRunner",
    "DemoReport",
    "default_catalog",
    "PatternGuideConfig",
    "load_config",
    "PatternGuideError",
    "InvalidArgumentError",
    "InvalidConfigurationError",
]


def __getattr__(name):
    """Lazy loading of the public API to keep ``import patternguide`` light."""
    if name in {"DemoCatalog", "DemoRunner", "DemoReport", "default_catalog"}:
        from . import catalog

        return getattr(catalog, name)

    if name in {"PatternGuideConfig", "load_config"}:
        from . import config

        return getattr(config, name)

    if name in {"PatternGuideError", "InvalidArgumentError", "InvalidConfigurationError"}:
        from . import errors

        return getattr(errors, name)

    raise AttributeError(f"module 'patternguide' has no attribute '{name}'")
