"""
Demo catalog and harness for PatternGuide.

Registers the pattern demos, runs them in isolation and captures their output
as ``DemoReport`` objects that the CLI renders.
"""

import logging
import time
from dataclasses import dataclass, field
from types import ModuleType
from typing import Any, Callable, Dict, Iterable, Iterator, List, Optional

from .config import DemoConfig
from .creational import abstract_factory, builder, factory_method, prototype, singleton
from .errors import InvalidArgumentError

logger = logging.getLogger(__name__)
demo_logger = logging.getLogger("patternguide.demo")


class Transcript:
    """Ordered output lines written by a demo."""

    def __init__(self, name: str = ""):
        self.name = name
        self._lines: List[str] = []

    def write(self, line: str = "") -> None:
        self._lines.append(str(line))
        demo_logger.debug("[%s] %s", self.name, line)

    @property
    def lines(self) -> List[str]:
        return list(self._lines)

    def __iter__(self) -> Iterator[str]:
        return iter(self._lines)

    def __len__(self) -> int:
        return len(self._lines)


@dataclass
class Demo:
    """A runnable pattern demonstration."""

    key: str
    title: str
    summary: str
    runner: Callable[[Transcript], None]
    module: Optional[ModuleType] = None
    category: str = "creational"


@dataclass
class DemoReport:
    """Outcome of running one demo."""

    key: str
    title: str
    lines: List[str] = field(default_factory=list)
    success: bool = True
    error: Optional[str] = None
    duration_seconds: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "key": self.key,
            "title": self.title,
            "success": self.success,
            "error": self.error,
            "duration_seconds": round(self.duration_seconds, 6),
            "lines": list(self.lines),
        }


class DemoCatalog:
    """Registry of demos keyed by a short, case-insensitive name."""

    def __init__(self, demos: Iterable[Demo] = ()):
        self._demos: Dict[str, Demo] = {}
        for demo in demos:
            self.register(demo)

    def register(self, demo: Demo) -> None:
        key = demo.key.lower()
        if key in self._demos:
            raise ValueError(f"Demo already registered: {key}")
        self._demos[key] = demo

    def get(self, key: str) -> Demo:
        normalized = (key or "").strip().lower()
        if normalized not in self._demos:
            raise InvalidArgumentError(f"Unknown demo: {key!r}. Available: {self.keys()}")
        return self._demos[normalized]

    def keys(self) -> List[str]:
        return list(self._demos)

    def demos(self) -> List[Demo]:
        return list(self._demos.values())

    def __contains__(self, key: str) -> bool:
        return (key or "").strip().lower() in self._demos

    def __len__(self) -> int:
        return len(self._demos)


def default_catalog() -> DemoCatalog:
    """Catalog with the five creational pattern demos, in study order."""
    return DemoCatalog(
        [
            Demo(
                key="singleton",
                title="Singleton",
                summary="One shared instance behind a single accessor; lazy, locked, "
                "double-checked, eager and metaclass variants.",
                runner=singleton.demo,
                module=singleton,
            ),
            Demo(
                key="factory-method",
                title="Factory Method",
                summary="A base routine calls an overridable creation method; subclasses "
                "pick the concrete transport.",
                runner=factory_method.demo,
                module=factory_method,
            ),
            Demo(
                key="abstract-factory",
                title="Abstract Factory",
                summary="A factory of factories producing consistent families of themed widgets.",
                runner=abstract_factory.demo,
                module=abstract_factory,
            ),
            Demo(
                key="builder",
                title="Builder",
                summary="Fluent step-wise assembly of an immutable HTTP request with validation.",
                runner=builder.demo,
                module=builder,
            ),
            Demo(
                key="prototype",
                title="Prototype",
                summary="Copy-based creation; shallow copies share nested objects, deep "
                "copies do not.",
                runner=prototype.demo,
                module=prototype,
            ),
        ]
    )


class DemoRunner:
    """Runs demos from a catalog and collects their reports."""

    def __init__(self, catalog: Optional[DemoCatalog] = None, config: Optional[DemoConfig] = None):
        self.catalog = catalog or default_catalog()
        self.config = config or DemoConfig()

    def run(self, key: str) -> DemoReport:
        """
        Run one demo.

        An exception raised by the demo is captured in the report unless
        ``stop_on_error`` is configured. Unknown keys always raise.

        Raises:
            InvalidArgumentError: If the key is not in the catalog
        """
        demo = self.catalog.get(key)
        transcript = Transcript(demo.key)
        report = DemoReport(key=demo.key, title=demo.title)

        logger.info("Running demo: %s", demo.key)
        start = time.perf_counter()
        try:
            demo.runner(transcript)
        except Exception as e:
            if self.config.stop_on_error:
                raise
            logger.error("Demo %s failed: %s", demo.key, e, exc_info=True)
            report.success = False
            report.error = f"{type(e).__name__}: {e}"
        finally:
            report.duration_seconds = time.perf_counter() - start
            report.lines = transcript.lines

        return report

    def run_many(self, keys: Iterable[str]) -> List[DemoReport]:
        # Resolve every key first so a typo fails before anything runs.
        demos = [self.catalog.get(key) for key in keys]
        return [self.run(demo.key) for demo in demos]

    def run_all(self) -> List[DemoReport]:
        """Run every demo enabled in the configuration, in catalog order."""
        enabled = {key.lower() for key in self.config.enabled_demos}
        keys = [key for key in self.catalog.keys() if key in enabled]
        skipped = enabled.difference(self.catalog.keys())
        if skipped:
            logger.warning("Ignoring unknown demos in configuration: %s", sorted(skipped))
        return self.run_many(keys)
