"""
Prototype pattern: new objects are copies of an existing one.

``Vehicle.clone`` offers both copy flavours:

- shallow (``copy.copy``): top-level fields are copied, the ``Engine`` and the
  ``features`` list stay shared with the original
- deep (``copy.deepcopy``): nested objects are duplicated as well
"""

import copy
import logging
from dataclasses import dataclass, field
from typing import Dict, List

from ..errors import InvalidArgumentError

logger = logging.getLogger(__name__)


@dataclass
class Engine:
    horsepower: int
    cylinders: int = 4
    serial_number: str = ""

    def tune(self, delta: int) -> int:
        self.horsepower += delta
        return self.horsepower


@dataclass
class Vehicle:
    make: str
    model: str
    color: str
    engine: Engine
    features: List[str] = field(default_factory=list)

    def clone(self, deep: bool = False) -> "Vehicle":
        return copy.deepcopy(self) if deep else copy.copy(self)

    def shallow_clone(self) -> "Vehicle":
        return self.clone(deep=False)

    def deep_clone(self) -> "Vehicle":
        return self.clone(deep=True)

    def describe(self) -> str:
        extras = ", ".join(self.features) or "no extras"
        return f"{self.color} {self.make} {self.model}, {self.engine.horsepower} hp ({extras})"


class PrototypeRegistry:
    """Named prototypes that are cloned on request instead of built from scratch."""

    def __init__(self):
        self._prototypes: Dict[str, Vehicle] = {}

    def register(self, name: str, prototype: Vehicle) -> None:
        self._prototypes[name] = prototype

    def unregister(self, name: str) -> None:
        self._get(name)
        del self._prototypes[name]

    def names(self) -> List[str]:
        return sorted(self._prototypes)

    def _get(self, name: str) -> Vehicle:
        try:
            return self._prototypes[name]
        except KeyError:
            raise InvalidArgumentError(
                f"Unknown prototype: {name!r}. Available: {self.names()}"
            ) from None

    def clone(self, name: str, deep: bool = True, **overrides) -> Vehicle:
        """
        Copy a registered prototype and apply attribute overrides to the copy.

        Raises:
            InvalidArgumentError: If the name or an override attribute is unknown
        """
        duplicate = self._get(name).clone(deep=deep)
        for attribute, value in overrides.items():
            if not hasattr(duplicate, attribute):
                raise InvalidArgumentError(f"Vehicle has no attribute {attribute!r}")
            setattr(duplicate, attribute, value)
        logger.debug("Cloned prototype %s (deep=%s)", name, deep)
        return duplicate


def demo(transcript) -> None:
    transcript.write("Prototype: shallow copies share nested objects, deep copies do not")

    original = Vehicle("Volvo", "XC60", "silver", Engine(250, 4, "ENG-001"), ["sunroof"])

    shallow = original.shallow_clone()
    shallow.color = "red"
    shallow.engine.tune(50)
    transcript.write(f"  shallow copy tuned: original engine now {original.engine.horsepower} hp")
    transcript.write(f"  shallow copy repainted: original color still {original.color}")

    deep = original.deep_clone()
    deep.engine.tune(100)
    deep.features.append("tow hitch")
    transcript.write(
        f"  deep copy tuned to {deep.engine.horsepower} hp: original stays at "
        f"{original.engine.horsepower} hp with features {original.features}"
    )

    registry = PrototypeRegistry()
    registry.register("family-suv", original)
    fleet_car = registry.clone("family-suv", color="blue")
    transcript.write(f"  from registry: {fleet_car.describe()}")
