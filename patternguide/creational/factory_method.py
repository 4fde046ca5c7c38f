"""
Factory Method pattern: subclasses decide which product to create.

``Logistics.plan_delivery`` works only with the ``Transport`` interface; the
concrete creator's ``create_transport`` picks the actual vehicle.
"""

import logging
from abc import ABC, abstractmethod
from typing import Callable, Dict, List, Type

from ..errors import InvalidArgumentError

logger = logging.getLogger(__name__)


class Transport(ABC):
    """Product interface shared by every means of delivery."""

    name: str = "transport"

    @abstractmethod
    def deliver(self, cargo: str) -> str:
        ...


class Truck(Transport):
    name = "truck"

    def deliver(self, cargo: str) -> str:
        return f"Delivering {cargo} by land in a box"


class Ship(Transport):
    name = "ship"

    def deliver(self, cargo: str) -> str:
        return f"Delivering {cargo} by sea in a container"


class Airplane(Transport):
    name = "airplane"

    def deliver(self, cargo: str) -> str:
        return f"Delivering {cargo} by air in a cargo hold"


class Logistics(ABC):
    """Creator: holds the business routine and defers product choice to subclasses."""

    mode: str = ""

    @abstractmethod
    def create_transport(self) -> Transport:
        """The factory method."""
        ...

    def plan_delivery(self, cargo: str) -> str:
        transport = self.create_transport()
        logger.debug("%s created %s", type(self).__name__, transport.name)
        return transport.deliver(cargo)


_REGISTRY: Dict[str, Type[Logistics]] = {}


def register_logistics(mode: str) -> Callable[[Type[Logistics]], Type[Logistics]]:
    """Class decorator that makes a creator selectable by ``logistics_for``."""

    def decorator(cls: Type[Logistics]) -> Type[Logistics]:
        key = mode.strip().lower()
        if key in _REGISTRY:
            raise ValueError(f"Logistics mode already registered: {key}")
        cls.mode = key
        _REGISTRY[key] = cls
        return cls

    return decorator


@register_logistics("road")
class RoadLogistics(Logistics):
    def create_transport(self) -> Transport:
        return Truck()


@register_logistics("sea")
class SeaLogistics(Logistics):
    def create_transport(self) -> Transport:
        return Ship()


@register_logistics("air")
class AirLogistics(Logistics):
    def create_transport(self) -> Transport:
        return Airplane()


def available_modes() -> List[str]:
    return sorted(_REGISTRY)


def logistics_for(mode: str) -> Logistics:
    """
    Return the creator for a delivery mode.

    Args:
        mode: Mode name, case-insensitive ("road", "sea", "air")

    Raises:
        InvalidArgumentError: If the mode is empty or unknown
    """
    key = (mode or "").strip().lower()
    if key not in _REGISTRY:
        raise InvalidArgumentError(
            f"Unknown logistics mode: {mode!r}. Available: {available_modes()}"
        )
    return _REGISTRY[key]()


def demo(transcript) -> None:
    transcript.write("Factory Method: the creator picks the transport")
    for mode in available_modes():
        logistics = logistics_for(mode)
        transcript.write(f"  {type(logistics).__name__}: {logistics.plan_delivery('10 crates')}")

    try:
        logistics_for("teleport")
    except InvalidArgumentError as e:
        transcript.write(f"  rejected: {e}")
