"""
Tests for the factory_method module.
"""

import pytest

from patternguide.creational.factory_method import (
    AirLogistics,
    Logistics,
    RoadLogistics,
    SeaLogistics,
    Ship,
    Transport,
    Truck,
    available_modes,
    logistics_for,
    register_logistics,
)
from patternguide.errors import InvalidArgumentError


class TestCreators:
    """Each concrete creator produces its own transport."""

    def test_road_creates_truck(self):
        assert isinstance(RoadLogistics().create_transport(), Truck)

    def test_sea_creates_ship(self):
        assert isinstance(SeaLogistics().create_transport(), Ship)

    def test_plan_delivery_uses_factory_method(self):
        assert RoadLogistics().plan_delivery("apples") == "Delivering apples by land in a box"
        assert SeaLogistics().plan_delivery("apples") == "Delivering apples by sea in a container"
        assert AirLogistics().plan_delivery("mail") == "Delivering mail by air in a cargo hold"

    def test_base_routine_works_with_any_subclass(self):
        class Bicycle(Transport):
            name = "bicycle"

            def deliver(self, cargo):
                return f"Pedalling {cargo}"

        class CourierLogistics(Logistics):
            def create_transport(self):
                return Bicycle()

        assert CourierLogistics().plan_delivery("letters") == "Pedalling letters"

    def test_abstract_creator_cannot_be_instantiated(self):
        with pytest.raises(TypeError):
            Logistics()


class TestSelector:
    """Tests for logistics_for."""

    def test_known_modes(self):
        assert available_modes() == ["air", "road", "sea"]

    @pytest.mark.parametrize("mode", ["road", "ROAD", "  Road  "])
    def test_mode_is_normalized(self, mode):
        assert isinstance(logistics_for(mode), RoadLogistics)

    def test_family_a_behaviour(self):
        assert "by sea" in logistics_for("sea").plan_delivery("oil")

    @pytest.mark.parametrize("mode", ["teleport", "", None])
    def test_unknown_mode_rejected(self, mode):
        with pytest.raises(InvalidArgumentError) as exc_info:
            logistics_for(mode)
        assert "Available" in str(exc_info.value)

    def test_invalid_argument_is_value_error(self):
        with pytest.raises(ValueError):
            logistics_for("rocket")

    def test_duplicate_registration_rejected(self):
        with pytest.raises(ValueError):

            @register_logistics("road")
            class OtherRoad(Logistics):
                def create_transport(self):
                    return Truck()
