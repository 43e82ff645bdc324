"""Fixtures compartidas por las pruebas del controlador de lavadora."""

from unittest.mock import Mock, create_autospec

import matplotlib
matplotlib.use("Agg")

import pytest

from control_lavado.domain.devices import DirtDetector, Engine, WaterPump
from control_lavado.domain.models.laundry_batch import LaundryBatch
from control_lavado.domain.models.program_configuration import ProgramConfiguration
from control_lavado.domain.services.washing_machine import WashingMachine
from control_lavado.domain.value_objects.material import Material
from control_lavado.domain.value_objects.percentage import Percentage
from control_lavado.domain.value_objects.program import Program


@pytest.fixture
def devices():
    """Dobles de los tres dispositivos colgados de un mismo padre para verificar el orden."""
    manager = Mock()
    dirt_detector = create_autospec(DirtDetector, instance=True)
    engine = create_autospec(Engine, instance=True)
    water_pump = create_autospec(WaterPump, instance=True)
    manager.attach_mock(dirt_detector, "dirt_detector")
    manager.attach_mock(engine, "engine")
    manager.attach_mock(water_pump, "water_pump")
    return manager


@pytest.fixture
def dirt_detector(devices):
    return devices.dirt_detector


@pytest.fixture
def engine(devices):
    return devices.engine


@pytest.fixture
def water_pump(devices):
    return devices.water_pump


@pytest.fixture
def washing_machine(dirt_detector, engine, water_pump):
    return WashingMachine(dirt_detector, engine, water_pump)


@pytest.fixture
def not_too_heavy_batch():
    return LaundryBatch(material_type=Material.JEANS, weight_kg=3)


@pytest.fixture
def long_program():
    return ProgramConfiguration(program=Program.LONG)


@pytest.fixture
def auto_program():
    return ProgramConfiguration(program=Program.AUTODETECT, spin=True)


@pytest.fixture
def detected_dirt(dirt_detector):
    """Hace que el detector devuelva el porcentaje indicado."""
    def _detected_dirt(value):
        dirt_detector.detect_dirt_degree.return_value = Percentage(value)
    return _detected_dirt
