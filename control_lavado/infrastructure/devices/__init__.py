"""Dispositivos simulados en memoria para pruebas y demostraciones."""

from .simulated_dirt_detector import SimulatedDirtDetector
from .simulated_engine import SimulatedEngine
from .simulated_water_pump import SimulatedWaterPump

__all__ = ["SimulatedDirtDetector", "SimulatedEngine", "SimulatedWaterPump"]
