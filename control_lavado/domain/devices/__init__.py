"""
Interfaces de los dispositivos que controla la lavadora.

Las implementaciones reales (drivers) o simuladas se inyectan en el
controlador al construirlo.
"""

from .dirt_detector import DirtDetector
from .engine import Engine
from .water_pump import WaterPump

__all__ = ["DirtDetector", "Engine", "WaterPump"]
