"""Módulo principal para el sistema de control de lavadora."""

# Para facilitar los imports
from .domain.models.laundry_batch import LaundryBatch
from .domain.models.program_configuration import ProgramConfiguration
from .domain.models.laundry_status import LaundryStatus
# Imports de value_objects
from .domain.value_objects.material import Material
from .domain.value_objects.program import Program
from .domain.value_objects.error_code import ErrorCode, Result
from .domain.value_objects.percentage import Percentage
from .domain.value_objects.wash_stage import WashStage
# Dispositivos y excepciones
from .domain.devices import DirtDetector, Engine, WaterPump
from .domain.exceptions import DeviceException, DirtDetectorException, EngineException, WaterPumpException
# Services
from .domain.services.wash_policy import WashPolicy
from .domain.services.washing_machine import WashingMachine
