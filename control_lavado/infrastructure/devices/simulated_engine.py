from typing import List, Optional, Tuple, Any

from ...domain.devices.engine import Engine
from ...domain.exceptions import EngineException
from .fault_injector import FaultInjector


class SimulatedEngine(Engine):
    """Motor en memoria que registra los minutos lavados y los centrifugados."""
    
    def __init__(self, fault_injector: Optional[FaultInjector] = None):
        self.fault_injector = fault_injector or FaultInjector()
        self.calls: List[Tuple[str, Tuple[Any, ...]]] = []
        self.minutes_washed = 0
        self.spins = 0
    
    def run_washing(self, time_in_minutes: int) -> None:
        self.calls.append(("run_washing", (time_in_minutes,)))
        self.fault_injector.check("engine", "run_washing", EngineException)
        self.minutes_washed += time_in_minutes
    
    def spin(self) -> None:
        self.calls.append(("spin", ()))
        self.fault_injector.check("engine", "spin", EngineException)
        self.spins += 1
