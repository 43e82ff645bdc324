from typing import List, Optional, Tuple, Any

from ...domain.devices.water_pump import WaterPump
from ...domain.exceptions import WaterPumpException
from .fault_injector import FaultInjector


class SimulatedWaterPump(WaterPump):
    """Bomba de agua en memoria que lleva la cuenta del agua en el tambor."""
    
    def __init__(self, fault_injector: Optional[FaultInjector] = None):
        self.fault_injector = fault_injector or FaultInjector()
        self.calls: List[Tuple[str, Tuple[Any, ...]]] = []
        self.water_level = 0.0
        self.total_poured = 0.0
    
    def pour(self, liters: float) -> None:
        self.calls.append(("pour", (liters,)))
        if liters < 0:
            raise ValueError(f"No se puede verter una cantidad negativa de agua: {liters}")
        self.fault_injector.check("water_pump", "pour", WaterPumpException)
        self.water_level += liters
        self.total_poured += liters
    
    def release(self) -> None:
        self.calls.append(("release", ()))
        self.fault_injector.check("water_pump", "release", WaterPumpException)
        self.water_level = 0.0
