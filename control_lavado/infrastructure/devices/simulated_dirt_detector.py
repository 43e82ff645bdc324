from typing import List, Optional, Tuple, Any

import numpy as np

from ...domain.devices.dirt_detector import DirtDetector
from ...domain.exceptions import DirtDetectorException
from ...domain.models.laundry_batch import LaundryBatch
from ...domain.value_objects.percentage import Percentage
from .fault_injector import FaultInjector


class SimulatedDirtDetector(DirtDetector):
    """Detector de suciedad en memoria.
    
    Devuelve un grado de suciedad fijo o, si no se indica, uno aleatorio
    uniforme entre 0 y 100.
    """
    
    def __init__(self, dirt_degree: Optional[Percentage] = None,
                 fault_injector: Optional[FaultInjector] = None,
                 rng: Optional[np.random.Generator] = None):
        self.dirt_degree = dirt_degree
        self.fault_injector = fault_injector or FaultInjector()
        self.rng = rng if rng is not None else np.random.default_rng()
        self.calls: List[Tuple[str, Tuple[Any, ...]]] = []
    
    def detect_dirt_degree(self, laundry_batch: LaundryBatch) -> Percentage:
        self.calls.append(("detect_dirt_degree", (laundry_batch,)))
        self.fault_injector.check("detector", "detect_dirt_degree", DirtDetectorException)
        
        if self.dirt_degree is not None:
            return self.dirt_degree
        return Percentage(round(float(self.rng.uniform(0, 100)), 1))
