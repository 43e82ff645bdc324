from abc import ABC, abstractmethod

from ..models.laundry_batch import LaundryBatch
from ..value_objects.percentage import Percentage


class DirtDetector(ABC):
    """Interfaz del detector de suciedad."""
    
    @abstractmethod
    def detect_dirt_degree(self, laundry_batch: LaundryBatch) -> Percentage:
        """Mide el grado de suciedad de una carga.
        
        Args:
            laundry_batch: Carga a medir
            
        Returns:
            Porcentaje de suciedad entre 0 y 100
            
        Raises:
            DirtDetectorException: Si la medición falla
        """
        pass
