from abc import ABC, abstractmethod


class WaterPump(ABC):
    """Interfaz de la bomba de agua."""
    
    @abstractmethod
    def pour(self, liters: float) -> None:
        """Llena el tambor con la cantidad de agua indicada.
        
        Raises:
            WaterPumpException: Si la bomba falla
        """
        pass
    
    @abstractmethod
    def release(self) -> None:
        """Vacía el agua del tambor.
        
        Raises:
            WaterPumpException: Si la bomba falla
        """
        pass
