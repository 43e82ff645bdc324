from abc import ABC, abstractmethod


class Engine(ABC):
    """Interfaz del motor del tambor."""
    
    @abstractmethod
    def run_washing(self, time_in_minutes: int) -> None:
        """Hace girar el tambor en modo lavado durante el tiempo indicado.
        
        Raises:
            EngineException: Si el motor falla
        """
        pass
    
    @abstractmethod
    def spin(self) -> None:
        """Centrifuga la carga.
        
        Raises:
            EngineException: Si el motor falla
        """
        pass
