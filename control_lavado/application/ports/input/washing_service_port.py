from abc import ABC, abstractmethod
from typing import List, Union

from control_lavado.domain.models.laundry_status import LaundryStatus
from control_lavado.domain.value_objects.material import Material
from control_lavado.domain.value_objects.program import Program


class WashingServicePort(ABC):
    """Puerto de entrada para lanzar ciclos de lavado.
    
    Define la interfaz que los adaptadores de entrada utilizarán para
    interactuar con el controlador de la lavadora.
    """
    
    @abstractmethod
    def start_washing(self,
                      material: Union[Material, str],
                      weight_kg: float,
                      program: Union[Program, str],
                      spin: bool = True) -> LaundryStatus:
        """Lanza un ciclo de lavado.
        
        Args:
            material: Material de la carga como enum Material o string
            weight_kg: Peso de la carga en kilogramos
            program: Programa como enum Program o string
            spin: Si se centrifuga al final del ciclo
            
        Returns:
            Estado final del ciclo
            
        Raises:
            ValueError: Si el material, el programa o el peso no son válidos
        """
        pass
    
    @abstractmethod
    def get_available_programs(self) -> List[str]:
        """Obtiene la lista de programas disponibles como strings."""
        pass
    
    @abstractmethod
    def get_available_materials(self) -> List[str]:
        """Obtiene la lista de materiales admitidos como strings."""
        pass
