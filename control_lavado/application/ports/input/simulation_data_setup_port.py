"""Puerto de entrada para la generación de escenarios de simulación."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, Any, List

from control_lavado.domain.models.laundry_batch import LaundryBatch
from control_lavado.domain.models.program_configuration import ProgramConfiguration
from control_lavado.domain.value_objects.percentage import Percentage


@dataclass(frozen=True)
class WashScenario:
    """Carga, configuración y suciedad real de un ciclo simulado."""
    batch: LaundryBatch
    configuration: ProgramConfiguration
    dirt_degree: Percentage


class SimulationDataSetupPort(ABC):
    """Puerto para generar escenarios de lavado de prueba."""
    
    @abstractmethod
    def generate_scenarios(self, config: Dict[str, Any] = None) -> List[WashScenario]:
        """
        Genera una lista de escenarios de lavado.
        
        Args:
            config: Configuración opcional con parámetros para la generación
            
        Returns:
            Lista de escenarios
        """
        pass
    
    @abstractmethod
    def get_default_config(self) -> Dict[str, Any]:
        """
        Obtiene la configuración por defecto para la generación de escenarios.
        
        Returns:
            Diccionario con la configuración por defecto
        """
        pass
