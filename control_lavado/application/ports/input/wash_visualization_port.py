"""Puerto de entrada para la visualización de resultados de simulación."""

from abc import ABC, abstractmethod
from typing import Dict, Any


class WashVisualizationPort(ABC):
    """Puerto para dibujar los resultados de una simulación de lavados."""
    
    @abstractmethod
    def plot_summary(self, summary: Dict[str, Any], output_dir: str = "./assets/plots") -> Dict[str, str]:
        """
        Crea gráficos con la distribución de códigos de error y programas.
        
        Args:
            summary: Resumen de la simulación (ver WashSimulationUseCase.summarize)
            output_dir: Directorio donde guardar los gráficos generados
            
        Returns:
            Diccionario con rutas de los archivos generados
        """
        pass
