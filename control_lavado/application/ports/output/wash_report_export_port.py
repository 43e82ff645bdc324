from abc import ABC, abstractmethod
from typing import List, Union

import pandas as pd

from control_lavado.domain.value_objects.export_format import ExportFormat


class WashReportExportPort(ABC):
    """Puerto de salida para exportar el informe de una simulación.
    
    Define la interfaz que los adaptadores de salida utilizarán para exportar
    los resultados de los ciclos simulados a diferentes formatos.
    """
    
    @abstractmethod
    def export_report(self, results: pd.DataFrame, export_format: Union[ExportFormat, str],
                      output_path: str = None) -> str:
        """Exporta los resultados de una simulación a un formato específico.
        
        Args:
            results: Una fila por ciclo simulado
            export_format: Formato de exportación como enum ExportFormat o string
                           (text, csv, json, excel)
            output_path: Ruta del fichero de salida; sin ruta se devuelve el contenido
            
        Returns:
            El contenido exportado o la ruta del fichero escrito
            
        Raises:
            ValueError: Si el formato no está soportado
        """
        pass
    
    @abstractmethod
    def get_supported_formats(self) -> List[str]:
        """Obtiene la lista de formatos de exportación soportados."""
        pass
