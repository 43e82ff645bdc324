from enum import Enum
from typing import List


class ExportFormat(Enum):
    """Formatos en los que se puede exportar el informe de una simulación."""
    
    TEXT = "text"
    CSV = "csv"
    JSON = "json"
    EXCEL = "excel"
    
    @classmethod
    def from_string(cls, format_str: str) -> 'ExportFormat':
        """Convierte una cadena de texto a un enum ExportFormat.
        
        Raises:
            ValueError: Si la cadena no corresponde a un formato válido
        """
        try:
            return cls(format_str.strip().lower())
        except ValueError:
            raise ValueError(f"'{format_str}' no es un formato de exportación válido")
    
    def to_string(self) -> str:
        return self.value
    
    @classmethod
    def get_all_formats(cls) -> List['ExportFormat']:
        return list(cls)
