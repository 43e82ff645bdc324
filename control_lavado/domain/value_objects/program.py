from enum import Enum
from typing import List, Optional


class Program(Enum):
    """Representa los programas de lavado.
    
    Cada programa concreto lleva asociado su tiempo de lavado en minutos.
    AUTODETECT es una petición: el programa real se decide midiendo la
    suciedad de la carga.
    """
    
    LONG = "long"
    MEDIUM = "medium"
    SHORT = "short"
    AUTODETECT = "autodetect"
    
    @property
    def time_in_minutes(self) -> Optional[int]:
        """Tiempo de lavado del programa, None para AUTODETECT."""
        return _WASHING_TIMES.get(self)
    
    @classmethod
    def from_string(cls, program_str: str) -> 'Program':
        """Convierte una cadena de texto a un enum Program.
        
        Args:
            program_str: Cadena de texto que representa un programa
            
        Returns:
            Enum Program correspondiente
            
        Raises:
            ValueError: Si la cadena no corresponde a un programa válido
        """
        program_str_lower = program_str.strip().lower()
        
        for program in cls:
            if program.value == program_str_lower:
                return program
        
        if program_str_lower in ('largo',):
            return cls.LONG
        elif program_str_lower in ('medio',):
            return cls.MEDIUM
        elif program_str_lower in ('corto',):
            return cls.SHORT
        elif program_str_lower in ('auto', 'automatico', 'automático'):
            return cls.AUTODETECT
        
        raise ValueError(f"'{program_str}' no es un programa de lavado válido")
    
    def to_string(self) -> str:
        """Convierte el enum a una representación de cadena de texto."""
        return self.value
    
    def is_runnable(self) -> bool:
        """Indica si el programa se puede ejecutar directamente en el motor."""
        return self != Program.AUTODETECT
    
    @classmethod
    def get_runnable_programs(cls) -> List['Program']:
        """Obtiene los programas que el motor puede ejecutar (sin AUTODETECT)."""
        return [cls.LONG, cls.MEDIUM, cls.SHORT]


_WASHING_TIMES = {
    Program.LONG: 120,
    Program.MEDIUM: 90,
    Program.SHORT: 45,
}
