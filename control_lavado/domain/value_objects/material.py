from enum import Enum, auto
from typing import List


class Material(Enum):
    """Representa los tipos de tejido que admite la lavadora."""
    
    WOOL = auto()
    JEANS = auto()
    COTTON = auto()
    SYNTHETIC = auto()
    DELICATE = auto()
    
    @classmethod
    def from_string(cls, material_str: str) -> 'Material':
        """Convierte una cadena de texto a un enum Material.
        
        Args:
            material_str: Cadena de texto que representa un material
            
        Returns:
            Enum Material correspondiente
            
        Raises:
            ValueError: Si la cadena no corresponde a un material válido
        """
        material_str_lower = material_str.strip().lower()
        
        if material_str_lower in ('wool', 'lana'):
            return cls.WOOL
        elif material_str_lower in ('jeans', 'vaquero'):
            return cls.JEANS
        elif material_str_lower in ('cotton', 'algodon', 'algodón'):
            return cls.COTTON
        elif material_str_lower in ('synthetic', 'syntetic', 'sintetico', 'sintético'):
            return cls.SYNTHETIC
        elif material_str_lower in ('delicate', 'delicado'):
            return cls.DELICATE
        else:
            raise ValueError(f"'{material_str}' no es un material válido")
    
    def to_string(self) -> str:
        """Convierte el enum a una representación de cadena de texto."""
        return self.name.lower()
    
    def is_delicate(self) -> bool:
        """Indica si el tejido admite menos carga que los tejidos resistentes.
        
        Returns:
            True para lana, sintéticos y delicados
        """
        return self in (Material.WOOL, Material.SYNTHETIC, Material.DELICATE)
    
    @classmethod
    def get_all_materials(cls) -> List['Material']:
        """Obtiene una lista con todos los materiales.
        
        Returns:
            Lista de enums Material
        """
        return list(cls)
