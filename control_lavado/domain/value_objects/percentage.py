from dataclasses import dataclass, field
from numbers import Real


@dataclass(frozen=True, order=True)
class Percentage:
    """Grado de suciedad devuelto por el detector, en el rango [0, 100]."""
    
    value: float = field(
        metadata={"description": "Valor porcentual entre 0 y 100"}
    )
    
    def __post_init__(self):
        if isinstance(self.value, bool) or not isinstance(self.value, Real):
            raise ValueError(f"El porcentaje debe ser numérico, se recibió {self.value!r}")
        if not 0 <= self.value <= 100:
            raise ValueError(f"El porcentaje debe estar entre 0 y 100, se recibió {self.value}")
    
    def __str__(self) -> str:
        return f"{self.value:g}%"
