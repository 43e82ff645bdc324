import math
from dataclasses import dataclass, field
from numbers import Real

from control_lavado.domain.value_objects.material import Material


@dataclass(frozen=True)
class LaundryBatch:
    """Representa una carga de ropa a lavar."""
    
    material_type: Material = field(
        metadata={"description": "Tipo de tejido predominante en la carga"}
    )
    weight_kg: float = field(
        metadata={"description": "Peso de la carga en kilogramos, siempre positivo"}
    )
    
    def __post_init__(self):
        if not isinstance(self.material_type, Material):
            raise ValueError(f"Material no válido: {self.material_type!r}")
        if isinstance(self.weight_kg, bool) or not isinstance(self.weight_kg, Real):
            raise ValueError(f"El peso debe ser numérico, se recibió {self.weight_kg!r}")
        if not math.isfinite(self.weight_kg) or self.weight_kg <= 0:
            raise ValueError(f"El peso de la carga debe ser positivo, se recibió {self.weight_kg}")
