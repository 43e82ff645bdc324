import math
from numbers import Real
from typing import Dict, Any

from control_lavado.domain.models.laundry_batch import LaundryBatch
from control_lavado.domain.value_objects.material import Material
from control_lavado.domain.value_objects.percentage import Percentage
from control_lavado.domain.value_objects.program import Program


class WashPolicy:
    """Constantes de política de la lavadora y los cálculos que dependen de ellas.

    Reúne los umbrales de peso por material, el factor de agua por kilo y los
    umbrales de suciedad que deciden el programa en modo AUTODETECT.
    """

    def __init__(self, config: Dict[str, Any] = None):
        defaults = self.get_default_config()
        if config:
            defaults.update(config)
        self._validate_config(defaults)
        self.config = defaults

    @staticmethod
    def get_default_config() -> Dict[str, Any]:
        return {
            "max_weight_kg": 8.0,
            "delicate_weight_ratio": 0.5,  # Los tejidos delicados admiten la mitad de carga
            "water_liters_per_kg": 10.0,
            "long_program_threshold": 60.0,
            "medium_program_threshold": 20.0
        }

    def _validate_config(self, config: Dict[str, Any]) -> None:
        for key in self.get_default_config():
            value = config[key]
            if isinstance(value, bool) or not isinstance(value, Real) or not math.isfinite(value):
                raise ValueError(f"{key} debe ser un número finito, se recibió {value!r}")
        if config["max_weight_kg"] <= 0:
            raise ValueError(f"max_weight_kg debe ser positivo, se recibió {config['max_weight_kg']}")
        if not 0 < config["delicate_weight_ratio"] <= 1:
            raise ValueError(
                f"delicate_weight_ratio debe estar en (0, 1], se recibió {config['delicate_weight_ratio']}"
            )
        if config["water_liters_per_kg"] <= 0:
            raise ValueError(
                f"water_liters_per_kg debe ser positivo, se recibió {config['water_liters_per_kg']}"
            )

        long_threshold = config["long_program_threshold"]
        medium_threshold = config["medium_program_threshold"]
        for name, threshold in (("long_program_threshold", long_threshold),
                                ("medium_program_threshold", medium_threshold)):
            if not 0 <= threshold <= 100:
                raise ValueError(f"{name} debe estar entre 0 y 100, se recibió {threshold}")
        if medium_threshold > long_threshold:
            raise ValueError(
                f"El umbral del programa medio ({medium_threshold}) no puede superar "
                f"al del programa largo ({long_threshold})"
            )

    def max_weight_for(self, material: Material) -> float:
        """Peso máximo admitido para un material, en kilogramos."""
        max_weight = self.config["max_weight_kg"]
        if material.is_delicate():
            return max_weight * self.config["delicate_weight_ratio"]
        return max_weight

    def is_overweight(self, laundry_batch: LaundryBatch) -> bool:
        """El peso máximo del material se admite; solo lo que lo supera es sobrepeso."""
        return laundry_batch.weight_kg > self.max_weight_for(laundry_batch.material_type)

    def water_amount(self, laundry_batch: LaundryBatch) -> float:
        """Litros de agua que hay que verter para la carga."""
        return laundry_batch.weight_kg * self.config["water_liters_per_kg"]

    def program_for_dirt(self, dirt_degree: Percentage) -> Program:
        """Elige el programa según el grado de suciedad medido.

        Args:
            dirt_degree: Porcentaje de suciedad devuelto por el detector

        Returns:
            LONG a partir del umbral largo, MEDIUM a partir del umbral medio,
            SHORT por debajo
        """
        if dirt_degree.value >= self.config["long_program_threshold"]:
            return Program.LONG
        elif dirt_degree.value >= self.config["medium_program_threshold"]:
            return Program.MEDIUM
        return Program.SHORT
