"""Caso de uso para generar escenarios de lavado de prueba."""

import numpy as np
import logging
from typing import Dict, Any, List

from control_lavado.domain.models.laundry_batch import LaundryBatch
from control_lavado.domain.models.program_configuration import ProgramConfiguration
from control_lavado.domain.value_objects.material import Material
from control_lavado.domain.value_objects.percentage import Percentage
from control_lavado.domain.value_objects.program import Program
from control_lavado.application.ports.input.simulation_data_setup_port import SimulationDataSetupPort, WashScenario

logger = logging.getLogger(__name__)


class SetupSimulationDataUseCase(SimulationDataSetupPort):
    """Implementación del caso de uso para generar escenarios de lavado."""

    def get_default_config(self) -> Dict[str, Any]:
        """Obtiene la configuración por defecto para la generación de escenarios."""
        return {
            "NUM_SCENARIOS": 50,
            "SEED": 42,
            "MIN_WEIGHT_KG": 0.5,
            "MAX_WEIGHT_KG": 10.0,  # Por encima del máximo de la lavadora para generar sobrepesos
            "AUTODETECT_PROBABILITY": 0.4,
            "SPIN_PROBABILITY": 0.8
        }

    def generate_scenarios(self, config: Dict[str, Any] = None) -> List[WashScenario]:
        """Genera escenarios con materiales, pesos, programas y suciedad aleatorios."""
        defaults = self.get_default_config()
        if config:
            defaults.update(config)
        config = defaults

        # Extraer configuración
        NUM_SCENARIOS = config.get("NUM_SCENARIOS", 50)
        SEED = config.get("SEED", 42)
        MIN_WEIGHT_KG = config.get("MIN_WEIGHT_KG", 0.5)
        MAX_WEIGHT_KG = config.get("MAX_WEIGHT_KG", 10.0)
        AUTODETECT_PROBABILITY = config.get("AUTODETECT_PROBABILITY", 0.4)
        SPIN_PROBABILITY = config.get("SPIN_PROBABILITY", 0.8)

        if NUM_SCENARIOS < 0:
            raise ValueError(f"NUM_SCENARIOS no puede ser negativo, se recibió {NUM_SCENARIOS}")
        if not 0 < MIN_WEIGHT_KG <= MAX_WEIGHT_KG:
            raise ValueError(
                f"Rango de pesos no válido: [{MIN_WEIGHT_KG}, {MAX_WEIGHT_KG}]"
            )

        rng = np.random.default_rng(SEED)
        materials = Material.get_all_materials()
        programs = Program.get_runnable_programs()

        scenarios = []
        for _ in range(NUM_SCENARIOS):
            material = materials[rng.integers(len(materials))]
            weight_kg = round(float(rng.uniform(MIN_WEIGHT_KG, MAX_WEIGHT_KG)), 1)

            if rng.random() < AUTODETECT_PROBABILITY:
                program = Program.AUTODETECT
            else:
                program = programs[rng.integers(len(programs))]
            spin = bool(rng.random() < SPIN_PROBABILITY)
            dirt_degree = Percentage(round(float(rng.uniform(0, 100)), 1))

            scenarios.append(WashScenario(
                batch=LaundryBatch(material_type=material, weight_kg=weight_kg),
                configuration=ProgramConfiguration(program=program, spin=spin),
                dirt_degree=dirt_degree
            ))

        logger.info(f"Generados {len(scenarios)} escenarios de lavado (semilla {SEED})")
        return scenarios
