from typing import List, Union
import logging

from control_lavado.application.ports.input.washing_service_port import WashingServicePort
from control_lavado.domain.models.laundry_batch import LaundryBatch
from control_lavado.domain.models.laundry_status import LaundryStatus
from control_lavado.domain.models.program_configuration import ProgramConfiguration
from control_lavado.domain.services.washing_machine import WashingMachine
from control_lavado.domain.value_objects.material import Material
from control_lavado.domain.value_objects.program import Program


logger = logging.getLogger(__name__)


class WashingServiceAdapter(WashingServicePort):
    """Adaptador de entrada para el servicio de lavado.

    Implementa el puerto de entrada WashingServicePort: convierte los datos
    recibidos (enums o strings) en objetos del dominio y delega el ciclo en
    el controlador de la lavadora.
    """

    def __init__(self, washing_machine: WashingMachine):
        self.washing_machine = washing_machine

    def _convert_to_material_enum(self, material: Union[Material, str]) -> Material:
        """
        Convierte un material (string o enum) a un enum Material.

        Raises:
            ValueError: Si el material no está disponible
        """
        if isinstance(material, Material):
            return material

        try:
            return Material.from_string(material)
        except (ValueError, AttributeError):
            raise ValueError(f"Material no disponible: {material}. "
                             f"Opciones: {', '.join(self.get_available_materials())}")

    def _convert_to_program_enum(self, program: Union[Program, str]) -> Program:
        """
        Convierte un programa (string o enum) a un enum Program.

        Raises:
            ValueError: Si el programa no está disponible
        """
        if isinstance(program, Program):
            return program

        try:
            return Program.from_string(program)
        except (ValueError, AttributeError):
            raise ValueError(f"Programa no disponible: {program}. "
                             f"Opciones: {', '.join(self.get_available_programs())}")

    def start_washing(self,
                      material: Union[Material, str],
                      weight_kg: float,
                      program: Union[Program, str],
                      spin: bool = True) -> LaundryStatus:
        """Lanza un ciclo de lavado.

        Implementación del método definido en el puerto de entrada.
        """
        batch = LaundryBatch(
            material_type=self._convert_to_material_enum(material),
            weight_kg=weight_kg
        )
        configuration = ProgramConfiguration(
            program=self._convert_to_program_enum(program),
            spin=spin
        )

        logger.info(
            f"Iniciando lavado: {batch.weight_kg} kg de {batch.material_type.to_string()}, "
            f"programa {configuration.program.to_string()}, centrifugado {'sí' if spin else 'no'}"
        )
        status = self.washing_machine.start(batch, configuration)
        logger.info(f"Lavado terminado con {status.error_code.name}")
        return status

    def get_available_programs(self) -> List[str]:
        """Obtiene la lista de programas disponibles como strings."""
        return [program.to_string() for program in Program]

    def get_available_materials(self) -> List[str]:
        """Obtiene la lista de materiales admitidos como strings."""
        return [material.to_string() for material in Material.get_all_materials()]
