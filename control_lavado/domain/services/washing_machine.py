import logging
from typing import Optional

from control_lavado.domain.devices.dirt_detector import DirtDetector
from control_lavado.domain.devices.engine import Engine
from control_lavado.domain.devices.water_pump import WaterPump
from control_lavado.domain.exceptions import EngineException, WaterPumpException
from control_lavado.domain.models.laundry_batch import LaundryBatch
from control_lavado.domain.models.laundry_status import LaundryStatus
from control_lavado.domain.models.program_configuration import ProgramConfiguration
from control_lavado.domain.services.wash_policy import WashPolicy
from control_lavado.domain.value_objects.error_code import ErrorCode
from control_lavado.domain.value_objects.percentage import Percentage
from control_lavado.domain.value_objects.program import Program
from control_lavado.domain.value_objects.wash_stage import WashStage

logger = logging.getLogger(__name__)


class WashingMachine:
    """Controlador de un ciclo de lavado.

    Valida la carga, decide el programa (midiendo la suciedad si se pide
    AUTODETECT) y maneja los dispositivos en orden estricto: llenado, lavado,
    vaciado y centrifugado opcional. Nunca lanza excepciones a quien lo
    llama: cualquier fallo termina en un LaundryStatus con su código de error.
    """

    def __init__(
        self,
        dirt_detector: DirtDetector,
        engine: Engine,
        water_pump: WaterPump,
        wash_policy: Optional[WashPolicy] = None
    ):
        self.dirt_detector = dirt_detector
        self.engine = engine
        self.water_pump = water_pump
        self.wash_policy = wash_policy or WashPolicy()

    def start(self, laundry_batch: LaundryBatch, program_configuration: ProgramConfiguration) -> LaundryStatus:
        """Ejecuta un ciclo de lavado completo.

        Args:
            laundry_batch: Carga a lavar
            program_configuration: Programa solicitado y si se centrifuga

        Returns:
            LaundryStatus con NO_ERROR y el programa ejecutado, o con el
            código de error y la etapa en la que se detuvo el ciclo
        """
        self._enter(WashStage.IDLE)
        stage = self._enter(WashStage.VALIDATING)
        if self.wash_policy.is_overweight(laundry_batch):
            logger.warning(
                f"Carga rechazada: {laundry_batch.weight_kg} kg de {laundry_batch.material_type.to_string()} "
                f"supera el máximo de {self.wash_policy.max_weight_for(laundry_batch.material_type)} kg"
            )
            self._enter(WashStage.REJECTED)
            return LaundryStatus.error(ErrorCode.TOO_HEAVY, WashStage.REJECTED)

        try:
            if program_configuration.is_autodetect():
                stage = self._enter(WashStage.DETECTING)
            program = self._establish_program(laundry_batch, program_configuration)

            stage = self._enter(WashStage.POURING)
            self.water_pump.pour(self.wash_policy.water_amount(laundry_batch))

            stage = self._enter(WashStage.WASHING)
            self.engine.run_washing(program.time_in_minutes)

            stage = self._enter(WashStage.RELEASING)
            self.water_pump.release()

            if program_configuration.spin:
                stage = self._enter(WashStage.SPINNING)
                self.engine.spin()
        except WaterPumpException as e:
            logger.error(f"Fallo de la bomba de agua en la etapa {stage.name}: {e}")
            return LaundryStatus.error(ErrorCode.WATER_PUMP_FAILURE, stage)
        except EngineException as e:
            logger.error(f"Fallo del motor en la etapa {stage.name}: {e}")
            return LaundryStatus.error(ErrorCode.ENGINE_FAILURE, stage)
        except Exception:
            logger.exception(f"Error desconocido en la etapa {stage.name}")
            return LaundryStatus.error(ErrorCode.UNKNOWN_ERROR, stage)

        self._enter(WashStage.DONE)
        logger.info(f"Lavado completado con el programa {program.to_string()}")
        return LaundryStatus.success(program)

    def _establish_program(self, laundry_batch: LaundryBatch,
                           program_configuration: ProgramConfiguration) -> Program:
        if not program_configuration.is_autodetect():
            return program_configuration.program

        dirt_degree = self.dirt_detector.detect_dirt_degree(laundry_batch)
        if not isinstance(dirt_degree, Percentage):
            raise TypeError(f"El detector devolvió {dirt_degree!r} en lugar de un Percentage")

        program = self.wash_policy.program_for_dirt(dirt_degree)
        logger.info(f"Suciedad detectada: {dirt_degree}, programa seleccionado: {program.to_string()}")
        return program

    def _enter(self, stage: WashStage) -> WashStage:
        if stage.is_terminal():
            logger.debug(f"Ciclo terminado en la etapa {stage.name}")
        else:
            logger.debug(f"Etapa del ciclo: {stage.name}")
        return stage
