"""Caso de uso para simular muchos ciclos de lavado con dispositivos simulados."""

import logging
import os
import time
from typing import Dict, Any, List, Optional

import numpy as np
import pandas as pd

from control_lavado.domain.services.wash_policy import WashPolicy
from control_lavado.domain.services.washing_machine import WashingMachine
from control_lavado.domain.value_objects.error_code import ErrorCode
from control_lavado.domain.value_objects.export_format import ExportFormat
from control_lavado.domain.value_objects.program import Program
from control_lavado.application.ports.input.simulation_data_setup_port import WashScenario
from control_lavado.application.ports.input.wash_visualization_port import WashVisualizationPort
from control_lavado.application.ports.output.wash_report_export_port import WashReportExportPort
from control_lavado.infrastructure.devices.fault_injector import FaultInjector
from control_lavado.infrastructure.devices.simulated_dirt_detector import SimulatedDirtDetector
from control_lavado.infrastructure.devices.simulated_engine import SimulatedEngine
from control_lavado.infrastructure.devices.simulated_water_pump import SimulatedWaterPump

logger = logging.getLogger(__name__)

RESULT_COLUMNS = [
    "material", "weight_kg", "requested_program", "spin", "dirt_degree",
    "error_code", "runned_program", "stage", "liters_poured",
    "minutes_washed", "spun", "execution_time"
]


class WashSimulationUseCase:
    """Caso de uso para simular ciclos de lavado y resumir sus resultados."""

    def __init__(
        self,
        report_export_service: WashReportExportPort,
        visualization_service: WashVisualizationPort,
        wash_policy: Optional[WashPolicy] = None,
        device_config: Dict[str, Any] = None
    ):
        self.report_export_service = report_export_service
        self.visualization_service = visualization_service
        self.wash_policy = wash_policy or WashPolicy()
        self.device_config = self.get_default_device_config()
        if device_config:
            self.device_config.update(device_config)
        self.rng = np.random.default_rng(self.device_config["seed"])

    @staticmethod
    def get_default_device_config() -> Dict[str, Any]:
        """Tasas de fallo por defecto de los dispositivos simulados."""
        return {
            "seed": 7,
            "pump_failure_rate": 0.05,
            "pump_unexpected_failure_rate": 0.01,
            "engine_failure_rate": 0.05,
            "engine_unexpected_failure_rate": 0.01,
            "detector_failure_rate": 0.0
        }

    def run_scenario(self, scenario: WashScenario) -> Dict[str, Any]:
        """
        Ejecuta un escenario con dispositivos simulados nuevos y recopila métricas.

        Args:
            scenario: Escenario a ejecutar

        Returns:
            Diccionario con el resultado del ciclo y el uso de los dispositivos
        """
        detector = SimulatedDirtDetector(
            dirt_degree=scenario.dirt_degree,
            fault_injector=FaultInjector(
                failure_rate=self.device_config["detector_failure_rate"],
                rng=self.rng
            )
        )
        engine = SimulatedEngine(FaultInjector(
            failure_rate=self.device_config["engine_failure_rate"],
            unexpected_failure_rate=self.device_config["engine_unexpected_failure_rate"],
            rng=self.rng
        ))
        water_pump = SimulatedWaterPump(FaultInjector(
            failure_rate=self.device_config["pump_failure_rate"],
            unexpected_failure_rate=self.device_config["pump_unexpected_failure_rate"],
            rng=self.rng
        ))
        washing_machine = WashingMachine(detector, engine, water_pump, self.wash_policy)

        start_time = time.time()
        status = washing_machine.start(scenario.batch, scenario.configuration)
        execution_time = time.time() - start_time

        return {
            "material": scenario.batch.material_type.to_string(),
            "weight_kg": scenario.batch.weight_kg,
            "requested_program": scenario.configuration.program.to_string(),
            "spin": scenario.configuration.spin,
            "dirt_degree": scenario.dirt_degree.value,
            "error_code": status.error_code.name,
            "runned_program": status.runned_program.to_string() if status.runned_program else None,
            "stage": status.stage.name,
            "liters_poured": water_pump.total_poured,
            "minutes_washed": engine.minutes_washed,
            "spun": engine.spins > 0,
            "execution_time": execution_time
        }

    def run_simulation(self, scenarios: List[WashScenario]) -> pd.DataFrame:
        """Ejecuta todos los escenarios uno tras otro y devuelve una fila por ciclo."""
        logger.info(f"Iniciando simulación de {len(scenarios)} ciclos de lavado")
        rows = [self.run_scenario(scenario) for scenario in scenarios]
        results = pd.DataFrame(rows, columns=RESULT_COLUMNS)
        logger.info(f"Simulación completada: {len(results)} ciclos")
        return results

    def summarize(self, results: pd.DataFrame) -> Dict[str, Any]:
        """
        Resume los resultados de una simulación.

        Args:
            results: DataFrame devuelto por run_simulation

        Returns:
            Diccionario con totales, tasa de éxito y distribuciones de
            códigos de error y programas ejecutados
        """
        total_cycles = len(results)
        error_counts = results["error_code"].value_counts()
        program_counts = results["runned_program"].dropna().value_counts()
        successful_cycles = int(error_counts.get(ErrorCode.NO_ERROR.name, 0))

        summary = {
            "total_cycles": total_cycles,
            "successful_cycles": successful_cycles,
            "success_rate": (successful_cycles / total_cycles * 100) if total_cycles > 0 else 0.0,
            "error_codes": {code.name: int(error_counts.get(code.name, 0)) for code in ErrorCode},
            "programs": {
                program.to_string(): int(program_counts.get(program.to_string(), 0))
                for program in Program.get_runnable_programs()
            },
            "total_liters": float(results["liters_poured"].sum()),
            "total_minutes": int(results["minutes_washed"].sum()),
            "spins": int(results["spun"].sum())
        }

        logger.info(
            f"Ciclos completados: {successful_cycles}/{total_cycles} "
            f"({summary['success_rate']:.1f}%)"
        )
        return summary

    def run_and_report(
        self,
        scenarios: List[WashScenario],
        export_format: str = "text",
        output_dir: str = "./assets/reports",
        plots_dir: str = "./assets/plots"
    ) -> Dict[str, Any]:
        """
        Simula los escenarios, exporta el informe y genera los gráficos.

        Returns:
            Diccionario con el resumen, el informe exportado (o su ruta) y las
            rutas de los gráficos

        Raises:
            ValueError: Si se pide Excel sin output_dir, ya que Excel solo se
                        puede escribir a fichero
        """
        export_format = ExportFormat.from_string(export_format) if isinstance(export_format, str) else export_format
        if export_format == ExportFormat.EXCEL and not output_dir:
            raise ValueError("El informe en Excel requiere un output_dir donde escribir el fichero")

        results = self.run_simulation(scenarios)
        summary = self.summarize(results)
        output_path = None
        if output_dir:
            os.makedirs(output_dir, exist_ok=True)
            extension = "xlsx" if export_format == ExportFormat.EXCEL else (
                "txt" if export_format == ExportFormat.TEXT else export_format.to_string()
            )
            output_path = os.path.join(output_dir, f"informe_simulacion.{extension}")

        report = self.report_export_service.export_report(results, export_format, output_path)
        plots = self.visualization_service.plot_summary(summary, output_dir=plots_dir)

        return {
            "summary": summary,
            "report": report,
            "plots": plots
        }
