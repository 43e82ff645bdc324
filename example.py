#!/usr/bin/env python
"""
Ejemplo de uso del sistema de control de lavadora.

Este script conecta el controlador con dispositivos simulados, lanza un
lavado de ejemplo y abre la interfaz de consola para lanzar más lavados o
simular muchos ciclos con fallos aleatorios de los dispositivos.
"""

import logging

# Importar componentes del dominio
from control_lavado.domain.services.wash_policy import WashPolicy
from control_lavado.domain.services.washing_machine import WashingMachine

# Importar adaptadores y casos de uso
from control_lavado.application.usecases.setup_simulation_data_usecase import SetupSimulationDataUseCase
from control_lavado.application.usecases.wash_simulation_usecase import WashSimulationUseCase
from control_lavado.infrastructure.devices import SimulatedDirtDetector, SimulatedEngine, SimulatedWaterPump
from control_lavado.infrastructure.adapters.input.washing_service_adapter import WashingServiceAdapter
from control_lavado.infrastructure.adapters.input.cli_interface_adapter import CLIInterfaceAdapter
from control_lavado.infrastructure.adapters.output.wash_report_export_adapter import WashReportExportAdapter
from control_lavado.infrastructure.adapters.output.wash_visualization_adapter import WashVisualizationAdapter

def main():
    """Función principal del ejemplo."""
    # 1. Crear la política y el controlador con dispositivos simulados
    wash_policy = WashPolicy()
    washing_machine = WashingMachine(
        dirt_detector=SimulatedDirtDetector(),
        engine=SimulatedEngine(),
        water_pump=SimulatedWaterPump(),
        wash_policy=wash_policy
    )

    # 2. Crear adaptadores de entrada y salida
    washing_service = WashingServiceAdapter(washing_machine=washing_machine)
    report_export_adapter = WashReportExportAdapter()
    visualization_adapter = WashVisualizationAdapter()

    # 3. Instanciar casos de uso con sus dependencias
    simulation_data_usecase = SetupSimulationDataUseCase()
    wash_simulation_usecase = WashSimulationUseCase(
        report_export_service=report_export_adapter,
        visualization_service=visualization_adapter,
        wash_policy=wash_policy
    )

    # 4. Crear adaptador de interfaz CLI y configurar logging antes de usar el sistema
    cli_interface = CLIInterfaceAdapter(
        washing_service=washing_service,
        simulation_data_service=simulation_data_usecase,
        wash_simulation_usecase=wash_simulation_usecase
    )
    cli_interface.configure_logging()
    logger = logging.getLogger(__name__)
    logger.info("Lanzando lavado de ejemplo")

    # 5. Lavado de ejemplo: 3 kg de vaqueros en programa largo
    status = washing_service.start_washing("jeans", 3, "long")
    logger.info(f"Lavado de ejemplo: {status.error_code.name}, programa {status.runned_program}")

    # 6. Ejecutar la interfaz CLI
    cli_interface.run_cli_interface()


if __name__ == "__main__":
    main()
