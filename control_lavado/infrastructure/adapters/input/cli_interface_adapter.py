"""Adaptador para la interfaz de línea de comandos."""

import os
import logging
import sys

from control_lavado.application.ports.input.washing_service_port import WashingServicePort
from control_lavado.application.ports.input.simulation_data_setup_port import SimulationDataSetupPort
from control_lavado.application.usecases.wash_simulation_usecase import WashSimulationUseCase

logger = logging.getLogger(__name__)

YES_ANSWERS = ['s', 'si', 'sí', 'y', 'yes']


class CLIInterfaceAdapter:
    """Adaptador para la interfaz de línea de comandos del sistema."""

    def __init__(
        self,
        washing_service: WashingServicePort,
        simulation_data_service: SimulationDataSetupPort,
        wash_simulation_usecase: WashSimulationUseCase
    ):
        self.washing_service = washing_service
        self.simulation_data_service = simulation_data_service
        self.wash_simulation_usecase = wash_simulation_usecase

    def configure_logging(self, log_file: str = "./assets/logs/control-lavado.log"):
        """
        Configura el logging para la aplicación.

        Args:
            log_file: Ruta al archivo de log
        """
        os.makedirs(os.path.dirname(log_file), exist_ok=True)

        logging.basicConfig(
            level=logging.INFO,
            format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            handlers=[
                logging.FileHandler(log_file),
                logging.StreamHandler(sys.stdout)
            ]
        )

    def run_single_wash(self):
        """Pide los datos de una carga por consola y lanza un ciclo de lavado."""
        print(f"Materiales: {', '.join(self.washing_service.get_available_materials())}")
        material = input("Material de la carga (default: cotton): ").strip() or "cotton"

        try:
            weight_kg = float(input("Peso de la carga en kg (default: 3): ") or "3")
        except ValueError:
            logger.warning("Peso inválido. Usando 3 kg.")
            weight_kg = 3.0

        print(f"Programas: {', '.join(self.washing_service.get_available_programs())}")
        program = input("Programa (default: autodetect): ").strip() or "autodetect"
        spin = input("¿Centrifugar al final? (s/n, default: s): ").strip().lower() in YES_ANSWERS + ['']

        try:
            status = self.washing_service.start_washing(material, weight_kg, program, spin)
        except ValueError as e:
            logger.warning(f"Datos de lavado inválidos: {e}")
            print(f"No se pudo iniciar el lavado: {e}")
            return None

        if status.is_success():
            print(f"Lavado completado con el programa {status.runned_program.to_string()}")
        else:
            print(f"Lavado interrumpido: {status.error_code.name} (etapa {status.stage.name})")
        return status

    def run_simulation(self):
        """Pide los parámetros de una simulación y la ejecuta."""
        default_config = self.simulation_data_service.get_default_config()
        default_scenarios = default_config["NUM_SCENARIOS"]

        try:
            user_scenarios = input(f"Número de ciclos a simular (Enter para usar {default_scenarios}): ")
            num_scenarios = default_scenarios
            if user_scenarios.strip():
                num_scenarios = max(1, int(user_scenarios.strip()))
        except ValueError:
            logger.warning(f"Entrada inválida. Usando {default_scenarios} ciclos.")
            num_scenarios = default_scenarios

        export_format = input("Formato del informe (text/csv/json/excel, default: text): ").strip() or "text"
        if export_format.lower() not in ["text", "csv", "json", "excel"]:
            logger.warning(f"Formato '{export_format}' no soportado. Usando text.")
            export_format = "text"

        scenarios = self.simulation_data_service.generate_scenarios({"NUM_SCENARIOS": num_scenarios})
        output = self.wash_simulation_usecase.run_and_report(scenarios, export_format=export_format)

        summary = output["summary"]
        print(f"\nCiclos completados: {summary['successful_cycles']}/{summary['total_cycles']} "
              f"({summary['success_rate']:.1f}%)")
        for code, count in summary["error_codes"].items():
            print(f"  {code}: {count}")
        print(f"Informe: {output['report']}")
        return output

    def run_cli_interface(self):
        """Ejecuta la interfaz de línea de comandos principal."""
        logger.info("Iniciando sistema de control de lavadora")

        while True:
            print("\n1. Lanzar un lavado")
            print("2. Simular ciclos de lavado")
            print("3. Salir")
            option = input("Seleccione una opción: ").strip()

            if option == "1":
                self.run_single_wash()
            elif option == "2":
                self.run_simulation()
            elif option == "3":
                break
            else:
                print("Opción no válida.")

        logger.info("Sesión de consola terminada.")
