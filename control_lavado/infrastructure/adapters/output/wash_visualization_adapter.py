"""Adaptador para visualización de los resultados de una simulación."""

import matplotlib.pyplot as plt
import logging
from typing import Dict, Any
from pathlib import Path

from control_lavado.application.ports.input.wash_visualization_port import WashVisualizationPort

logger = logging.getLogger(__name__)


class WashVisualizationAdapter(WashVisualizationPort):
    """Adaptador para dibujar los resultados de una simulación de lavados."""

    def plot_summary(self, summary: Dict[str, Any], output_dir: str = "./assets/plots",
                     show_plots: bool = False) -> Dict[str, str]:
        """
        Crea gráficos de barras con los códigos de error y los programas ejecutados.

        Args:
            summary: Resumen de la simulación
            output_dir: Directorio donde guardar los gráficos generados
            show_plots: Si es True, muestra los gráficos interactivamente

        Returns:
            Diccionario con rutas de los archivos generados
        """
        Path(output_dir).mkdir(parents=True, exist_ok=True)

        generated_files = {}

        # 1. Distribución de códigos de error y de programas ejecutados
        fig, (ax1, ax2) = plt.subplots(1, 2, figsize=(12, 5))

        error_codes = list(summary["error_codes"].keys())
        error_counts = [summary["error_codes"][code] for code in error_codes]
        colors = ['green' if code == "NO_ERROR" else 'red' for code in error_codes]

        ax1.bar(error_codes, error_counts, color=colors, alpha=0.7)
        ax1.set_title('Resultado de los ciclos')
        ax1.set_ylabel('Ciclos')
        ax1.tick_params(axis='x', rotation=45)

        programs = list(summary["programs"].keys())
        program_counts = [summary["programs"][program] for program in programs]

        ax2.bar(programs, program_counts, color='blue', alpha=0.7)
        ax2.set_title('Programas ejecutados')
        ax2.set_ylabel('Ciclos completados')

        fig.suptitle(
            f"Simulación de {summary['total_cycles']} lavados "
            f"({summary['success_rate']:.1f}% completados)",
            size=14
        )
        fig.tight_layout()

        distribution_plot_path = f'{output_dir}/distribucion_lavados.png'
        fig.savefig(distribution_plot_path)
        generated_files['distribution_plot'] = distribution_plot_path
        logger.info(f"Gráfico de distribución guardado como '{distribution_plot_path}'")

        if show_plots:
            plt.figure(fig.number)
            plt.show()
        else:
            plt.close(fig)

        return generated_files
