import json
import pandas as pd
from typing import Dict, Any, List, Union
import logging

from control_lavado.application.ports.output.wash_report_export_port import WashReportExportPort
from control_lavado.domain.value_objects.export_format import ExportFormat


logger = logging.getLogger(__name__)


class WashReportExportAdapter(WashReportExportPort):
    """Adaptador de salida para exportar el informe de una simulación de lavados.

    Implementa el puerto de salida WashReportExportPort para exportar los
    resultados a diferentes formatos.
    """

    def __init__(self):
        self.supported_formats = [export_format.to_string() for export_format in ExportFormat.get_all_formats()]

    def get_supported_formats(self) -> List[str]:
        """Obtiene la lista de formatos de exportación soportados."""
        return self.supported_formats

    def export_report(self, results: pd.DataFrame, export_format: Union[ExportFormat, str],
                      output_path: str = None) -> str:
        """Exporta los resultados de una simulación a varios formatos."""
        if isinstance(export_format, str):
            if export_format.strip().lower() not in self.supported_formats:
                raise ValueError(f"Formato no soportado: {export_format}. "
                                 f"Opciones: {', '.join(self.supported_formats)}")
            export_format = ExportFormat.from_string(export_format)

        if export_format == ExportFormat.JSON:
            return self._export_to_json(results, output_path)
        elif export_format == ExportFormat.CSV:
            return self._export_to_csv(results, output_path)
        elif export_format == ExportFormat.EXCEL:
            return self._export_to_excel(results, output_path)
        elif export_format == ExportFormat.TEXT:
            return self._export_to_text(results, output_path)

        raise NotImplementedError(f"Exportación a {export_format} no implementada")

    def _create_structured_data(self, results: pd.DataFrame) -> Dict[str, Any]:
        """Crea una representación estructurada (serializable) del informe."""
        cycles = json.loads(results.to_json(orient="records"))
        error_counts = results["error_code"].value_counts().to_dict() if not results.empty else {}

        return {
            "total_cycles": len(results),
            "error_codes": {code: int(count) for code, count in error_counts.items()},
            "cycles": cycles
        }

    def _export_to_json(self, results: pd.DataFrame, output_path: str = None) -> str:
        """Exporta el informe a formato JSON."""
        json_str = json.dumps(self._create_structured_data(results), indent=2)

        if output_path:
            with open(output_path, 'w') as f:
                f.write(json_str)
            logger.info(f"Informe exportado a JSON: {output_path}")
            return output_path

        return json_str

    def _export_to_csv(self, results: pd.DataFrame, output_path: str = None) -> str:
        """Exporta el informe a formato CSV."""
        if results.empty:
            return "No hay ciclos para exportar"

        if output_path:
            results.to_csv(output_path, index=False)
            logger.info(f"Informe exportado a CSV: {output_path}")
            return output_path

        return results.to_csv(index=False)

    def _export_to_excel(self, results: pd.DataFrame, output_path: str = None) -> str:
        """Exporta el informe a formato Excel."""
        if not output_path:
            raise ValueError("Se requiere una ruta de salida para exportar a Excel")

        if results.empty:
            return "No hay ciclos para exportar"

        results.to_excel(output_path, index=False, sheet_name="Ciclos")
        logger.info(f"Informe exportado a Excel: {output_path}")

        return output_path

    def _export_to_text(self, results: pd.DataFrame, output_path: str = None) -> str:
        """Exporta el informe a formato texto (para consola)."""
        if results.empty:
            return "No hay ciclos para exportar"

        lines = ["Informe de simulación de lavados:", "-" * 40]

        # Agrupamos por código de error para mejor visualización
        for error_code, group in results.groupby("error_code", sort=True):
            lines.append(f"\n{error_code}: {len(group)} ciclos")
            lines.append("-" * 40)
            for _, row in group.iterrows():
                program = row["runned_program"] if row["runned_program"] else "-"
                lines.append(
                    f"  {row['weight_kg']:>5.1f} kg {row['material']:<10} "
                    f"pedido: {row['requested_program']:<10} ejecutado: {program:<7} "
                    f"etapa: {row['stage']}"
                )

        successful = int((results["error_code"] == "NO_ERROR").sum())
        lines.append("\n" + "-" * 40)
        lines.append(f"Ciclos completados: {successful}/{len(results)}")
        lines.append(f"Agua total: {results['liters_poured'].sum():.1f} litros")
        lines.append(f"Minutos de lavado: {int(results['minutes_washed'].sum())}")

        text = "\n".join(lines)
        if output_path:
            with open(output_path, 'w') as f:
                f.write(text)
            logger.info(f"Informe exportado a texto: {output_path}")
            return output_path

        return text
