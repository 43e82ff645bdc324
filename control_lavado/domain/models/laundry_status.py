from dataclasses import dataclass, field
from typing import Optional

from control_lavado.domain.value_objects.error_code import ErrorCode, Result
from control_lavado.domain.value_objects.program import Program
from control_lavado.domain.value_objects.wash_stage import WashStage


@dataclass(frozen=True)
class LaundryStatus:
    """Estado final de un ciclo de lavado."""
    
    result: Result = field(
        metadata={"description": "SUCCESS si el ciclo terminó completo"}
    )
    error_code: ErrorCode = field(
        metadata={"description": "Causa del fallo, NO_ERROR si el ciclo terminó completo"}
    )
    runned_program: Optional[Program] = field(
        default=None,
        metadata={"description": "Programa realmente ejecutado, solo con NO_ERROR"}
    )
    stage: WashStage = field(
        default=WashStage.DONE,
        metadata={"description": "Etapa en la que se detuvo el ciclo"}
    )
    
    @classmethod
    def success(cls, program: Program) -> 'LaundryStatus':
        """Crea el estado de un ciclo completado con el programa dado."""
        return cls(
            result=Result.SUCCESS,
            error_code=ErrorCode.NO_ERROR,
            runned_program=program,
            stage=WashStage.DONE
        )
    
    @classmethod
    def error(cls, error_code: ErrorCode, stage: WashStage) -> 'LaundryStatus':
        """Crea el estado de un ciclo interrumpido; no lleva programa ejecutado."""
        return cls(
            result=Result.FAILURE,
            error_code=error_code,
            runned_program=None,
            stage=stage
        )
    
    def is_success(self) -> bool:
        return self.result == Result.SUCCESS
