from dataclasses import dataclass, field

from control_lavado.domain.value_objects.program import Program


@dataclass(frozen=True)
class ProgramConfiguration:
    """Configuración elegida por el usuario para un ciclo de lavado."""
    
    program: Program = field(
        metadata={"description": "Programa solicitado, AUTODETECT para decidir por suciedad"}
    )
    spin: bool = field(
        default=True,
        metadata={"description": "Si es True se centrifuga al final del ciclo"}
    )
    
    def __post_init__(self):
        if not isinstance(self.program, Program):
            raise ValueError(f"Programa no válido: {self.program!r}")
    
    def is_autodetect(self) -> bool:
        return not self.program.is_runnable()
