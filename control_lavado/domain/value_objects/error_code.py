from enum import Enum, auto


class ErrorCode(Enum):
    """Códigos de error con los que termina un ciclo de lavado."""
    
    NO_ERROR = auto()
    TOO_HEAVY = auto()
    WATER_PUMP_FAILURE = auto()
    ENGINE_FAILURE = auto()
    UNKNOWN_ERROR = auto()
    
    def to_string(self) -> str:
        return self.name.lower()


class Result(Enum):
    """Resultado global de un ciclo de lavado."""
    
    SUCCESS = auto()
    FAILURE = auto()
