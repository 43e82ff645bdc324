from enum import Enum, auto


class WashStage(Enum):
    """Etapas por las que pasa un ciclo de lavado.
    
    Idle -> Validating -> (Rejected | Detecting?) -> Pouring -> Washing
    -> Releasing -> Spinning? -> Done
    """
    
    IDLE = auto()
    VALIDATING = auto()
    REJECTED = auto()
    DETECTING = auto()
    POURING = auto()
    WASHING = auto()
    RELEASING = auto()
    SPINNING = auto()
    DONE = auto()
    
    def is_terminal(self) -> bool:
        return self in (WashStage.REJECTED, WashStage.DONE)
