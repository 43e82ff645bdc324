import logging
from typing import Iterable, Optional, Type

import numpy as np

logger = logging.getLogger(__name__)


class FaultInjector:
    """Decide si una operación simulada falla y con qué tipo de fallo.
    
    Los fallos forzados (fail_on / unexpected_fail_on) tienen prioridad sobre
    los aleatorios. Un fallo esperado lanza la excepción propia del
    dispositivo; uno inesperado lanza RuntimeError.
    """
    
    def __init__(
        self,
        failure_rate: float = 0.0,
        unexpected_failure_rate: float = 0.0,
        fail_on: Iterable[str] = (),
        unexpected_fail_on: Iterable[str] = (),
        rng: Optional[np.random.Generator] = None
    ):
        for name, rate in (("failure_rate", failure_rate),
                           ("unexpected_failure_rate", unexpected_failure_rate)):
            if not 0.0 <= rate <= 1.0:
                raise ValueError(f"{name} debe estar entre 0 y 1, se recibió {rate}")
        if failure_rate + unexpected_failure_rate > 1.0:
            raise ValueError("La suma de las tasas de fallo no puede superar 1")
        
        self.failure_rate = failure_rate
        self.unexpected_failure_rate = unexpected_failure_rate
        self.fail_on = set(fail_on)
        self.unexpected_fail_on = set(unexpected_fail_on)
        self.rng = rng if rng is not None else np.random.default_rng()
    
    def check(self, device: str, operation: str, expected_exception: Type[Exception]) -> None:
        """Lanza el fallo que corresponda a la operación, si lo hay."""
        if operation in self.fail_on:
            raise expected_exception(f"{device}: fallo forzado en '{operation}'")
        if operation in self.unexpected_fail_on:
            raise RuntimeError(f"{device}: fallo inesperado forzado en '{operation}'")
        
        if self.failure_rate == 0.0 and self.unexpected_failure_rate == 0.0:
            return
        
        draw = self.rng.random()
        if draw < self.failure_rate:
            logger.debug(f"{device}: fallo simulado en '{operation}'")
            raise expected_exception(f"{device}: fallo simulado en '{operation}'")
        if draw < self.failure_rate + self.unexpected_failure_rate:
            logger.debug(f"{device}: fallo inesperado simulado en '{operation}'")
            raise RuntimeError(f"{device}: fallo inesperado simulado en '{operation}'")
