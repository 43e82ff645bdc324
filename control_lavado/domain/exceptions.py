"""Tipos de fallo bien definidos que pueden señalar los dispositivos."""


class DeviceException(Exception):
    """Base de los fallos señalados por un dispositivo de la lavadora."""


class DirtDetectorException(DeviceException):
    """El detector de suciedad no pudo medir la carga."""


class EngineException(DeviceException):
    """Fallo del motor durante el lavado o el centrifugado."""


class WaterPumpException(DeviceException):
    """Fallo de la bomba al llenar o vaciar el tambor."""
