from .base import ByteSink, MemorySink
from .device import DEFAULT_DEVICE, DeviceFileTransport, device_from_env
from .serial import SERIAL_BAUD_RATE, SerialTransport

__all__ = [
    "ByteSink",
    "DEFAULT_DEVICE",
    "DeviceFileTransport",
    "device_from_env",
    "MemorySink",
    "SERIAL_BAUD_RATE",
    "SerialTransport",
]
