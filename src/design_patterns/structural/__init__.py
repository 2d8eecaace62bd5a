"""Structural patterns: composing or wrapping objects to change interface, share state or guard access."""

from .adapter import (
    Client,
    MessageSender,
    SerialAdapter,
    SerialComm,
    SharedMemoryAdapter,
    SharedMemoryComm,
    UDPAdapter,
    UDPComm,
)
from .bridge import (
    BlueColor,
    BorderImplementor,
    Circle,
    ColorImplementor,
    DashedBorder,
    RedColor,
    ShapeAbstraction,
    SolidBorder,
    Square,
    Triangle,
)
from .composite import ComplexObject, Serializable, SimpleData
from .decorator import Coffee, CoffeeDecorator, MilkDecorator, SimpleCoffee, SugarDecorator
from .facade import ActivityLog, FileDownloaderFacade, FileWriter, HttpClient
from .flyweight import Monster, MonsterFactory, MonsterType
from .proxy import RealService, Service, ServiceProxy

__all__ = [
    "MessageSender",
    "UDPComm",
    "SerialComm",
    "SharedMemoryComm",
    "UDPAdapter",
    "SerialAdapter",
    "SharedMemoryAdapter",
    "Client",
    "ColorImplementor",
    "RedColor",
    "BlueColor",
    "BorderImplementor",
    "SolidBorder",
    "DashedBorder",
    "ShapeAbstraction",
    "Circle",
    "Square",
    "Triangle",
    "Serializable",
    "SimpleData",
    "ComplexObject",
    "Coffee",
    "SimpleCoffee",
    "CoffeeDecorator",
    "MilkDecorator",
    "SugarDecorator",
    "HttpClient",
    "FileWriter",
    "ActivityLog",
    "FileDownloaderFacade",
    "MonsterType",
    "MonsterFactory",
    "Monster",
    "Service",
    "RealService",
    "ServiceProxy",
]
