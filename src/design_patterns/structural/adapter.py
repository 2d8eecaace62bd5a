"""Adapter - three incompatible transports behind one ``MessageSender`` interface.

Each adaptee has its own call shape (datagram bytes, raw buffer plus length,
plain string payload). Adapters own their adaptee and translate ``send()``.
"""

from abc import ABC, abstractmethod
from typing import Optional

from design_patterns.infrastructure.output import OutputSink, resolve_sink


class MessageSender(ABC):
    """Target interface the client expects."""

    @abstractmethod
    def send(self, message: str) -> bool:
        """Send a message, returning True on success."""
        pass


class UDPComm:
    """Adaptee that only understands datagrams of bytes."""

    def __init__(self, output: Optional[OutputSink] = None):
        self._output = resolve_sink(output)

    def send_datagram(self, packet_data: bytes) -> None:
        self._output.emit(f"UDP: Sending packet of size {len(packet_data)}")


class SerialComm:
    """Adaptee that transmits a raw buffer with an explicit length."""

    def __init__(self, output: Optional[OutputSink] = None):
        self._output = resolve_sink(output)

    def transmit_bytes(self, data_buffer: memoryview, length: int) -> None:
        self._output.emit(f"Serial: Transmitting {length} bytes")


class SharedMemoryComm:
    """Adaptee that accepts a string payload under a different method name."""

    def __init__(self, output: Optional[OutputSink] = None):
        self._output = resolve_sink(output)

    def push_data(self, payload: str) -> None:
        self._output.emit(f"Shared Memory: Pushing payload: {payload}")


class UDPAdapter(MessageSender):
    """Encodes the message into a datagram for ``UDPComm``."""

    def __init__(self, output: Optional[OutputSink] = None):
        self._adaptee = UDPComm(output)

    def send(self, message: str) -> bool:
        self._adaptee.send_datagram(message.encode("utf-8"))
        return True


class SerialAdapter(MessageSender):
    """Hands ``SerialComm`` a buffer view and its length."""

    def __init__(self, output: Optional[OutputSink] = None):
        self._adaptee = SerialComm(output)

    def send(self, message: str) -> bool:
        data = message.encode("utf-8")
        self._adaptee.transmit_bytes(memoryview(data), len(data))
        return True


class SharedMemoryAdapter(MessageSender):
    """Straight rename onto ``SharedMemoryComm.push_data``."""

    def __init__(self, output: Optional[OutputSink] = None):
        self._adaptee = SharedMemoryComm(output)

    def send(self, message: str) -> bool:
        self._adaptee.push_data(message)
        return True


class Client:
    """Depends only on ``MessageSender``; the adapter can be swapped at runtime."""

    def __init__(self, sender: MessageSender):
        self._sender = sender

    @property
    def sender(self) -> MessageSender:
        return self._sender

    def change_adapter(self, new_sender: MessageSender) -> None:
        self._sender = new_sender

    def send_message(self, message: str) -> bool:
        return self._sender.send(message)
