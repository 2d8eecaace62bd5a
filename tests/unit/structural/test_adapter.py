"""Tests for the message sender adapters."""
from design_patterns.structural.adapter import (
    Client,
    MessageSender,
    SerialAdapter,
    SharedMemoryAdapter,
    UDPAdapter,
)


class RecordingSender(MessageSender):
    def __init__(self):
        self.messages = []

    def send(self, message):
        self.messages.append(message)
        return True


class TestAdapters:
    def test_udp_adapter_sends_encoded_packet(self, sink):
        assert UDPAdapter(sink).send("Hello via UDP!") is True
        assert sink.lines == ["UDP: Sending packet of size 14"]

    def test_serial_adapter_passes_length(self, sink):
        assert SerialAdapter(sink).send("Hello via Serial!") is True
        assert sink.lines == ["Serial: Transmitting 17 bytes"]

    def test_serial_adapter_counts_bytes_not_characters(self, sink):
        SerialAdapter(sink).send("héllo")
        assert sink.lines == ["Serial: Transmitting 6 bytes"]

    def test_shared_memory_adapter_pushes_payload(self, sink):
        assert SharedMemoryAdapter(sink).send("Hello via Shared Memory!") is True
        assert sink.lines == ["Shared Memory: Pushing payload: Hello via Shared Memory!"]


class TestClient:
    def test_client_uses_current_adapter(self):
        first = RecordingSender()
        second = RecordingSender()
        client = Client(first)

        client.send_message("one")
        client.change_adapter(second)
        client.send_message("two")

        assert first.messages == ["one"]
        assert second.messages == ["two"]
        assert client.sender is second

    def test_client_with_real_adapters(self, sink):
        client = Client(UDPAdapter(sink))
        client.send_message("abc")
        client.change_adapter(SharedMemoryAdapter(sink))
        client.send_message("abc")

        assert sink.lines == [
            "UDP: Sending packet of size 3",
            "Shared Memory: Pushing payload: abc",
        ]
