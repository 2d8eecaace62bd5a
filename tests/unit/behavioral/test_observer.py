"""Tests for subject/observer notification."""
from design_patterns.behavioral.observer import ConcreteObserver, Observer, Subject


class RecordingObserver(Observer):
    def __init__(self, name, log):
        self.name = name
        self.log = log
        self.values = []

    def update(self, value):
        self.values.append(value)
        self.log.append((self.name, value))


class TestSubject:
    def setup_method(self):
        self.subject = Subject()
        self.log = []
        self.first = RecordingObserver("first", self.log)
        self.second = RecordingObserver("second", self.log)

    def test_notifications_in_order_and_after_detach(self):
        self.subject.attach(self.first)
        self.subject.attach(self.second)

        self.subject.set_state(10)
        self.subject.set_state(20)
        self.subject.detach(self.first)
        self.subject.set_state(30)

        assert self.first.values == [10, 20]
        assert self.second.values == [10, 20, 30]
        assert self.subject.state == 30

    def test_attachment_order_is_notification_order(self):
        self.subject.attach(self.second)
        self.subject.attach(self.first)

        self.subject.set_state(1)

        assert self.log == [("second", 1), ("first", 1)]

    def test_detach_unknown_observer_is_noop(self):
        self.subject.attach(self.first)

        assert self.subject.detach(self.second) is False
        assert self.subject.observers == [self.first]

    def test_set_state_without_observers(self):
        self.subject.set_state(5)
        assert self.subject.state == 5

    def test_concrete_observer_emits(self, sink):
        self.subject.attach(ConcreteObserver("Observer1", sink))

        self.subject.set_state(10)

        assert sink.lines == ["Observer1 received update: 10"]
