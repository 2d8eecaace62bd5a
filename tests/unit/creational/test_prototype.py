"""Tests for prototype cloning."""
import pytest

from design_patterns.creational.prototype import GameCharacter, Prototype


class TestGameCharacter:
    def test_buffer_starts_ascending(self, sink):
        character = GameCharacter("Jamie", 5, sink)

        assert character.values == [0, 1, 2, 3, 4]

    def test_clone_is_a_prototype_with_equal_contents(self, sink):
        character = GameCharacter("Jamie", 5, sink)
        clone = character.clone()

        assert isinstance(clone, Prototype)
        assert clone is not character
        assert clone.name == "Jamie"
        assert clone.values == character.values

    def test_mutating_original_does_not_change_earlier_clone(self, sink):
        character = GameCharacter("Jamie", 5, sink)
        character.fill_array(7)
        clone = character.clone()

        character.set_name("Jack")
        character.update_array(0, 99)
        character.update_array(1, 100)

        assert clone.name == "Jamie"
        assert clone.values == [7, 7, 7, 7, 7]
        assert character.values == [99, 100, 7, 7, 7]

    def test_mutating_clone_does_not_change_original(self, sink):
        character = GameCharacter("Jamie", 3, sink)
        clone = character.clone()

        clone.update_array(2, 42)

        assert character.values == [0, 1, 2]

    def test_out_of_range_update_is_ignored(self, sink):
        character = GameCharacter("Jamie", 3, sink)

        assert character.update_array(3, 50) is False
        assert character.update_array(-1, 50) is False
        assert character.values == [0, 1, 2]

    def test_get_value(self, sink):
        character = GameCharacter("Jamie", 3, sink)

        assert character.get_value(1) == 1
        assert character.get_value(3) is None

    def test_values_wrap_like_bytes(self, sink):
        character = GameCharacter("Jamie", 1, sink)
        character.update_array(0, 258)

        assert character.values == [2]

    @pytest.mark.parametrize("size, wrapped", [(255, 255), (256, 0), (260, 4), (-1, 255)])
    def test_size_wraps_like_a_byte(self, sink, size, wrapped):
        character = GameCharacter("Jamie", size, sink)

        assert character.allocate_size == wrapped
        assert character.values == list(range(wrapped))

    def test_describe(self, sink):
        GameCharacter("Jamie", 2, sink).describe()

        assert sink.lines == [
            "GameCharacter name = Jamie allocated elements: ",
            "Value 0: 0",
            "Value 1: 1",
        ]
