import pytest

from cipherlab.encryption import rail_fence


def test_vector_three_rails():
    assert rail_fence.encode("HELLOWORLD", 3) == "HOLELWRDLO"
    assert rail_fence.decode("HOLELWRDLO", 3) == "HELLOWORLD"


def test_two_rails_alternates():
    assert rail_fence.encode("ABCDEF", 2) == "ACEBDF"


@pytest.mark.parametrize("rails", [-1, 0, 1, 5, 6])
def test_out_of_range_rails_return_text(rails):
    assert rail_fence.encode("HELLO", rails) == "HELLO"
    assert rail_fence.decode("HELLO", rails) == "HELLO"


@pytest.mark.parametrize("rails", [2, 3, 4, 7])
def test_round_trip(rails):
    text = "WE ARE DISCOVERED, FLEE AT ONCE!"
    encoded = rail_fence.encode(text, rails)
    assert sorted(encoded) == sorted(text)
    assert rail_fence.decode(encoded, rails) == text


def test_decode_handles_marker_like_characters():
    text = "a*b*c*d*e"
    assert rail_fence.decode(rail_fence.encode(text, 3), 3) == text


def test_grid_places_characters_on_zigzag():
    assert rail_fence.grid("HELLO", 3, blank=".") == [
        list("H...O"),
        list(".E.L."),
        list("..L.."),
    ]


def test_grid_single_rail():
    assert rail_fence.grid("ABC", 1) == [["A", "B", "C"]]
    assert rail_fence.grid("ABC", 0) == []


@pytest.mark.parametrize("rails", [5, 999999999])
def test_grid_with_too_many_rails_is_one_row(rails):
    assert rail_fence.grid("HELLO", rails) == [list("HELLO")]
