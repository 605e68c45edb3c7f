import pytest

from cipherlab.encryption import playfair


def test_matrix_first_row_from_keyword():
    matrix = playfair.build_matrix("PLAYFAIR")
    assert matrix[0] == ("P", "L", "A", "Y", "F")
    assert matrix[1] == ("I", "R", "B", "C", "D")


def test_matrix_has_every_letter_but_j_once():
    cells = [cell for row in playfair.build_matrix("Jumping jacks") for cell in row]
    assert len(cells) == 25
    assert sorted(cells) == sorted("ABCDEFGHIKLMNOPQRSTUVWXYZ")


def test_locate_treats_j_as_i():
    matrix = playfair.build_matrix("PLAYFAIR")
    assert playfair.locate(matrix, "J") == playfair.locate(matrix, "I") == (1, 0)
    assert playfair.locate(matrix, "z") == (4, 4)


def test_locate_rejects_non_letters():
    with pytest.raises(ValueError):
        playfair.locate(playfair.build_matrix("KEY"), "1")


def test_prepare_digraphs_inserts_filler():
    assert playfair.prepare_digraphs("balloon") == ["BA", "LX", "LO", "ON"]
    assert playfair.prepare_digraphs("abc") == ["AB", "CX"]
    assert playfair.prepare_digraphs("") == []


def test_encode_vector():
    assert playfair.encode("Hide the gold!", "PLAYFAIR") == "EBIMQMGHVRCZ"
    assert playfair.decode("EBIMQMGHVRCZ", "PLAYFAIR") == "HIDETHEGOLDX"


def test_same_row_and_column_rules():
    # row 2 of the PLAYFAIR square is E G H K M; column 1 is L R G O V
    assert playfair.encode("EG", "PLAYFAIR") == "GH"
    assert playfair.encode("MK", "PLAYFAIR") == "EM"
    assert playfair.encode("OL", "PLAYFAIR") == "VR"
    assert playfair.encode("VL", "PLAYFAIR") == "LR"
    assert playfair.decode("GH", "PLAYFAIR") == "EG"
    assert playfair.decode("VR", "PLAYFAIR") == "OL"


@pytest.mark.parametrize("text", ["HELPME", "ATTACKATDAWN", "CRYPTOGRAPHY"])
@pytest.mark.parametrize("keyword", ["MONARCHY", "KEYWORD"])
def test_round_trip_even_no_doubles(text, keyword):
    assert playfair.decode(playfair.encode(text, keyword), keyword) == text


@pytest.mark.parametrize("keyword", ["", "1234", None])
def test_empty_keyword_is_a_no_op(keyword):
    assert playfair.encode("hello", keyword) == "hello"
    assert playfair.decode("hello", keyword) == "hello"
