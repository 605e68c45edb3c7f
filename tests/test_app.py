from cipherlab.encryption import monoalphabetic, sdes, vigenere


def test_home_lists_algorithms(client):
    response = client.get("/")
    assert response.status_code == 200
    data = response.get_json()
    assert data["title"] == "CipherLab"
    assert data["lang"] == "en"
    assert [algo["slug"] for algo in data["algorithms"]][:2] == ["caesar", "atbash"]


def test_language_switch(client):
    response = client.get("/set-language/ru")
    assert response.status_code == 302
    assert client.get("/").get_json()["title"] == "Лаборатория шифров"
    data = client.get("/algorithms/caesar").get_json()
    assert data["key_label"] == "Сдвиг"


def test_algorithms_grouped_by_category(client):
    data = client.get("/algorithms").get_json()
    assert [algo["slug"] for algo in data["modern"]] == ["sdes"]
    assert len(data["classical"]) == 5


def test_algorithm_detail_includes_practice(client):
    data = client.get("/algorithms/playfair").get_json()
    assert data["name"] == "Playfair Cipher"
    assert data["practice"]["code"]


def test_unknown_algorithm_is_404(client):
    response = client.get("/algorithms/enigma")
    assert response.status_code == 404
    assert response.get_json() == {"error": "Unknown algorithm."}
    assert client.post("/algorithms/enigma/encrypt", json={"text": "x"}).status_code == 404


def test_encrypt_and_decrypt(client):
    response = client.post("/algorithms/caesar/encrypt", json={"text": "HELLO", "key": "3"})
    data = response.get_json()
    assert data["result"] == "KHOOR"
    assert data["steps"][0].startswith("Step 1")

    response = client.post("/algorithms/vigenere/decrypt", json={"text": "RIJVS", "key": "KEY"})
    assert response.get_json() == {"result": "HELLO"}


def test_encrypt_accepts_form_data(client):
    response = client.post("/algorithms/atbash/encrypt", data={"text": "HELLO"})
    assert response.get_json()["result"] == "SVOOL"


def test_empty_text_is_rejected(client):
    response = client.post("/algorithms/caesar/encrypt", json={"text": "", "key": "3"})
    assert response.status_code == 400
    assert response.get_json()["error"] == "Please enter your message."


def test_sdes_validation_error_through_playground(client):
    response = client.post("/algorithms/sdes/encrypt", json={"text": "0111", "key": "1010000010"})
    assert response.status_code == 400
    assert response.get_json()["error"] == "Input must be 8 bits of binary (0s and 1s only)"


def test_visualize_rail_fence(client):
    response = client.post(
        "/algorithms/railfence/visualize", json={"text": "HELLO", "key": "3"}
    )
    grid = response.get_json()["visualization"]
    assert grid[0] == ["H", " ", " ", " ", "O"]


def test_sdes_requires_keys_first(client):
    response = client.post("/sdes/encrypt", json={"plaintext": "01110010"})
    assert response.status_code == 400
    assert response.get_json()["error"] == "Please generate keys first"


def test_sdes_workflow(client):
    response = client.post("/sdes/keys", json={"key": "1010000010"})
    assert response.get_json() == {
        "permuted_key": "1000001100",
        "k1": "10100100",
        "k2": "01000011",
    }

    response = client.post("/sdes/encrypt", json={"plaintext": "01110010"})
    data = response.get_json()
    assert data["ciphertext"] == "01110111"
    assert data["steps"][-1] == {"step": "Final Permutation", "bits": "01110111"}

    response = client.post("/sdes/decrypt", json={"ciphertext": "01110111"})
    assert response.get_json() == {"plaintext": "01110010"}


def test_sdes_invalid_key_clears_previous_keys(client):
    client.post("/sdes/keys", json={"key": "1010000010"})
    response = client.post("/sdes/keys", json={"key": "10102"})
    assert response.status_code == 400
    assert "10 bits" in response.get_json()["error"]
    assert client.post("/sdes/encrypt", json={"plaintext": "01110010"}).status_code == 400


def test_practice_challenge_round_trip(client):
    response = client.get("/practice/vigenere/challenge?difficulty=easy")
    assert response.status_code == 200
    challenge = response.get_json()
    assert challenge["difficulty"] == "easy"

    solution = vigenere.decode(challenge["ciphertext"], challenge["key"])

    response = client.post("/practice/vigenere/challenge", json={"answer": solution.lower()})
    data = response.get_json()
    assert data["is_correct"] is True
    assert data["feedback"] == "Great job! Your solution is correct."

    response = client.post("/practice/vigenere/challenge", json={"answer": "nope"})
    assert response.get_json()["is_correct"] is False


def test_practice_without_challenge(client):
    response = client.post("/practice/caesar/challenge", json={"answer": "HELLO"})
    assert response.status_code == 400


def test_practice_rejects_bad_difficulty_and_sdes(client):
    assert client.get("/practice/caesar/challenge?difficulty=extreme").status_code == 400
    assert client.get("/practice/sdes/challenge").status_code == 404


def test_sdes_keys_match_engine(client):
    schedule = sdes.generate_keys("0111111101")
    data = client.post("/sdes/keys", json={"key": "0111111101"}).get_json()
    assert data["k1"] == sdes.format_bits(schedule.k1)
    assert data["k2"] == sdes.format_bits(schedule.k2)


def test_challenge_cookie_does_not_carry_the_answer(app, client):
    challenge = client.get("/practice/caesar/challenge?difficulty=easy").get_json()
    plaintext = monoalphabetic.caesar_decode(challenge["ciphertext"], int(challenge["key"]))

    cookie = client.get_cookie("session")
    stored = app.session_interface.get_signing_serializer(app).loads(cookie.value)
    assert set(stored["challenge_caesar"]) == {"slug", "difficulty", "ciphertext", "key", "hint"}
    assert plaintext not in str(stored)

    response = client.post("/practice/caesar/challenge", json={"answer": plaintext})
    assert response.get_json()["is_correct"] is True
    assert response.get_json()["solution"] == plaintext


def test_visualize_rail_fence_with_huge_rail_count(client):
    response = client.post(
        "/algorithms/railfence/visualize", json={"text": "HELLO", "key": "999999999"}
    )
    assert response.status_code == 200
    assert response.get_json()["visualization"] == [list("HELLO")]


def test_numeric_json_values_are_read_as_text(client):
    response = client.post(
        "/algorithms/sdes/encrypt", json={"text": "01110010", "key": 1010000010}
    )
    assert response.status_code == 200
    assert response.get_json()["result"] == "01110111"

    response = client.post("/algorithms/vigenere/encrypt", json={"text": "HELLO", "key": 123})
    assert response.status_code == 200
    assert response.get_json()["result"] == "HELLO"

    response = client.post("/algorithms/caesar/encrypt", json={"text": 12345, "key": 3})
    assert response.get_json()["result"] == "12345"


def test_numeric_sdes_workflow_and_answer(client):
    keys = client.post("/sdes/keys", json={"key": 1010000010}).get_json()
    assert keys["k1"] == "10100100"
    response = client.post("/sdes/decrypt", json={"ciphertext": 1110111})
    assert response.status_code == 400

    client.get("/practice/atbash/challenge?difficulty=easy")
    response = client.post("/practice/atbash/challenge", json={"answer": 42})
    assert response.status_code == 200
    assert response.get_json()["is_correct"] is False


def test_non_object_json_body_falls_back_to_form(client):
    response = client.post("/algorithms/caesar/encrypt", json=["HELLO"])
    assert response.status_code == 400
    assert response.get_json()["error"] == "Please enter your message."
