"""Tests for vocabulary set endpoints."""
from __future__ import annotations

from fastapi.testclient import TestClient

from hebrew_app.data.foundations import ALPHABET_CARDS, GRAMMAR_CARDS, SYLLABLE_CARDS
from hebrew_app.db.models.vocabulary import VocabWord
from hebrew_app.services.vocabulary import slugify, word_id_for


def _cards(set_payload: dict) -> list[dict]:
    return [card for group in set_payload["groups"] for card in group["words"]]


def test_word_ids_are_slugged_transliterations() -> None:
    assert word_id_for("genesis-1", "Be'reshit!") == "genesis-1-bereshit"
    assert slugify("Ha-Aretz 2") == "haaretz2"


def test_list_sets_merges_default_progress(client: TestClient, learner_headers, genesis_words) -> None:
    response = client.get("/api/vocab/sets", headers=learner_headers)

    assert response.status_code == 200
    (vocab_set,) = response.json()["sets"]
    assert vocab_set["id"] == "genesis-1"
    assert vocab_set["is_active"] is False
    categories = {group["category"] for group in vocab_set["groups"]}
    assert categories == {"Nouns", "Verbs"}
    nouns = next(group for group in vocab_set["groups"] if group["category"] == "Nouns")
    assert [card["trans"] for card in nouns["words"]] == ["elohim", "shamayim", "bereshit"]
    cards = _cards(vocab_set)
    assert len(cards) == 4
    assert all(card["level"] == 0 and card["review_count"] == 0 for card in cards)
    assert all(card["card_type"] == "vocabulary" for card in cards)


def test_read_unknown_set_returns_404(client: TestClient, learner_headers) -> None:
    response = client.get("/api/vocab/sets/missing", headers=learner_headers)

    assert response.status_code == 404
    assert response.json()["detail"] == "Vocab set 'missing' not found"


def test_activation_is_per_learner(client: TestClient, learner_headers, make_vocab_set) -> None:
    make_vocab_set("set-a", [{"trans": "av", "english": "father"}])
    make_vocab_set("set-b", [{"trans": "em", "english": "mother"}, {"trans": "ben", "english": "son"}])

    toggled = client.post("/api/vocab/sets/toggle-active", json={"set_id": "set-a"}, headers=learner_headers)
    assert toggled.json() == {"set_id": "set-a", "is_active": True}
    client.post("/api/vocab/sets/toggle-active", json={"set_id": "set-b"}, headers=learner_headers)

    active = client.get("/api/vocab/sets/active", headers=learner_headers).json()
    assert {item["id"] for item in active["active_sets"]} == {"set-a", "set-b"}
    assert active["total_words"] == 3

    activated = client.post("/api/vocab/sets/set-b/activate", headers=learner_headers)
    assert activated.json() == {"active_set_id": "set-b"}
    active = client.get("/api/vocab/sets/active", headers=learner_headers).json()
    assert [item["id"] for item in active["active_sets"]] == ["set-b"]

    client.post("/api/auth/register", json={"email": "other@example.com", "password": "supersecure"})
    other_token = client.post(
        "/api/auth/login", json={"email": "other@example.com", "password": "supersecure"}
    ).json()["access_token"]
    other_active = client.get(
        "/api/vocab/sets/active", headers={"Authorization": f"Bearer {other_token}"}
    ).json()
    assert other_active == {"active_sets": [], "total_words": 0}


def test_toggle_active_validates_set(client: TestClient, learner_headers) -> None:
    missing_id = client.post("/api/vocab/sets/toggle-active", json={}, headers=learner_headers)
    assert missing_id.status_code == 400

    unknown = client.post("/api/vocab/sets/toggle-active", json={"set_id": "nope"}, headers=learner_headers)
    assert unknown.status_code == 404


def test_create_set_skips_duplicate_words(client: TestClient, admin_headers, db_session) -> None:
    payload = {
        "set_id": "psalm-23",
        "title": "Psalm 23",
        "description": "The shepherd psalm",
        "words": [
            {"hebrew": "רֹעִי", "trans": "ro'i", "english": "my shepherd", "type": "Noun", "category": "Nouns"},
            {"hebrew": "רֹעִי", "trans": "Roi", "english": "my shepherd", "type": "Noun", "category": "Nouns"},
            {"hebrew": "יְהוָה", "trans": "YHWH", "english": "the LORD", "type": "Noun", "category": "Nouns"},
        ],
    }

    response = client.post("/api/vocab/create", json=payload, headers=admin_headers)

    assert response.status_code == 201
    data = response.json()
    assert data["set"]["total_words"] == 2
    assert [word["id"] for word in data["words"]] == ["psalm-23-roi", "psalm-23-yhwh"]
    lord = db_session.get(VocabWord, "psalm-23-yhwh")
    assert lord.semantic_group == "Deity & Divine"

    conflict = client.post("/api/vocab/create", json=payload, headers=admin_headers)
    assert conflict.status_code == 409


def test_created_set_lists_the_same_words(client: TestClient, admin_headers) -> None:
    words = [
        {"hebrew": "אָב", "trans": "av", "english": "father", "type": "Noun",
         "category": "Nouns", "subcategory": "Family", "frequency": 2},
        {"hebrew": "אֵם", "trans": "em", "english": "mother", "type": "Noun",
         "category": "Nouns", "subcategory": "Family", "frequency": 1},
        {"hebrew": "רֹעִי", "trans": "ro'i", "english": "my shepherd", "type": "Noun",
         "category": "Nouns", "subcategory": "Family"},
        {"hebrew": "הָלַךְ", "trans": "halakh", "english": "he walked", "type": "Verb",
         "category": "Verbs", "frequency": 3},
    ]
    payload = {"set_id": "family", "title": "Family", "words": words}
    assert client.post("/api/vocab/create", json=payload, headers=admin_headers).status_code == 201

    (listed,) = client.get("/api/vocab/sets", headers=admin_headers).json()["sets"]

    assert listed["id"] == "family"
    assert listed["total_words"] == len(words)
    groups = {(group["category"], group["subcategory"]): group["words"] for group in listed["groups"]}
    assert set(groups) == {("Nouns", "Family"), ("Verbs", None)}
    assert [card["trans"] for card in groups[("Nouns", "Family")]] == ["em", "av", "ro'i"]
    by_trans = {card["trans"]: card for cards in groups.values() for card in cards}
    for word in words:
        card = by_trans[word["trans"]]
        assert (card["hebrew"], card["english"], card["type"]) == (word["hebrew"], word["english"], word["type"])


def test_create_set_requires_word_fields(client: TestClient, admin_headers) -> None:
    payload = {"set_id": "broken", "title": "Broken", "words": [{"hebrew": "אב", "trans": "av"}]}

    response = client.post("/api/vocab/create", json=payload, headers=admin_headers)

    assert response.status_code == 400


def test_reorganize_regroups_vocabulary_sets(client: TestClient, admin_headers, make_vocab_set) -> None:
    make_vocab_set(
        "nouns",
        [{"trans": f"w{i}", "english": f"word {i}", "frequency": i + 1} for i in range(12)],
    )

    response = client.post("/api/vocab/reorganize", json={"set_id": "nouns"}, headers=admin_headers)

    assert response.status_code == 200
    (result,) = response.json()["sets"]
    assert result["words_updated"] == 12
    assert result["num_groups"] == 2
    assert [group["word_count"] for group in result["groups"]] == [6, 6]
    assert all(group["category"] == "Noun" for group in result["groups"])
    assert all(group["subcategory"] == "Objects & Things" for group in result["groups"])


def test_reorganize_without_sets_returns_404(client: TestClient, admin_headers) -> None:
    response = client.post("/api/vocab/reorganize", json={}, headers=admin_headers)

    assert response.status_code == 404
    assert response.json()["detail"] == "No vocab sets found"


def test_seed_categories_is_idempotent(client: TestClient, admin_headers, learner_headers) -> None:
    expected_alphabet = len({slugify(card.name) for card in ALPHABET_CARDS})
    expected_syllables = len({slugify(card.pronunciation) for card in SYLLABLE_CARDS})
    expected_grammar = len({slugify(card.pronunciation) for card in GRAMMAR_CARDS})

    first = client.post("/api/vocab/seed-categories", headers=admin_headers).json()
    assert first["alphabet"] == {"created": True, "words": expected_alphabet}
    assert first["syllables"] == {"created": True, "words": expected_syllables}
    assert first["grammar"] == {"created": True, "words": expected_grammar}

    second = client.post("/api/vocab/seed-categories", headers=admin_headers).json()
    assert second["alphabet"]["created"] is False
    assert second["grammar"]["words"] == expected_grammar

    alphabet = client.get("/api/vocab/sets/alphabet", headers=learner_headers).json()
    card = _cards(alphabet)[0]
    assert card["card_type"] == "alphabet"
    assert set(card["extra_data"]) >= {"pronunciation", "sound"}

    grammar = client.get("/api/vocab/sets/grammar-markers", headers=learner_headers).json()
    assert all(card["card_type"] == "grammar" for card in _cards(grammar))
    assert all("examples" in card["extra_data"] for card in _cards(grammar))

    rejected = client.post("/api/vocab/reorganize", json={"set_id": "alphabet"}, headers=admin_headers)
    assert rejected.status_code == 400
