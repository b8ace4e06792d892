"""Tests for the Bible reader endpoints."""
from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from hebrew_app.db.models.bible import BibleBook, BibleVerse, BibleWord, StrongsEntry
from hebrew_app.services.bible import parse_chapter
from hebrew_app.utils.exceptions import ValidationError


@pytest.fixture()
def genesis(db_session) -> BibleBook:
    book = BibleBook(
        id="Gen",
        name="Genesis",
        hebrew_name="בראשית",
        abbreviation="Gen",
        chapter_count=50,
        testament="OT",
        order_index=1,
    )
    exodus = BibleBook(
        id="Exod",
        name="Exodus",
        hebrew_name="שמות",
        abbreviation="Exod",
        chapter_count=40,
        testament="OT",
        order_index=2,
    )
    db_session.add_all([exodus, book])
    db_session.flush()

    first = BibleVerse(book_id="Gen", chapter=1, verse=1, hebrew_text="בְּרֵאשִׁית בָּרָא", word_count=2)
    second = BibleVerse(book_id="Gen", chapter=1, verse=2, hebrew_text="וְהָאָרֶץ", word_count=1)
    db_session.add_all([second, first])
    db_session.flush()

    db_session.add_all(
        [
            BibleWord(
                verse_id=first.id,
                position=2,
                hebrew="בָּרָא",
                lemma="H1254",
                morph="HVqp3ms",
            ),
            BibleWord(
                verse_id=first.id,
                position=1,
                hebrew="בְּרֵאשִׁית",
                lemma="H7225",
                lemma_prefix="b",
                morph="HR/Ncfsa",
                is_prefix_compound=True,
            ),
            BibleWord(verse_id=second.id, position=1, hebrew="וְהָאָרֶץ", lemma="H9999", morph=None),
            StrongsEntry(
                number="H7225",
                lemma="רֵאשִׁית",
                transliteration="rêʼshîyth",
                pronunciation="ray-sheeth'",
                short_def="beginning",
                strongs_def="the first, in place, time, order or rank",
            ),
            StrongsEntry(number="H1254", lemma="בָּרָא", transliteration="bârâʼ", short_def="create"),
        ]
    )
    db_session.commit()
    return book


def test_parse_chapter() -> None:
    assert parse_chapter(" 3 ") == 3
    for value in ("abc", "0", "-2"):
        with pytest.raises(ValidationError):
            parse_chapter(value)


def test_books_are_ordered(client: TestClient, learner_headers, genesis) -> None:
    response = client.get("/api/bible/books", headers=learner_headers)

    assert response.status_code == 200
    books = response.json()["books"]
    assert [book["id"] for book in books] == ["Gen", "Exod"]
    assert books[0]["hebrew_name"] == "בראשית"


def test_chapter_joins_strongs_and_morphology(client: TestClient, learner_headers, genesis) -> None:
    response = client.get("/api/bible/Gen/1", headers=learner_headers)

    assert response.status_code == 200
    data = response.json()
    assert data["book"]["name"] == "Genesis"
    assert [verse["verse"] for verse in data["verses"]] == [1, 2]

    first_word, second_word = data["verses"][0]["words"]
    assert first_word["position"] == 1
    assert first_word["gloss"] == "beginning"
    assert first_word["full_def"] == "the first, in place, time, order or rank"
    assert first_word["strongs_lemma"] == "רֵאשִׁית"
    assert first_word["is_prefix_compound"] is True
    assert first_word["morph_description"] == "Preposition + Noun, common, fem., sing., absolute"
    assert second_word["gloss"] == "create"
    assert second_word["pronunciation"] is None
    assert second_word["morph_description"] == "Verb, Qal, Perfect, 3rd, masc., sing."

    unknown = data["verses"][1]["words"][0]
    assert unknown["gloss"] is None
    assert unknown["strongs_lemma"] is None
    assert unknown["morph_description"] == ""

    assert data["navigation"] == {"prev_chapter": None, "next_chapter": 2, "total_chapters": 50}


def test_chapter_is_served_from_cache(client: TestClient, learner_headers, genesis, db_session) -> None:
    client.get("/api/bible/Gen/1", headers=learner_headers)
    verse = db_session.query(BibleVerse).filter_by(book_id="Gen", verse=2).one()
    verse.hebrew_text = "changed"
    db_session.commit()

    cached = client.get("/api/bible/Gen/1", headers=learner_headers).json()

    assert cached["verses"][1]["hebrew_text"] == "וְהָאָרֶץ"


@pytest.mark.parametrize(
    ("path", "status_code", "detail"),
    [
        ("/api/bible/Gen/abc", 400, "Invalid chapter number"),
        ("/api/bible/Gen/0", 400, "Invalid chapter number"),
        ("/api/bible/Matt/1", 404, "Book not found"),
        ("/api/bible/Gen/51", 404, "Chapter 51 not found. Genesis has 50 chapters."),
        ("/api/bible/Gen/2", 404, "No verses found for this chapter"),
    ],
)
def test_chapter_errors(
    client: TestClient, learner_headers, genesis, path: str, status_code: int, detail: str
) -> None:
    response = client.get(path, headers=learner_headers)

    assert response.status_code == status_code
    assert response.json()["detail"] == detail
