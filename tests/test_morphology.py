"""Unit tests for the OSHB morphology decoder."""
from __future__ import annotations

import pytest

from hebrew_app.core.morphology import decode_morphology


@pytest.mark.parametrize(
    ("code", "expected"),
    [
        ("HVqp3ms", "Verb, Qal, Perfect, 3rd, masc., sing."),
        ("HR/Ncfsa", "Preposition + Noun, common, fem., sing., absolute"),
        ("HTd/Ncmpa", "Particle, definite article + Noun, common, masc., plur., absolute"),
        ("HNcfsc/Sp3ms", "Noun, common, fem., sing., construct + Suffix, pronominal, 3rd, masc., sing."),
        ("AVqp3ms", "Verb, Peal, Perfect, 3rd, masc., sing."),
        ("HAamsa", "Adjective, adjective, masc., sing., absolute"),
    ],
)
def test_decode_known_codes(code: str, expected: str) -> None:
    assert decode_morphology(code) == expected


def test_unknown_codes_are_returned_unchanged() -> None:
    assert decode_morphology("XYZ") == "XYZ"
    assert decode_morphology("H") == "H"


def test_missing_code_decodes_to_empty_string() -> None:
    assert decode_morphology(None) == ""
    assert decode_morphology("") == ""
