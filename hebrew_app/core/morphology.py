"""Decode Open Scriptures Hebrew Bible (OSHB) morphology codes.

``HVqp3ms`` becomes ``Verb, Qal, Perfect, 3rd, masc., sing.``; compound codes
such as ``HR/Ncfsa`` decode each segment and join them with `` + ``.
Codes that cannot be read are returned unchanged.
"""
from __future__ import annotations

LANGUAGE = {"H": "Hebrew", "A": "Aramaic"}

PART_OF_SPEECH = {
    "A": "Adjective",
    "C": "Conjunction",
    "D": "Adverb",
    "N": "Noun",
    "P": "Pronoun",
    "R": "Preposition",
    "S": "Suffix",
    "T": "Particle",
    "V": "Verb",
}

VERB_STEM_HEBREW = {
    "q": "Qal",
    "N": "Niphal",
    "p": "Piel",
    "P": "Pual",
    "h": "Hiphil",
    "H": "Hophal",
    "t": "Hithpael",
    "o": "Polel",
    "O": "Polal",
    "r": "Hithpolel",
    "m": "Poel",
    "M": "Poal",
    "k": "Palel",
    "K": "Pulal",
    "Q": "Qal Passive",
    "l": "Pilpel",
    "L": "Polpal",
    "f": "Hithpalpel",
    "D": "Nithpael",
    "j": "Pealal",
    "i": "Pilel",
    "u": "Hothpaal",
    "c": "Tiphil",
    "v": "Hishtaphel",
    "w": "Nithpalel",
    "y": "Nithpoel",
    "z": "Hithpoel",
}

VERB_STEM_ARAMAIC = {
    "q": "Peal",
    "Q": "Peil",
    "u": "Hithpeel",
    "p": "Pael",
    "P": "Ithpaal",
    "M": "Hithpaal",
    "a": "Aphel",
    "h": "Haphel",
    "s": "Saphel",
    "e": "Shaphel",
    "H": "Hophal",
    "i": "Ithpeel",
    "t": "Hishtaphel",
    "v": "Ishtaphel",
    "w": "Hithaphel",
}

VERB_TYPE = {
    "p": "Perfect",
    "q": "Sequential Perfect",
    "i": "Imperfect",
    "w": "Sequential Imperfect",
    "h": "Cohortative",
    "j": "Jussive",
    "v": "Imperative",
    "r": "Participle Active",
    "s": "Participle Passive",
    "a": "Infinitive Absolute",
    "c": "Infinitive Construct",
}

PERSON = {"1": "1st", "2": "2nd", "3": "3rd"}
GENDER = {"m": "masc.", "f": "fem.", "b": "both", "c": "common"}
NUMBER = {"s": "sing.", "p": "plur.", "d": "dual"}
STATE = {"a": "absolute", "c": "construct", "d": "determined"}
NOUN_TYPE = {"c": "common", "g": "gentilic", "p": "proper"}
ADJECTIVE_TYPE = {
    "a": "adjective",
    "c": "cardinal number",
    "g": "gentilic",
    "o": "ordinal number",
}
SUFFIX_TYPE = {
    "d": "directional he",
    "h": "paragogic he",
    "n": "paragogic nun",
    "p": "pronominal",
}
PRONOUN_TYPE = {
    "d": "demonstrative",
    "f": "indefinite",
    "i": "interrogative",
    "p": "personal",
    "r": "relative",
}
PARTICLE_TYPE = {
    "d": "definite article",
    "a": "accusative",
    "e": "exhortation",
    "i": "interrogative",
    "j": "interjection",
    "m": "demonstrative",
    "n": "negative",
    "o": "direct object",
    "r": "relative",
}

# Optional feature slots read, in order, after the part of speech letter.
_FEATURES = {
    "N": (NOUN_TYPE, GENDER, NUMBER, STATE),
    "A": (ADJECTIVE_TYPE, GENDER, NUMBER, STATE),
    "P": (PRONOUN_TYPE, PERSON, GENDER, NUMBER),
    "T": (PARTICLE_TYPE,),
    "S": (SUFFIX_TYPE, PERSON, GENDER, NUMBER),
}


def _read_features(code: str, start: int, tables) -> list[str]:
    parts: list[str] = []
    idx = start
    for table in tables:
        if idx < len(code) and code[idx] in table:
            parts.append(table[code[idx]])
            idx += 1
    return parts


def _has_language(segment: str) -> bool:
    return len(segment) >= 2 and segment[0] in LANGUAGE and segment[1] in PART_OF_SPEECH


def decode_segment(code: str) -> str:
    if not code or len(code) < 2:
        return code
    language, pos = code[0], code[1]
    if language not in LANGUAGE or pos not in PART_OF_SPEECH:
        return code

    parts = [PART_OF_SPEECH[pos]]
    if pos == "V":
        stems = VERB_STEM_ARAMAIC if language == "A" else VERB_STEM_HEBREW
        parts.extend(_read_features(code, 2, (stems, VERB_TYPE, PERSON, GENDER, NUMBER)))
    elif pos in _FEATURES:
        parts.extend(_read_features(code, 2, _FEATURES[pos]))
    return ", ".join(parts)


def decode_morphology(morph: str | None) -> str:
    """Return a readable description of an OSHB morphology code."""

    if not morph:
        return ""
    segments = morph.split("/")
    language = segments[0][:1]
    decoded = [decode_segment(segments[0])]
    for segment in segments[1:]:
        # Only the first segment carries the language letter.
        if language in LANGUAGE and not _has_language(segment):
            segment = language + segment
        decoded.append(decode_segment(segment))
    return " + ".join(decoded)
