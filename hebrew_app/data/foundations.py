"""Built-in foundation sets: the alphabet, syllable drills and grammar markers."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class AlphabetCard:
    char: str
    name: str
    pronunciation: str
    sound: str
    notes: str
    is_vowel: bool = False


@dataclass(frozen=True)
class SyllableCard:
    word: str
    syllables: str
    pronunciation: str
    syllable_type: str
    notes: str

    @property
    def meaning(self) -> str:
        return self.notes.replace("Meaning: ", "", 1).replace('"', "")


@dataclass(frozen=True)
class GrammarCard:
    hebrew: str
    pronunciation: str
    meaning: str
    grammar_type: str
    category: str
    explanation: str
    examples: Tuple[str, ...]


@dataclass(frozen=True)
class FoundationSet:
    id: str
    title: str
    description: str
    set_type: str


ALPHABET_SET = FoundationSet(
    id="alphabet",
    title="Hebrew Alphabet",
    description="Learn all 41 Hebrew characters - consonants and vowels",
    set_type="alphabet",
)
SYLLABLE_SET = FoundationSet(
    id="syllables",
    title="Hebrew Syllables",
    description="Practice dividing Hebrew words into syllables",
    set_type="syllables",
)
GRAMMAR_SET = FoundationSet(
    id="grammar-markers",
    title="Grammar Markers",
    description="Articles, prepositions, particles & punctuation",
    set_type="grammar",
)


ALPHABET_CARDS: Tuple[AlphabetCard, ...] = (
    # Consonants
    AlphabetCard("א", "Aleph", "AH-lef", "(silent)", "Looks like X"),
    AlphabetCard("ב", "Bet", "bayt", "b / v", "Backwards C with floor"),
    AlphabetCard("ג", "Gimel", "GEE-mel", "g", "Always hard g"),
    AlphabetCard("ד", "Dalet", "DAH-let", "d", "Has corner (vs ר)"),
    AlphabetCard("ה", "He", "hay", "h", "Gap at top left"),
    AlphabetCard("ו", "Vav", "vahv", "v / o / u", 'Straight line; means "and"'),
    AlphabetCard("ז", "Zayin", "ZAH-yin", "z", "Like a sword"),
    AlphabetCard("ח", "Chet", "khet", "ch", 'Throaty (like "Bach")'),
    AlphabetCard("ט", "Tet", "tet", "t", "Curly shape"),
    AlphabetCard("י", "Yod", "yohd", "y / i", "Tiny apostrophe"),
    AlphabetCard("כ", "Kaph", "kahf", "k / kh", "Like ב but rounder"),
    AlphabetCard("ל", "Lamed", "LAH-med", "l", "Shepherd's staff, tallest letter"),
    AlphabetCard("מ", "Mem", "mem", "m", "Square with opening bottom left"),
    AlphabetCard("נ", "Nun", "noon", "n", "Like ו with base/foot"),
    AlphabetCard("ס", "Samekh", "SAH-mekh", "s", "Closed circle"),
    AlphabetCard("ע", "Ayin", "AH-yin", "(guttural)", "Silent/throaty, looks like Y"),
    AlphabetCard("פ", "Pe", "pay", "p / f", "Like ב with inner line"),
    AlphabetCard("צ", "Tsade", "TSAH-day", "ts", "Unique bent shape"),
    AlphabetCard("ק", "Qoph", "kohf", "q", "Deep k sound"),
    AlphabetCard("ר", "Resh", "raysh", "r", "Rounded top, SHORT, on baseline"),
    AlphabetCard("שׂ", "Sin", "seen", "s", "Dot on left"),
    AlphabetCard("שׁ", "Shin", "sheen", "sh", "Dot on right"),
    AlphabetCard("ת", "Tav", "tahv", "t", "Like ח with extra line"),
    AlphabetCard("ך", "Kaph (final)", "kahf", "kh", "LONG tail drops below baseline"),
    AlphabetCard("ם", "Mem (final)", "mem", "m", "Closed square, stays ON baseline"),
    AlphabetCard("ן", "Nun (final)", "noon", "n", "LONG tail drops below baseline"),
    AlphabetCard("ף", "Pe (final)", "fay", "f", "LONG tail drops below baseline"),
    AlphabetCard("ץ", "Tsade (final)", "TSAH-day", "ts", "LONG tail drops below baseline"),
    # Vowel points
    AlphabetCard("בָ", "Qamets", "KAH-mets", '"ah" (father)', "Small T shape under letter", True),
    AlphabetCard("בֵ", "Tsere", "tsay-RAY", '"ay" (day)', "Two dots under letter", True),
    AlphabetCard("בֹ", "Holem", "HOH-lem", '"oh" (go)', "Dot above letter (or on vav)", True),
    AlphabetCard("בוּ", "Shureq", "shoo-ROOK", '"oo" (food)', "Vav with dot inside", True),
    AlphabetCard("בִי", "Hireq + Yod", "hee-REEK", '"ee" (see)', "Dot under + yod after", True),
    AlphabetCard("בַ", "Patach", "pah-TAKH", '"ah" (cat)', "Line under letter", True),
    AlphabetCard("בֶ", "Segol", "seh-GOHL", '"eh" (bed)', "Three dots under letter", True),
    AlphabetCard("בִ", "Hireq", "hee-REEK", '"ih" (sit)', "One dot under letter", True),
    AlphabetCard("בֻ", "Qibbuts", "kee-BOOTS", '"oo" (book)', "Three diagonal dots under", True),
    AlphabetCard("בְ", "Sheva", "sheh-VAH", '"uh" or silent', "Two vertical dots - vocal at word start", True),
    AlphabetCard("בֲ", "Hateph Patach", "hah-TEF pah-TAKH", '"ah" (short)', "Sheva + patach - with gutturals", True),
    AlphabetCard("בֱ", "Hateph Segol", "hah-TEF seh-GOHL", '"eh" (short)', "Sheva + segol - with gutturals", True),
    AlphabetCard("בֳ", "Hateph Qamets", "hah-TEF KAH-mets", '"oh" (short)', "Sheva + qamets - with gutturals", True),
)


SYLLABLE_CARDS: Tuple[SyllableCard, ...] = (
    SyllableCard("בֵּן", "בֵּן", "ben", "1 closed syllable", 'Meaning: "son"'),
    SyllableCard("יָד", "יָד", "yad", "1 closed syllable", 'Meaning: "hand"'),
    SyllableCard("לֹא", "לֹא", "lo", "1 open syllable", 'Meaning: "no/not"'),
    SyllableCard("עַם", "עַם", "am", "1 closed syllable", 'Meaning: "people"'),
    SyllableCard("גּוֹי", "גּוֹי", "goy", "1 closed syllable", 'Meaning: "nation"'),
    SyllableCard("שָׁלוֹם", "שָׁ־לוֹם", "sha-LOM", "Open + closed syllables", 'Meaning: "peace"'),
    SyllableCard("מֶלֶךְ", "מֶ־לֶךְ", "MEH-lekh", "Open + closed syllables", 'Meaning: "king"'),
    SyllableCard("דָּבָר", "דָּ־בָר", "da-VAR", "Open + closed syllables", 'Meaning: "word"'),
    SyllableCard("אֱלֹהִים", "אֱ־לֹ־הִים", "e-lo-HEEM", "3 syllables", 'Meaning: "God"'),
    SyllableCard("בָּרָא", "בָּ־רָא", "ba-RA", "Open + open syllables", 'Meaning: "he created"'),
    SyllableCard("טוֹב", "טוֹב", "tov", "1 closed syllable", 'Meaning: "good"'),
    SyllableCard("אוֹר", "אוֹר", "or", "1 closed syllable", 'Meaning: "light"'),
    SyllableCard("יוֹם", "יוֹם", "yom", "1 closed syllable", 'Meaning: "day"'),
    SyllableCard("לַיְלָה", "לַיְ־לָה", "LAY-lah", "Closed + open syllables", 'Meaning: "night"'),
    SyllableCard("בֶּן־אָדָם", "בֶּן־אָ־דָם", "ben-a-DAM", "Joined by maqqef", 'Meaning: "son of man"'),
    SyllableCard("אֶרֶץ", "אֶ־רֶץ", "EH-rets", "Open + closed syllables", 'Meaning: "earth/land"'),
    SyllableCard("שָׁמַיִם", "שָׁ־מַ־יִם", "sha-MA-yim", "3 syllables", 'Meaning: "heavens/sky"'),
    SyllableCard("מַיִם", "מַ־יִם", "MA-yim", "Open + closed syllables", 'Meaning: "water"'),
    SyllableCard("רוּחַ", "רוּ־חַ", "RU-akh", "Open + closed syllables", 'Meaning: "spirit/wind"'),
    SyllableCard("תֹּהוּ", "תֹּ־הוּ", "TO-hu", "Open + open syllables", 'Meaning: "formless/chaos"'),
)


GRAMMAR_CARDS: Tuple[GrammarCard, ...] = (
    GrammarCard("הַ", "ha-", "The", "Definite Article (with patach)", "Articles",
                'Attaches to beginning of words to mean "the" - most common form',
                ("מֶלֶךְ = king", "הַמֶּלֶךְ = THE king")),
    GrammarCard("הָ", "ha-", "The", "Definite Article (with qamets)", "Articles",
                "Used before certain letters (gutturals: א ה ח ע)",
                ("אָרֶץ = earth", "הָאָרֶץ = THE earth")),
    GrammarCard("הֶ", "he-", "The", "Definite Article (with segol)", "Articles",
                "Used before certain guttural letters with specific vowels",
                ("הֶהָרִים = THE mountains",)),
    GrammarCard("וְ", "ve-", "And", "Vav Conjunction (with sheva)", "Conjunctions",
                'Attaches to beginning of words - most common form of "and"',
                ("שָׁמַיִם = heavens", "וְשָׁמַיִם = AND heavens")),
    GrammarCard("וּ", "u-", "And", "Vav Conjunction (with shureq)", "Conjunctions",
                "Used before letters ב מ פ (BeMP)",
                ("בֹהוּ = void", "וּבֹהוּ = AND void")),
    GrammarCard("וָ", "va-", "And", "Vav Conjunction (with qamets)", "Conjunctions",
                "Used before single-syllable words or certain consonants",
                ("בֹהוּ = void", "וָבֹהוּ = AND void")),
    GrammarCard("וַ", "va-", "And (then)", "Vav Consecutive", "Conjunctions",
                "Creates narrative past tense - THE most common verb form in stories",
                ("יֹּאמֶר = he will say", "וַיֹּאמֶר = and he SAID (then he said)")),
    GrammarCard("בְּ", "be-", "In / By / With", "Inseparable Preposition", "Prepositions",
                "Attaches to beginning of words",
                ("רֵאשִׁית = beginning", "בְּרֵאשִׁית = IN the beginning")),
    GrammarCard("לְ", "le-", "To / For", "Inseparable Preposition", "Prepositions",
                "Attaches to beginning of words",
                ("אוֹר = light", "לָאוֹר = TO the light")),
    GrammarCard("כְּ", "ke-", "Like / As / According to", "Inseparable Preposition", "Prepositions",
                "Attaches to beginning of words",
                ("אִישׁ = man", "כְּאִישׁ = LIKE a man")),
    GrammarCard("וּבְ", "uv-", "And in", "Vav + Preposition", "Combined Forms",
                "Conjunction + preposition combined",
                ("יוֹם = day", "וּבְיוֹם = AND IN the day")),
    GrammarCard("וְלַ", "vela-", "And to/for the", "Vav + Preposition + Article", "Combined Forms",
                "Conjunction + preposition + article all together",
                ("חֹשֶׁךְ = darkness", "וְלַחֹשֶׁךְ = AND TO THE darkness")),
    GrammarCard("בַּ", "ba-", "In the", "Preposition + Article", "Combined Forms",
                "Preposition ב + article הַ combined",
                ("יוֹם = day", "בַּיוֹם = IN THE day")),
    GrammarCard("לָ", "la-", "To the / For the", "Preposition + Article", "Combined Forms",
                "Preposition ל + article הַ combined",
                ("אוֹר = light", "לָאוֹר = TO THE light")),
    GrammarCard("כָּ", "ka-", "Like the / As the", "Preposition + Article", "Combined Forms",
                "Preposition כ + article הַ combined",
                ("מַיִם = water", "כַּמַּיִם = LIKE THE water")),
    GrammarCard("אֵת", "et", "[Direct object marker]", "Particle (untranslatable)", "Particles",
                "Shows what receives the action of a verb - only with definite objects",
                ("בָּרָא אֱלֹהִים אֵת הַשָּׁמַיִם", "God created [אֵת] THE heavens")),
    GrammarCard("אֶת־", "et-", "[Direct object marker]", "Particle with Maqqef", "Particles",
                "Same as אֵת but connected with maqqef (hyphen)",
                ("וַיַּרְא אֶת־הָאוֹר", "And he saw [אֶת] the light")),
    GrammarCard("וְאֵת", "ve'et", "And [object marker]", "Vav + Particle", "Particles",
                "Conjunction + direct object marker",
                ("אֵת הַשָּׁמַיִם וְאֵת הָאָרֶץ", "the heavens AND [וְאֵת] the earth")),
    GrammarCard("עַל", "al", "On / Upon / Over", "Preposition (standalone)", "Prepositions",
                "Very common preposition - often with maqqef",
                ("עַל־פְּנֵי = upon the face of", "עַל־הָאָרֶץ = upon the earth")),
    GrammarCard("אֶל", "el", "To / Toward / Unto", "Preposition (standalone)", "Prepositions",
                "Shows direction or movement toward",
                ("אֶל־הָעִיר = to the city", "אֶל־אֱלֹהִים = to God")),
    GrammarCard("מִן", "min", "From", "Preposition (standalone)", "Prepositions",
                "Often shortened to מִ and attached to words",
                ("מִן־הָעִיר = from the city", "מִמִּצְרַיִם = from Egypt")),
    GrammarCard("עִם", "im", "With", "Preposition (standalone)", "Prepositions",
                "Indicates accompaniment",
                ("עִם־אָבִיו = with his father", "עִם־הָעָם = with the people")),
    GrammarCard("בֵּין", "bein", "Between", "Preposition (standalone)", "Prepositions",
                'Often used twice: "between X and between Y"',
                ("בֵּין הָאוֹר וּבֵין הַחֹשֶׁךְ", "between the light and between the darkness")),
    GrammarCard("כִּי", "ki", "That / Because / When / For", "Conjunction (multi-use)", "Conjunctions",
                "Context determines meaning - VERY common word",
                ("כִּי־טוֹב = that [it was] good", "כִּי יָדַעְתִּי = because I knew")),
    GrammarCard("אֲשֶׁר", "asher", "Who / Which / That", "Relative Pronoun", "Particles",
                "Introduces relative clauses",
                ("הָאִישׁ אֲשֶׁר = the man who/that", "הַמָּקוֹם אֲשֶׁר = the place which/where")),
    GrammarCard("אִם", "im", "If", "Conditional Particle", "Particles",
                "Introduces conditional statements",
                ("אִם־תִּשְׁמַע = if you listen", "אִם־לֹא = if not")),
    GrammarCard("לֹא", "lo", "Not / No", "Negative Particle", "Particles",
                "Standard negation",
                ("לֹא טוֹב = not good", "לֹא־יָדַעְתִּי = I did not know")),
    GrammarCard("אַל", "al", "Do not", "Negative Command", "Particles",
                "Used for prohibitions (don't do this)",
                ("אַל־תִּירָא = do not fear", "אַל־תֹּאכַל = do not eat")),
    GrammarCard("־", "maqqef", "Maqqef (connector)", "Punctuation", "Punctuation",
                "Connects words into one pronunciation unit - like a hyphen",
                ("עַל־פְּנֵי = al-penei (one unit)", "כָּל־הָאָרֶץ = kol-haarets")),
    GrammarCard("׃", "sof pasuq", "Sof Pasuq (verse end)", "Punctuation", "Punctuation",
                "Marks the end of a verse - like a period",
                ("Appears at end of every verse", "Similar to a colon (:)")),
    GrammarCard("פ", "pe (petucha)", "Petucha (paragraph)", "Section Marker", "Punctuation",
                "Open paragraph break - marks major section division",
                ("Appears at end of Genesis 1:5", "Editorial marker from scribes")),
)


__all__ = [
    "ALPHABET_CARDS",
    "ALPHABET_SET",
    "AlphabetCard",
    "FoundationSet",
    "GRAMMAR_CARDS",
    "GRAMMAR_SET",
    "GrammarCard",
    "SYLLABLE_CARDS",
    "SYLLABLE_SET",
    "SyllableCard",
]
