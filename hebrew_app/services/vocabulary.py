"""Vocabulary sets, cards and per-learner active set selection."""
from __future__ import annotations

import re
import uuid
from typing import Iterable, List, Optional, Sequence

from loguru import logger
from sqlalchemy import delete, func, select
from sqlalchemy.orm import Session

from hebrew_app.core.organizer import detect_semantic_group, organize_words, suggest_study_days
from hebrew_app.data.foundations import (
    ALPHABET_CARDS,
    ALPHABET_SET,
    GRAMMAR_CARDS,
    GRAMMAR_SET,
    SYLLABLE_CARDS,
    SYLLABLE_SET,
    FoundationSet,
)
from hebrew_app.db.models.progress import UserProgress
from hebrew_app.db.models.vocabulary import UserActiveSet, VocabSet, VocabWord
from hebrew_app.schemas.vocabulary import (
    ActiveSetsResponse,
    CreatedSet,
    CreatedWord,
    ReorganizedGroup,
    ReorganizedSet,
    SeedCategoriesResponse,
    SeededSet,
    VocabGroupRead,
    VocabSetCreate,
    VocabSetCreateResponse,
    VocabSetRead,
)
from hebrew_app.utils.exceptions import ConflictError, NotFoundError, ValidationError

_SLUG_PATTERN = re.compile(r"[^a-z0-9]")


def slugify(value: str) -> str:
    """Lowercase ``value`` and drop everything but ``[a-z0-9]``."""

    return _SLUG_PATTERN.sub("", value.lower())


def word_id_for(set_id: str, transliteration: str) -> str:
    return f"{set_id}-{slugify(transliteration)}"


def card_payload(word: VocabWord, progress: Optional[UserProgress] = None) -> dict:
    """Card fields of ``word`` merged with the learner's progress, if any."""

    return {
        "id": word.id,
        "hebrew": word.hebrew,
        "trans": word.transliteration,
        "english": word.english,
        "type": word.type,
        "notes": word.notes or "",
        "semantic_group": word.semantic_group or "",
        "frequency": word.frequency,
        "card_type": word.card_type,
        "extra_data": word.extra_data or {},
        "level": progress.level if progress else 0,
        "next_review": progress.next_review if progress else None,
        "last_reviewed": progress.last_reviewed if progress else None,
        "review_count": progress.review_count if progress else 0,
        "correct_count": progress.correct_count if progress else 0,
    }


class VocabularyService:
    """Read and curate vocabulary sets."""

    def __init__(self, db: Session):
        self.db = db

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------
    def get_set(self, set_id: str) -> VocabSet:
        vocab_set = self.db.get(VocabSet, set_id)
        if vocab_set is None:
            raise NotFoundError(f"Vocab set '{set_id}' not found")
        return vocab_set

    def active_set_ids(self, user_id: uuid.UUID) -> set[str]:
        stmt = select(UserActiveSet.set_id).where(UserActiveSet.user_id == user_id)
        return set(self.db.scalars(stmt))

    def progress_map(
        self, user_id: uuid.UUID, word_ids: Iterable[str] | None = None
    ) -> dict[str, UserProgress]:
        stmt = select(UserProgress).where(UserProgress.user_id == user_id)
        if word_ids is not None:
            stmt = stmt.where(UserProgress.word_id.in_(list(word_ids)))
        return {row.word_id: row for row in self.db.scalars(stmt)}

    def _words_for_sets(self, set_ids: Sequence[str]) -> List[VocabWord]:
        if not set_ids:
            return []
        stmt = (
            select(VocabWord)
            .where(VocabWord.set_id.in_(set_ids))
            .order_by(
                VocabWord.set_id,
                VocabWord.group_category,
                VocabWord.group_subcategory,
                VocabWord.frequency.asc().nulls_last(),
                VocabWord.id,
            )
        )
        return list(self.db.scalars(stmt))

    def _build_sets(
        self, user_id: uuid.UUID, sets: Sequence[VocabSet], active_ids: set[str]
    ) -> List[VocabSetRead]:
        words = self._words_for_sets([vocab_set.id for vocab_set in sets])
        progress = self.progress_map(user_id, [word.id for word in words])

        grouped: dict[str, dict[tuple[str, Optional[str]], list[dict]]] = {}
        for word in words:
            groups = grouped.setdefault(word.set_id, {})
            key = (word.group_category, word.group_subcategory)
            groups.setdefault(key, []).append(card_payload(word, progress.get(word.id)))

        return [
            VocabSetRead(
                id=vocab_set.id,
                title=vocab_set.title,
                description=vocab_set.description or "",
                date_added=vocab_set.created_at,
                total_words=vocab_set.total_words,
                is_active=vocab_set.id in active_ids,
                set_type=vocab_set.set_type,
                groups=[
                    VocabGroupRead(category=category, subcategory=subcategory, words=cards)
                    for (category, subcategory), cards in grouped.get(vocab_set.id, {}).items()
                ],
            )
            for vocab_set in sets
        ]

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------
    def list_sets(self, user_id: uuid.UUID) -> List[VocabSetRead]:
        """All sets, newest first, with the learner's progress merged in."""

        sets = list(
            self.db.scalars(select(VocabSet).order_by(VocabSet.created_at.desc(), VocabSet.id))
        )
        return self._build_sets(user_id, sets, self.active_set_ids(user_id))

    def read_set(self, user_id: uuid.UUID, set_id: str) -> VocabSetRead:
        vocab_set = self.get_set(set_id)
        return self._build_sets(user_id, [vocab_set], self.active_set_ids(user_id))[0]

    def active_sets(self, user_id: uuid.UUID) -> ActiveSetsResponse:
        active_ids = self.active_set_ids(user_id)
        sets = list(
            self.db.scalars(
                select(VocabSet)
                .where(VocabSet.id.in_(active_ids))
                .order_by(VocabSet.created_at.desc(), VocabSet.id)
            )
        ) if active_ids else []
        built = self._build_sets(user_id, sets, active_ids)
        total = sum(len(group.words) for item in built for group in item.groups)
        return ActiveSetsResponse(active_sets=built, total_words=total)

    # ------------------------------------------------------------------
    # Active set selection
    # ------------------------------------------------------------------
    def activate_only(self, user_id: uuid.UUID, set_id: str) -> str:
        """Make ``set_id`` the learner's single active set."""

        self.get_set(set_id)
        self.db.execute(delete(UserActiveSet).where(UserActiveSet.user_id == user_id))
        self.db.add(UserActiveSet(user_id=user_id, set_id=set_id))
        self.db.commit()
        logger.info(f"User {user_id} activated set {set_id}")
        return set_id

    def toggle_active(self, user_id: uuid.UUID, set_id: str) -> bool:
        """Flip membership of ``set_id`` in the learner's active sets."""

        self.get_set(set_id)
        membership = self.db.scalar(
            select(UserActiveSet).where(
                UserActiveSet.user_id == user_id, UserActiveSet.set_id == set_id
            )
        )
        if membership is not None:
            self.db.delete(membership)
            is_active = False
        else:
            self.db.add(UserActiveSet(user_id=user_id, set_id=set_id))
            is_active = True
        self.db.commit()
        return is_active

    # ------------------------------------------------------------------
    # Curation (admin)
    # ------------------------------------------------------------------
    def create_set(self, payload: VocabSetCreate) -> VocabSetCreateResponse:
        """Create a set from pasted words; duplicate word ids are skipped."""

        if self.db.get(VocabSet, payload.set_id) is not None:
            raise ConflictError(f'Vocab set with ID "{payload.set_id}" already exists')

        vocab_set = VocabSet(
            id=payload.set_id,
            title=payload.title,
            description=payload.description,
            total_words=0,
            set_type="vocabulary",
        )
        self.db.add(vocab_set)
        self.db.flush()

        seen: set[str] = set()
        created: List[CreatedWord] = []
        for item in payload.words:
            word_id = word_id_for(payload.set_id, item.trans)
            if word_id in seen or self.db.get(VocabWord, word_id) is not None:
                logger.warning(f"Skipping duplicate word id {word_id}")
                continue
            seen.add(word_id)
            self.db.add(
                VocabWord(
                    id=word_id,
                    hebrew=item.hebrew,
                    transliteration=item.trans,
                    english=item.english,
                    type=item.type,
                    notes=item.notes,
                    semantic_group=item.semantic_group
                    or detect_semantic_group(item.english, item.notes, item.type),
                    frequency=item.frequency,
                    set_id=payload.set_id,
                    group_category=item.category,
                    group_subcategory=item.subcategory,
                    card_type="vocabulary",
                    extra_data={},
                )
            )
            created.append(
                CreatedWord(id=word_id, hebrew=item.hebrew, trans=item.trans, english=item.english)
            )

        vocab_set.total_words = len(created)
        self.db.commit()
        logger.info(f"Created vocab set {payload.set_id} with {len(created)} words")
        return VocabSetCreateResponse(
            set=CreatedSet(id=vocab_set.id, title=vocab_set.title, total_words=len(created)),
            words=created,
        )

    def reorganize(self, set_id: Optional[str] = None) -> List[ReorganizedSet]:
        """Regroup words of vocabulary sets into even, frequency-ordered groups.

        Foundation sets (alphabet, syllables, grammar) keep their fixed groups
        and are skipped unless named explicitly, which is rejected.
        """

        if set_id is not None:
            vocab_set = self.get_set(set_id)
            if vocab_set.set_type != "vocabulary":
                raise ValidationError(f"Set '{set_id}' has fixed groups and cannot be reorganized")
            sets = [vocab_set]
        else:
            sets = list(
                self.db.scalars(
                    select(VocabSet).where(VocabSet.set_type == "vocabulary").order_by(VocabSet.id)
                )
            )
        if not sets:
            raise NotFoundError("No vocab sets found")

        results: List[ReorganizedSet] = []
        for vocab_set in sets:
            words = list(self.db.scalars(select(VocabWord).where(VocabWord.set_id == vocab_set.id)))
            groups = organize_words(words)
            updated = 0
            for group in groups:
                for word in group.words:
                    word.group_category = group.category
                    word.group_subcategory = group.subcategory
                    updated += 1
            results.append(
                ReorganizedSet(
                    set_id=vocab_set.id,
                    words_updated=updated,
                    num_groups=len(groups),
                    groups=[
                        ReorganizedGroup(
                            category=group.category,
                            subcategory=group.subcategory,
                            word_count=len(group.words),
                            suggested_days=suggest_study_days(group.category, len(group.words)),
                        )
                        for group in groups
                    ],
                )
            )
        self.db.commit()
        logger.info(f"Reorganized {len(results)} vocab set(s)")
        return results

    # ------------------------------------------------------------------
    # Foundation sets
    # ------------------------------------------------------------------
    def seed_foundations(self) -> SeedCategoriesResponse:
        """Create the alphabet, syllable and grammar marker sets when missing."""

        alphabet = self._seed_set(ALPHABET_SET, self._alphabet_words())
        syllables = self._seed_set(SYLLABLE_SET, self._syllable_words())
        grammar = self._seed_set(GRAMMAR_SET, self._grammar_words())
        self.db.commit()
        return SeedCategoriesResponse(
            message="Categories seeded successfully",
            alphabet=alphabet,
            syllables=syllables,
            grammar=grammar,
        )

    def _seed_set(self, foundation: FoundationSet, words: Iterable[VocabWord]) -> SeededSet:
        existing = self.db.get(VocabSet, foundation.id)
        if existing is not None:
            return SeededSet(created=False, words=existing.total_words)

        vocab_set = VocabSet(
            id=foundation.id,
            title=foundation.title,
            description=foundation.description,
            total_words=0,
            set_type=foundation.set_type,
        )
        self.db.add(vocab_set)
        self.db.flush()

        inserted = 0
        seen: set[str] = set()
        for word in words:
            # Cards sharing a transliteration collapse onto the first one.
            if word.id in seen or self.db.get(VocabWord, word.id) is not None:
                continue
            seen.add(word.id)
            self.db.add(word)
            inserted += 1
        vocab_set.total_words = inserted
        self.db.flush()
        logger.info(f"Seeded foundation set {foundation.id} with {inserted} cards")
        return SeededSet(created=True, words=inserted)

    @staticmethod
    def _alphabet_words() -> Iterable[VocabWord]:
        for card in ALPHABET_CARDS:
            kind = "Vowel" if card.is_vowel else "Consonant"
            yield VocabWord(
                id=f"{ALPHABET_SET.id}-{slugify(card.name)}",
                hebrew=card.char,
                transliteration=card.name.lower(),
                english=card.name,
                type=kind,
                notes=card.notes,
                semantic_group="Alphabet",
                set_id=ALPHABET_SET.id,
                group_category="Vowels" if card.is_vowel else "Consonants",
                group_subcategory="Vowel Points" if card.is_vowel else "Letters",
                card_type="alphabet",
                extra_data={"pronunciation": card.pronunciation, "sound": card.sound},
            )

    @staticmethod
    def _syllable_words() -> Iterable[VocabWord]:
        for card in SYLLABLE_CARDS:
            yield VocabWord(
                id=f"{SYLLABLE_SET.id}-{slugify(card.pronunciation)}",
                hebrew=card.word,
                transliteration=card.pronunciation.lower(),
                english=card.meaning,
                type="Syllable",
                notes=card.notes,
                semantic_group="Syllables",
                set_id=SYLLABLE_SET.id,
                group_category="Syllables",
                group_subcategory=card.syllable_type,
                card_type="syllable",
                extra_data={
                    "syllables": card.syllables,
                    "pronunciation": card.pronunciation,
                    "syllable_type": card.syllable_type,
                },
            )

    @staticmethod
    def _grammar_words() -> Iterable[VocabWord]:
        for card in GRAMMAR_CARDS:
            yield VocabWord(
                id=f"grammar-{slugify(card.pronunciation)}",
                hebrew=card.hebrew,
                transliteration=card.pronunciation.lower(),
                english=card.meaning,
                type=card.grammar_type,
                notes=card.explanation,
                semantic_group="Grammar",
                set_id=GRAMMAR_SET.id,
                group_category=card.category,
                group_subcategory=card.grammar_type,
                card_type="grammar",
                extra_data={
                    "pronunciation": card.pronunciation,
                    "grammar_type": card.grammar_type,
                    "category": card.category,
                    "explanation": card.explanation,
                    "examples": list(card.examples),
                },
            )

    # ------------------------------------------------------------------
    # Counting helpers
    # ------------------------------------------------------------------
    def count_words(self, set_ids: Sequence[str] | None = None) -> int:
        stmt = select(func.count(VocabWord.id))
        if set_ids is not None:
            stmt = stmt.where(VocabWord.set_id.in_(set_ids))
        return self.db.scalar(stmt) or 0


__all__ = ["VocabularyService", "card_payload", "slugify", "word_id_for"]
