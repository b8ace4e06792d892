"""Seed the achievement catalog and the foundation card sets."""
from __future__ import annotations

import sys
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parent.parent))

from hebrew_app.db.session import SessionLocal
from hebrew_app.services.achievement import DEFAULT_ACHIEVEMENTS, AchievementService
from hebrew_app.services.vocabulary import VocabularyService


def main() -> None:
    """Insert or refresh achievements, then add any missing foundation sets."""

    db = SessionLocal()
    try:
        print(f"Seeding {len(DEFAULT_ACHIEVEMENTS)} achievement definitions...")
        created = AchievementService(db).seed_achievements()
        db.commit()
        print(f"✓ Achievements ready ({created} new)")

        result = VocabularyService(db).seed_foundations()
        print(f"✓ {result.message}")
        for name, seeded in (
            ("alphabet", result.alphabet),
            ("syllables", result.syllables),
            ("grammar", result.grammar),
        ):
            state = "created" if seeded.created else "already present"
            print(f"  {name}: {seeded.words} cards ({state})")

    except Exception as exc:  # pragma: no cover - CLI feedback
        print(f"✗ Error seeding content: {exc}")
        raise
    finally:
        db.close()


if __name__ == "__main__":
    main()
