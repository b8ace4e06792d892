"""Create every table for a fresh database (no migrations are kept)."""
from __future__ import annotations

import sys
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parent.parent))

from hebrew_app.db import models  # noqa: F401  # Imported for side effects
from hebrew_app.db.base import Base
from hebrew_app.db.session import engine


if __name__ == "__main__":
    print("Creating tables...")
    Base.metadata.create_all(bind=engine)
    print(f"Tables created: {', '.join(sorted(Base.metadata.tables))}")
