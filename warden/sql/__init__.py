"""
SQL shipped with Warden.

The files are applied by hand (Supabase SQL editor or psql); Warden only
reads and prints them.
"""

from pathlib import Path
from typing import List

SQL_DIR = Path(__file__).parent


def schema_files() -> List[Path]:
    """All SQL files, ordered by their numeric prefix."""
    return sorted(SQL_DIR.glob("*.sql"))


def schema_sql() -> str:
    """Concatenated SQL of every schema file."""
    return "\n".join(path.read_text() for path in schema_files())
