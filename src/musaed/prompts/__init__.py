"""System instruction sent with every request.

Hides where the instruction text lives: a prompts/system.txt in the working
directory takes precedence over the copy shipped with the package, so the
assistant's persona can change without a code change.
"""

from functools import lru_cache
from pathlib import Path

SYSTEM_PROMPT_FILE = "system.txt"

_PACKAGE_DIR = Path(__file__).parent


def system_prompt_paths() -> list[Path]:
    """Locations searched for the instruction, highest precedence first."""
    return [
        Path.cwd() / "prompts" / SYSTEM_PROMPT_FILE,
        _PACKAGE_DIR / SYSTEM_PROMPT_FILE,
    ]


@lru_cache(maxsize=1)
def get_system_instruction() -> str:
    """Read the system instruction once per process.

    Call get_system_instruction.cache_clear() to pick up an edited file.

    Raises:
        FileNotFoundError: If no instruction file exists
    """
    paths = system_prompt_paths()
    for path in paths:
        if path.is_file():
            return path.read_text(encoding="utf-8").strip()

    searched = "\n".join(f"  - {path}" for path in paths)
    raise FileNotFoundError(f"System instruction not found. Searched:\n{searched}")


__all__ = [
    "SYSTEM_PROMPT_FILE",
    "get_system_instruction",
    "system_prompt_paths",
]
