"""Random sentence templates: ``{0}`` is the sender, ``{1}`` the target."""
from __future__ import annotations

import random
from pathlib import Path
from typing import List, Optional, Sequence

FALLBACK_TARGET = "Baumhardt"


def load_file_lines(path: Path) -> List[str]:
    return path.read_text(encoding="utf-8").splitlines()


def _pick(options: Sequence[str]) -> str:
    return random.choice(options) if options else "FIXME"


def random_sentence_at(options: Sequence[str], username: str, target: str) -> str:
    return _pick(options).replace("{0}", username).replace("{1}", target)


def random_sentence(
    options: Sequence[str],
    options_single: Optional[Sequence[str]],
    username: str,
) -> str:
    if options_single is not None:
        return _pick(options_single).replace("{0}", username)
    return random_sentence_at(options, username, FALLBACK_TARGET)
