from __future__ import annotations

import logging
import random
from pathlib import Path
from typing import List, Optional

import yaml

logger = logging.getLogger(__name__)

DEFAULT_CORPUS = Path(__file__).resolve().parent.parent / "data" / "passages.yaml"


class PassageRepository:
    """Fixed corpus of passages; ``next()`` draws one uniformly at random."""

    def __init__(self, path: Optional[Path] = None, rng: Optional[random.Random] = None) -> None:
        self._path = path or DEFAULT_CORPUS
        self._rng = rng or random.Random()
        self._passages = self._load_passages()

    def next(self) -> str:
        return self._rng.choice(self._passages)

    def _load_passages(self) -> List[str]:
        if not self._path.exists():
            raise FileNotFoundError(f"Passage corpus not found: {self._path}")
        raw = yaml.safe_load(self._path.read_text(encoding="utf-8"))
        if not raw or not isinstance(raw, dict):
            raise ValueError(f"{self._path.name}: expected YAML with a 'passages' list")
        content = raw.get("passages")
        if not isinstance(content, list):
            raise ValueError(f"{self._path.name}: missing or invalid 'passages'")
        passages = [str(item).strip() for item in content if item is not None and str(item).strip()]
        if not passages:
            raise ValueError(f"{self._path.name}: 'passages' is empty")
        logger.debug("Loaded %d passages from %s", len(passages), self._path)
        return passages
