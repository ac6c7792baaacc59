"""Tests for speedtype.core.passages – YAML passage corpus."""

from __future__ import annotations

import random
from pathlib import Path

import pytest
import yaml

from speedtype.core.passages import DEFAULT_CORPUS, PassageRepository


def _write_yaml(path: Path, data: object) -> Path:
    path.write_text(yaml.dump(data, allow_unicode=True, default_flow_style=False), encoding="utf-8")
    return path


# ---------------------------------------------------------------------------
# Bundled corpus
# ---------------------------------------------------------------------------

class TestBundledCorpus:
    def test_file_exists(self):
        assert DEFAULT_CORPUS.exists()

    def test_draws_from_five_pangrams(self):
        repo = PassageRepository(rng=random.Random(1))
        drawn = {repo.next() for _ in range(300)}
        assert len(drawn) == 5
        assert "The quick brown fox jumps over the lazy dog." in drawn


# ---------------------------------------------------------------------------
# Loading custom corpora
# ---------------------------------------------------------------------------

class TestLoading:
    def test_strips_and_drops_blank(self, tmp_path: Path):
        path = _write_yaml(tmp_path / "p.yaml", {"passages": ["  one  ", "", "   ", "two"]})
        repo = PassageRepository(path=path, rng=random.Random(3))
        assert {repo.next() for _ in range(100)} == {"one", "two"}

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            PassageRepository(path=tmp_path / "nope.yaml")

    def test_not_a_mapping(self, tmp_path: Path):
        path = _write_yaml(tmp_path / "p.yaml", ["just", "a", "list"])
        with pytest.raises(ValueError, match="expected YAML"):
            PassageRepository(path=path)

    def test_missing_key(self, tmp_path: Path):
        path = _write_yaml(tmp_path / "p.yaml", {"title": "x"})
        with pytest.raises(ValueError, match="passages"):
            PassageRepository(path=path)

    def test_empty_list(self, tmp_path: Path):
        path = _write_yaml(tmp_path / "p.yaml", {"passages": ["", "  "]})
        with pytest.raises(ValueError, match="empty"):
            PassageRepository(path=path)


# ---------------------------------------------------------------------------
# Random selection
# ---------------------------------------------------------------------------

class TestNext:
    def test_single_passage(self, tmp_path: Path):
        path = _write_yaml(tmp_path / "p.yaml", {"passages": ["only"]})
        assert PassageRepository(path=path).next() == "only"

    def test_seeded_rng_is_deterministic(self, tmp_path: Path):
        path = _write_yaml(tmp_path / "p.yaml", {"passages": ["a", "b", "c", "d"]})
        first = PassageRepository(path=path, rng=random.Random(42))
        second = PassageRepository(path=path, rng=random.Random(42))
        assert [first.next() for _ in range(10)] == [second.next() for _ in range(10)]

    def test_every_passage_reachable(self, tmp_path: Path):
        path = _write_yaml(tmp_path / "p.yaml", {"passages": ["a", "b", "c"]})
        repo = PassageRepository(path=path, rng=random.Random(0))
        assert {repo.next() for _ in range(200)} == {"a", "b", "c"}
