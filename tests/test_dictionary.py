import json
import random

import pytest

from wordlet.config.game_settings import load_word_list, validate_word_list_integrity
from wordlet.services import Dictionary, get_dictionary


def test_contains(dictionary):
    assert dictionary.contains("slump")
    assert "slump" in dictionary
    assert not dictionary.contains("djkle")
    assert not dictionary.contains("SLUMP")


def test_random_word_uses_the_injected_rng():
    words = ["crane", "stare", "raise", "slump"]
    first = Dictionary(words, rng=random.Random(99))
    second = Dictionary(words, rng=random.Random(99))

    picks = [first.random_word() for _ in range(10)]
    assert picks == [second.random_word() for _ in range(10)]
    assert set(picks) <= set(words)


def test_duplicates_are_collapsed():
    dictionary = Dictionary(["crane", "crane", "stare"])
    assert len(dictionary) == 2
    assert list(dictionary) == ["crane", "stare"]


def test_empty_dictionary_is_rejected():
    with pytest.raises(ValueError):
        Dictionary([])


def test_packaged_word_list_loads():
    dictionary = get_dictionary()
    assert len(dictionary) > 100
    for word in ["slump", "abbey", "ahead", "sleep", "admit", "aging"]:
        assert word in dictionary
    assert all(len(word) == 5 and word.islower() for word in dictionary)


def test_load_word_list_lowercases(tmp_path):
    path = tmp_path / "words.json"
    path.write_text(json.dumps(["CRANE", "Stare"]), encoding="utf-8")

    assert load_word_list(str(path)) == ["crane", "stare"]
    assert Dictionary.from_file(str(path)).contains("crane")


@pytest.mark.parametrize("content", [
    json.dumps([]),
    json.dumps({"words": ["crane"]}),
    json.dumps(["crane", "stares"]),
    json.dumps(["crane", "st4re"]),
    json.dumps(["crane", "crane"]),
    "not json",
])
def test_load_word_list_rejects_bad_files(tmp_path, content):
    path = tmp_path / "words.json"
    path.write_text(content, encoding="utf-8")

    with pytest.raises(ValueError):
        load_word_list(str(path))


def test_load_word_list_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_word_list(str(tmp_path / "missing.json"))


def test_validate_word_list_integrity_reports_duplicates():
    with pytest.raises(ValueError, match="crane"):
        validate_word_list_integrity(["crane", "stare", "crane"])

    with pytest.raises(ValueError, match="lowercase"):
        validate_word_list_integrity(["CRANE"])

    assert validate_word_list_integrity(["crane", "stare"])
