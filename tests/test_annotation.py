"""Tests for TextGrid loading and tier lookup."""

from pathlib import Path

import pytest
from praatio import textgrid

from pausestrip.annotation import (
    TierNotFoundError,
    find_tier_index,
    get_intervals,
    load_textgrid,
)


def _write_textgrid(path: Path, tiers: dict, duration: float = 1.0) -> Path:
    tg = textgrid.Textgrid()
    for name, entries in tiers.items():
        tg.addTier(textgrid.IntervalTier(name, entries, 0, duration))
    tg.save(str(path), format="long_textgrid", includeBlankSpaces=True)
    return path


@pytest.fixture
def two_tier_grid(tmp_path):
    return load_textgrid(_write_textgrid(tmp_path / "a.wav.TextGrid", {
        "phones": [(0.0, 0.15, "sil"), (0.15, 0.5, "HH"), (0.5, 1.0, "AH0")],
        "words": [(0.0, 0.15, "sil"), (0.15, 1.0, "hello")],
    }))


def test_load_missing():
    with pytest.raises(FileNotFoundError):
        load_textgrid(Path("/nonexistent/a.wav.TextGrid"))


def test_find_tier_index_is_one_based(two_tier_grid):
    assert find_tier_index(two_tier_grid, "phones") == 1
    assert find_tier_index(two_tier_grid, "words") == 2


def test_find_tier_index_not_found(two_tier_grid):
    with pytest.raises(TierNotFoundError) as excinfo:
        find_tier_index(two_tier_grid, "syllables", source="a.wav.TextGrid")
    assert excinfo.value.tier_name == "syllables"
    assert excinfo.value.available == ["phones", "words"]
    assert "a.wav.TextGrid" in str(excinfo.value)


def test_tier_not_found_is_lookup_error(two_tier_grid):
    with pytest.raises(LookupError):
        find_tier_index(two_tier_grid, "Words")


def test_get_intervals(two_tier_grid):
    intervals = get_intervals(two_tier_grid, 2)
    assert [iv.index for iv in intervals] == [1, 2]
    assert [iv.label for iv in intervals] == ["sil", "hello"]
    assert intervals[1].start == pytest.approx(0.15)
    assert intervals[1].end == pytest.approx(1.0)


def test_blank_gaps_keep_their_index(tmp_path):
    tg = load_textgrid(_write_textgrid(tmp_path / "b.wav.TextGrid", {
        "words": [(0.2, 0.5, "hi"), (0.7, 1.0, "there")],
    }))
    intervals = get_intervals(tg, 1)
    assert [iv.label for iv in intervals] == ["", "hi", "", "there"]
    assert [iv.index for iv in intervals] == [1, 2, 3, 4]
    assert intervals[0].start == pytest.approx(0.0)


def test_point_tier_rejected(tmp_path):
    tg = textgrid.Textgrid()
    tg.addTier(textgrid.PointTier("marks", [(0.5, "x")], 0, 1.0))
    path = tmp_path / "c.wav.TextGrid"
    tg.save(str(path), format="long_textgrid", includeBlankSpaces=True)
    loaded = load_textgrid(path)
    with pytest.raises(ValueError, match="not an interval tier"):
        get_intervals(loaded, find_tier_index(loaded, "marks"))


_DUPLICATE_WORDS = '''File type = "ooTextFile"
Object class = "TextGrid"

xmin = 0
xmax = 1
tiers? <exists>
size = 2
item []:
    item [1]:
        class = "IntervalTier"
        name = "words"
        xmin = 0
        xmax = 1
        intervals: size = 1
        intervals [1]:
            xmin = 0
            xmax = 1
            text = "sil"
    item [2]:
        class = "IntervalTier"
        name = "words"
        xmin = 0
        xmax = 1
        intervals: size = 2
        intervals [1]:
            xmin = 0
            xmax = 0.5
            text = "sil"
        intervals [2]:
            xmin = 0.5
            xmax = 1
            text = "hello"
'''


def test_repeated_tier_name_last_wins(tmp_path):
    path = tmp_path / "dup.wav.TextGrid"
    path.write_text(_DUPLICATE_WORDS, encoding="utf-8")
    tg = load_textgrid(path)
    assert tg.tier_names == ["words", "words"]
    index = find_tier_index(tg, "words")
    assert index == 2
    intervals = get_intervals(tg, index)
    assert [iv.label for iv in intervals] == ["sil", "hello"]
    assert intervals[1].start == pytest.approx(0.5)


def test_utf16_textgrid(tmp_path):
    path = tmp_path / "u16.wav.TextGrid"
    path.write_text(_DUPLICATE_WORDS, encoding="utf-16")
    assert load_textgrid(path).tier_names == ["words", "words"]


def test_malformed_textgrid(tmp_path):
    path = tmp_path / "junk.wav.TextGrid"
    path.write_text("this is not a textgrid", encoding="utf-8")
    with pytest.raises(ValueError, match="Malformed annotation"):
        load_textgrid(path)
