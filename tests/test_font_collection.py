import pytest
from hypothesis import given
from hypothesis import strategies as st

from skribidi.font_collection import (
    MAX_FONTS,
    Font,
    FontCollection,
    FontFamily,
    FontStretch,
    FontStyle,
    stretch_value,
)

LATN = "Latn"
ARAB = "Arab"


def latin(name, **kwargs):
    return Font(name=name, scripts={LATN}, **kwargs)


def make(*fonts):
    collection = FontCollection()
    for font in fonts:
        collection.add_font(font)
    return collection


def names(fonts):
    return [font.name for font in fonts]


def test_stretch_value_table():
    assert stretch_value(FontStretch.NORMAL) == 1.0
    assert stretch_value(FontStretch.CONDENSED) == 0.75
    assert stretch_value(FontStretch.ULTRA_EXPANDED) == 2.0


def test_stretch_value_clamps():
    assert stretch_value(99) == stretch_value(FontStretch.ULTRA_EXPANDED)
    assert stretch_value(-5) == stretch_value(FontStretch.NORMAL)


def test_add_font_assigns_index_and_get_font():
    a, b = latin("a"), latin("b")
    collection = make(a, b)
    assert a.idx == 0
    assert b.idx == 1
    assert collection.get_font(1) is b
    assert len(collection) == 2


def test_get_font_out_of_range():
    collection = make(latin("a"))
    with pytest.raises(IndexError):
        collection.get_font(1)


def test_too_many_fonts():
    collection = FontCollection()
    for i in range(MAX_FONTS):
        collection.add_font(latin(str(i)))
    with pytest.raises(OverflowError):
        collection.add_font(latin("extra"))


def test_collection_ids_increase():
    first = FontCollection()
    second = FontCollection()
    assert second.id > first.id


def test_filters_by_family_and_script():
    collection = make(
        latin("latin"),
        Font(name="arabic", scripts={ARAB}),
        Font(name="emoji", font_family=FontFamily.EMOJI, scripts={LATN}),
    )
    result = collection.match_fonts(LATN, FontFamily.DEFAULT, FontStyle.NORMAL, FontStretch.NORMAL, 400)
    assert names(result) == ["latin"]


def test_emoji_family_ignores_script():
    collection = make(Font(name="emoji", font_family=FontFamily.EMOJI))
    result = collection.match_fonts(ARAB, FontFamily.EMOJI, FontStyle.NORMAL, FontStretch.NORMAL, 400)
    assert names(result) == ["emoji"]


def test_no_candidates():
    collection = make(Font(name="arabic", scripts={ARAB}))
    assert collection.match_fonts(LATN, FontFamily.DEFAULT, FontStyle.NORMAL, FontStretch.NORMAL, 400) == []


def test_identical_fonts_all_returned():
    collection = make(latin("a"), latin("b"))
    result = collection.match_fonts(LATN, FontFamily.DEFAULT, FontStyle.ITALIC, FontStretch.EXPANDED, 900)
    assert names(result) == ["a", "b"]


def test_stretch_exact():
    collection = make(latin("normal", stretch=1.0), latin("condensed", stretch=0.75))
    result = collection.match_fonts(LATN, FontFamily.DEFAULT, FontStyle.NORMAL, FontStretch.CONDENSED, 400)
    assert names(result) == ["condensed"]
    result = collection.match_fonts(LATN, FontFamily.DEFAULT, FontStyle.NORMAL, FontStretch.NORMAL, 400)
    assert names(result) == ["normal"]


def test_stretch_nearest():
    collection = make(latin("normal", stretch=1.0), latin("condensed", stretch=0.75))
    result = collection.match_fonts(LATN, FontFamily.DEFAULT, FontStyle.NORMAL, FontStretch.EXPANDED, 400)
    assert names(result) == ["normal"]


def test_style_italic_falls_back_to_oblique():
    collection = make(latin("normal"), latin("oblique", style=FontStyle.OBLIQUE))
    result = collection.match_fonts(LATN, FontFamily.DEFAULT, FontStyle.ITALIC, FontStretch.NORMAL, 400)
    assert names(result) == ["oblique"]


def test_style_normal_prefers_oblique_over_italic():
    collection = make(latin("italic", style=FontStyle.ITALIC), latin("oblique", style=FontStyle.OBLIQUE))
    result = collection.match_fonts(LATN, FontFamily.DEFAULT, FontStyle.NORMAL, FontStretch.NORMAL, 400)
    assert names(result) == ["oblique"]


def test_style_exact():
    collection = make(latin("normal"), latin("italic", style=FontStyle.ITALIC))
    result = collection.match_fonts(LATN, FontFamily.DEFAULT, FontStyle.ITALIC, FontStretch.NORMAL, 400)
    assert names(result) == ["italic"]


def test_weight_400_prefers_500():
    collection = make(latin("light", weight=300), latin("medium", weight=500))
    result = collection.match_fonts(LATN, FontFamily.DEFAULT, FontStyle.NORMAL, FontStretch.NORMAL, 400)
    assert names(result) == ["medium"]


def test_weight_450_prefers_400():
    collection = make(latin("regular", weight=400), latin("semibold", weight=600))
    result = collection.match_fonts(LATN, FontFamily.DEFAULT, FontStyle.NORMAL, FontStretch.NORMAL, 450)
    assert names(result) == ["regular"]


def test_weight_heavy_request_takes_nearest_darker():
    collection = make(latin("light", weight=300), latin("semibold", weight=600))
    result = collection.match_fonts(LATN, FontFamily.DEFAULT, FontStyle.NORMAL, FontStretch.NORMAL, 700)
    assert names(result) == ["semibold"]


def test_weight_light_request_takes_nearest_lighter():
    collection = make(latin("thin", weight=200), latin("medium", weight=500))
    result = collection.match_fonts(LATN, FontFamily.DEFAULT, FontStyle.NORMAL, FontStretch.NORMAL, 300)
    assert names(result) == ["thin"]


def test_weight_light_request_without_lighter_fonts():
    collection = make(latin("medium", weight=500), latin("bold", weight=700))
    result = collection.match_fonts(LATN, FontFamily.DEFAULT, FontStyle.NORMAL, FontStretch.NORMAL, 200)
    assert names(result) == ["medium"]


def test_default_font():
    collection = make(
        latin("bold", weight=700),
        latin("regular", weight=400),
        latin("italic", weight=400, style=FontStyle.ITALIC),
    )
    default = collection.get_default_font(FontFamily.DEFAULT)
    assert default is not None
    assert default.name == "regular"


def test_default_font_missing_family():
    collection = make(latin("regular"))
    assert collection.get_default_font(FontFamily.EMOJI) is None


@given(
    weights=st.lists(st.integers(min_value=100, max_value=900), min_size=1, max_size=8),
    requested=st.integers(min_value=100, max_value=900),
)
def test_weight_match_returns_one_weight_from_candidates(weights, requested):
    collection = make(*(latin(str(i), weight=w) for i, w in enumerate(weights)))
    result = collection.match_fonts(LATN, FontFamily.DEFAULT, FontStyle.NORMAL, FontStretch.NORMAL, requested)
    assert result
    assert len({font.weight for font in result}) == 1
    assert result[0].weight in weights
    if requested in weights:
        assert result[0].weight == requested