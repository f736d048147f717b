import pytest

from quakelist.options import Magnitude, TimeSpan

TS_TOKENS = ["hour", "day", "week", "month"]
MAG_TOKENS = ["significant", "4_5", "2_5", "1_0", "all"]


@pytest.mark.parametrize("cls,token", [(TimeSpan, t) for t in TS_TOKENS] + [(Magnitude, t) for t in MAG_TOKENS])
def test_token_survives_canonical_form(cls, token):
    value, err = cls.parse(token)
    assert err is None
    assert cls.from_canonical(value.canonical) is value
    assert cls.parse(value.token) == (value, None)

def test_empty_token_gives_default():
    assert TimeSpan.parse("") == (TimeSpan.DAY, None)
    assert Magnitude.parse("") == (Magnitude.SIGNIFICANT, None)

def test_bogus_token_gives_default_and_message():
    assert TimeSpan.parse("bogus") == (TimeSpan.DAY, "invalid timespan 'bogus'")
    assert Magnitude.parse("bogus") == (Magnitude.SIGNIFICANT, "invalid magnitude 'bogus'")

def test_magnitude_canonical_differs_from_input():
    assert Magnitude.M4_5.canonical == "4.5"
    assert Magnitude.M2_5.canonical == "2.5"
    assert Magnitude.M1_0.canonical == "1.0"
    assert Magnitude.ALL.canonical == "all"
    # the URL form is not accepted as form input
    assert Magnitude.parse("4.5") == (Magnitude.SIGNIFICANT, "invalid magnitude '4.5'")

def test_labels():
    assert TimeSpan.WEEK.label == "Past 7 Days"
    assert Magnitude.M1_0.label == "M1.0+"

def test_from_canonical_rejects_unknown():
    with pytest.raises(ValueError):
        TimeSpan.from_canonical("year")
