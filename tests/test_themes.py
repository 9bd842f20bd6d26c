from preprocess.themes import THEMES, extract_themes


def test_creation_theme():
    text = "In the beginning God created the heaven and the earth."
    themes = extract_themes(text)
    assert "creation" in themes
    assert "heaven" in themes


def test_case_insensitive_and_multiword_keywords():
    themes = extract_themes("The LEVIATHAN swam beneath the Burning Bush")
    assert themes == ["moses", "creatures"]


def test_taxonomy_order_and_no_duplicates():
    text = "Angels and seraphim and cherubim sang; Michael and Gabriel answered."
    themes = extract_themes(text)
    assert themes == ["angels"]


def test_no_themes():
    assert extract_themes("") == []
    assert extract_themes("A quiet walk by the road.") == []


def test_taxonomy():
    assert len(THEMES) == 18
    assert len(set(THEMES)) == 18
