from preprocess.references import extract_biblical_references, format_reference


def test_genesis_citation():
    text = "In the beginning God created the heaven... Genesis 1:1"
    assert "Genesis 1:1" in extract_biblical_references(text)


def test_verse_range_and_abbreviations():
    text = "See Gen. 3:14-15, Isa. 6:3 and Ps. 104:2."
    assert extract_biblical_references(text) == ["Gen 3:14-15", "Isa 6:3", "Ps 104:2"]


def test_bare_book_and_chapter_only():
    assert extract_biblical_references("as the Zohar teaches") == ["Zohar"]
    assert extract_biblical_references("read Psalms 23 today") == ["Psalms 23"]


def test_case_insensitive_and_hebrew_names():
    assert extract_biblical_references("bereishit 2:7") == ["bereishit 2:7"]
    assert extract_biblical_references("Shir HaShirim 1:2") == ["Shir HaShirim 1:2"]


def test_duplicates_collapsed_in_first_seen_order():
    text = "Exodus 3:2, then Genesis 1:1, and again Exodus 3:2."
    assert extract_biblical_references(text) == ["Exodus 3:2", "Genesis 1:1"]


def test_names_inside_words_do_not_match():
    text = "He spoke the truth about creation theology."
    assert extract_biblical_references(text) == []


def test_no_references():
    assert extract_biblical_references("") == []
    assert extract_biblical_references("A quiet night in the desert.") == []


def test_format_reference():
    assert format_reference("Gen.", "3", "14", "15") == "Gen 3:14-15"
    assert format_reference("Genesis", "3", None, "15") == "Genesis 3"
    assert format_reference("B.") == "B"
