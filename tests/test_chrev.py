from zbplugin.chrev import flip


def test_single_letters():
    assert flip("a") == "ɐ"
    assert flip("T") == "⏊"


def test_empty():
    assert flip("") == ""


def test_sentence():
    assert flip("I love you") == "noʎ ǝʌol I"


def test_reverse_concatenation_invariant():
    left, right = "Hello", "World"
    assert flip(left + right) == flip(right) + flip(left)


def test_length_preserved_for_ascii():
    text = "The quick brown fox"
    assert len(flip(text)) == len(text)


def test_unmapped_becomes_nul():
    assert flip("\t") == "\x00"