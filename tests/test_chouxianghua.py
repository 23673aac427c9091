from zbplugin.chouxianghua import convert


def _lookups(pinyin, emoji):
    return (lambda w: pinyin.get(w, "")), (lambda p: emoji.get(p, ""))


def test_pair_replacement():
    pinyin_of, emoji_of = _lookups({"你": "ni", "好": "hao"}, {"nihao": "👋"})
    assert convert("你好", pinyin_of, emoji_of) == "👋"


def test_single_replacement_and_passthrough():
    pinyin_of, emoji_of = _lookups({"你": "ni", "好": "hao"}, {"ni": "🫵"})
    assert convert("你好", pinyin_of, emoji_of) == "🫵好"


def test_unknown_text_unchanged():
    pinyin_of, emoji_of = _lookups({}, {})
    assert convert("abc 123", pinyin_of, emoji_of) == "abc 123"


def test_pair_consumes_both_characters():
    pinyin_of, emoji_of = _lookups(
        {"你": "ni", "好": "hao", "呀": "ya"}, {"nihao": "👋", "ya": "❗"}
    )
    assert convert("你好呀", pinyin_of, emoji_of) == "👋❗"


def test_empty():
    pinyin_of, emoji_of = _lookups({}, {})
    assert convert("", pinyin_of, emoji_of) == ""