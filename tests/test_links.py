from zbplugin import links


def test_baidu_empty():
    assert links.baidu_link("") is None


def test_baidu_escapes():
    assert links.baidu_link("a b") == links.BAIDU_URL + "a+b"


def test_baidu_keeps_safe_chars():
    assert links.baidu_link("x-_.~") == links.BAIDU_URL + "x-_.~"


def test_alipay_strips():
    assert links.alipay_voice_url(" 1 ") == "https://mm.cqu.cc/share/zhifubaodaozhang/mp3/1.mp3"


def test_waifu_numbered():
    assert links.waifu_url(5) == links.WAIFU_URL.format(5)


def test_waifu_random_in_range():
    for _ in range(50):
        url = links.waifu_url()
        number = int(url.rsplit("-", 1)[1].removesuffix(".jpg"))
        assert 1 <= number <= links.WAIFU_COUNT