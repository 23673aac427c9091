import pytest

from zbplugin.biliparse import SHORT_LINK_RE, LinkKind, match_link, video_id


@pytest.mark.parametrize(
    "url, kind, ident",
    [
        ("t.bilibili.com/642277677329285174", LinkKind.DYNAMIC, "642277677329285174"),
        ("bilibili.com/read/cv17134450", LinkKind.ARTICLE, "17134450"),
        ("bilibili.com/video/BV13B4y1x7pS", LinkKind.VIDEO, "BV13B4y1x7pS"),
        ("live.bilibili.com/22603245", LinkKind.LIVE, "22603245"),
        ("https://www.bilibili.com/video/av10007", LinkKind.VIDEO, "10007"),
        ("m.bilibili.com/dynamic/675892999274627104", LinkKind.DYNAMIC, "675892999274627104"),
        ("bilibili.com/read/mobile/17279244", LinkKind.ARTICLE, "17279244"),
    ],
)
def test_match_link(url, kind, ident):
    found = match_link(url)
    assert found.kind is kind
    assert found.id == ident


def test_escaped_slashes():
    found = match_link("bilibili.com\\/video\\/BV1xx411c7mD")
    assert found.kind is LinkKind.VIDEO
    assert found.id == "BV1xx411c7mD"


def test_no_match():
    assert match_link("example.com/nothing") is None


def test_groups_include_whole_match():
    found = match_link("see bilibili.com/video/av10007 now")
    assert found.groups[0] == "bilibili.com/video/av10007"
    assert found.groups[2] == ""


def test_video_id_prefers_av():
    assert video_id(["x", "10007", ""]) == "10007"
    assert video_id(["x", "", "BV1xx411c7mD"]) == "BV1xx411c7mD"


def test_short_link():
    assert SHORT_LINK_RE.search("look b23.tv/abc123") is not None
    assert SHORT_LINK_RE.search("look example.com/abc") is None