"""Small link builders: search, payment voice and random waifu."""

from __future__ import annotations

import random
from urllib.parse import quote_plus

BAIDU_URL = "https://buhuibaidu.me/?s="
ALIPAY_VOICE_URL = "https://mm.cqu.cc/share/zhifubaodaozhang/mp3/{}.mp3"
WAIFU_URL = "https://www.thiswaifudoesnotexist.net/example-{}.jpg"
WAIFU_COUNT = 100000


def baidu_link(text: str) -> str | None:
    """Link that searches the text for someone; None for empty text."""
    if not text:
        return None
    return BAIDU_URL + quote_plus(text)


def alipay_voice_url(amount: str) -> str:
    """URL of the payment-received voice for an amount."""
    return ALIPAY_VOICE_URL.format(amount.strip())


def waifu_url(number: int | None = None) -> str:
    """URL of a generated waifu picture; a random one when no number is given."""
    if number is None:
        number = random.randrange(WAIFU_COUNT) + 1
    return WAIFU_URL.format(number)