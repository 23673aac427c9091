# zbplugin

Building blocks for a chat bot that speaks the OneBot protocol: the bot's
command-line configuration and a set of plugin behaviours, each usable on
its own.

## Modules

- `zbplugin.message` – message segments: `Segment` and the builders `text`,
  `image`, `record`, `at`, `reply`. `str(segment)` gives the CQ-code form.
- `zbplugin.cli` – `parse_args`, `build_config`, `load_config`, `save_config`,
  the `BotConfig`, `WSClient` and `WSServer` dataclasses, and `main`.
- `zbplugin.banner` – `BANNER`, `render_banner(version, when)`,
  `latest_tag(tags_output)` and `generate(path)`, which runs
  `git tag --sort=committerdate` and writes a module holding the banner.
- `zbplugin.logformat` – `LogFormat`, a `logging.Formatter` that writes
  coloured `[LEVEL] message` lines, and `level_color(levelno)`.
- `zbplugin.chrev` – `flip(text)` reverses English text and turns it upside down.
- `zbplugin.breakrepeat` – `RepeatBreaker.feed(group_id, raw)` returns a
  shuffled copy of a message once it has been repeated past the throttle
  (3 by default), otherwise `None`.
- `zbplugin.choose` – `parse_options` splits "A还是B还是C"; `choose` builds the
  reply listing the options and the one picked.
- `zbplugin.chat` – `name_reply`, `poke_reply` with a per-key token bucket
  `RateLimiter`, and a per-group `AirConditioner`.
- `zbplugin.chouxianghua` – `convert(text, pinyin_of, emoji_of)` replaces
  characters, or pairs of them, whose pronunciation maps to an emoji. You supply
  the two lookups.
- `zbplugin.cpstory` – `CpStory`, `fill_story` and `split_names`.
- `zbplugin.aifalse` – `cpu_percent`, `mem_percent`, `disk_report` (via
  psutil), and `pack_limit`, `unpack_limit`, `parse_limit_command` for the
  packed rate-limit setting.
- `zbplugin.aipaint` – `ServerConfig`, painting server settings kept in a JSON
  file (`update`, `load`).
- `zbplugin.links` – `baidu_link`, `alipay_voice_url`, `waifu_url`.
- `zbplugin.tts` – `set_reply_mode`, `reply_mode`, `format_list` and
  `TTSModes`, which keeps per-group voice choices packed into integers in any
  mutable mapping you give it.
- `zbplugin.antiabuse` – `AntiDB`, an SQLite store of forbidden words per group
  and of ban times; `clean_message` and `group_table`.
- `zbplugin.biliparse` – `match_link` recognises video, dynamic, article and
  live-room links; `video_id`.
- `zbplugin.bilipushdb` – `PushDB`, an SQLite store of push subscriptions and
  uploader names, with `Push` rows.
- `zbplugin.bilipush` – `subscribe`, `unsubscribe`, `unsubscribe_dynamic`,
  `unsubscribe_live`, `format_push_list`, `LiveTracker`, `DynamicTracker`,
  `live_message` and `targets`.

## Install

```
pip install .
```

## Command line

```
zbplugin -h
```

prints the options. The usual ones:

```
zbplugin -u ws://127.0.0.1:6700 -t token -n MyBot -p / 12345678
```

Trailing integers become super users. `-s config.json` saves the resulting
configuration and exits; `-c config.json` reads it back instead of the flags.
`-d` turns on debug logging, `-w` keeps only warnings and above. `-l`, `-r`
and `-x` set latency (ms), ring size and maximum processing time (minutes).

## Library use

```python
from zbplugin.chrev import flip
from zbplugin.breakrepeat import RepeatBreaker

print(flip("I love you"))

breaker = RepeatBreaker()
for _ in range(5):
    out = breaker.feed(1, "hello")
print(out)  # the letters of "hello", shuffled
```

## What it does not do

- `zbplugin` (the command) builds or loads the configuration and prints the
  banner; it does not connect to a websocket, receive events or run plugins.
- Nothing here sends messages; functions return the text or `Segment`s to send.
- No network requests are made: link details, live status and dynamics must be
  fetched by the caller and passed to `bilipush`.
- `TTSModes` only records which voice a group uses; it does not synthesise speech.
- No images are rendered; lists such as `AntiDB.list_words` come back as text.

## Tests

```
pip install .[test]
pytest
```