import argparse
import logging
import pathlib
import re

import trio

from .commontypes import SettingsError
from .events import Event, KeyCode
from .keystreams import make_keystream
from .settings import Settings

TOKEN_MATCHER = re.compile(r"<(BS|SHIFT|ENTER|SYM)>|(.)", re.DOTALL)
NAMED_KEYS = {
    "BS": KeyCode.DELETE,
    "SHIFT": KeyCode.SHIFT,
    "ENTER": KeyCode.ENTER,
    "SYM": KeyCode.SYMBOL_ALPHA,
}


def parse_keys(keys: str, combining: bool = True) -> list[Event]:
    "Turn a string such as 'か゛<BS>は゜' into key events; <BS>, <SHIFT>, <ENTER> and <SYM> name functional keys."
    events = []
    for match in TOKEN_MATCHER.finditer(keys):
        named, character = match.groups()
        if named is not None:
            events.append(Event.functional(NAMED_KEYS[named]))
        else:
            events.append(Event.keypress(ord(character), combining=combining))
    return events


def describe(event: Event) -> str:
    if event.is_consumed:
        return "consumed"
    if event.text is not None:
        return f"commit {event.text!r}"
    if event.is_functional_key:
        try:
            return f"key {KeyCode(event.key_code).name}"
        except ValueError:
            return f"key {event.key_code}"
    return f"key {event.text_to_commit!r}"


async def combine_keys(events: list[Event], settings: Settings):
    send_channel, receive_channel = trio.open_memory_channel(len(events))
    async with send_channel:
        for event in events:
            send_channel.send_nowait(event)
    composing = ""
    async with make_keystream(receive_channel, settings) as keystream:
        async for combined in keystream:
            composing = combined.composing
            print(f"{describe(combined.event):<24} {composing}")
    print(f"composing: {composing}")


combine_parser = argparse.ArgumentParser(description="Feed kana keys through the combiner and print what comes out.")
combine_parser.add_argument("keys")
combine_parser.add_argument("--settings", type=pathlib.Path)
combine_parser.add_argument("--plain", action="store_true", help="send keys without the combining flag")
combine_parser.add_argument("-v", "--verbose", action="store_true")


def combine_cli():
    args = combine_parser.parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)
    if args.settings is not None:
        try:
            settings = Settings.load(args.settings)
        except SettingsError as exc:
            combine_parser.error(str(exc))
    else:
        settings = Settings(_path=pathlib.Path("settings.json"))
    trio.run(combine_keys, parse_keys(args.keys, combining=not args.plain), settings)
