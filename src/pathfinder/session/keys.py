"""Decoding of raw terminal bytes into session events."""

from __future__ import annotations

import codecs
from dataclasses import dataclass
from enum import Enum
from typing import Callable

ESC = b"\x1b"


class EventKind(Enum):
    ERASE = "erase"
    MOVE_PREVIOUS = "move-previous"
    MOVE_NEXT = "move-next"
    SHRINK = "shrink-window"
    GROW = "grow-window"
    CHARACTER = "character"
    CONFIRM = "confirm"


@dataclass(slots=True, frozen=True)
class KeyEvent:
    kind: EventKind
    char: str = ""

    @classmethod
    def character(cls, char: str) -> "KeyEvent":
        return cls(EventKind.CHARACTER, char)


_SINGLE_BYTE = {
    b"\x7f": EventKind.ERASE,
    b"\x08": EventKind.ERASE,
    b"\t": EventKind.MOVE_NEXT,
    b"\r": EventKind.CONFIRM,
    b"\n": EventKind.CONFIRM,
}

_ARROWS = {
    b"A": EventKind.MOVE_PREVIOUS,
    b"B": EventKind.MOVE_NEXT,
    b"C": EventKind.GROW,
    b"D": EventKind.SHRINK,
}


def decode_key(
    read: Callable[[int], bytes],
    pending: Callable[[], bool] | None = None,
) -> KeyEvent | None:
    """Read one key press through ``read`` and translate it.

    ``read(n)`` must block until at least one byte is available and return
    ``b""`` at end of input, which is reported as a confirm. ``pending()``
    tells whether more bytes follow an escape right away; without it they are
    assumed to. A byte after a lone escape is decoded as its own key. Unknown
    control bytes and escape sequences decode to ``None``.
    """
    first = read(1)
    if not first:
        return KeyEvent(EventKind.CONFIRM)

    if first == ESC:
        if pending is not None and not pending():
            return None
        follower = read(1)
        if follower in (b"[", b"O"):
            return _decode_csi(read)
        if not follower or follower == ESC:
            return None
        first = follower

    if first in _SINGLE_BYTE:
        return KeyEvent(_SINGLE_BYTE[first])

    if first[0] < 0x20 or first[0] == 0x7F:
        return None

    decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
    text = decoder.decode(first)
    while not text:
        more = read(1)
        if not more:
            text = decoder.decode(b"", final=True)
            break
        text = decoder.decode(more)
    if not text or not text.isprintable():
        return None
    return KeyEvent.character(text)


def _decode_csi(read: Callable[[int], bytes]) -> KeyEvent | None:
    final = read(1)
    if final in _ARROWS:
        return KeyEvent(_ARROWS[final])
    # Drain parameter bytes of sequences we do not handle, e.g. ESC [ 3 ~.
    while final and not (0x40 <= final[0] <= 0x7E):
        final = read(1)
    return None
