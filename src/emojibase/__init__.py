"""
Base256 이모지 인코딩
바이트 0-255 를 256개 이모지 중 하나로 1:1 변환한다.
"""

from .alphabet import EMOJI_ALPHABET
from .base import Base, DecodeError
from .emoji import Emoji, decode, encode, encoded_length

ALPHABETS = {
    "emoji": Emoji,
}


def get_codec(name: str) -> type[Base]:
    """알파벳 이름 -> 코덱 클래스"""
    codec = ALPHABETS.get((name or "").strip().lower())
    if codec is None:
        known = ", ".join(sorted(ALPHABETS))
        raise ValueError(f"unknown alphabet {name!r} (known: {known})")
    return codec


__all__ = [
    "ALPHABETS",
    "Base",
    "DecodeError",
    "EMOJI_ALPHABET",
    "Emoji",
    "decode",
    "encode",
    "encoded_length",
    "get_codec",
]
