"""Emoji 알파벳 (0: 🚀, 1: 🪐, ..., 255: 🥂)"""

from ._emoji_index import EMOJI_INDEX
from .alphabet import EMOJI_ALPHABET
from .base import Base


class Emoji(Base):
    ALPHABET = EMOJI_ALPHABET
    INDEX = EMOJI_INDEX


encode = Emoji.encode
decode = Emoji.decode
encoded_length = Emoji.encoded_length
