"""
Base256 인코딩/디코딩 공통 로직
알파벳(256개 코드포인트)만 바꿔 끼우면 같은 코덱을 그대로 쓴다.
"""

import threading
from types import MappingProxyType
from typing import Iterable, Mapping, Optional

from .alphabet import build_index, validate_alphabet


def _as_bytes(data: Iterable[int]) -> bytes:
    # bytes(3) 은 길이 3 의 0 바이트열이 되므로 정수 단독 입력은 거부
    if isinstance(data, int):
        raise TypeError(f"expected bytes-like or iterable of ints, got {type(data).__name__}")
    return bytes(data)


class DecodeError(ValueError):
    """알파벳에 없는 코드포인트. index 는 바이트 오프셋이 아닌 문자 위치."""

    def __init__(self, codepoint: str, index: int):
        super().__init__(codepoint, index)
        self.codepoint = codepoint
        self.index = index

    def __str__(self) -> str:
        return f"{self.codepoint} at index {self.index} is not part of the alphabet"

    def __repr__(self) -> str:
        return f"DecodeError(codepoint={self.codepoint!r}, index={self.index})"


class Base:
    """
    알파벳 변형의 공통 부모 클래스.

    하위 클래스는 ALPHABET 을 지정하고, 미리 생성한 역색인이 있으면 INDEX 도 지정한다.
    INDEX 가 없으면 첫 decode 시점에 한 번만 만들어 캐시한다.
    """

    ALPHABET: str = ""
    INDEX: Optional[Mapping[str, int]] = None
    _lookup: Optional[Mapping[str, int]] = None

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        # 알파벳을 바꾼 하위 클래스는 부모의 역색인을 물려받지 않는다
        if "ALPHABET" in cls.__dict__ and "INDEX" not in cls.__dict__:
            cls.INDEX = None
        cls.ALPHABET = validate_alphabet(cls.ALPHABET)
        if cls.INDEX is not None:
            if dict(cls.INDEX) != build_index(cls.ALPHABET):
                raise ValueError(f"{cls.__name__}.INDEX does not match its ALPHABET")
            cls.INDEX = MappingProxyType(dict(cls.INDEX))
        # 클래스마다 별도 캐시/락
        cls._lookup = None
        cls._lookup_lock = threading.Lock()

    @classmethod
    def lookup(cls) -> Mapping[str, int]:
        """역색인 반환 (생성된 상수 우선, 없으면 최초 1회 생성)"""
        if cls is Base:
            raise TypeError("Base has no alphabet; use a subclass such as Emoji")
        if cls.INDEX is not None:
            return cls.INDEX
        table = cls._lookup
        if table is None:
            with cls._lookup_lock:
                table = cls._lookup
                if table is None:
                    table = MappingProxyType(build_index(cls.ALPHABET))
                    cls._lookup = table
        return table

    @classmethod
    def get_index(cls, codepoint: str) -> int:
        return cls.lookup()[codepoint]

    @classmethod
    def encode(cls, data: Iterable[int]) -> str:
        """바이트열 -> 알파벳 문자열 (실패 없음)"""
        alphabet = cls.ALPHABET
        return "".join([alphabet[b] for b in _as_bytes(data)])

    @classmethod
    def encoded_length(cls, data: Iterable[int], encoding: str = "utf-8") -> int:
        """encode 결과를 주어진 인코딩으로 저장했을 때의 크기 (심볼별 폭의 합)"""
        widths = [len(sym.encode(encoding)) for sym in cls.ALPHABET]
        return sum(widths[b] for b in _as_bytes(data))

    @classmethod
    def decode(cls, text: str) -> bytes:
        """알파벳 문자열 -> 바이트열. 첫 번째 잘못된 문자에서 DecodeError."""
        table = cls.lookup()
        output = bytearray(len(text))
        for i, char in enumerate(text):
            value = table.get(char)
            if value is None:
                raise DecodeError(char, i)
            output[i] = value
        return bytes(output)
