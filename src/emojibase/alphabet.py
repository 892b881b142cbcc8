"""
256 심볼 알파벳 정의 및 검증
바이트 값 i 는 알파벳의 i 번째 코드포인트에 대응한다 (전단사).
"""

from typing import Iterable, Optional

ALPHABET_SIZE = 256

# 순서 변경 금지: 인코딩 결과가 달라진다 (tests/unit/test_logic.py 골든 벡터 참고)
EMOJI_ALPHABET = (
    "🚀🪐☄🛰🌌🌑🌒🌓🌔🌕🌖🌗🌘🌍🌏🌎"  # 0x00
    "🐉☀💻🖥💾💿😂❤😍🤣😊🙏💕😭😘👍"  # 0x10
    "😅👏😁🔥🥰💔💖💙😢🤔😆🙄💪😉☺👌"  # 0x20
    "🤗💜😔😎😇🌹🤦🎉💞✌✨🤷😱😌🌸🙌"  # 0x30
    "😋💗💚😏💛🙂💓🤩😄😀🖤😃💯🙈👇🎶"  # 0x40
    "😒🤭❣😜💋👀😪😑💥🙋😞😩😡🤪👊🥳"  # 0x50
    "😥🤤👉💃😳✋😚😝😴🌟😬🙃🍀🌷😻😓"  # 0x60
    "⭐✅🥺🌈😈🤘💦✔😣🏃💐☹🎊💘😠☝"  # 0x70
    "😕🌺🎂🌻😐🖕💝🙊😹🗣💫💀👑🎵🤞😛"  # 0x80
    "🔴😤🌼😫⚽🤙☕🏆🤫👈😮🙆🍻🍃🐶💁"  # 0x90
    "😲🌿🧡🎁⚡🌞🎈❌✊👋😰🤨😶🤝🚶💰"  # 0xa0
    "🍓💢🤟🙁🚨💨🤬✈🎀🍺🤓😙💟🌱😖👶"  # 0xb0
    "🥴▶➡❓💎💸⬇😨🌚🦋😷🕺⚠🙅😟😵"  # 0xc0
    "👎🤲🤠🤧📌🔵💅🧐🐾🍒😗🤑🌊🤯🐷☎"  # 0xd0
    "💧😯💆👆🎤🙇🍑❄🌴💣🐸💌📍🥀🤢👅"  # 0xe0
    "💡💩👐📸👻🤐🤮🎼🥵🚩🍎🍊👼💍📣🥂"  # 0xf0
)


def validate_alphabet(symbols: Iterable[str]) -> str:
    """알파벳 정의 검증. 길이 256, 단일 코드포인트, 중복 없음."""
    symbols = list(symbols)
    if len(symbols) != ALPHABET_SIZE:
        raise ValueError(
            f"alphabet must have exactly {ALPHABET_SIZE} symbols, got {len(symbols)}"
        )
    seen = {}
    for i, sym in enumerate(symbols):
        if not isinstance(sym, str) or len(sym) != 1:
            raise ValueError(f"alphabet entry {i} is not a single codepoint: {sym!r}")
        if sym in seen:
            raise ValueError(
                f"alphabet entry {i} duplicates entry {seen[sym]}: {sym!r}"
            )
        seen[sym] = i
    return "".join(symbols)


def build_index(symbols: Iterable[str]) -> dict[str, int]:
    """코드포인트 -> 바이트 값 역색인 생성"""
    return {sym: i for i, sym in enumerate(symbols)}


def linear_index(symbols: str, codepoint: str) -> Optional[int]:
    """
    선형 탐색 기준 구현 (매 호출마다 256개 전체 비교).
    decode 에서는 사용하지 않고, 역색인 검증용으로만 쓴다.
    """
    for i, sym in enumerate(symbols):
        if sym == codepoint:
            return i
    return None
