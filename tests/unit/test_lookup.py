"""
사용자 정의 알파벳 - 지연 생성 역색인 검증
"""

import sys
import os
import threading

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "..", "src"))
from emojibase import Base, DecodeError, EMOJI_ALPHABET, Emoji
from emojibase import alphabet as alphabet_module
from emojibase import base as base_module

# 한자 영역 256자
CJK_ALPHABET = "".join(chr(0x4E00 + i) for i in range(256))


def _make_codec(symbols=CJK_ALPHABET, index=None):
    attrs = {"ALPHABET": symbols}
    if index is not None:
        attrs["INDEX"] = index
    return type("Custom", (Base,), attrs)


def test_custom_alphabet_roundtrip():
    codec = _make_codec()
    data = bytes(range(256))
    assert codec.encode(data) == CJK_ALPHABET
    assert codec.decode(CJK_ALPHABET) == data
    assert codec.encoded_length(b"\x00") == 3


def test_custom_alphabet_rejects_foreign_codepoint():
    codec = _make_codec()
    with pytest.raises(DecodeError) as exc:
        codec.decode(chr(0x4E00) + "🚀")
    assert exc.value.index == 1
    assert exc.value.codepoint == "🚀"


def test_lookup_built_lazily_once():
    codec = _make_codec()
    assert codec._lookup is None
    first = codec.lookup()
    assert codec.lookup() is first
    assert dict(first) == alphabet_module.build_index(CJK_ALPHABET)


def test_lookup_cache_per_class():
    a = _make_codec()
    b = _make_codec(EMOJI_ALPHABET)
    assert a.lookup() is not b.lookup()
    assert b.get_index("🚀") == 0
    assert a.get_index(chr(0x4E00)) == 0


def test_concurrent_first_lookup_builds_once(monkeypatch):
    """동시에 첫 decode 를 호출해도 역색인은 한 번만 생성"""
    codec = _make_codec()
    calls = []
    real_build = base_module.build_index

    def counting_build(symbols):
        calls.append(1)
        return real_build(symbols)

    monkeypatch.setattr(base_module, "build_index", counting_build)

    start = threading.Barrier(8)
    results = []
    errors = []

    def worker():
        try:
            start.wait()
            results.append(codec.decode(CJK_ALPHABET[:16]))
        except Exception as e:
            errors.append(e)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert not errors
    assert len(calls) == 1
    assert results == [bytes(range(16))] * 8


def test_invalid_alphabet_fails_at_class_definition():
    with pytest.raises(ValueError, match="duplicates"):
        _make_codec(CJK_ALPHABET[:255] + CJK_ALPHABET[0])


def test_mismatched_index_fails_at_class_definition():
    index = alphabet_module.build_index(CJK_ALPHABET)
    index[CJK_ALPHABET[0]], index[CJK_ALPHABET[1]] = 1, 0
    with pytest.raises(ValueError, match="INDEX does not match"):
        _make_codec(index=index)


def test_supplied_index_skips_lazy_build():
    codec = _make_codec(index=alphabet_module.build_index(CJK_ALPHABET))
    assert codec.lookup() is codec.INDEX
    assert codec._lookup is None


def test_base_itself_has_no_alphabet():
    with pytest.raises(TypeError, match="subclass"):
        Base.decode("x")
    with pytest.raises(TypeError):
        Base.lookup()


def test_emoji_subclass_with_new_alphabet_builds_own_index():
    """부모(Emoji)의 역색인을 물려받지 않고 자기 알파벳으로 생성"""
    class Custom(Emoji):
        ALPHABET = CJK_ALPHABET

    assert Custom.INDEX is None
    assert Custom.decode(CJK_ALPHABET[:3]) == b"\x00\x01\x02"
    assert Custom.encode(b"\x00") == CJK_ALPHABET[0]
    # 부모는 그대로
    assert Emoji.decode("🚀") == b"\x00"


def test_emoji_subclass_keeps_generated_index():
    class Plain(Emoji):
        pass

    assert Plain.INDEX is not None
    assert dict(Plain.lookup()) == dict(Emoji.INDEX)
    assert Plain.decode("🥂") == b"\xff"
    assert Plain._lookup is None
