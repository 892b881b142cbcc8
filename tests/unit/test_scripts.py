"""
scripts/ 로컬 실행 스크립트 검증
"""

import sys
import os

import pytest

_ROOT = os.path.join(os.path.dirname(__file__), "..", "..")
sys.path.insert(0, os.path.join(_ROOT, "src"))
sys.path.insert(0, os.path.join(_ROOT, "scripts"))
import gen_index
import local_run


def test_encode_text(capsys):
    local_run.main(["encode", "--text", "hi juan!"])
    out = capsys.readouterr()
    assert out.out.strip() == "😴🌟😅😬🤘🤤😻👏"
    assert "8 바이트" in out.err


def test_encode_file(tmp_path, capsys):
    src = tmp_path / "in.bin"
    src.write_bytes(b"\x00\x01\xff")
    local_run.main(["encode", str(src)])
    assert capsys.readouterr().out.strip() == "🚀🪐🥂"


def test_decode_to_file(tmp_path):
    src = tmp_path / "in.txt"
    # 파일 끝 개행은 무시
    src.write_text("🏃✋🌈😅🌷🤤😻🌟😅👏\n", encoding="utf-8")
    dst = tmp_path / "out.bin"
    local_run.main(["decode", str(src), "--output", str(dst)])
    assert dst.read_bytes() == b"yes mani !"


def test_decode_error_exits(capsys):
    with pytest.raises(SystemExit) as exc:
        local_run.main(["decode", "--text", "🚀x"])
    assert exc.value.code == 1
    assert "오류: x at index 1 is not part of the alphabet" in capsys.readouterr().err


def test_missing_file_exits(tmp_path, capsys):
    with pytest.raises(SystemExit):
        local_run.main(["encode", str(tmp_path / "nope.bin")])
    assert "오류:" in capsys.readouterr().err


def test_unknown_alphabet_exits(capsys):
    with pytest.raises(SystemExit):
        local_run.main(["--alphabet", "nope", "encode", "--text", "x"])
    assert "unknown alphabet" in capsys.readouterr().err


def test_alphabet_rows(capsys):
    local_run.main(["alphabet"])
    rows = capsys.readouterr().out.splitlines()
    assert len(rows) == 16
    assert rows[0].startswith("🚀🪐☄")
    assert rows[-1].endswith("🥂")


def test_generated_index_file_is_current():
    with open(gen_index.INDEX_PATH, encoding="utf-8") as f:
        assert f.read() == gen_index.render_index(gen_index.EMOJI_ALPHABET)


def test_render_index_escapes_keys():
    """따옴표/역슬래시 심볼도 유효한 파이썬 리터럴로 출력"""
    symbols = '"\\' + "".join(chr(0x4E00 + i) for i in range(254))
    namespace = {}
    exec(gen_index.render_index(symbols), namespace)
    assert namespace["EMOJI_INDEX"]['"'] == 0
    assert namespace["EMOJI_INDEX"]["\\"] == 1
    assert len(namespace["EMOJI_INDEX"]) == 256
