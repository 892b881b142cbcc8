#!/usr/bin/env python3
"""
Emoji 역색인 모듈(src/emojibase/_emoji_index.py) 생성 스크립트
EMOJI_ALPHABET 순서를 바꾼 뒤에는 반드시 다시 실행할 것.

사용법:
  python3 scripts/gen_index.py          # 파일 재생성
  python3 scripts/gen_index.py --check  # 최신이 아니면 exit 1
"""

import argparse
import json
import os
import sys

_PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
_SRC = os.path.join(_PROJECT_ROOT, "src")
if _SRC not in sys.path:
    sys.path.insert(0, _SRC)

from emojibase.alphabet import EMOJI_ALPHABET, validate_alphabet

INDEX_PATH = os.path.join(_SRC, "emojibase", "_emoji_index.py")


def render_index(symbols: str) -> str:
    symbols = validate_alphabet(symbols)
    lines = [
        "# 자동 생성 파일 - 직접 수정하지 말 것 (scripts/gen_index.py 로 재생성)",
        "EMOJI_INDEX = {",
    ]
    lines += [f"    {json.dumps(sym, ensure_ascii=False)}: {i}," for i, sym in enumerate(symbols)]
    lines.append("}")
    return "\n".join(lines) + "\n"


def main(argv=None):
    parser = argparse.ArgumentParser(description="Emoji 역색인 모듈 생성")
    parser.add_argument("--check", action="store_true", help="재생성 없이 최신 여부만 확인")
    args = parser.parse_args(argv)

    content = render_index(EMOJI_ALPHABET)
    if args.check:
        with open(INDEX_PATH, encoding="utf-8") as f:
            if f.read() != content:
                print(f"{INDEX_PATH} 가 최신이 아닙니다.", file=sys.stderr)
                sys.exit(1)
        print("최신 상태입니다.")
        return

    with open(INDEX_PATH, "w", encoding="utf-8") as f:
        f.write(content)
    print(f"생성 완료: {INDEX_PATH}")


if __name__ == "__main__":
    main()
