#!/usr/bin/env python3
"""
로컬 인코딩/디코딩 확인용 스크립트 (AWS 없이 Python만 사용)

사용법:
  python3 scripts/local_run.py encode --text "hi juan!"
  python3 scripts/local_run.py encode 파일경로        (생략하거나 - 이면 stdin)
  python3 scripts/local_run.py decode --text "😴🌟😅😬🤘🤤😻👏"
  python3 scripts/local_run.py decode 파일경로 --output 결과.bin
  python3 scripts/local_run.py alphabet
"""

import argparse
import os
import sys

# 프로젝트 루트의 src 폴더를 경로에 추가 (emojibase 임포트용)
_PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
_SRC = os.path.join(_PROJECT_ROOT, "src")
if _SRC not in sys.path:
    sys.path.insert(0, _SRC)

from emojibase import get_codec


def read_input(path: str) -> bytes:
    """파일(또는 stdin) 내용을 바이트로 읽기"""
    if path == "-":
        return sys.stdin.buffer.read()
    with open(path, "rb") as f:
        return f.read()


def encode_bytes(data: bytes, alphabet: str = "emoji") -> str:
    codec = get_codec(alphabet)
    encoded = codec.encode(data)
    print(
        f"  [Base256 인코딩] {len(data)} 바이트 → {len(encoded)} 심볼 "
        f"(UTF-8 {codec.encoded_length(data)} 바이트)",
        file=sys.stderr,
    )
    return encoded


def decode_text(text: str, alphabet: str = "emoji") -> bytes:
    """
    이모지 문자열을 원본 바이트로 복원합니다.
    알파벳에 없는 문자가 있으면 DecodeError(ValueError) 를 그대로 올립니다.
    """
    codec = get_codec(alphabet)
    # 파일 끝 개행은 알파벳 문자가 아니므로 제거
    data = codec.decode(text.rstrip("\r\n"))
    print(f"  [Base256 디코딩] {len(data)} 바이트 복원", file=sys.stderr)
    return data


def alphabet_rows(alphabet: str = "emoji") -> list:
    symbols = get_codec(alphabet).ALPHABET
    return [symbols[i:i + 16] for i in range(0, len(symbols), 16)]


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="로컬 Base256 이모지 변환: encode / decode / alphabet"
    )
    parser.add_argument("--alphabet", default="emoji", help="알파벳 이름 (기본: emoji)")
    sub = parser.add_subparsers(dest="command", required=True)

    p_encode = sub.add_parser("encode", help="바이트를 이모지 문자열로 변환합니다")
    p_encode.add_argument("path", nargs="?", default="-", help="입력 파일 (기본: stdin)")
    p_encode.add_argument("--text", help="파일 대신 이 문자열의 UTF-8 바이트를 인코딩")

    p_decode = sub.add_parser("decode", help="이모지 문자열을 원본 바이트로 복원합니다")
    p_decode.add_argument("path", nargs="?", default="-", help="입력 파일 (기본: stdin)")
    p_decode.add_argument("--text", help="파일 대신 이 문자열을 디코딩")
    p_decode.add_argument("--output", help="결과를 stdout 대신 파일로 저장")

    sub.add_parser("alphabet", help="알파벳 256개를 16개씩 출력합니다")

    args = parser.parse_args(argv)

    try:
        if args.command == "encode":
            data = args.text.encode("utf-8") if args.text is not None else read_input(args.path)
            print(encode_bytes(data, args.alphabet))

        elif args.command == "decode":
            if args.text is not None:
                text = args.text
            else:
                text = read_input(args.path).decode("utf-8")
            data = decode_text(text, args.alphabet)
            if args.output:
                with open(args.output, "wb") as f:
                    f.write(data)
            else:
                sys.stdout.buffer.write(data)
                sys.stdout.buffer.flush()

        elif args.command == "alphabet":
            for row in alphabet_rows(args.alphabet):
                print(row)

    except (ValueError, OSError) as e:
        print(f"오류: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
