"""
인코딩 람다
POST /encode -> 요청 본문(바이트)을 이모지 문자열로 변환
"""

import base64
import binascii
import json
import os
import sys

# --- 공통 모듈 설정 ---
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))
from emojibase import get_codec

_DEFAULT_ALPHABET = os.environ.get("ALPHABET", "emoji")
# API Gateway 응답 한도(6MB)를 넘지 않도록 입력 크기 제한
_MAX_INPUT_BYTES = int(os.environ.get("MAX_INPUT_BYTES", str(1024 * 1024)))


def _read_body(event: dict) -> bytes:
    """요청 본문을 바이트로 복원 (바이너리는 base64 로 들어온다)"""
    body = event.get("body") or ""
    if event.get("isBase64Encoded"):
        return base64.b64decode(body, validate=True)
    return body.encode("utf-8")


def _response(status_code: int, body: dict) -> dict:
    return {
        "statusCode": status_code,
        "headers": {
            "Content-Type": "application/json",
            "Access-Control-Allow-Origin": "*"
        },
        "body": json.dumps(body, ensure_ascii=False),
    }


def handler(event, context):
    try:
        query = event.get("queryStringParameters") or {}
        name = query.get("alphabet", _DEFAULT_ALPHABET)
        try:
            codec = get_codec(name)
        except ValueError as e:
            return _response(400, {"error": str(e)})

        try:
            data = _read_body(event)
        except (binascii.Error, ValueError):
            return _response(400, {"error": "본문 base64 디코딩 실패"})

        if len(data) > _MAX_INPUT_BYTES:
            return _response(413, {"error": f"입력은 최대 {_MAX_INPUT_BYTES} 바이트까지 가능합니다."})

        encoded = codec.encode(data)
        return _response(200, {
            "encoded": encoded,
            "alphabet": name.strip().lower(),
            "bytes": len(data),
            "symbols": len(encoded),
            "utf8Length": codec.encoded_length(data),
        })

    except Exception as e:
        print(f"Handler Error: {e}")
        return _response(500, {"error": "Internal Server Error"})
