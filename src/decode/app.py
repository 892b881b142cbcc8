"""
디코딩 람다
POST /decode {"encoded": "..."} -> 원본 바이트(base64) 및 가능하면 UTF-8 텍스트 반환
"""

import base64
import json
import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))
from emojibase import DecodeError, get_codec

_DEFAULT_ALPHABET = os.environ.get("ALPHABET", "emoji")


def _as_text(data: bytes) -> str | None:
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError:
        return None


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
        try:
            body = json.loads(event.get("body") or "{}")
        except json.JSONDecodeError:
            return _response(400, {"error": "JSON 본문이 필요합니다."})
        if not isinstance(body, dict):
            return _response(400, {"error": "JSON 객체가 필요합니다."})

        encoded = body.get("encoded")
        if not isinstance(encoded, str):
            return _response(400, {"error": "encoded 필드가 필요합니다."})

        query = event.get("queryStringParameters") or {}
        name = query.get("alphabet", _DEFAULT_ALPHABET)
        try:
            codec = get_codec(name)
        except ValueError as e:
            return _response(400, {"error": str(e)})

        try:
            data = codec.decode(encoded)
        except DecodeError as e:
            return _response(400, {
                "error": str(e),
                "codepoint": e.codepoint,
                "index": e.index,
            })

        return _response(200, {
            "data": base64.b64encode(data).decode("ascii"),
            "text": _as_text(data),
            "bytes": len(data),
            "alphabet": name.strip().lower(),
        })

    except Exception as e:
        print(f"Handler Error: {e}")
        return _response(500, {"error": "Internal Server Error"})
