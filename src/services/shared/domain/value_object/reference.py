import secrets
from datetime import datetime, timezone

# Crockford Base32（I, L, O, U を除外して読み間違いを防ぐ）
_ALPHABET = "0123456789ABCDEFGHJKMNPQRSTVWXYZ"
_RANDOM_LENGTH = 10


def generate_reference(prefix: str, now: datetime | None = None) -> str:
    """人が読める一意な参照番号を生成する

    形式: ``<PREFIX>-<yyyymmddHHMMSSmmm>-<ランダム10文字>``

    - 先頭のタイムスタンプ(UTC, ミリ秒)により生成順にソート可能
    - 50 bit の乱数部により、生成者間の調整なしで衝突を避ける
    """
    moment = (now or datetime.now(timezone.utc)).astimezone(timezone.utc)
    timestamp = moment.strftime("%Y%m%d%H%M%S") + f"{moment.microsecond // 1000:03d}"

    bits = secrets.randbits(5 * _RANDOM_LENGTH)
    chars = []
    for _ in range(_RANDOM_LENGTH):
        chars.append(_ALPHABET[bits & 0x1F])
        bits >>= 5
    return f"{prefix}-{timestamp}-{''.join(reversed(chars))}"
