"""Choices offered by the search form."""
from __future__ import annotations

TOKYO_23_WARDS = [
    "千代田区", "中央区", "港区", "新宿区", "文京区", "台東区", "墨田区", "江東区",
    "品川区", "目黒区", "大田区", "世田谷区", "渋谷区", "中野区", "杉並区", "豊島区",
    "北区", "荒川区", "板橋区", "練馬区", "足立区", "葛飾区", "江戸川区",
]

# Hot Pepper dinner budget codes.
BUDGET_OPTIONS = [
    ("指定なし", ""),
    ("～2000円", "B001"),
    ("2001～3000円", "B002"),
    ("3001～4000円", "B003"),
    ("4001～5000円", "B004"),
    ("5001～7000円", "B005"),
    ("7001～10000円", "B006"),
    ("10001～15000円", "B007"),
    ("15001～20000円", "B008"),
    ("20001～30000円", "B009"),
    ("30001円～", "B010"),
]

SMOKING_OPTIONS = [
    ("指定なし", ""),
    ("禁煙のみ", "1"),
    ("喫煙可", "0"),
]

DEFAULT_PAGE_SIZE = 5


def form_options() -> dict:
    return {
        "wards": TOKYO_23_WARDS,
        "budgets": [{"label": label, "code": code} for label, code in BUDGET_OPTIONS],
        "smoking": [{"label": label, "code": code} for label, code in SMOKING_OPTIONS],
        "default_count": DEFAULT_PAGE_SIZE,
    }
