from __future__ import annotations

from typing import Any

MISSING_FIELD = "なし"

ANALYSIS_FAILED = "AI分析中にエラーが発生しました。"

EVALUATION_TEMPLATE = """\
あなたは広告代理店のベテランマーケターであり、特に企業の会食や接待に適した飲食店を厳選する専門家です。
以下の飲食店の詳細情報を基に、そのお店が「会食」の用途にどれほど適しているかを厳密に評価してください。

評価は5段階で行い、以下の基準を厳守してください。
- 5: 非常に適している（静かで個室完備、質の高い料理、高級感があり、重要な会食に最適）
- 4: かなり適している（静かで個室がある、料理の質も高く、一般的な会食に十分）
- 3: 普通（会食にも利用可能だが、特筆すべき点はない。カジュアルな会食向け）
- 2: あまり適していない（騒がしい、個室がない、料理の質が会食向けではないなど）
- 1: 全く適していない（会食には不向き）

特に以下の点を重視して評価してください。
1. 静かさ: 会話がしやすい環境か。
2. 個室の有無: プライベートな空間が確保できるか。（情報があれば）
3. 料理の質（ジャンルから推測）: 会食にふさわしいジャンルか、期待できる質か。
4. 高級感: 内装、雰囲気、サービスから感じられる高級感。

評価理由を各項目（静かさ、個室の有無、料理の質、高級感）ごとに具体的に述べ、最後に総合的な5段階評価と簡潔な総評を記述してください。

--- お店の情報 ---
{shop_info}
---

出力形式:
会食向け度: [5段階評価の数字]
評価詳細:
- 静かさ: [評価理由]
- 個室の有無: [評価理由]
- 料理の質: [評価理由]
- 高級感: [評価理由]
総評: [簡潔な総評]
"""


def _field(shop: dict[str, Any], key: str, nested: str | None = None) -> str:
    value = shop.get(key)
    if nested is not None:
        value = value.get(nested) if isinstance(value, dict) else None
    if value is None or value == "":
        return MISSING_FIELD
    return str(value)


def describe_shop(shop: dict[str, Any]) -> str:
    """Render the fixed-shape shop description, using ``なし`` for absent fields."""
    lines = [
        f"店名: {_field(shop, 'name')}",
        f"ジャンル: {_field(shop, 'genre', 'name')}",
        f"アクセス: {_field(shop, 'access')}",
        f"予算（ディナー）: {_field(shop, 'budget', 'name')}",
        f"キャッチコピー: {_field(shop, 'catch')}",
        f"お店のこだわり: {_field(shop, 'shop_detail_memo')}",
        f"平均客単価: {_field(shop, 'avg_price')}",
    ]
    return "\n".join(lines)


def build_evaluation_prompt(shop: dict[str, Any]) -> str:
    return EVALUATION_TEMPLATE.format(shop_info=describe_shop(shop))
