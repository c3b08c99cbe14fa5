from unittest.mock import MagicMock, call, patch

import httpx
import pytest

from kaishoku.config import AppConfig
from kaishoku.hotpepper.client import DirectorySearchError
from kaishoku.hotpepper.config import HotPepperConfig
from kaishoku.llm.config import LLMConfig
from kaishoku.llm.groq_client import GenerationError
from kaishoku.shops.annotate import annotate_shop, search_and_annotate
from kaishoku.shops.models import SearchCriteria
from kaishoku.shops.prompts import ANALYSIS_FAILED

CONFIG = AppConfig(
    hotpepper=HotPepperConfig(api_key="hp-key", url="http://hotpepper.test/gourmet/v1/"),
    llm=LLMConfig(api_key="groq-key"),
    annotation_delay=3.0,
)

SHOPS = [
    {"id": "J001", "name": "一の店", "genre": {"name": "和食"}},
    {"id": "J002", "name": "二の店", "genre": {"name": "焼肉"}},
    {"id": "J003", "name": "三の店", "genre": {"name": "中華"}},
]

CRITERIA = SearchCriteria(keyword="渋谷区", count=3)


def _client(shops=SHOPS, status_code: int = 200) -> httpx.Client:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, json={"results": {"shop": shops}})

    return httpx.Client(transport=httpx.MockTransport(handler))


@patch("kaishoku.shops.annotate.generate_text", return_value="会食向け度: 5")
def test_annotate_shop_success(mock_generate):
    annotation = annotate_shop(SHOPS[0], CONFIG.llm)

    assert annotation.ok
    assert annotation.text == "会食向け度: 5"
    prompt = mock_generate.call_args.args[0]
    assert "店名: 一の店" in prompt


@patch("kaishoku.shops.annotate.generate_text", side_effect=GenerationError("quota exceeded"))
def test_annotate_shop_failure_uses_placeholder(mock_generate):
    annotation = annotate_shop(SHOPS[0], CONFIG.llm)

    assert not annotation.ok
    assert annotation.text == ANALYSIS_FAILED


@patch("kaishoku.shops.annotate.generate_text")
def test_search_and_annotate_one_call_per_shop_in_order(mock_generate):
    mock_generate.side_effect = lambda prompt, config: prompt.splitlines()[0]
    sleep = MagicMock()

    result = search_and_annotate(CRITERIA, CONFIG, _client(), sleep=sleep)

    assert mock_generate.call_count == len(SHOPS)
    assert [shop["id"] for shop in result] == ["J001", "J002", "J003"]
    for source, annotated in zip(SHOPS, result):
        assert {k: annotated[k] for k in source} == source
        assert annotated["aiAnalysis"]


@patch("kaishoku.shops.annotate.generate_text")
def test_search_and_annotate_isolates_generation_failure(mock_generate):
    mock_generate.side_effect = ["一つ目の評価", GenerationError("rate limited"), "三つ目の評価"]

    result = search_and_annotate(CRITERIA, CONFIG, _client(), sleep=MagicMock())

    assert mock_generate.call_count == 3
    assert [shop["aiAnalysis"] for shop in result] == ["一つ目の評価", ANALYSIS_FAILED, "三つ目の評価"]


@patch("kaishoku.shops.annotate.generate_text")
def test_search_and_annotate_pauses_after_every_attempt(mock_generate):
    events = []
    outcomes = iter([GenerationError("boom"), "ok", "ok"])

    def generate(prompt, config):
        events.append("generate")
        outcome = next(outcomes)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    def sleep(seconds):
        events.append(f"sleep {seconds}")

    mock_generate.side_effect = generate

    search_and_annotate(CRITERIA, CONFIG, _client(), sleep=sleep)

    assert events == ["generate", "sleep 3.0"] * 3


@patch("kaishoku.shops.annotate.generate_text", side_effect=GenerationError("down"))
def test_search_and_annotate_sleeps_even_when_every_call_fails(mock_generate):
    sleep = MagicMock()

    result = search_and_annotate(CRITERIA, CONFIG, _client(), sleep=sleep)

    assert [shop["aiAnalysis"] for shop in result] == [ANALYSIS_FAILED] * 3
    assert sleep.call_args_list == [call(3.0)] * 3


@patch("kaishoku.shops.annotate.generate_text")
def test_search_and_annotate_no_results(mock_generate):
    sleep = MagicMock()

    result = search_and_annotate(CRITERIA, CONFIG, _client(shops=[]), sleep=sleep)

    assert result == []
    mock_generate.assert_not_called()
    sleep.assert_not_called()


@patch("kaishoku.shops.annotate.generate_text")
def test_search_and_annotate_directory_failure_aborts(mock_generate):
    with pytest.raises(DirectorySearchError):
        search_and_annotate(CRITERIA, CONFIG, _client(status_code=500), sleep=MagicMock())

    mock_generate.assert_not_called()
