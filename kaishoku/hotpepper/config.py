from __future__ import annotations

from dataclasses import dataclass

HOTPEPPER_URL = "http://webservice.recruit.co.jp/hotpepper/gourmet/v1/"


@dataclass(frozen=True)
class HotPepperConfig:
    """
    Connection settings for the Hot Pepper Gourmet shop search endpoint.
    """

    api_key: str
    url: str = HOTPEPPER_URL
    response_format: str = "json"
    timeout: float = 10.0
