from typing import Callable

import pytest

from helpers import FakeResponse, page_payload


@pytest.fixture
def paged_source() -> Callable[[list[list[dict]]], Callable[[str, dict], FakeResponse]]:
    """Build a handler serving a listing split into pages of character payloads."""

    def build(pages: list[list[dict]]):
        def handler(url: str, params: dict) -> FakeResponse:
            if "page" not in params:
                return FakeResponse(payload=page_payload(pages[0], pages=len(pages)))
            page = int(params["page"])
            if page < 1 or page > len(pages):
                return FakeResponse(status=404, payload={"error": "There is nothing here"})
            return FakeResponse(payload=page_payload(pages[page - 1], pages=len(pages)))
        return handler

    return build
