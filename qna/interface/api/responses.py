"""Response helpers."""

import json
from typing import Any

from fastapi.responses import JSONResponse, PlainTextResponse
from pydantic import BaseModel


class PrettyJSONResponse(JSONResponse):
    """JSON response indented by two spaces."""

    def render(self, content: Any) -> bytes:
        return json.dumps(content, ensure_ascii=False, indent=2).encode("utf-8")


def pretty_json(content: BaseModel | list[BaseModel]) -> PrettyJSONResponse:
    """Render models as pretty JSON, omitting unset optional fields."""
    if isinstance(content, list):
        body = [item.model_dump(mode="json", exclude_none=True) for item in content]
    else:
        body = content.model_dump(mode="json", exclude_none=True)
    return PrettyJSONResponse(body)


def text(message: str, status_code: int = 200) -> PlainTextResponse:
    """Plain text response."""
    return PlainTextResponse(message, status_code=status_code)
