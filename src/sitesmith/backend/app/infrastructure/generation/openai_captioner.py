from __future__ import annotations

import base64

from langchain_core.language_models import BaseChatModel
from langchain_core.messages import HumanMessage

from sitesmith.backend.app.infrastructure.generation.prompts import CAPTION_PROMPT


class OpenAIImageCaptioner:
    def __init__(self, *, llm: BaseChatModel) -> None:
        self._llm = llm

    async def caption(self, content: bytes, content_type: str) -> str:
        data_uri = f"data:{content_type};base64,{base64.b64encode(content).decode('ascii')}"
        msg = HumanMessage(
            content=[
                {"type": "text", "text": CAPTION_PROMPT},
                {"type": "image_url", "image_url": {"url": data_uri}},
            ]
        )
        result = await self._llm.ainvoke([msg])
        text = getattr(result, "content", "") or ""
        if isinstance(text, list):
            text = "".join(p.get("text", "") if isinstance(p, dict) else str(p) for p in text)
        return text.strip()
