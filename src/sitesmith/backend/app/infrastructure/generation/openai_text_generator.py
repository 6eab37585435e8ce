from __future__ import annotations

import logging
from typing import Optional, Sequence

from langchain_core.language_models import BaseChatModel
from langchain_core.messages import BaseMessage, HumanMessage, SystemMessage

from sitesmith.backend.app.application.generation.interfaces import AssetRef
from sitesmith.backend.app.domain.projects.value_objects import strip_code_fences
from sitesmith.backend.app.infrastructure.generation.prompts import (
    CREATE_SYSTEM,
    SECTION_SYSTEM,
    STITCH_SYSTEM,
    UPDATE_SYSTEM,
    format_assets,
    format_context,
)

logger = logging.getLogger(__name__)


class OpenAIWebsiteGenerator:
    def __init__(self, *, llm: BaseChatModel) -> None:
        self._llm = llm
        self.llm_model = getattr(llm, "model_name", type(llm).__name__)

    async def _complete(self, msgs: list[BaseMessage]) -> str:
        result = await self._llm.ainvoke(msgs)
        content = getattr(result, "content", "") or ""
        # content may be a list of parts for multimodal models
        if isinstance(content, list):
            content = "".join(p.get("text", "") if isinstance(p, dict) else str(p) for p in content)
        return strip_code_fences(content)

    async def generate(
        self,
        *,
        current_document: Optional[str],
        instructions: str,
        context: str,
        assets: Sequence[AssetRef],
    ) -> str:
        if current_document:
            msgs: list[BaseMessage] = [
                SystemMessage(content=UPDATE_SYSTEM),
                HumanMessage(
                    content=(
                        f"<CURRENT_HTML>\n{current_document}\n</CURRENT_HTML>\n\n"
                        f"<INSTRUCTIONS>\n{instructions.strip()}\n</INSTRUCTIONS>\n\n"
                        f"{format_context(context)}\n\n{format_assets(assets)}"
                    )
                ),
            ]
        else:
            msgs = [
                SystemMessage(content=CREATE_SYSTEM),
                HumanMessage(
                    content=(
                        f"<INSTRUCTIONS>\n{instructions.strip()}\n</INSTRUCTIONS>\n\n"
                        f"{format_context(context)}\n\n{format_assets(assets)}"
                    )
                ),
            ]
        logger.info("Generating website with %s (update=%s)", self.llm_model, bool(current_document))
        return await self._complete(msgs)

    async def patch_section(
        self,
        *,
        current_document: str,
        section_name: str,
        instructions: str,
        context: str,
        assets: Sequence[AssetRef],
    ) -> str:
        # step 1: the section on its own
        section_msgs: list[BaseMessage] = [
            SystemMessage(content=SECTION_SYSTEM.format(section=section_name)),
            HumanMessage(
                content=(
                    f"<SECTION_NAME>{section_name}</SECTION_NAME>\n\n"
                    f"<CURRENT_HTML>\n{current_document}\n</CURRENT_HTML>\n\n"
                    f"<INSTRUCTIONS>\n{instructions.strip()}\n</INSTRUCTIONS>\n\n"
                    f"{format_context(context)}\n\n{format_assets(assets)}"
                )
            ),
        ]
        section_html = await self._complete(section_msgs)
        if not section_html:
            return ""

        # step 2: stitch it into the full document
        stitch_msgs: list[BaseMessage] = [
            SystemMessage(content=STITCH_SYSTEM.format(section=section_name)),
            HumanMessage(
                content=(
                    f"<CURRENT_HTML>\n{current_document}\n</CURRENT_HTML>\n\n"
                    f"<NEW_SECTION name=\"{section_name}\">\n{section_html}\n</NEW_SECTION>"
                )
            ),
        ]
        logger.info("Stitching section %r with %s", section_name, self.llm_model)
        return await self._complete(stitch_msgs)
