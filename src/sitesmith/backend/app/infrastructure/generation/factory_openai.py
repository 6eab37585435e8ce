from dataclasses import dataclass

from langchain_openai import ChatOpenAI

from sitesmith.backend.app.infrastructure.generation.openai_captioner import OpenAIImageCaptioner
from sitesmith.backend.app.infrastructure.generation.openai_text_generator import OpenAIWebsiteGenerator


@dataclass(frozen=True, slots=True)
class OpenAIGenerationFactory:
    api_key: str
    timeout_s: float = 120.0

    def _llm(self, model: str, temperature: float) -> ChatOpenAI:
        return ChatOpenAI(
            model=model,
            temperature=temperature,
            api_key=self.api_key,
            timeout=self.timeout_s,
        )

    def create_website_generator(self, model: str, temperature: float = 0.2) -> OpenAIWebsiteGenerator:
        return OpenAIWebsiteGenerator(llm=self._llm(model, temperature))

    def create_captioner(self, model: str) -> OpenAIImageCaptioner:
        return OpenAIImageCaptioner(llm=self._llm(model, 0.0))
