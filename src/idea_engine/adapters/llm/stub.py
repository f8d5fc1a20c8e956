"""Stub LLM provider for testing."""

import json
import re

from idea_engine.adapters.llm.base import LLMMessage, LLMProvider, LLMResponse, VisionMessage
from idea_engine.logging import get_logger

logger = get_logger(__name__)

STUB_STYLE_GUIDE = """**COLOR PALETTE:**
Saturated teal background gradient, bright yellow accents, white highlights.

**TEXT STYLE:**
Extremely bold sans-serif headline, yellow with thick black outline, top-left.

**LAYOUT & COMPOSITION:**
Presenter on the right third, face fills 40% of frame, text left.

**PHOTOGRAPHY STYLE:**
Professional photo, straight-on eye level, high-key lighting, high contrast.

**GRAPHIC ELEMENTS:**
Large red arrow pointing at the subject, thin white border."""


def _topics_from_prompt(prompt: str) -> list[str]:
    match = re.search(r"Topics: (.+)", prompt)
    if not match:
        return ["General Content"]
    return [t.strip() for t in match.group(1).split(",") if t.strip()]


class StubLLMProvider(LLMProvider):
    """Stub provider that returns canned responses for every pipeline prompt.

    The response is chosen from the JSON keys the prompt asks for, so the
    stub can drive a full analysis run without network access.
    """

    @property
    def name(self) -> str:
        return "stub"

    async def complete(
        self,
        messages: list[LLMMessage],
        temperature: float = 0.7,  # noqa: ARG002
        max_tokens: int = 4096,  # noqa: ARG002
        json_mode: bool = False,
        model: str | None = None,  # noqa: ARG002
    ) -> LLMResponse:
        """Return a mock completion response."""
        logger.info(
            "stub_llm_complete",
            message_count=len(messages),
            json_mode=json_mode,
        )

        user_message = ""
        for msg in reversed(messages):
            if msg.role == "user":
                user_message = msg.content
                break

        if json_mode and '"newsQueries"' in user_message:
            topics = _topics_from_prompt(user_message)
            lead = topics[0]
            content = json.dumps(
                {
                    "newsQueries": [
                        f"latest {lead} news today",
                        f"{lead} announcements this week",
                        f"recent {lead} breakthroughs",
                        f"{lead} industry trends",
                        f"{', '.join(topics[:2])} update",
                    ],
                    "redditQueries": [
                        f"{lead} discussion",
                        f"best {lead} tips",
                        f"{lead} questions today",
                        f"{lead} community opinions",
                        f"{lead} recent experiences",
                    ],
                }
            )
        elif json_mode and '"ideas"' in user_message:
            topics = _topics_from_prompt(user_message)
            content = json.dumps(
                {
                    "ideas": [
                        {
                            "title": f"{topic}: What Nobody Tells You ({i + 1})",
                            "thumbnailPrompt": f"Shocked presenter, big text '{topic.upper()}', "
                            "glowing question mark",
                            "videoDescription": f"Hook: why {topic} matters right now.\n\n"
                            f"Main points: three things changing in {topic} this week.\n\n"
                            "Call to action: subscribe and share your take in the comments.",
                        }
                        for i, topic in enumerate((topics * 5)[:5])
                    ]
                }
            )
        elif json_mode:
            content = json.dumps(
                {
                    "topics": ["Technology", "Software Development", "Artificial Intelligence"],
                    "style": "Educational",
                    "tone": "Energetic",
                    "targetAudience": "Developers aged 18-35 interested in practical AI tools",
                    "contentFormat": "Long-form tutorials with on-screen demos",
                }
            )
        else:
            content = f"This is a stub response for: {user_message[:100]}"

        return LLMResponse(
            content=content,
            model="stub-model",
            usage={
                "prompt_tokens": len(user_message.split()),
                "completion_tokens": len(content.split()),
                "total_tokens": len(user_message.split()) + len(content.split()),
            },
            finish_reason="stop",
        )

    @property
    def supports_vision(self) -> bool:
        """Stub provider supports vision for testing."""
        return True

    async def complete_with_vision(
        self,
        messages: list[VisionMessage],
        temperature: float = 0.7,  # noqa: ARG002
        max_tokens: int = 4096,  # noqa: ARG002
        json_mode: bool = False,
        model: str | None = None,  # noqa: ARG002
    ) -> LLMResponse:
        """Return a canned thumbnail style guide."""
        image_count = sum(len(m.image_urls) for m in messages)

        logger.info(
            "stub_llm_vision_complete",
            message_count=len(messages),
            image_count=image_count,
            json_mode=json_mode,
        )

        return LLMResponse(
            content=STUB_STYLE_GUIDE,
            model="stub-vision-model",
            usage={
                "prompt_tokens": image_count * 1000,
                "completion_tokens": len(STUB_STYLE_GUIDE.split()),
                "total_tokens": image_count * 1000 + len(STUB_STYLE_GUIDE.split()),
            },
            finish_reason="stop",
        )

    async def health_check(self) -> bool:
        """Stub provider is always healthy."""
        return True
