"""
Prompt builder for sentiment classification requests.

Responsible for:
- Loading and rendering Jinja2 templates (system + user prompts)
- Selecting the prompt variant (label-only or label + reasoning)
- Constructing a complete CompletionRequest with mode-specific parameters
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import structlog
from jinja2 import Environment, FileSystemLoader, StrictUndefined

from sentiment_api.models.enums import MessageRole, SentimentLabel
from sentiment_api.models.llm_models import CompletionRequest, Message


logger = structlog.get_logger(__name__)

DEFAULT_TEMPLATES_DIR = Path(__file__).parent / "templates"

LABEL_DESCRIPTIONS = {
    SentimentLabel.POSITIF: "Jawaban menunjukkan emosi atau pandangan yang baik, puas, senang, atau mendukung",
    SentimentLabel.NEGATIF: "Jawaban menunjukkan emosi atau pandangan yang buruk, tidak puas, kecewa, atau menolak",
    SentimentLabel.NETRAL: "Jawaban objektif, tidak menunjukkan emosi khusus, atau seimbang",
}


@dataclass(frozen=True)
class PromptVariant:
    """Templates and generation parameters of one prompt mode."""
    system_template: str
    user_template: str
    max_tokens: int
    temperature: float


class PromptBuilder:
    """
    Build [system, user] prompts for the completion endpoint.

    Two variants exist because the instructions differ materially: asking
    for a rationale needs a larger token budget and a nonzero temperature.
    """

    def __init__(
        self,
        templates_dir: Optional[Path] = None,
        model: str = "telkom-ai-instruct",
        label_max_tokens: int = 100,
        label_temperature: float = 0.0,
        reasoning_max_tokens: int = 300,
        reasoning_temperature: float = 0.1,
    ):
        """
        Initialize prompt builder.

        Args:
            templates_dir: Directory containing prompt templates (defaults to
                the templates shipped with the package)
            model: Model identifier for built requests
            label_max_tokens: Max output tokens (label-only mode)
            label_temperature: Temperature (label-only mode)
            reasoning_max_tokens: Max output tokens (reasoning mode)
            reasoning_temperature: Temperature (reasoning mode)
        """
        self.templates_dir = Path(templates_dir) if templates_dir else DEFAULT_TEMPLATES_DIR
        self.model = model
        self.label_variant = PromptVariant(
            system_template="system_label.txt",
            user_template="user_label.txt",
            max_tokens=label_max_tokens,
            temperature=label_temperature,
        )
        self.reasoning_variant = PromptVariant(
            system_template="system_reasoning.txt",
            user_template="user_reasoning.txt",
            max_tokens=reasoning_max_tokens,
            temperature=reasoning_temperature,
        )

        self.jinja_env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            trim_blocks=True,
            lstrip_blocks=True,
            undefined=StrictUndefined,
            autoescape=False  # We're generating prompts, not HTML
        )

        # Fail at startup, not on the first request
        try:
            for variant in (self.label_variant, self.reasoning_variant):
                self.jinja_env.get_template(variant.system_template)
                self.jinja_env.get_template(variant.user_template)
            logger.info("Loaded prompt templates", templates_dir=str(self.templates_dir))
        except Exception as e:
            logger.error("Failed to load prompt templates", error=str(e))
            raise

    def variant(self, want_reasoning: bool) -> PromptVariant:
        return self.reasoning_variant if want_reasoning else self.label_variant

    def build_system_prompt(self, want_reasoning: bool = False) -> str:
        """Render the system instruction for the requested mode."""
        template = self.jinja_env.get_template(self.variant(want_reasoning).system_template)
        return template.render(
            labels=[(label.value, LABEL_DESCRIPTIONS[label]) for label in SentimentLabel]
        ).strip()

    def build_user_prompt(self, question: str, answer: str, want_reasoning: bool = False) -> str:
        """
        Render the user instruction embedding question and answer verbatim.

        No escaping is applied: the text is plain prompt text, and the
        validator has already rejected blank or oversized input.
        """
        template = self.jinja_env.get_template(self.variant(want_reasoning).user_template)
        return template.render(question=question, answer=answer).strip()

    def build_messages(self, question: str, answer: str, want_reasoning: bool = False) -> list[Message]:
        """
        Build the ordered [system, user] message pair.

        Returns:
            List of exactly two messages, system first
        """
        return [
            Message(role=MessageRole.SYSTEM, content=self.build_system_prompt(want_reasoning)),
            Message(
                role=MessageRole.USER,
                content=self.build_user_prompt(question, answer, want_reasoning),
            ),
        ]

    def build_request(
        self,
        question: str,
        answer: str,
        want_reasoning: bool = False,
    ) -> CompletionRequest:
        """
        Build a complete CompletionRequest for one classification.

        Args:
            question: Question text
            answer: Answer text to classify
            want_reasoning: Whether to ask the model for a rationale

        Returns:
            CompletionRequest with the variant's max_tokens/temperature
        """
        variant = self.variant(want_reasoning)
        messages = self.build_messages(question, answer, want_reasoning)

        logger.debug(
            "Completion request built",
            model=self.model,
            reasoning=want_reasoning,
            max_tokens=variant.max_tokens,
            temperature=variant.temperature,
            system_prompt_length=len(messages[0].content),
            user_prompt_length=len(messages[1].content),
        )

        return CompletionRequest(
            model=self.model,
            messages=messages,
            max_tokens=variant.max_tokens,
            temperature=variant.temperature,
        )
