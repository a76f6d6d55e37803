"""Unit tests for PromptBuilder."""

import pytest

from sentiment_api.llm.prompt_builder import PromptBuilder
from sentiment_api.models.enums import MessageRole

QUESTION = "Bagaimana pendapat Anda tentang layanan kami?"
ANSWER = "Layanan Anda sangat memuaskan dan responsif"


@pytest.fixture
def builder():
    return PromptBuilder(
        model="telkom-ai-instruct",
        label_max_tokens=100,
        label_temperature=0.0,
        reasoning_max_tokens=300,
        reasoning_temperature=0.1,
    )


class TestPromptBuilder:
    """Test suite for PromptBuilder."""
    
    @pytest.mark.parametrize("want_reasoning", [False, True])
    def test_messages_are_system_then_user(self, builder, want_reasoning):
        messages = builder.build_messages(QUESTION, ANSWER, want_reasoning)
        
        assert [m.role for m in messages] == [MessageRole.SYSTEM, MessageRole.USER]
    
    def test_label_system_prompt_lists_labels_and_json_format(self, builder):
        system = builder.build_system_prompt(want_reasoning=False)
        
        for label in ("Positif", "Negatif", "Netral"):
            assert f"- {label}:" in system
        assert '{"sentiment": "Positif"}' in system
        assert "reasoning" not in system
    
    def test_reasoning_system_prompt_asks_for_reasoning(self, builder):
        system = builder.build_system_prompt(want_reasoning=True)
        
        assert '"reasoning"' in system
        assert '"sentiment": "Positif"' in system
        assert "bahasa Indonesia" in system
    
    def test_user_prompt_embeds_text_verbatim(self, builder):
        question = 'Apa pendapat Anda tentang "fitur {{ baru }}"?'
        answer = "Bagus <b>sekali</b> & cepat"
        user = builder.build_user_prompt(question, answer)
        
        assert f"Pertanyaan: {question}" in user
        assert f"Jawaban: {answer}" in user
    
    def test_user_prompt_variants_differ(self, builder):
        label_prompt = builder.build_user_prompt(QUESTION, ANSWER, want_reasoning=False)
        reasoning_prompt = builder.build_user_prompt(QUESTION, ANSWER, want_reasoning=True)
        
        assert label_prompt != reasoning_prompt
        assert reasoning_prompt.endswith("berikan penjelasan lengkap.")
        assert label_prompt.endswith("berdasarkan konteks pertanyaan.")
    
    def test_label_request_parameters(self, builder):
        request = builder.build_request(QUESTION, ANSWER, want_reasoning=False)
        
        assert request.model == "telkom-ai-instruct"
        assert request.max_tokens == 100
        assert request.temperature == 0.0
        assert request.stream is False
        assert len(request.messages) == 2
    
    def test_reasoning_request_parameters(self, builder):
        request = builder.build_request(QUESTION, ANSWER, want_reasoning=True)
        
        assert request.max_tokens == 300
        assert request.temperature == 0.1
        assert '"reasoning"' in request.messages[0].content
    
    def test_request_serializes_to_wire_format(self, builder):
        payload = builder.build_request(QUESTION, ANSWER).model_dump(mode="json")
        
        assert payload["stream"] is False
        assert payload["messages"][0]["role"] == "system"
        assert payload["messages"][1]["role"] == "user"
        assert set(payload) == {"model", "messages", "stream", "max_tokens", "temperature"}
    
    def test_custom_templates_dir(self, tmp_path):
        for name in ("system_label.txt", "system_reasoning.txt"):
            (tmp_path / name).write_text("SYS {{ labels | length }}", encoding="utf-8")
        for name in ("user_label.txt", "user_reasoning.txt"):
            (tmp_path / name).write_text("Q={{ question }} A={{ answer }}", encoding="utf-8")
        
        builder = PromptBuilder(templates_dir=tmp_path)
        messages = builder.build_messages("q", "a")
        
        assert messages[0].content == "SYS 3"
        assert messages[1].content == "Q=q A=a"
    
    def test_missing_templates_fail_at_init(self, tmp_path):
        with pytest.raises(Exception):
            PromptBuilder(templates_dir=tmp_path)
