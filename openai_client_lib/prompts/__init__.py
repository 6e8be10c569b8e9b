from openai_client_lib.prompts.history import ConversationHistory, default_base_prompt

__all__ = ["ConversationHistory", "default_base_prompt"]
