"""LLM provider gateway, prompt builders and reply extraction."""
