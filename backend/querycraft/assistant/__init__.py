"""LLM-backed assistant endpoints."""
