"""Infrastructure services - LLM client and response parsing."""
