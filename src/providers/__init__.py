"""Image provider adapters (google, openai)."""
