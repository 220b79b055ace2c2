"""Image generation tool (OpenAI Images API)."""
