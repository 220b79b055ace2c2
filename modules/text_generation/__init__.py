"""Text generation tool (OpenAI Responses API)."""
