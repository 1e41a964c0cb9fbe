"""
LLM integration layer.

Responsibilities:
- Manage Groq API configuration and credentials.
- Send chat messages to an ordered list of candidate models.
- Fall through to the next model on any failure; first success wins.
- Report exhaustion with a fixed offline message instead of raising.
"""
