"""
Relevance ranking engine.

Responsibilities:
- Tokenize a free-text query into keywords.
- Score every catalog candidate on keyword hits plus a tiered proximity bonus.
- Filter, sort and cap the scored pool into the retrieval context.
- Render the ranked list into the short summary handed to the LLM.
"""
