"""
Shared utilities for resumeforge.

Common functionality used across contexts:
- Session logging setup
- LLM provider access and response parsing
- Text report formatting
"""
