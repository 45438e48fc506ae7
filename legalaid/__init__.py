"""Legal document drafting and Q&A service backed by Gemini."""

__version__ = "0.1.0"
