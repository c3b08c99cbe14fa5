"""
Generation API integration layer.

Responsibilities:
- Hold the Groq API configuration and credentials.
- Send a single evaluation prompt to the Groq chat completions endpoint.
- Report any failure as ``GenerationError`` so callers can isolate it.
"""
