"""
Gemini integration layer.

Responsibilities:
- Manage Gemini API configuration and credentials.
- Forward a single-turn prompt to the generateContent endpoint.
- Pull the first text fragment out of the nested response shape.
"""
