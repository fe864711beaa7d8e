"""
PlatePal: dietary-aware restaurant discovery.

Components:
- ``proxy``: the one-route API that forwards prompts to Gemini.
- ``llm``: Gemini configuration and the raw generateContent call.
- ``client``: form state, prompt assembly, response parsing and sorting.
- ``ui``: the Gradio front end that drives the client against the proxy.
"""
