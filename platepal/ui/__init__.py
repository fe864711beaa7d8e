"""
Gradio user interface for PlatePal.

Talks to the proxy over HTTP exactly like any other client would.
"""
