"""Entry point: ``python -m platepal.ui``."""
from __future__ import annotations

import logging
import os

import gradio as gr

from ..client.config import DEFAULT_CLIENT_CONFIG
from .gradio_app import build_demo


def main() -> None:
    logging.basicConfig(level=os.environ.get("PLATEPAL_LOG_LEVEL", "INFO").upper())
    demo = build_demo(DEFAULT_CLIENT_CONFIG)
    demo.queue()
    demo.launch(
        server_name=DEFAULT_CLIENT_CONFIG.ui_host,
        server_port=DEFAULT_CLIENT_CONFIG.ui_port,
        theme=gr.themes.Soft(),
    )


if __name__ == "__main__":
    main()
