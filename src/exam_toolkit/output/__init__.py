"""
Module: output

Purpose:
    Text rendering of generated versions and answer keys.

Key Functions:
    - render_version(): Printable text of one version
    - render_answer_key(): Answer key of one version

Used By:
    - exam_toolkit.cli
"""

from .text import render_answer_key, render_header, render_version

__all__ = [
    "render_header",
    "render_version",
    "render_answer_key",
]
