"""Jinja2 prompt templates shipped with scribe.

Templates are loaded by logical name through ``scribe.prompt_store``, e.g.
``post_process/user_v1`` -> ``prompts/post_process/user_v1.j2``.
"""
