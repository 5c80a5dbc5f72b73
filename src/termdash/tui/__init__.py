"""Textual host for the runtime's character buffer."""
