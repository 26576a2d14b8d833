"""
utils/ - Shared helpers
========================
Logging, console output, prompts and table rendering.
"""
