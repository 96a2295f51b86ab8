"""Safety package.

This package declares the per-category safety thresholds attached to remote
model calls and the LLM-backed sanitizer that rewrites user prompts before
prompt composition.
"""
