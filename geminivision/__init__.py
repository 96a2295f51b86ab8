"""GeminiVision: structured image-generation parameters to Gemini images.

Subpackages:
    - `prompting`: deterministic prompt composition and hint tables.
    - `safety`: safety thresholds and the LLM-backed prompt sanitizer.
    - `llm`: provider configuration and Gemini transport.
    - `image`: image-generation client and service.
    - `core`: request orchestration, data contracts, and errors.
    - `api`: HTTP and CLI adapters.
"""
