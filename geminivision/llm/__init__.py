"""LLM access package.

Architectural role:
    Provides provider configuration, request-payload construction, and transport
    adapters used by the sanitizer and image layers.

Module split:
    - `provider_config`: environment-driven provider and model configuration.
    - `service`: canonical prompt-to-payload adapter for text generation.
    - `client`: Gemini HTTP transport and response parsing.
"""
