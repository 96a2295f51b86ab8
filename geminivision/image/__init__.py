"""Image generation adapter package.

Scope:
    Provides the image-provider client and the service that composes a
    `GenerationSpec` into a prompt and submits it with the fixed safety config.

Non-goals:
    - No file ingestion or multimodal file analysis.
    - No Base64 decoding/encoding pipeline.
    - No temporary-file creation or cleanup responsibilities.
"""
