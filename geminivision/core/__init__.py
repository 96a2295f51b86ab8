"""Core orchestration package.

Architectural role:
    Exposes the request-orchestration layer that sits between API/CLI entrypoints
    and lower-level subsystems (safety, prompting, image and LLM adapters).

Composition:
    - `engine`: Main control-flow implementation for generation requests.
    - `generation_types`: Shared request/spec/result contracts.
    - `errors`: Exception taxonomy of the pipeline.

Determinism and side effects:
    Package import itself is deterministic and side-effect free. Runtime side effects
    are performed by `engine` during request processing.
"""
