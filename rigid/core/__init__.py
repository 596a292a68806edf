"""Core — models, engine, services and use cases (no CLI dependency)."""
