"""Core domain: models, tag extraction, encoding and ports."""
