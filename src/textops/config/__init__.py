"""Configuration: TOML models, discovery, unified settings, and logging."""
