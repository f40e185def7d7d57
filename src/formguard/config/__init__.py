"""Configuration: TOML discovery, pydantic section models, settings, and logging."""
