"""Configuration: timemask.toml discovery, section models, settings, logging."""
