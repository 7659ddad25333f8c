"""Configuration — folio.toml discovery, section models, settings, logging."""
