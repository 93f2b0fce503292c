"""SchemaLab: structural validation of JSON and TOML documents."""

__version__ = "1.0.0"
