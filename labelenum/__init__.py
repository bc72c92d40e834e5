"""Integer enumerations backed by string labels, with JSON, YAML, text, binary and SQL conversions."""

__version__ = "0.1.0"

__all__ = ["cache", "enum", "errors", "lookup", "marshal", "registry", "validation", "wrapper"]