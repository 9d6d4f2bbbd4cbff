class ConfigurationError(ValueError):
    """Raised when a chart is configured with values it cannot render."""
