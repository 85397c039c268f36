"""Infrastructure layer: the JSON text codec."""
