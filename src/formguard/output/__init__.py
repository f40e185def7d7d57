"""Output layer: render ServiceResult for terminals and machines."""
