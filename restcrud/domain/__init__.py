"""Domain layer: models, errors, services and repository interfaces."""
