"""Infrastructure layer: configuration, HTTP plumbing and REST repositories."""
