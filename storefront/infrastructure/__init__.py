"""Infrastructure layer - configuration, logging, HTTP clients, collaborators."""
