"""Output adapters turning core models into target vocabularies."""
