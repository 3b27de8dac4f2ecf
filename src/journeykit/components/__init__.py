"""Metadata models and keyed registries for every journeykit kind."""
