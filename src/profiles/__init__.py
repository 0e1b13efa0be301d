"""Style and character profiles: models, lookup, templates."""
