"""Static catalog for the landing page: models, library prompts and pricing."""
