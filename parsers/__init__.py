"""Page parsers for freeones.com."""
