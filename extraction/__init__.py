"""Field extraction and record assembly for FreeOnes actor profiles."""

from extraction.extractor import extract_actor

__all__ = ["extract_actor"]
