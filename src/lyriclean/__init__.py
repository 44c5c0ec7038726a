from .pipeline import clean_lyrics

__all__ = ["clean_lyrics"]
