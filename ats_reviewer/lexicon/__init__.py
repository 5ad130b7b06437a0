from functools import lru_cache

from .lexicon import Lexicon


@lru_cache(maxsize=1)
def get_default_lexicon() -> Lexicon:
    return Lexicon.from_file()


__all__ = ["Lexicon", "get_default_lexicon"]
