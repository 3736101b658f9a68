# talord/adapters/api/dependencies.py
from functools import lru_cache

from talord.core.domain.lexicon import NumeralLexicon, load_lexicon
from talord.core.use_cases.name_number import NameNumber


def get_lexicon() -> NumeralLexicon:
    return load_lexicon()


# --- Singletons ---
# The lexicon is frozen, so a single use case instance serves every request.
@lru_cache(maxsize=1)
def get_name_number_use_case() -> NameNumber:
    return NameNumber(lexicon=get_lexicon())
