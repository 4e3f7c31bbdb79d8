__version__ = "0.1.0"
from trigram_similarity.config import ConfigManager

config = ConfigManager()
cfg = config.load()

from trigram_similarity.core import jaccard, normalize, similarity, trigrams  # noqa: E402
from trigram_similarity.data import Match  # noqa: E402
from trigram_similarity.search import Matches, find_words  # noqa: E402

__all__ = [
    "__version__",
    "config",
    "cfg",
    "similarity",
    "jaccard",
    "normalize",
    "trigrams",
    "find_words",
    "Matches",
    "Match",
]
