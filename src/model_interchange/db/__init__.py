from model_interchange.db.memory import InMemoryElement, InMemoryElementStore
from model_interchange.db.seed import load_seed_file

__all__ = [
    "InMemoryElement",
    "InMemoryElementStore",
    "load_seed_file",
]
