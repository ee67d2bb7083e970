import json
import logging
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from model_interchange.core.errors import DataFormatError
from model_interchange.db.memory import InMemoryElementStore
from model_interchange.models import Element, ScopedElement

logger = logging.getLogger(__name__)

_SEED_ADAPTER = TypeAdapter(list[ScopedElement])


async def load_seed_file(store: InMemoryElementStore, path: str | Path) -> int:
    """Load a JSON list of scoped elements into ``store``; returns the count loaded."""
    try:
        raw = json.loads(Path(path).read_text(encoding="utf-8"))
        seeds = _SEED_ADAPTER.validate_python(raw)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError, ValidationError) as exc:
        raise DataFormatError(f"Invalid seed file {path}: {exc}") from exc

    batches: dict[tuple[str, str, str], list[Element]] = {}
    for seed in seeds:
        batches.setdefault((seed.org, seed.project, seed.branch), []).append(seed.element())

    for (org, project, branch), elements in batches.items():
        await store.create_elements(org, project, branch, elements)
    logger.info("Loaded %d seed element(s) from %s", len(seeds), path)
    return len(seeds)
