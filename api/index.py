from functools import lru_cache
import logging
from pathlib import Path
import sys

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

# Ensure local src package is importable in serverless runtime.
ROOT = Path(__file__).resolve().parent.parent
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from synset_align import Synset, __version__, get_dictionary  # noqa: E402
from synset_align.alignment import InterLingualIndex, default_index  # noqa: E402
from synset_align.alignment.repository import parse_sense_key  # noqa: E402
from synset_align.dictionaries import BaseDictionary  # noqa: E402
from synset_align.exceptions import (  # noqa: E402
    DictionaryError,
    MappingUnavailableError,
    ResourceError,
)

app = FastAPI(title="synset-align API", version=__version__)
logger = logging.getLogger(__name__)


@app.get("/health")
def health() -> dict[str, bool]:
    return {"ok": True}


class MapRequest(BaseModel):
    source: str
    source_language: str = "eng"
    target: str
    target_language: str
    sense: str


class MapResponse(BaseModel):
    mapped: bool
    synset: Synset | None = None


def _index() -> InterLingualIndex:
    return default_index()


@lru_cache(maxsize=32)
def _load_dictionary(source: str, language: str) -> BaseDictionary:
    return get_dictionary(source, language, index=_index())


@app.post("/map", response_model=MapResponse)
def map_sense(body: MapRequest) -> MapResponse:
    try:
        pos, offset = parse_sense_key(body.sense)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    try:
        source = _load_dictionary(body.source, body.source_language)
        target = _load_dictionary(body.target, body.target_language)
        synset = source.synset_at(pos, offset)
        mapped = _index().map_synset(synset, target)
    except DictionaryError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except MappingUnavailableError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    except ResourceError:
        logger.exception("map failed")
        raise HTTPException(status_code=500, detail="internal_error")

    return MapResponse(mapped=mapped is not None, synset=mapped)
