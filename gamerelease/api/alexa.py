from typing import Any, Dict, Iterator
from fastapi import APIRouter, Depends

from gamerelease.core.config import Settings, get_settings
from gamerelease.models.schemas import AlexaRequest
from gamerelease.services.catalog import ReleaseCatalog
from gamerelease.services.dispatcher import dispatch

router = APIRouter(prefix="/alexa", tags=["alexa"])

def get_catalog(settings: Settings = Depends(get_settings)) -> Iterator[ReleaseCatalog]:
    with ReleaseCatalog(settings) as catalog:
        yield catalog

@router.post("")
def alexa(
    req: AlexaRequest,
    settings: Settings = Depends(get_settings),
    catalog: ReleaseCatalog = Depends(get_catalog),
) -> Dict[str, Any]:
    """
    Alexa custom-skill endpoint. One request in, one response envelope out.
    """
    reply = dispatch(req, settings, catalog=catalog)
    return reply.to_alexa().model_dump(by_alias=True)
