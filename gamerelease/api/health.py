from fastapi import APIRouter, Depends
from gamerelease.core.config import Settings, get_settings, mask
from gamerelease.models.schemas import HealthOut

router = APIRouter(tags=["health"])

@router.get("/health", response_model=HealthOut)
def health(s: Settings = Depends(get_settings)):
    """Liveness plus the catalog the skill talks to; the key is masked."""
    return HealthOut(
        status="ok",
        app=s.APP_NAME,
        version=s.APP_VERSION,
        catalog_url=s.IGDB_API_URL,
        catalog_key=mask(s.IGDB_KEY),
        timezone=s.RELEASE_TIMEZONE,
    )
