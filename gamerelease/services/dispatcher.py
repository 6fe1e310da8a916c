from __future__ import annotations
from datetime import datetime
from typing import Optional, Tuple

from gamerelease.core.config import Settings
from gamerelease.models.schemas import AlexaRequest, Intent, SkillReply
from gamerelease.services.catalog import ReleaseCatalog
from gamerelease.services.logger import get_logger
from gamerelease.services.platforms import find_platform_id
from gamerelease.services.releases import release_titles, join_titles
from gamerelease.services import responses
from gamerelease.services.weeks import INTENT_WEEKS, week_range

log = get_logger(__name__)

LAUNCH_REQUEST = "LaunchRequest"
INTENT_REQUEST = "IntentRequest"
HELP_INTENT = "AMAZON.HelpIntent"
CONSOLE_SLOT = "TYPE_OF_CONSOLE"
MATCH_CODE = "ER_SUCCESS_MATCH"


def resolve_console(intent: Optional[Intent]) -> Tuple[Optional[str], str]:
    """
    (resolved console name or None, console as spoken).

    Only the first resolution authority counts, and only on an exact match.
    """
    slot = intent.slots.get(CONSOLE_SLOT) if intent else None
    if slot is None:
        return None, ""
    spoken = slot.value or ""
    authorities = slot.resolutions.resolutions_per_authority if slot.resolutions else []
    if not authorities:
        return None, spoken
    top = authorities[0]
    if top.status.code != MATCH_CODE or not top.values:
        return None, spoken
    return top.values[0].value.name, spoken


def dispatch(
    req: AlexaRequest,
    settings: Settings,
    catalog: Optional[ReleaseCatalog] = None,
    now: Optional[datetime] = None,
) -> SkillReply:
    body = req.request
    if body.type == LAUNCH_REQUEST:
        log.info("Launch request")
        return responses.launch_reply()

    intent = body.intent if body.type == INTENT_REQUEST else None
    intent_name = intent.name if intent else ""
    if intent_name == HELP_INTENT:
        log.info("Help intent")
        return responses.help_reply()

    console, spoken = resolve_console(intent)
    if console is None:
        log.info(f"Console not resolved (spoken={spoken!r}, intent={intent_name!r})")
        return responses.not_found_reply(spoken)

    if intent_name not in INTENT_WEEKS:
        log.info(f"Unsupported intent {intent_name!r} (request type {body.type!r})")
        return responses.not_found_reply("")

    week = week_range(intent_name, now=now, tz=settings.RELEASE_TIMEZONE)
    platform_id = find_platform_id(console)
    log.info(f"{intent_name} for console={console!r} platform={platform_id}")

    if catalog is None:
        with ReleaseCatalog(settings) as owned:
            records = owned.fetch_releases(platform_id, week)
    else:
        records = catalog.fetch_releases(platform_id, week)

    titles = release_titles(records)
    log.info(f"{len(titles)} distinct release(s) out of {len(records)} record(s)")
    return responses.release_reply(intent_name, console, titles, join_titles(titles))
