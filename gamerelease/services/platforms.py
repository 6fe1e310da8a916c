# IGDB platform ids
NINTENDO_SWITCH_ID = "130"
PS4_ID = "48"
XBOX_ONE_ID = "49"
PC_ID = "6"

PLATFORM_IDS = {
    "ps4": PS4_ID,
    "switch": NINTENDO_SWITCH_ID,
    "xbox one": XBOX_ONE_ID,
    "pc": PC_ID,
}

ALL_PLATFORMS = ",".join([PS4_ID, NINTENDO_SWITCH_ID, XBOX_ONE_ID, PC_ID])


def find_platform_id(console: str) -> str:
    """Catalog platform id for a resolved console name; unknown names query every platform."""
    return PLATFORM_IDS.get(console, ALL_PLATFORMS)
