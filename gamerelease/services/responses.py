from __future__ import annotations
from typing import List

from gamerelease.models.schemas import SkillReply

# German only. Release replies name the console by its resolved slot name.

CARD_IMAGE_URL = "https://images.unsplash.com/photo-1521484358791-8c8504da415e?ixlib=rb-0.3.5&s=297fdee304c29c6474a47682aa8f651b"
SKILL_TITLE = "Game Release"
NO_RELEASES_CARD = "Leider keine Releases :("
FEEDBACK_EMAIL = "hello@juni.io"

# intent -> (found, nothing found)
RELEASE_TEMPLATES = {
    "ReleasePreviousWeek": (
        "folgende spiele sind die letzte woche für {console} erschienen:\n {games}",
        "ich konnte leider keine {console} game releases für die letzte woche finden",
    ),
    "ReleaseThisWeek": (
        "folgende spiele kommen diese woche für {console}:\n {games}",
        "ich konnte leider keine {console} game releases für diese woche finden",
    ),
    "ReleaseNextWeek": (
        "folgende spiele kommen nächste woche für {console}: {games}",
        "ich konnte leider keine {console} game releases für nächste woche finden",
    ),
}

WELCOME_SPEECH = (
    "Willkommen beim Skill Game Release! "
    "Du kannst mich nach aktuellen Game Releases für die Konsolen PS4, Xbox One, Nintendo Switch oder den PC fragen. "
    "Um herauszufinden was du mich alles fragen kannst: sag einfach \"Alexa, frage Game Release was kann ich fragen\"."
)
WELCOME_CARD = (
    "Willkommen beim Skill \"Game Release\"!\n"
    "Du kannst mich nach aktuellen Game Releases für die Konsolen PS4, Xbox One, Nintendo Switch oder den PC fragen.\n"
    "Um herauszufinden was du mich alles fragen kannst: sag einfach \"Alexa, frage Game Release was kann ich fragen\"."
)

HELP_SPEECH = (
    "Du kannst mich z.B. folgendes fragen: "
    "\"Welche Spiele sind letzte Woche für die Switch, PS4, Xbox One oder den PC erschienen?\", "
    "\"Was kommt nächste Woche für die Switch, PS4, Xbox One oder den PC?\" oder "
    "\"Was erscheint diese Woche für die Switch, PS4, Xbox One oder den PC?\"."
)
HELP_CARD = (
    "Du kannst mich z.B. folgendes fragen:\n"
    "\"Welche Spiele sind letzte Woche für die Switch, PS4, Xbox One oder den PC erschienen?\",\n"
    "\"Was kommt nächste Woche für die Switch, PS4, Xbox One oder den PC?\" oder\n"
    "\"Was erscheint diese Woche für die Switch, PS4, Xbox One oder den PC?\"."
)

NOT_FOUND_SPEECH = (
    "Ich konnte die Plattform {console} leider nicht finden. "
    "Aktuell unterstütze ich nur Switch, PS4, Xbox One und PC. "
    "Für Verbesserungswünsche kannst du mir Feedback per Email an {email} schicken."
)
NOT_FOUND_CARD = (
    "Ich konnte die Plattform {console} leider nicht finden, aktuell unterstütze ich nur Switch, PS4, Xbox One und PC.\n"
    "Für Verbesserungswünsche kannst du mir Feedback per Email an {email} schicken."
)


def _reply(speech: str, card_title: str, card_text: str) -> SkillReply:
    return SkillReply(
        speech=speech,
        card_title=card_title,
        card_text=card_text,
        small_image_url=CARD_IMAGE_URL,
        large_image_url=CARD_IMAGE_URL,
    )


def release_card_title(console: str) -> str:
    return f"{console.upper()} - Game Releases"


def release_reply(intent: str, console: str, titles: List[str], games: str) -> SkillReply:
    """
    Reply for one of the release intents.

    `games` is the spoken, conjunction-joined list; the card shows `titles` one per line.
    """
    found_tpl, none_tpl = RELEASE_TEMPLATES[intent]
    if games:
        speech = found_tpl.format(console=console, games=games)
        card_text = "\n".join(titles)
    else:
        speech = none_tpl.format(console=console)
        card_text = NO_RELEASES_CARD
    return _reply(speech, release_card_title(console), card_text)


def launch_reply() -> SkillReply:
    return _reply(WELCOME_SPEECH, SKILL_TITLE, WELCOME_CARD)


def help_reply() -> SkillReply:
    return _reply(HELP_SPEECH, SKILL_TITLE, HELP_CARD)


def not_found_reply(console: str) -> SkillReply:
    return _reply(
        NOT_FOUND_SPEECH.format(console=console, email=FEEDBACK_EMAIL),
        SKILL_TITLE,
        NOT_FOUND_CARD.format(console=console, email=FEEDBACK_EMAIL),
    )
