from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import Optional, List, Dict

class HealthOut(BaseModel):
    status: str
    app: str
    version: str
    catalog_url: str
    catalog_key: str  # masked
    timezone: str

# --- IGDB catalog (release_dates?expand=game) ---

class CatalogGame(BaseModel):
    id: Optional[int] = None
    name: str
    slug: Optional[str] = None
    popularity: Optional[float] = None

class ReleaseRecord(BaseModel):
    id: Optional[int] = None
    game: CatalogGame
    date: Optional[int] = None       # epoch ms, same unit as filter[date]
    human: str = ""                  # e.g. "2018-Q3" or "Sep 14, 2018"
    region: int = 0                  # 1 EU, 2 NA, 3 AU, 4 NZ, 5 JP, 6 CH, 7 AS, 8 Worldwide
    category: Optional[int] = None   # date precision; 3-6 are quarters
    platform: Optional[int] = None

# --- Alexa custom skill envelope ---

class AlexaModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

class SlotValue(AlexaModel):
    name: str
    id: Optional[str] = None

class ResolutionValue(AlexaModel):
    value: SlotValue

class ResolutionStatus(AlexaModel):
    code: str

class ResolutionAuthority(AlexaModel):
    authority: Optional[str] = None
    status: ResolutionStatus
    values: List[ResolutionValue] = Field(default_factory=list)

class Resolutions(AlexaModel):
    resolutions_per_authority: List[ResolutionAuthority] = Field(default_factory=list)

class Slot(AlexaModel):
    name: str
    value: Optional[str] = None
    resolutions: Optional[Resolutions] = None

class Intent(AlexaModel):
    name: str
    slots: Dict[str, Slot] = Field(default_factory=dict)

class RequestBody(AlexaModel):
    type: str
    request_id: Optional[str] = None
    locale: Optional[str] = None
    intent: Optional[Intent] = None

class AlexaRequest(AlexaModel):
    version: str = "1.0"
    request: RequestBody

class OutputSpeech(AlexaModel):
    type: str = "PlainText"
    text: str

class CardImage(AlexaModel):
    small_image_url: str
    large_image_url: str

class Card(AlexaModel):
    type: str = "Standard"
    title: str
    text: str
    image: CardImage

class ResponseBody(AlexaModel):
    output_speech: OutputSpeech
    card: Card
    should_end_session: bool = True

class AlexaResponse(AlexaModel):
    version: str = "1.0"
    response: ResponseBody

# --- formatter output ---

class SkillReply(BaseModel):
    speech: str
    card_title: str
    card_text: str
    small_image_url: str
    large_image_url: str

    def to_alexa(self) -> AlexaResponse:
        return AlexaResponse(response=ResponseBody(
            output_speech=OutputSpeech(text=self.speech),
            card=Card(
                title=self.card_title, text=self.card_text,
                image=CardImage(small_image_url=self.small_image_url, large_image_url=self.large_image_url),
            ),
        ))
