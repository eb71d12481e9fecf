from pydantic import BaseModel, ConfigDict


class Tip(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    title: str
    body: str
    tag: str
    icon: str
