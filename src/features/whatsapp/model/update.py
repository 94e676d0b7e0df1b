from pydantic import BaseModel, ConfigDict

from features.whatsapp.model.entry import Entry


class Update(BaseModel):
    """
    Root of a webhook delivery: { object: str, entry: [Entry] }.
    One delivery may batch many entries, changes, messages and statuses.
    Extra fields are ignored to keep parsing resilient to API changes.
    """

    model_config = ConfigDict(extra = "ignore")

    object: str
    entry: list[Entry] = []
