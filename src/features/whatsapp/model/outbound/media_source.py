from pydantic import BaseModel

from util.error_codes import MISSING_MEDIA_SOURCE
from util.errors import ValidationError


class MediaSource(BaseModel):
    """Media referenced either by an uploaded media ID or by a public link."""
    id: str | None = None
    link: str | None = None

    def validate_source(self, field: str):
        if not self.id and not self.link:
            raise ValidationError(field, "media must carry an id or a URL", MISSING_MEDIA_SOURCE)
