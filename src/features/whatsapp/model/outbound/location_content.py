from typing import ClassVar

from pydantic import BaseModel

from util.error_codes import INVALID_LOCATION
from util.errors import ValidationError


class LocationContent(BaseModel):
    """https://developers.facebook.com/docs/whatsapp/cloud-api/reference/messages#location-object"""
    TYPE: ClassVar[str] = "location"

    latitude: float
    longitude: float
    name: str | None = None
    address: str | None = None

    def validate_content(self):
        if self.latitude == 0 and self.longitude == 0:
            raise ValidationError("location", "latitude and longitude are both zero", INVALID_LOCATION)
        if not -90 <= self.latitude <= 90:
            raise ValidationError("location.latitude", "must be within [-90, 90]", INVALID_LOCATION)
        if not -180 <= self.longitude <= 180:
            raise ValidationError("location.longitude", "must be within [-180, 180]", INVALID_LOCATION)
