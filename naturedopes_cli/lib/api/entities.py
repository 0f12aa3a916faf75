from typing import Optional

from pydantic import BaseModel, Field

MIN_KEY_LENGTH_TO_REVEAL_PREFIX = 8


class Image(BaseModel):
    id: int
    species_name: str
    gps_long: float
    gps_lat: float
    image_path: str
    user_id: int


class ApiKey(BaseModel):
    id: int
    key: str
    name: str
    created_at: str
    expires_at: str
    last_used: Optional[str] = Field(default=None)
    revoked: bool = Field(default=False)

    @property
    def masked_key(self) -> str:
        if len(self.key) < MIN_KEY_LENGTH_TO_REVEAL_PREFIX:
            return "***"
        return f"{self.key[:MIN_KEY_LENGTH_TO_REVEAL_PREFIX]}..."
