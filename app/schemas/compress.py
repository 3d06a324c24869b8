from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Optional

class CompressRequest(BaseModel):
    text: Optional[str] = None
    # 1 (original) .. 5 (summary); the form posts it as a string, anything else means 1
    level: Any = None

class CompressResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    original_length: int = Field(..., alias="originalLength")
    compressed_length: int = Field(..., alias="compressedLength")
    ratio: float
    text: str
