# omikuji/models/omikuji.py

from pydantic import BaseModel, Field
from typing import Dict

class OmikujiResult(BaseModel):
    result: str

class ResponseEnvelope(BaseModel):
    """A transport-neutral response: both adapters turn this into their own reply."""
    status_code: int = 200
    headers: Dict[str, str] = Field(default_factory=dict)
    body: str = ""
