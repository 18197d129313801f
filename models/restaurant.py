from pydantic import BaseModel, ConfigDict
from typing import List, Optional

class Restaurant(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: Optional[str] = None
    name: str
    description: Optional[str] = None
    categories: List[str] = []
    address: Optional[str] = None
    city: Optional[str] = None
