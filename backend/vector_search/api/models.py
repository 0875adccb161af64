# models.py
from pydantic import BaseModel, ConfigDict
from typing import Any, Dict, Optional

# Transient values passed between pipeline stages; none of them outlive a request.


class ModerationVerdict(BaseModel):
    flagged: bool
    categories: Dict[str, Any] = {}


class PageSection(BaseModel):
    # the store returns extra columns (id, page_id, similarity, ...); keep them
    model_config = ConfigDict(extra="allow")

    content: Optional[str] = None
