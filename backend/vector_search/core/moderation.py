# backend/vector_search/core/moderation.py
"""
Content moderation gate. Runs before any embedding or completion cost is incurred.
"""
from vector_search.api.models import ModerationVerdict
from vector_search.core.errors import UserError
from vector_search.core.logger import get_logger

logger = get_logger(__name__)


class Moderator:
    def __init__(self, client):
        # client: openai.OpenAI (or anything exposing .moderations.create)
        self.client = client

    def verdict(self, text: str) -> ModerationVerdict:
        response = self.client.moderations.create(input=text)
        # one input was sent, so only the first result matters
        result = response.results[0]
        return ModerationVerdict(flagged=bool(result.flagged), categories=result.categories.to_dict())

    def check(self, text: str) -> ModerationVerdict:
        """
        Raise UserError carrying the flagged categories when the text is rejected.
        """
        verdict = self.verdict(text)
        if verdict.flagged:
            logger.info("Query rejected by moderation")
            raise UserError("Flagged content", {"flagged": True, "categories": verdict.categories})
        return verdict
