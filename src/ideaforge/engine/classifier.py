"""Domain classification stage."""

import logging

from ..llm import CompletionService
from ..llm.prompts import CLASSIFIER_PREAMBLE
from ..models import ChatMessage
from ..taxonomy import DomainCategory, parse_label

logger = logging.getLogger(__name__)


class DomainClassifier:
    """Asks a fast model which domain a question belongs to."""

    def __init__(self, llm: CompletionService, model: str):
        self.llm = llm
        self.model = model

    def build_messages(self, question: str) -> list[ChatMessage]:
        return [ChatMessage(role="user", content=CLASSIFIER_PREAMBLE + question)]

    async def classify(self, question: str) -> DomainCategory:
        """Classify a question with a single completion call.

        Answers that are not exactly a category label resolve to Other.
        Errors from the completion call propagate.
        """
        raw = await self.llm.complete(self.model, self.build_messages(question))
        category = parse_label(raw)

        if category.value != raw.strip():
            preview = raw[:60].replace("\n", " ")
            logger.debug(f"[CLASSIFIER] Unrecognised label '{preview}', using {category.value}")

        logger.info(f"[CLASSIFIER] Question classified as {category.value}")
        return category
