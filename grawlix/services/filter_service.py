from fastapi import HTTPException, Depends
from grawlix.core.config import Settings, get_settings
from grawlix.core.vocabulary import Vocabulary, get_base_vocabulary
from grawlix.schemas.text import TextFilterRequest, ReplaceTextRequest
from grawlix.utils import censor as matcher
import logging

logger = logging.getLogger(__name__)


class FilterService:
    """Runs the matcher for one request against the shared base vocabulary."""

    def __init__(self, vocabulary: Vocabulary, settings: Settings):
        self.vocabulary = vocabulary
        self.settings = settings

    def _prepare(self, request: TextFilterRequest) -> tuple[str, Vocabulary]:
        """Apply the placeholder policy and derive this request's vocabulary."""
        content = request.content
        if content is None:
            content = self.settings.placeholder_content
        vocabulary = (
            self.vocabulary
            .with_additions(request.extra_filters)
            .with_exclusions(request.exclude_filters)
        )
        return content, vocabulary

    def check(self, request: TextFilterRequest) -> bool:
        """True if the content contains a disallowed term."""
        try:
            content, vocabulary = self._prepare(request)
            found = matcher.contains_profanity(content, vocabulary)
            logger.debug("check-text: %d chars, profane=%s", len(content), found)
            return found
        except Exception as e:
            logger.error(f"Error checking text: {e}")
            raise HTTPException(status_code=500, detail="Failed to check text")

    def censor(self, request: TextFilterRequest) -> str:
        """Content with each disallowed term masked."""
        try:
            content, vocabulary = self._prepare(request)
            return matcher.censor(content, vocabulary, self.settings.mask_char)
        except Exception as e:
            logger.error(f"Error censoring text: {e}")
            raise HTTPException(status_code=500, detail="Failed to censor text")

    def replace(self, request: ReplaceTextRequest) -> str:
        """Content with each disallowed term swapped for the grawlix."""
        try:
            content, vocabulary = self._prepare(request)
            return matcher.replace(content, vocabulary, request.grawlix)
        except Exception as e:
            logger.error(f"Error replacing text: {e}")
            raise HTTPException(status_code=500, detail="Failed to replace text")


def get_filter_service(
    vocabulary: Vocabulary = Depends(get_base_vocabulary),
    settings: Settings = Depends(get_settings),
) -> FilterService:
    """Dependency function to get a FilterService bound to the base vocabulary."""
    return FilterService(vocabulary, settings)
