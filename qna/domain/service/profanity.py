"""Profanity filter interface."""


class ProfanityFilter:
    """Censors offensive words in free text."""

    async def censor(self, text: str) -> str:
        """Return text with offensive words masked.

        Raises:
            ProfanityServiceError: If the text could not be checked
        """
        raise NotImplementedError
