"""Title prompt fed from a submitted form field."""

from dataclasses import dataclass

from photo_reel.services.publishing import TitlePrompt


@dataclass
class FormTitlePrompt(TitlePrompt):
    """Answer the title prompt with the value the user submitted."""

    value: str | None

    async def ask(self) -> str | None:
        return self.value
