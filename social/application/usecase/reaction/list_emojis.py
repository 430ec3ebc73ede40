"""List emojis use case."""

from pydantic import BaseModel

from social.domain.value import COMMON_EMOJIS


class EmojiItem(BaseModel):
    """Well-known emoji."""

    name: str
    unicode: str
    display_name: str


class ListEmojisResponse(BaseModel):
    """List emojis response."""

    emojis: list[EmojiItem]
    total_count: int


class ListEmojisUseCase:
    """Use case for the emoji names clients may send without unicode."""

    async def execute(self) -> ListEmojisResponse:
        emojis = [
            EmojiItem(
                name=name,
                unicode=unicode,
                display_name=name.replace("_", " ").title(),
            )
            for name, unicode in COMMON_EMOJIS.items()
        ]
        return ListEmojisResponse(emojis=emojis, total_count=len(emojis))
