"""Data models for synset-align."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

PartOfSpeech = Literal["noun", "verb", "adjective", "adverb"]

PARTS_OF_SPEECH: tuple[PartOfSpeech, ...] = ("noun", "verb", "adjective", "adverb")

# "s" marks satellite adjectives, which share the adjective namespace.
POS_BY_TAG: dict[str, PartOfSpeech] = {
    "n": "noun",
    "v": "verb",
    "a": "adjective",
    "s": "adjective",
    "r": "adverb",
}

TAG_BY_POS: dict[PartOfSpeech, str] = {
    "noun": "n",
    "verb": "v",
    "adjective": "a",
    "adverb": "r",
}


class EditionDescriptor(BaseModel):
    """Identifies one dictionary edition by publisher, language and version."""

    model_config = ConfigDict(frozen=True)

    publisher: str
    language: str
    number: str

    @field_validator("number", mode="before")
    @classmethod
    def _format_number(cls, value: object) -> str:
        if not isinstance(value, (int, float, Decimal, str)):
            raise ValueError(f"Unsupported version number: {value!r}")
        try:
            number = Decimal(str(value).strip())
        except InvalidOperation as exc:
            raise ValueError(f"Invalid version number: {value!r}") from exc
        if not number.is_finite():
            raise ValueError(f"Invalid version number: {value!r}")
        return str(number.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))

    def __str__(self) -> str:
        return f"{self.publisher}-{self.language}-{self.number}"


class Synset(BaseModel):
    """A single word sense resolved from a dictionary edition."""

    model_config = ConfigDict(frozen=True)

    edition: EditionDescriptor
    pos: PartOfSpeech
    offset: int = Field(ge=0)
    lemmas: tuple[str, ...] = ()
    gloss: str | None = None

    @property
    def sense_key(self) -> str:
        return f"{TAG_BY_POS[self.pos]}{self.offset:08d}"

    def contains_word(self, lemma: str) -> bool:
        wanted = lemma.strip().lower()
        return any(item.lower() == wanted for item in self.lemmas)
