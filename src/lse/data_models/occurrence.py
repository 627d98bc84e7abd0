from pydantic import BaseModel, ConfigDict, Field


class Occurrence(BaseModel):
    """How many times a keyword appears in one document."""

    model_config = ConfigDict(frozen=True)

    doc_id: str
    frequency: int = Field(ge=0)

    def plus(self, frequency: int) -> "Occurrence":
        """Return a copy with frequency added to this one's."""
        return self.model_copy(update={"frequency": self.frequency + frequency})
