"""Question-related Pydantic models, shaped like the content API payloads."""
from pydantic import BaseModel, ConfigDict, Field

TEXT_OPTION_TYPE = "text"


class Question(BaseModel):
    """Question body as stored by the content API."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., alias="_id", min_length=1)
    question: str = ""
    answer: str = ""
    question_image_url: str | None = None


class Option(BaseModel):
    """Answer option; text options carry HTML, others may carry an image."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., alias="_id", min_length=1)
    option_text: str = ""
    option_type: str = TEXT_OPTION_TYPE
    path_url: str | None = None

    @property
    def is_text(self) -> bool:
        return self.option_type == TEXT_OPTION_TYPE


class QuestionItem(BaseModel):
    """A question paired with its options in display order."""

    question: Question
    options: list[Option] = Field(default_factory=list)

    def find_option(self, option_id: str) -> Option | None:
        for option in self.options:
            if option.id == option_id:
                return option
        return None
