"""Conversion mode descriptor schema."""

from typing import Any, Dict
from pydantic import BaseModel, Field


class ConversionMode(BaseModel):
    """Display metadata for one conversion mode of the selector UI."""

    label: str = Field(..., min_length=1, description="Short name shown in the mode selector")
    description: str = Field(..., min_length=1, description="One-line explanation of the mode")
    input_label: str = Field(..., min_length=1, alias="inputLabel", description="Heading of the input pane")
    output_label: str = Field(..., min_length=1, alias="outputLabel", description="Heading of the output pane")
    input_placeholder: str = Field(
        ..., min_length=1, alias="inputPlaceholder", description="Placeholder of the empty input pane"
    )
    output_placeholder: str = Field(
        ..., min_length=1, alias="outputPlaceholder", description="Placeholder of the empty output pane"
    )
    bidirectional: bool = Field(..., description="Whether the UI offers the inverse conversion")

    class Config:
        """Pydantic config."""

        frozen = True
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "label": "Slugify",
                "description": "Convert text to URL-friendly slugs",
                "inputLabel": "Text",
                "outputLabel": "URL Slug",
                "inputPlaceholder": "Enter text to convert to URL slug...",
                "outputPlaceholder": "url-friendly-slug-will-appear-here",
                "bidirectional": False,
            }
        }

    def to_descriptor(self) -> Dict[str, Any]:
        """
        Serialize with the camelCase keys the front end reads.

        Returns:
            Descriptor dictionary
        """
        return self.model_dump(by_alias=True)
