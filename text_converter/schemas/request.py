"""Request schema for a single conversion."""

from pydantic import BaseModel, Field


class ConversionRequest(BaseModel):
    """Input schema for a conversion run."""

    mode: str = Field(..., description="Conversion mode key, e.g. 'slugify'")
    text: str = Field(default="", description="Text to convert")
    reverse: bool = Field(default=False, description="Run the inverse of a bidirectional mode")

    class Config:
        """Pydantic config."""

        json_schema_extra = {
            "example": {
                "mode": "snake-case",
                "text": "myVariableName",
                "reverse": False,
            }
        }
