"""Result schema for a single conversion."""

from pydantic import BaseModel, Field


class ConversionResult(BaseModel):
    """Output schema for a conversion run."""

    mode: str = Field(..., description="Conversion mode key that was applied")
    reverse: bool = Field(default=False, description="Whether the inverse conversion was applied")
    input: str = Field(..., description="Original text")
    output: str = Field(..., description="Converted text")

    class Config:
        """Pydantic config."""

        json_schema_extra = {
            "example": {
                "mode": "snake-case",
                "reverse": False,
                "input": "myVariableName",
                "output": "my_variable_name",
            }
        }
