"""API request models."""

from pydantic import BaseModel, ConfigDict, Field


class ValidateRequest(BaseModel):
    """Request to validate a document against a schema."""

    model_config = ConfigDict(populate_by_name=True)

    document: str = Field(
        ...,
        description="Document source text (JSON or TOML, depending on the endpoint)",
        examples=['{"name": "Amy", "age": -1, "extra": true}'],
    )
    schema_text: str = Field(
        ...,
        alias="schema",
        description="JSON-encoded schema, always JSON even for TOML documents",
        examples=['{"type": "object", "properties": {"age": {"type": "number", "minimum": 0}}}'],
    )
