from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Accepts camelCase (as the admin UI sends it) or snake_case; responds in camelCase."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class PatchModel(CamelModel):
    """Partial updates. Unknown keys are rejected rather than silently dropped."""
    model_config = ConfigDict(extra="forbid")
