from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

# Integer keys are stored as 32-bit INTEGER columns
MAX_ID = 2**31 - 1


class CamelModel(BaseModel):
    """Base schema: camelCase on the wire, snake_case in Python, readable from ORM rows."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )
