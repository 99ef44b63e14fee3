"""Base pydantic model for the camelCase JSON wire format."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Python attributes in snake_case, JSON keys in camelCase.

    Requests are accepted in either spelling; responses are emitted in camelCase.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
