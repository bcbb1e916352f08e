"""
Shared pydantic configuration for the API boundary.

Field names are snake_case in Python and camelCase on the wire
(movieId, showTime, movieTitle). Input accepts either spelling.
"""

from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        "from_attributes": True,
    }
