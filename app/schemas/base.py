from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from app.config import settings
from app.models.constant import SCRAP_CATEGORIES

class CamelModel(BaseModel):
    """Base schema for the public JSON API, which speaks camelCase on the wire."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def check_categories(value):
    if not isinstance(value, list) or len(value) == 0:
        raise ValueError("At least one category is required")
    for category in value:
        if category not in SCRAP_CATEGORIES:
            raise ValueError(f"Invalid category: {category}")
    return value


def check_weight(value):
    # bool is an int subclass but never a weight
    is_number = isinstance(value, (int, float)) and not isinstance(value, bool)
    if not is_number or not (settings.MIN_WEIGHT_KG <= value <= settings.MAX_WEIGHT_KG):
        raise ValueError(
            f"Weight must be between {settings.MIN_WEIGHT_KG:g} and {settings.MAX_WEIGHT_KG:g} kg"
        )
    return value
