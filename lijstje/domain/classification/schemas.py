"""
Data schemas for classification module
"""
from typing import Optional
from pydantic import BaseModel, Field


class CategoryPrediction(BaseModel):
    """
    Predicted category and emoji for a free-text product name.

    matched_term is the concept term that decided the category, None when
    nothing matched and the fallback category was used.
    """
    category_name: str = Field(..., description="Canonical category name")
    emoji: str = Field(..., description="Display emoji")
    matched_term: Optional[str] = Field(None, description="Concept term that matched")

    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "example": {
                "category_name": "Fruit & Groente",
                "emoji": "🍎",
                "matched_term": "appel",
            }
        },
    }
