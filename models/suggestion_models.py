# models/suggestion_models.py

from typing import List

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

MAX_IMPROVEMENTS = 5
MAX_BLOG_IDEAS = 2


class Suggestions(BaseModel):
    """
    PageMetrics から導出されるスコアと改善提案。
    LLM 生成 / ルールベースのフォールバックのどちらでも同じ形になる。
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    seo_score: int = Field(..., ge=0, le=100)
    score_explanation: str = ""
    improvements: List[str] = Field(default_factory=list, max_length=MAX_IMPROVEMENTS)
    blog_ideas: List[str] = Field(default_factory=list, max_length=MAX_BLOG_IDEAS)
