# agents/suggestion_agent.py

from __future__ import annotations

import json
import logging
import math
import re
from typing import Any, List

from app.config import settings
from models.analysis_models import PageMetrics
from models.suggestion_models import MAX_BLOG_IDEAS, MAX_IMPROVEMENTS, Suggestions
from services.html_parser import (
    META_DESCRIPTION_MAX_LENGTH,
    META_DESCRIPTION_MIN_LENGTH,
    TITLE_MAX_LENGTH,
    TITLE_MIN_LENGTH,
)
from services.llm_client import get_llm_client

logger = logging.getLogger(__name__)

# ============================================================
# フォールバック用パラメータ
# ============================================================

# ルール1件ごとに 100 点から引く点数と、その下限
RULE_PENALTY = 10
MIN_FALLBACK_SCORE = 50

# テキスト解析でスコア行が見つからないときの値
DEFAULT_TEXT_SCORE = 75
DEFAULT_TEXT_EXPLANATION = "Based on standard SEO best practices analysis."
FALLBACK_EXPLANATION = "Based on fundamental SEO best practices and common issues found."

DEFAULT_IMPROVEMENTS: List[str] = [
    "Optimize title tag length to 30-60 characters for better search visibility",
    "Create compelling meta description (120-160 characters) to improve click-through rates",
    "Add descriptive alt attributes to all images for accessibility and SEO benefits",
    "Structure content with proper heading hierarchy (H1, H2, H3)",
    "Include relevant internal and external links to provide additional value",
]

DEFAULT_BLOG_IDEAS: List[str] = [
    "10 Essential SEO Best Practices for 2024: A Comprehensive Guide",
    "How to Optimize Your Website Content for Better Search Engine Rankings",
]

SYSTEM_PROMPT = (
    "You are an SEO expert. Provide detailed, actionable SEO improvement "
    "suggestions based on website analysis data."
)

_JSON_OBJECT_RE = re.compile(r"\{[\s\S]*\}")
_NUMBER_RE = re.compile(r"(\d+)")
_NUMBERED_RE = re.compile(r"^\d+\.\s*")
_BULLET_RE = re.compile(r"^[-*]\s*")


# ============================================================
# プロンプト
# ============================================================

def build_prompt(metrics: PageMetrics) -> str:
    """PageMetrics を埋め込んだ user プロンプトを作る。"""
    return f"""
Based on this SEO analysis data, provide comprehensive SEO improvement suggestions:

Website Analysis:
- URL: {metrics.url}
- Word Count: {metrics.word_count}
- Title: "{metrics.title.content}" (Length: {metrics.title.length} characters)
- Meta Description: "{metrics.meta_description.content}" (Length: {metrics.meta_description.length} characters)
- Images: {metrics.images.total} total, {metrics.images.missing_alt} missing alt attributes
- Headings: {metrics.headings.total_count} total headings, {metrics.headings.h1_count} H1 tags
- Links: {metrics.links.total} total links ({metrics.links.internal} internal, {metrics.links.external} external)

Please provide:
1. An overall SEO score (0-100) with explanation
2. A prioritized checklist of 3-5 specific improvement suggestions
3. Two creative blog post ideas based on the page's content

Format your response as JSON with these keys:
{{
  "seoScore": number,
  "scoreExplanation": string,
  "improvements": [string],
  "blogIdeas": [string]
}}
""".strip()


# ============================================================
# 正規化ユーティリティ
# ============================================================

def _clamp_score(value: Any) -> int:
    """スコアを 0〜100 の int に丸める。数値にできなければ ValueError。"""
    if isinstance(value, str) and value.strip().isdigit():
        score = int(value)
    else:
        number = float(value)
        # json は 1e999 / Infinity を inf として返す
        if not math.isfinite(number):
            raise ValueError(f"score is not finite: {value!r}")
        score = int(round(number))
    return max(0, min(100, score))


def _string_list(value: Any, limit: int) -> List[str]:
    if not isinstance(value, list):
        raise ValueError("expected a list of strings")
    items = [str(v).strip() for v in value if v is not None and str(v).strip()]
    return items[:limit]


def _suggestions_from_dict(data: Any) -> Suggestions:
    """LLM が返した JSON dict を Suggestions に変換する。キー欠落は ValueError。"""
    if not isinstance(data, dict):
        raise ValueError("JSON root is not an object")

    missing = [k for k in ("seoScore", "improvements", "blogIdeas") if k not in data]
    if missing:
        raise ValueError(f"missing keys: {missing}")

    return Suggestions(
        seo_score=_clamp_score(data["seoScore"]),
        score_explanation=str(data.get("scoreExplanation") or ""),
        improvements=_string_list(data["improvements"], MAX_IMPROVEMENTS),
        blog_ideas=_string_list(data["blogIdeas"], MAX_BLOG_IDEAS),
    )


# ============================================================
# LLM レスポンス解析
# ============================================================

def parse_structured_response(text: str) -> Suggestions:
    """
    JSON にならなかった LLM 応答を行単位でざっくり解析する。

    - "SEO Score" / "Overall Score" を含む行の最初の数値 → seoScore
    - "1." や "-" "*" で始まる行 → improvements（最大5件）
    - "blog" / "post" を含む行 → blogIdeas（最大2件）
    取れなかった項目は既定リストで埋める。
    """
    lines = [line.strip() for line in text.splitlines() if line.strip()]

    seo_score = DEFAULT_TEXT_SCORE
    improvements: List[str] = []
    blog_ideas: List[str] = []

    for line in lines:
        if "SEO Score" in line or "Overall Score" in line:
            m = _NUMBER_RE.search(line)
            if m:
                try:
                    seo_score = _clamp_score(m.group(1))
                except ValueError:
                    # 桁数が多すぎる等。既定スコアのまま
                    logger.warning("[suggestion] unusable score line: %.80s", line)

        if _NUMBERED_RE.match(line) or _BULLET_RE.match(line):
            improvement = _BULLET_RE.sub("", _NUMBERED_RE.sub("", line)).strip()
            if improvement and len(improvements) < MAX_IMPROVEMENTS:
                improvements.append(improvement)

        lowered = line.lower()
        if "blog" in lowered or "post" in lowered:
            idea = _BULLET_RE.sub("", line).strip()
            if idea and len(blog_ideas) < MAX_BLOG_IDEAS:
                blog_ideas.append(idea)

    return Suggestions(
        seo_score=seo_score,
        score_explanation=DEFAULT_TEXT_EXPLANATION,
        improvements=improvements or list(DEFAULT_IMPROVEMENTS),
        blog_ideas=blog_ideas or list(DEFAULT_BLOG_IDEAS),
    )


def parse_ai_response(text: str) -> Suggestions:
    """
    応答テキストから JSON オブジェクト部分を探してパースする。
    見つからない / 壊れている / 形が違う場合は行単位の解析に切り替える。
    """
    m = _JSON_OBJECT_RE.search(text)
    if m:
        try:
            return _suggestions_from_dict(json.loads(m.group(0)))
        except (ValueError, TypeError) as e:
            # json.JSONDecodeError / pydantic.ValidationError も ValueError 系
            logger.warning("[suggestion] JSON parse failed, use text parsing: %s", e)

    return parse_structured_response(text)


# ============================================================
# ルールベースのフォールバック
# ============================================================

def fallback_suggestions(metrics: PageMetrics) -> Suggestions:
    """
    LLM を使わずに、固定の閾値チェックだけでスコアと改善点を出す。
    1ルールごとに RULE_PENALTY 点減点、下限は MIN_FALLBACK_SCORE。
    """
    improvements: List[str] = []

    if metrics.title.length < TITLE_MIN_LENGTH:
        improvements.append(
            "Title tag is too short. Aim for 30-60 characters for optimal display in search results."
        )
    if metrics.title.length > TITLE_MAX_LENGTH:
        improvements.append(
            "Title tag is too long. Consider shortening to 30-60 characters for better visibility."
        )
    if metrics.meta_description.length < META_DESCRIPTION_MIN_LENGTH:
        improvements.append(
            "Meta description is too short. Expand to 120-160 characters for better search result snippets."
        )
    if metrics.meta_description.length > META_DESCRIPTION_MAX_LENGTH:
        improvements.append(
            "Meta description is too long. Shorten to 120-160 characters to avoid truncation."
        )
    if metrics.images.missing_alt > 0:
        improvements.append(
            f"{metrics.images.missing_alt} images are missing alt attributes. "
            "Add descriptive alt text for better accessibility and SEO."
        )
    if metrics.headings.h1_count == 0:
        improvements.append(
            "No H1 heading found. Add a clear H1 heading that includes your main keyword."
        )
    if metrics.headings.h1_count > 1:
        improvements.append(
            "Multiple H1 headings detected. Use only one H1 per page for better SEO structure."
        )

    score = max(MIN_FALLBACK_SCORE, 100 - len(improvements) * RULE_PENALTY)

    return Suggestions(
        seo_score=score,
        score_explanation=FALLBACK_EXPLANATION,
        improvements=improvements[:MAX_IMPROVEMENTS],
        blog_ideas=list(DEFAULT_BLOG_IDEAS),
    )


# ============================================================
# LLM 呼び出し
# ============================================================

def _llm_suggestions(metrics: PageMetrics) -> Suggestions:
    client = get_llm_client()
    model = settings.llm_model

    logger.info("[suggestion] LLM call start url=%s model=%s", metrics.url, model)
    response = client.chat.completions.create(
        model=model,
        messages=[
            {"role": "system", "content": SYSTEM_PROMPT},
            {"role": "user", "content": build_prompt(metrics)},
        ],
        temperature=settings.llm_temperature,
        max_tokens=settings.llm_max_tokens,
    )

    content = response.choices[0].message.content
    if not content:
        raise RuntimeError("LLM からコンテンツが返却されませんでした")

    logger.info("[suggestion] LLM response length=%s", len(content))
    return parse_ai_response(content)


# ============================================================
# 公開関数
# ============================================================

def generate_suggestions(metrics: PageMetrics) -> Suggestions:
    """
    SuggestionAgent のメイン関数。例外は投げない。

    1. LLM_API_KEY が無ければ即フォールバック
    2. LLM 呼び出し・解析で何か起きてもフォールバック
    """
    if not settings.llm_api_key:
        logger.info("[suggestion] mode=FALLBACK (no LLM_API_KEY)")
        return fallback_suggestions(metrics)

    try:
        logger.info("[suggestion] mode=LLM")
        return _llm_suggestions(metrics)
    except Exception as e:  # noqa: BLE001
        logger.warning("[suggestion] LLM error, fallback used: %s", e)
        return fallback_suggestions(metrics)
