"""AI 응답 JSON 스키마 (MonthlyAnalysis)."""
from .models import DIFFICULTY_LEVELS, TRADEMARK_STATUSES


def _string(description: str = "") -> dict:
    schema = {"type": "string"}
    if description:
        schema["description"] = description
    return schema


def _integer(description: str) -> dict:
    return {"type": "integer", "description": description}


DETAILED_PAGE_SCHEMA = {
    "type": "object",
    "properties": {
        "prologue": _string("Emotional intro (3-4 lines) appealing to the target audience."),
        "points": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "title": _string("Short benefit title"),
                    "content": _string("Description of the benefit"),
                },
                "required": ["title", "content"],
            },
            "description": "3 key selling points.",
        },
        "spec": _string("Brief summary of specs (Size, Weight, Material etc.)."),
        "faq": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {"q": _string(), "a": _string()},
                "required": ["q", "a"],
            },
            "description": "3 common Q&A pairs (e.g. Shipping time, Authenticity).",
        },
    },
    "required": ["prologue", "points", "spec", "faq"],
}

TRADEMARK_CHECK_SCHEMA = {
    "type": "object",
    "properties": {
        "status": {
            "type": "string",
            "enum": list(TRADEMARK_STATUSES),
            "description": "Risk level for a parallel importer.",
        },
        "riskLevel": _integer("0 (Safe) to 100 (High Risk)."),
        "brandDetected": _string("Name of the brand if detected, or 'None' if generic."),
        "riskReason": _string(
            "Explanation of risk (e.g. 'Generic noun - Safe', 'Famous Brand - Keep invoice')."
        ),
    },
    "required": ["status", "riskLevel", "brandDetected", "riskReason"],
}

RECOMMENDATION_SCHEMA = {
    "type": "object",
    "properties": {
        "productName": _string("Korean keyword optimized for Naver Search."),
        "englishKeyword": _string("English keyword for sourcing on Amazon."),
        "category": _string("Category (Non-consumable industrial goods)."),
        "reason": _string("Why this is a good 'Non-license' item to sell."),
        "difficulty": {
            "type": "string",
            "enum": list(DIFFICULTY_LEVELS),
            "description": "Sourcing difficulty (하=easy, 중=medium, 상=hard).",
        },
        "searchVolume": _integer("Naver Search Volume Index (0-100)."),
        "competitionLevel": _integer("Competition on Naver Smart Store (0-100)."),
        "targetAudience": _string("Target buyer description."),
        "salesTip": _string("Tip for sourcing specific specs/models."),
        "naverAveragePrice": _integer("Estimated average selling price on Naver Smart Store (KRW)."),
        "amazonSourcingPrice": _integer("Estimated purchase price on 11st Amazon (KRW)."),
        "suggestedSellingPrice": _integer("Recommended selling price to be competitive (KRW)."),
        "estimatedProfit": _integer("suggestedSellingPrice - amazonSourcingPrice (KRW)."),
        "seoTitle": _string(
            "Optimized Naver Product Title (Brand + Product + Keywords) under 50 chars."
        ),
        "hashtags": {
            "type": "array",
            "items": {"type": "string"},
            "description": "5-7 high volume hashtags for Naver.",
        },
        "marketingCopy": _string("A catchy one-sentence hook to put at the top of the detail page."),
        "detailedPage": DETAILED_PAGE_SCHEMA,
        "trademarkCheck": TRADEMARK_CHECK_SCHEMA,
    },
    "required": [
        "productName", "englishKeyword", "category", "reason", "difficulty",
        "searchVolume", "competitionLevel", "targetAudience", "salesTip",
        "naverAveragePrice", "amazonSourcingPrice", "suggestedSellingPrice", "estimatedProfit",
        "seoTitle", "hashtags", "marketingCopy", "detailedPage", "trademarkCheck",
    ],
}

ANALYSIS_SCHEMA = {
    "type": "object",
    "properties": {
        "month": _integer("The month being analyzed (1-12)"),
        "summary": _string(
            "Market summary focusing on 'Safe' Import Reselling (No Food/Cosmetics)."
        ),
        "recommendations": {"type": "array", "items": RECOMMENDATION_SCHEMA},
    },
    "required": ["month", "summary", "recommendations"],
}
