import pytest


def visibility_slice(visibility=0.42, sov=0.18, average_position=2.0, mentions=12, ranking=None):
    return {
        "visibility": {
            "visibility": visibility,
            "sov": sov,
            "averagePosition": average_position,
            "mentions": mentions,
        },
        "brand_family_ranking": ranking if ranking is not None else [
            {"name": "Nike", "average_rank": 1.2, "sov": 0.30, "is_target_brand": True},
            {"name": "Adidas", "average_rank": 1.8, "sov": 0.22, "is_target_brand": False},
            {"name": "ASICS", "average_rank": 2.5, "sov": 0.12, "is_target_brand": False},
        ],
        "summary": "Nike leads running shoe answers.",
    }


@pytest.fixture
def make_visibility_slice():
    """Factory for category visibility payloads."""
    return visibility_slice


@pytest.fixture
def multi_market_doc():
    return {
        "id": "rep-1",
        "entity": "Nike",
        "status": "completed",
        "isMultiMarket": True,
        "markets": [
            {"country": "United States", "language": "English", "code": "en-US", "isPrimary": True},
            {"country": "France", "language": "French", "code": "fr-FR", "isPrimary": False},
        ],
        "categoryFamilies": [
            {
                "id": "running_shoes",
                "canonical_name": "Running Shoes",
                "translations": {
                    "en-US": {"name": "Running Shoes"},
                    "fr-FR": {"name": "Chaussures de course"},
                },
            },
            {
                "id": "sportswear",
                "canonical_name": "Sportswear",
                "translations": {"en-US": {"name": "Sportswear"}},
            },
        ],
        "competitors": {
            "running_shoes": {
                "en-US": ["Adidas", "New Balance", "ASICS"],
                "fr-FR": ["Adidas", "Decathlon"],
            },
            "sportswear": {"en-US": ["Adidas", "Under Armour", "Puma"]},
        },
        "marketResults": {
            "en-US": {
                "reputation": {"summary": "Strong brand"},
                "categories_associated": None,
                "categories": {
                    "running_shoes": {"visibility": visibility_slice(), "competitive": {"x": 1}},
                    "sportswear": {"visibility": visibility_slice(visibility=0.1)},
                },
            },
            "fr-FR": {
                "reputation": None,
                "categories": {
                    "running_shoes": {"visibility": visibility_slice(visibility=0.3)},
                },
            },
        },
        "sources": [],
    }


@pytest.fixture
def single_market_doc():
    return {
        "id": "rep-2",
        "entity": "Nike",
        "status": "completed",
        "isMultiMarket": True,
        "markets": [
            {"country": "France", "language": "French", "code": "fr-FR", "isPrimary": True},
        ],
        "categoryFamilies": [
            {"id": "running_shoes", "canonical_name": "Running Shoes", "translations": {}},
        ],
        "competitors": {},
        "marketResults": {
            "fr-FR": {
                "reputation": None,
                "categories": {"running_shoes": {"visibility": visibility_slice()}},
            },
        },
    }


@pytest.fixture
def legacy_doc():
    return {
        "id": "rep-3",
        "entity": "Acme",
        "status": "completed",
        "isMultiMarket": False,
        "category": "CRM software",
        "countries": ["United States"],
        "languages": ["English"],
        "competitors": ["Globex", "Initech"],
        "analysisResults": {
            "reputation": {
                "sentiment_topics": {
                    "positive_topics": [
                        {"topic": "support", "frequency": 0.2, "cited_by": ["Gemini"]},
                        {"topic": "price", "frequency": 0.6, "cited_by": ["OpenAI"]},
                        {"topic": "ease of use", "frequency": 0.4, "cited_by": []},
                    ],
                    "negative_topics": [],
                    "neutral_topics": [],
                    "mixed_topics": [
                        {"topic": "integrations", "frequency": 0.1, "cited_by": ["openai"]},
                    ],
                },
            },
            "categories_associated": None,
            "categories": [
                {"name": "CRM software", "visibility": visibility_slice(), "competitive": None},
            ],
        },
    }
