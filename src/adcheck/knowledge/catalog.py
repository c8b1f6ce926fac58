"""Built-in real-estate advertising policy catalog."""

from adcheck.models.catalog import (
    ImageLimits,
    LandingPageThresholds,
    MetaThresholds,
    PolicyCatalog,
)

PROTECTED_CLASSES = [
    "race",
    "color",
    "religion",
    "national origin",
    "sex",
    "disability",
    "familial status",
]

# Fair Housing Act 3604(c) screening phrases, grouped by the class they target.
PROHIBITED_TERMS = [
    # Familial status
    "no kids",
    "no children",
    "adults only",
    "mature individuals",
    "singles only",
    "couples only",
    "perfect for newlyweds",
    "family only",
    "no students",
    "ideal for retirees",
    "young professionals",
    "empty nesters",
    "married couples",
    "single persons",
    "divorced",
    "widowed",
    # Age
    "senior",
    "elderly",
    "young",
    "older persons",
    # Sex
    "men only",
    "women only",
    "male",
    "female tenants",
    # Religion
    "christian",
    "muslim",
    "jewish",
    "hindu",
    "no atheists",
    "religious",
    # Race, color, national origin
    "caucasian",
    "african american",
    "asian",
    "hispanic",
    "latino",
    "white",
    "black",
    "english speakers only",
    "speaks english",
    "american citizens",
    # Disability
    "no wheelchairs",
    "able-bodied",
    "physically fit",
    "no disabled",
    # Exclusionary
    "exclusive",
    "restricted",
    "private community",
    "select clientele",
]

SUPERLATIVES = ["best", "cheapest", "lowest price", "guaranteed returns", "highest returns"]

FINANCIAL_TERMS = ["emi", "loan", "finance", "mortgage", "credit", "interest", "apr"]

GOVERNMENT_TERMS = ["government", "official", "approved by", "certified by government"]

CTA_TERMS = [
    "contact",
    "call",
    "visit",
    "book",
    "register",
    "enquire",
    "inquire",
    "schedule",
    "apply",
    "learn more",
]

PRICING_PATTERN = r"₹|rs\.?|inr|price|cost|starting from|\d+\s*lac|\d+\s*crore|\$\d+"


def get_default_catalog() -> PolicyCatalog:
    """Get the built-in policy catalog.

    Returns:
        PolicyCatalog with Fair Housing terms and Meta/Google thresholds
    """
    return PolicyCatalog(
        name="builtin",
        version="1.0.0",
        description="Fair Housing, Meta and Google Ads rules for real-estate advertising",
        protected_classes=PROTECTED_CLASSES,
        prohibited_terms=PROHIBITED_TERMS,
        superlatives=SUPERLATIVES,
        financial_terms=FINANCIAL_TERMS,
        government_terms=GOVERNMENT_TERMS,
        cta_terms=CTA_TERMS,
        pricing_pattern=PRICING_PATTERN,
        meta=MetaThresholds(image_text_limit=20, max_consecutive_caps=3),
        landing_page=LandingPageThresholds(min_words=100, adequate_words=300, min_images=3),
        image=ImageLimits(),
    )


DEFAULT_CATALOG = get_default_catalog()
