"""Domain taxonomy: the closed set of categories a question can fall under.

Each category carries three pieces of static text:

1. a classifier description, listed in the classification prompt
2. an innovation template, the persona/framing for the answer
3. a guidance suffix, appended after the answer scaffold

All three tables must cover every category. Coverage is checked when the
module is imported.
"""

from enum import Enum


class DomainCategory(str, Enum):
    """Domain categories recognised by the classifier."""

    MEDICAL = "Medical"
    TECHNICAL = "Technical"
    BUSINESS = "Business"
    EDUCATION = "Education"
    ENVIRONMENT = "Environment"
    GOVERNMENT = "Government"
    SOCIAL = "Social"
    ARTS = "Arts"
    OTHER = "Other"


DEFAULT_CATEGORY = DomainCategory.OTHER

CLASSIFIER_DESCRIPTIONS: dict[DomainCategory, str] = {
    DomainCategory.MEDICAL: "Health, medicine, wellness, fitness",
    DomainCategory.TECHNICAL: "Software, hardware, engineering, AI, data science",
    DomainCategory.BUSINESS: "Entrepreneurship, marketing, finance, management",
    DomainCategory.EDUCATION: "Learning, teaching, academic research, student life",
    DomainCategory.ENVIRONMENT: "Sustainability, climate, conservation, green technology",
    DomainCategory.GOVERNMENT: "Policy, law, regulation, public administration",
    DomainCategory.SOCIAL: "Community, relationships, communication, social media",
    DomainCategory.ARTS: "Creativity, design, music, visual arts, literature",
    DomainCategory.OTHER: "For queries that don't fit the above categories",
}

INNOVATION_TEMPLATES: dict[DomainCategory, str] = {
    DomainCategory.MEDICAL: (
        "You are a medical innovation specialist. Generate a creative, ethical, and "
        "scientifically grounded idea to solve the following health-related challenge. "
        "Include specific implementation steps, potential challenges, and how this idea "
        "advances healthcare. Aim for practical yet forward-thinking solutions that could "
        "realistically be developed within 3-5 years:"
    ),
    DomainCategory.TECHNICAL: (
        "You are a technology innovation specialist. Generate a creative, feasible, and "
        "cutting-edge technical solution to the following challenge. Include specific "
        "implementation approaches, technical requirements, and how this innovation builds "
        "upon or disrupts existing technologies. Focus on solutions that balance innovation "
        "with practicality:"
    ),
    DomainCategory.BUSINESS: (
        "You are a business innovation strategist. Generate a creative, market-viable "
        "business idea or strategy to address the following challenge. Include potential "
        "business models, target audience analysis, competitive advantages, and "
        "implementation roadmap. Balance profitability with sustainability and social "
        "responsibility:"
    ),
    DomainCategory.EDUCATION: (
        "You are an education innovation specialist. Generate a creative, evidence-based "
        "approach to address the following educational challenge. Include implementation "
        "methodology, assessment strategies, and how this idea enhances learning outcomes. "
        "Focus on solutions that are inclusive, engaging, and adaptable to diverse learning "
        "environments:"
    ),
    DomainCategory.ENVIRONMENT: (
        "You are an environmental innovation expert. Generate a creative, sustainable "
        "solution to the following environmental challenge. Include practical implementation "
        "steps, potential impact metrics, and how this idea advances sustainability goals. "
        "Balance ecological benefits with economic and social feasibility:"
    ),
    DomainCategory.GOVERNMENT: (
        "You are a public policy innovation specialist. Generate a creative, ethical policy "
        "approach or civic technology solution to address the following governance challenge. "
        "Include implementation considerations, stakeholder analysis, and metrics for "
        "measuring success. Focus on solutions that enhance transparency, efficiency, or "
        "citizen engagement:"
    ),
    DomainCategory.SOCIAL: (
        "You are a social innovation strategist. Generate a creative approach to address the "
        "following social challenge. Include community engagement strategies, impact "
        "assessment methods, and scalability considerations. Balance addressing immediate "
        "needs with systemic change:"
    ),
    DomainCategory.ARTS: (
        "You are a creative innovation specialist. Generate a novel artistic or design-based "
        "approach to address the following challenge. Include conceptual foundations, "
        "technical requirements, and potential cultural impact. Focus on ideas that push "
        "creative boundaries while remaining accessible and meaningful:"
    ),
    DomainCategory.OTHER: (
        "You are an innovation generalist with expertise across multiple domains. Generate a "
        "creative, practical solution to the following challenge. Include specific "
        "implementation steps, potential obstacles, and success metrics. Balance innovation "
        "with feasibility, focusing on ideas that could be realistically developed and "
        "deployed:"
    ),
}

GUIDANCE_TEMPLATES: dict[DomainCategory, str] = {
    DomainCategory.MEDICAL: (
        "Consider consulting with healthcare professionals and reviewing medical literature "
        "to validate and refine this concept. What specific patient population would benefit "
        "most from this innovation?"
    ),
    DomainCategory.TECHNICAL: (
        "Consider exploring open-source communities or technology incubators that might help "
        "develop this concept further. What existing technologies could you leverage to "
        "accelerate development?"
    ),
    DomainCategory.BUSINESS: (
        "Consider conducting market research and developing a minimum viable product to test "
        "your concept. What unique value proposition would differentiate your solution in the "
        "market?"
    ),
    DomainCategory.EDUCATION: (
        "Consider piloting this approach in a small educational setting to gather feedback and "
        "refine the implementation. What specific learning outcomes would you prioritize "
        "measuring?"
    ),
    DomainCategory.ENVIRONMENT: (
        "Consider partnering with environmental organizations or sustainable businesses to "
        "pilot this concept. How might you quantify the environmental impact of your solution?"
    ),
    DomainCategory.GOVERNMENT: (
        "Consider engaging with local government innovation labs or civic tech organizations "
        "to develop this concept further. How would you measure improved civic outcomes?"
    ),
    DomainCategory.SOCIAL: (
        "Consider community-based participatory research approaches to refine and implement "
        "this concept. How would you ensure the solution addresses the needs of all "
        "stakeholders?"
    ),
    DomainCategory.ARTS: (
        "Consider collaborating with artists, designers, and potential audiences to develop "
        "and refine this concept. How might you secure funding or resources for "
        "implementation?"
    ),
    DomainCategory.OTHER: (
        "Consider forming an interdisciplinary team to help develop this concept further. "
        "What metrics would best capture the success of your innovation?"
    ),
}

_LABELS = frozenset(category.value for category in DomainCategory)


def _verify_coverage() -> None:
    """Raise if any lookup table is missing a category."""
    tables = {
        "CLASSIFIER_DESCRIPTIONS": CLASSIFIER_DESCRIPTIONS,
        "INNOVATION_TEMPLATES": INNOVATION_TEMPLATES,
        "GUIDANCE_TEMPLATES": GUIDANCE_TEMPLATES,
    }
    for name, table in tables.items():
        missing = [c.value for c in DomainCategory if not table.get(c)]
        if missing:
            raise RuntimeError(f"{name} has no entry for: {', '.join(missing)}")


_verify_coverage()


def describe_all() -> list[tuple[DomainCategory, str]]:
    """Return (category, description) pairs in declaration order."""
    return [(category, CLASSIFIER_DESCRIPTIONS[category]) for category in DomainCategory]


def is_valid_label(text: str) -> bool:
    """Exact, case-sensitive check against the category labels."""
    return text in _LABELS


def parse_label(text: str) -> DomainCategory:
    """Resolve raw classifier output to a category, defaulting to Other.

    Surrounding whitespace is ignored; everything else must match a label
    exactly.
    """
    label = text.strip()
    if is_valid_label(label):
        return DomainCategory(label)
    return DEFAULT_CATEGORY


def template_for(category: DomainCategory) -> str:
    return INNOVATION_TEMPLATES[category]


def guidance_for(category: DomainCategory) -> str:
    return GUIDANCE_TEMPLATES[category]
