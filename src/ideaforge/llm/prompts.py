"""Prompt text for the classification and generation calls."""

from ..taxonomy import describe_all

CLASSIFIER_INSTRUCTIONS = "Return ONLY the category name without explanation."


def build_classifier_preamble() -> str:
    """Classification instructions, one line per category, ending at 'Question:'."""
    lines = "\n".join(f"- {category.value}: {description}" for category, description in describe_all())
    return (
        "\nAnalyze the following question and determine which domain category it falls under:\n"
        f"{lines}\n"
        "\n"
        f"{CLASSIFIER_INSTRUCTIONS}\n"
        "\n"
        "Question: \n"
    )


CLASSIFIER_PREAMBLE = build_classifier_preamble()

SOLUTION_SCAFFOLD = """Please provide an innovative solution for [specific problem/domain]:

1. Concept Summary
   • Brief overview of your proposed solution (2-3 sentences)

2. Innovation Highlights
   • [First key innovation element]
   • [Second key innovation element]
   • [Third key innovation element]

3. Implementation Roadmap
   Step 1: [First implementation step]
   Step 2: [Second implementation step]
   Step 3: [Third implementation step]
   [Additional steps as needed]

4. Challenges & Solutions
   Challenge: [First potential challenge]
   Solution: [Proposed mitigation]

   Challenge: [Second potential challenge]
   Solution: [Proposed mitigation]

5. Expected Impact
   • [Primary benefit or impact]
   • [Secondary benefits]
   • [Metrics for measuring success]

What aspect of this solution would you like me to elaborate on further?"""

FALLBACK_INSTRUCTION = "Generate a creative and innovative solution to this problem: "
