"""
Fixed analysis questions asked of every paper.

Dependencies: None
System role: Question wording for the five summary fields
"""

AIM_QUESTION = "What is the main aim, goal, or purpose of this research paper? Be concise."
METHODOLOGY_QUESTION = (
    "What methodology or methods were used in this research? List the key methods."
)
RESULTS_QUESTION = (
    "What are the main results or findings of this research? Summarize briefly."
)
SCOPE_QUESTION = (
    "What is the scope of this research? Include any limitations or boundaries mentioned."
)
RELEVANCE_QUESTION_TEMPLATE = (
    'How relevant is this paper to the research topic: "{topic}"? Explain why or why not.'
)


def build_questions(topic: str) -> dict[str, str]:
    """
    Build the five questions keyed by summary field.

    Args:
        topic: Research topic, interpolated verbatim into the relevance question

    Returns:
        dict[str, str]: Field name to question text, in summary order
    """
    return {
        "aim": AIM_QUESTION,
        "methodology": METHODOLOGY_QUESTION,
        "results": RESULTS_QUESTION,
        "scope": SCOPE_QUESTION,
        "relevance": RELEVANCE_QUESTION_TEMPLATE.format(topic=topic),
    }
