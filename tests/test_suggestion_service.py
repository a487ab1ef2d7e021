from ats_resume_scorer.schemas.analysis import CategoryScore
from ats_resume_scorer.services.suggestion_service import CRITICAL_SUGGESTION, generate_suggestions


def _scores(**values):
    return {name: CategoryScore(name=name, score=score, issues=(f"{name} issue",)) for name, score in values.items()}


def test_no_suggestions_for_healthy_scores():
    scores = _scores(keywords=90, formatting=85, content=100, structure=70)
    assert generate_suggestions(scores, overall_score=88) == []


def test_one_suggestion_per_weak_category_sorted_by_priority():
    scores = _scores(keywords=50, formatting=40, content=65, structure=30)
    suggestions = generate_suggestions(scores, overall_score=47)
    assert [(s.category, s.priority) for s in suggestions] == [
        ("keywords", "high"),
        ("content", "high"),
        ("overall", "high"),
        ("formatting", "medium"),
        ("structure", "medium"),
    ]


def test_first_category_issue_is_appended_to_description():
    suggestions = generate_suggestions(_scores(keywords=10), overall_score=80)
    assert suggestions[0].description.endswith("keywords issue.")


def test_critical_suggestion_below_sixty():
    assert CRITICAL_SUGGESTION in generate_suggestions(_scores(keywords=90), overall_score=59)
    assert CRITICAL_SUGGESTION not in generate_suggestions(_scores(keywords=90), overall_score=60)


def test_suggestions_are_truncated_to_limit():
    scores = _scores(keywords=0, formatting=0, content=0, structure=0)
    suggestions = generate_suggestions(scores, overall_score=0, limit=2)
    assert [s.category for s in suggestions] == ["keywords", "content"]


def test_unknown_categories_are_ignored():
    assert generate_suggestions(_scores(spelling=10), overall_score=90) == []
