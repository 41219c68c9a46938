"""Career recommendation from quiz answers.

``Recommender`` is the seam for a future external recommendation call: any
implementation takes the submitted answers and returns a ``CareerResult``.
``StubRecommender`` is the placeholder used until then.
"""

from dataclasses import dataclass
from typing import Any, Callable, Sequence

from prepper.models.attempt import CareerResult


OPTION_SCORES = {'A': 3, 'B': 2, 'C': 1, 'D': 2}
DEFAULT_OPTION_SCORE = 1


def clamp(value: float, lower: float, upper: float) -> float:
    return min(upper, max(lower, value))


@dataclass(frozen=True)
class CareerTemplate:
    career_path: str
    slope: float
    floor: float
    ceiling: float
    explanation: str
    strengths: tuple[str, ...]
    roadmap: tuple[str, ...]

    def confidence(self, score: int) -> float:
        return clamp(self.slope * score, self.floor, self.ceiling)

    def to_result(self, confidence: float) -> CareerResult:
        return CareerResult(
            careerPath=self.career_path,
            confidenceScore=round(confidence),
            explanation=self.explanation,
            strengths=list(self.strengths),
            roadmap=list(self.roadmap),
        )


CAREER_TEMPLATES = (
    CareerTemplate(
        career_path='Software Development',
        slope=2,
        floor=60,
        ceiling=95,
        explanation=(
            'Based on your analytical thinking, problem-solving skills, and preference for logical '
            'challenges, software development appears to be an excellent career match.'
        ),
        strengths=(
            'Strong analytical and logical thinking skills',
            'Excellent problem-solving abilities',
            'Preference for structured and organized work',
            'Interest in technology and innovation',
        ),
        roadmap=(
            'Learn programming fundamentals (JavaScript, Python)',
            'Build portfolio projects',
            'Consider computer science degree or bootcamp',
            'Network with developers and join communities',
        ),
    ),
    CareerTemplate(
        career_path='Data Science',
        slope=1.8,
        floor=55,
        ceiling=90,
        explanation=(
            'Your responses indicate strong aptitude for data analysis, statistical thinking, '
            'and pattern recognition.'
        ),
        strengths=(
            'Strong analytical and statistical skills',
            'Attention to detail and accuracy',
            'Interest in discovering insights from data',
            'Logical reasoning abilities',
        ),
        roadmap=(
            'Learn statistics and probability',
            'Master data analysis tools (Python, R, SQL)',
            'Study machine learning concepts',
            'Work on real-world datasets',
        ),
    ),
    CareerTemplate(
        career_path='Product Management',
        slope=1.5,
        floor=50,
        ceiling=85,
        explanation=(
            'Your combination of analytical thinking and communication skills suggests strong '
            'potential in product management.'
        ),
        strengths=(
            'Good communication and interpersonal skills',
            'Strategic thinking and planning abilities',
            'Understanding of user needs and market trends',
            'Leadership and coordination skills',
        ),
        roadmap=(
            'Learn product management frameworks',
            'Develop business acumen',
            'Practice user research and analysis',
            'Build cross-functional collaboration skills',
        ),
    ),
)


def answer_score(answer: Any) -> int:
    option = answer.get('answer') if isinstance(answer, dict) else None
    if not isinstance(option, str):
        return DEFAULT_OPTION_SCORE
    return OPTION_SCORES.get(option, DEFAULT_OPTION_SCORE)


def total_score(answers: Sequence[Any]) -> int:
    return sum(answer_score(answer) for answer in answers)


class Recommender:
    def recommend(self, answers: Sequence[Any]) -> CareerResult:
        raise NotImplementedError


class StubRecommender(Recommender):
    """Fixed-template scorer standing in for an external recommendation service."""

    def __init__(self, templates: Sequence[CareerTemplate] = CAREER_TEMPLATES) -> None:
        self.templates = tuple(templates)

    def recommend(self, answers: Sequence[Any]) -> CareerResult:
        score = total_score(answers)
        best, best_confidence = self.templates[0], self.templates[0].confidence(score)
        for template in self.templates[1:]:
            confidence = template.confidence(score)
            if confidence > best_confidence:
                best, best_confidence = template, confidence
        return best.to_result(best_confidence)


class CallableRecommender(Recommender):
    """Adapts a plain ``answers -> CareerResult`` function, e.g. a remote inference client."""

    def __init__(self, func: Callable[[Sequence[Any]], CareerResult]) -> None:
        self.func = func

    def recommend(self, answers: Sequence[Any]) -> CareerResult:
        return self.func(answers)


_default_recommender = StubRecommender()


def get_recommender() -> Recommender:
    return _default_recommender
