# Letter grade bands used by the app, as (minimum percentage, label).
GRADE_SCALE = (
    (97, "A+"),
    (93, "A"),
    (90, "A-"),
    (87, "B+"),
    (83, "B"),
    (80, "B-"),
    (77, "C+"),
    (73, "C"),
    (70, "C-"),
    (67, "D+"),
    (63, "D"),
    (60, "D-"),
    (0, "F"),
)


def percentage(score: float, max_score: float) -> float:
    if not max_score:
        return 0.0
    return round(score / max_score * 100, 2)


def letter_grade(score: float, max_score: float) -> str:
    pct = percentage(score, max_score)
    for minimum, label in GRADE_SCALE:
        if pct >= minimum:
            return label
    return "F"
