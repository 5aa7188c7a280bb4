"""
Exercise name -> muscle group classification.

Exercises are stored by free-text name, so the muscle group that drives the
volume calculation is inferred from the name with case-insensitive
substring matching.  Rules are evaluated **in order** and the first rule
with a matching keyword wins; a name that matches nothing is ``Other``.

Order matters.  The more specific patterns sit above the broad ones:

    Cardio      before Back        ("rowing machine" is not a row)
    Calves      before Quadriceps  ("leg press calf press")
    Hamstrings  before Biceps      ("lying leg curl")
    Glutes      before Triceps     ("cable kickback")
    Triceps     before Shoulders   ("overhead tricep extension")
    Shoulders   before Back        ("face pull", "upright row")
    Back        before Chest       ("press" is the last-resort keyword)

The classification is a heuristic.  Callers that know the muscle group
(e.g. a plan entry with an explicit ``muscle_group``) should pass it through
instead of relying on the name.
"""

from __future__ import annotations

from app.autoregulation.landmarks import MuscleGroup

CLASSIFICATION_RULES: tuple[tuple[tuple[str, ...], MuscleGroup], ...] = (
    (("treadmill", "elliptical", "stairmaster", "stair climber", "rowing machine", "rower", "cycling", "bike",
      "jump rope", "burpee", "mountain climber", "high knees", "butt kick", "jumping jack", "box jump",
      "battle rope", "sprint", "jogging", "running", "swimming", "hiit", "cardio", "incline walking",
      "steady state"), MuscleGroup.CARDIO),
    (("calf", "calves"), MuscleGroup.CALVES),
    (("leg curl", "hamstring", "ham curl", "glute ham", "glute-ham", "romanian", "rdl", "stiff-leg",
      "stiff leg", "good morning", "nordic"), MuscleGroup.HAMSTRINGS),
    (("glute", "hip thrust", "hip abduction", "cable kickback", "pull-through", "sumo", "cossack"),
     MuscleGroup.GLUTES),
    (("tricep", "dip", "pushdown", "push-down", "skull crusher", "skullcrusher", "close grip bench",
      "close-grip bench", "narrow grip bench", "overhead extension", "kickback", "diamond push"),
     MuscleGroup.TRICEPS),
    (("curl",), MuscleGroup.BICEPS),
    (("shoulder", "overhead", "lateral", "delt", "arnold", "upright row", "face pull", "military",
      "reverse pec deck", "reverse fly", "seated barbell press"), MuscleGroup.SHOULDERS),
    (("squat", "leg press", "leg extension", "lunge", "step-up", "step up", "hack"), MuscleGroup.QUADRICEPS),
    (("crunch", "plank", "sit-up", "situp", "abs", "ab wheel", "leg raise", "russian twist", "l-sit", "hollow"),
     MuscleGroup.ABS),
    (("row", "pull-up", "pullup", "pull up", "pulldown", "pull-down", "chin-up", "chinup", "chin up",
      "lat pull", "lats", "deadlift", "rack pull", "shrug", "pullover", "back extension", "hyperextension"),
     MuscleGroup.BACK),
    (("bench", "chest", "pec", "fly", "flye", "push-up", "pushup", "push up", "press"), MuscleGroup.CHEST),
)

DEFAULT_MUSCLE_GROUP = MuscleGroup.OTHER


def classify_exercise(name: str) -> MuscleGroup:
    """Infer the muscle group of an exercise from its name."""
    lowered = (name or "").lower()
    for keywords, group in CLASSIFICATION_RULES:
        if any(keyword in lowered for keyword in keywords):
            return group
    return DEFAULT_MUSCLE_GROUP


def is_time_based(name: str) -> bool:
    """Whether an exercise is logged by duration rather than weight x reps."""
    return classify_exercise(name) is MuscleGroup.CARDIO
