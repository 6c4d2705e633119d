import math
from enum import Enum

from utils.constants import STAT_KEYS, RATING_THRESHOLDS, LOWEST_RATING

class DistanceCategory(str, Enum):
  SHORT = "short"
  MILE = "mile"
  MIDDLE = "middle"
  LONG = "long"

class StrategyCategory(str, Enum):
  FRONT_RUNNER = "front-runner"
  PACE_CHASER = "pace-chaser"
  LATE_SURGER = "late-surger"
  CLOSER = "closer"

DISTANCE_COEFFICIENTS = {
  DistanceCategory.SHORT: {"speed": 1.0, "stamina": 0.5, "power": 1.0, "guts": 0.5, "wisdom": 0.5},
  DistanceCategory.MILE: {"speed": 1.0, "stamina": 0.7, "power": 1.0, "guts": 0.7, "wisdom": 0.7},
  DistanceCategory.MIDDLE: {"speed": 1.0, "stamina": 1.0, "power": 1.0, "guts": 1.0, "wisdom": 1.0},
  DistanceCategory.LONG: {"speed": 0.8, "stamina": 1.2, "power": 0.8, "guts": 1.2, "wisdom": 1.2},
}

STRATEGY_COEFFICIENTS = {
  StrategyCategory.FRONT_RUNNER: {"speed": 1.2, "stamina": 1.1, "power": 1.0, "guts": 1.0, "wisdom": 0.9},
  StrategyCategory.PACE_CHASER: {"speed": 1.1, "stamina": 1.0, "power": 1.1, "guts": 1.0, "wisdom": 1.0},
  StrategyCategory.LATE_SURGER: {"speed": 1.0, "stamina": 1.0, "power": 1.1, "guts": 1.1, "wisdom": 1.0},
  StrategyCategory.CLOSER: {"speed": 0.9, "stamina": 1.0, "power": 1.2, "guts": 1.2, "wisdom": 1.1},
}

# Japanese running style names used by the game client
STRATEGY_ALIASES = {
  "nige": StrategyCategory.FRONT_RUNNER,
  "senko": StrategyCategory.PACE_CHASER,
  "sashi": StrategyCategory.LATE_SURGER,
  "oikomi": StrategyCategory.CLOSER,
}

class EvaluationResult:
  def __init__(self, scores, total, rating):
    self.scores = scores
    self.total = total
    self.rating = rating

  @property
  def display_scores(self):
    return {stat: round_half_up(score) for stat, score in self.scores.items()}

  def __eq__(self, other):
    if not isinstance(other, EvaluationResult):
      return NotImplemented
    return (self.scores, self.total, self.rating) == (other.scores, other.total, other.rating)

  def __repr__(self):
    return f"EvaluationResult(total={self.total}, rating={self.rating!r}, scores={self.display_scores})"


def round_half_up(value: float) -> int:
  # Python's round() is banker's rounding; scores round .5 upwards
  return int(math.floor(value + 0.5))

def parse_distance(name) -> DistanceCategory:
  if isinstance(name, DistanceCategory):
    return name
  try:
    return DistanceCategory(str(name).strip().lower())
  except ValueError:
    raise ValueError(f"Unknown distance '{name}'. Expected one of: {', '.join(d.value for d in DistanceCategory)}")

def parse_strategy(name) -> StrategyCategory:
  if isinstance(name, StrategyCategory):
    return name
  key = str(name).strip().lower().replace("_", "-").replace(" ", "-")
  if key in STRATEGY_ALIASES:
    return STRATEGY_ALIASES[key]
  try:
    return StrategyCategory(key)
  except ValueError:
    raise ValueError(f"Unknown strategy '{name}'. Expected one of: {', '.join(s.value for s in StrategyCategory)}")

# Map total score to a letter rating
def get_rating(total: int) -> str:
  for threshold, rating in RATING_THRESHOLDS:
    if total >= threshold:
      return rating
  return LOWEST_RATING

def evaluate(stats, distance: DistanceCategory, strategy: StrategyCategory) -> EvaluationResult:
  """
  Weight each stat's current value by the distance and strategy coefficients.

  The total is rounded once from the unrounded sum, never from the rounded
  per-stat values, so the displayed scores may not add up to the total.
  """
  distance_coef = DISTANCE_COEFFICIENTS[distance]
  strategy_coef = STRATEGY_COEFFICIENTS[strategy]

  scores = {}
  for stat in STAT_KEYS:
    scores[stat] = getattr(stats, stat).current * distance_coef[stat] * strategy_coef[stat]

  total = round_half_up(sum(scores[stat] for stat in STAT_KEYS))
  return EvaluationResult(scores, total, get_rating(total))
