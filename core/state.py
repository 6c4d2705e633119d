import re

from core.logic import DistanceCategory, StrategyCategory, evaluate
from utils.constants import STAT_KEYS, REQUIRED_NUMBER_COUNT
from utils.config import debug_print

# 3-4 digit runs, e.g. "1200 / 1200" on the stat panel
STAT_NUMBER_PATTERN = re.compile(r"\d{3,4}", re.ASCII)
LEADING_DIGITS_PATTERN = re.compile(r"\s*\+?(\d+)", re.ASCII)

class StatValue:
  def __init__(self, current=0, maximum=0):
    self.current = current
    self.max = maximum

  def __eq__(self, other):
    if not isinstance(other, StatValue):
      return NotImplemented
    return self.current == other.current and self.max == other.max

  def __repr__(self):
    return f"StatValue({self.current}/{self.max})"

class StatBlock:
  def __init__(self, speed=None, stamina=None, power=None, guts=None, wisdom=None):
    self.speed = speed or StatValue()
    self.stamina = stamina or StatValue()
    self.power = power or StatValue()
    self.guts = guts or StatValue()
    self.wisdom = wisdom or StatValue()

  @classmethod
  def zeroed(cls):
    return cls()

  @classmethod
  def from_currents(cls, speed, stamina, power, guts, wisdom):
    return cls(*(StatValue(value, value) for value in (speed, stamina, power, guts, wisdom)))

  def items(self):
    return [(stat, getattr(self, stat)) for stat in STAT_KEYS]

  def as_dict(self):
    return {stat: {"current": value.current, "max": value.max} for stat, value in self.items()}

  def __eq__(self, other):
    if not isinstance(other, StatBlock):
      return NotImplemented
    return self.items() == other.items()

  def __repr__(self):
    return "StatBlock(" + ", ".join(f"{stat}={value.current}/{value.max}" for stat, value in self.items()) + ")"


# Read stat numbers out of OCR text
def parse_stats(text):
  numbers = STAT_NUMBER_PATTERN.findall(text or "")
  debug_print(f"[DEBUG] Found {len(numbers)} stat numbers: {numbers}")
  if len(numbers) < REQUIRED_NUMBER_COUNT:
    return None

  values = [int(n) for n in numbers[:REQUIRED_NUMBER_COUNT]]
  pairs = [StatValue(values[i], values[i + 1]) for i in range(0, REQUIRED_NUMBER_COUNT, 2)]
  return StatBlock(*pairs)

def parse_stat_input(text):
  """Parse a manually typed stat value from its leading digits. Anything else becomes 0."""
  match = LEADING_DIGITS_PATTERN.match(str(text or ""))
  return int(match.group(1)) if match else 0


class AppState:
  """
  Everything the calculator window shows.

  The evaluation result is never edited directly: every change to the stats
  or to a category goes through this class and recomputes it.
  """

  def __init__(self, distance=DistanceCategory.MIDDLE, strategy=StrategyCategory.FRONT_RUNNER):
    self.stats = None
    self.distance = distance
    self.strategy = strategy
    self.result = None
    self.captured_image = None
    self.busy = False
    self.overlay_enabled = False
    self.has_permission = False

  def recalculate(self):
    if self.stats is None:
      self.result = None
    else:
      self.result = evaluate(self.stats, self.distance, self.strategy)
    return self.result

  def set_stats(self, stats):
    self.stats = stats
    return self.recalculate()

  def set_stat(self, stat, field, text):
    if self.stats is None:
      return None
    if stat not in STAT_KEYS or field not in ("current", "max"):
      raise KeyError(f"Unknown stat field: {stat}.{field}")
    setattr(getattr(self.stats, stat), field, parse_stat_input(text))
    return self.recalculate()

  def set_distance(self, distance):
    self.distance = DistanceCategory(distance)
    return self.recalculate()

  def set_strategy(self, strategy):
    self.strategy = StrategyCategory(strategy)
    return self.recalculate()
