# Stat order as it appears on the training screen, left to right.
# OCR numbers are mapped positionally in this order.
STAT_KEYS = ["speed", "stamina", "power", "guts", "wisdom"]

STAT_LABELS = {
  "speed": "Speed",
  "stamina": "Stamina",
  "power": "Power",
  "guts": "Guts",
  "wisdom": "Wit"
}

# In-game (Japanese client) labels
STAT_LABELS_JP = {
  "speed": "スピード",
  "stamina": "スタミナ",
  "power": "パワー",
  "guts": "根性",
  "wisdom": "賢さ"
}

DISTANCE_LABELS = {
  "short": "Sprint",
  "mile": "Mile",
  "middle": "Medium",
  "long": "Long"
}

STRATEGY_LABELS = {
  "front-runner": "Front Runner",
  "pace-chaser": "Pace Chaser",
  "late-surger": "Late Surger",
  "closer": "End Closer"
}

# Two current/max pairs per stat
REQUIRED_NUMBER_COUNT = 10

# (minimum total, rating) checked top to bottom
RATING_THRESHOLDS = [
  (6000, "SS"),
  (5500, "S"),
  (5000, "A+"),
  (4500, "A"),
  (4000, "B"),
]
LOWEST_RATING = "C"

# Overlay button position, measured from the top-right corner of the screen
OVERLAY_OFFSET_X = 20
OVERLAY_OFFSET_Y = 100
