# Arena
ROUND_LIMIT = 3  # fixed number of exchange rounds per fight

# Shield bounds (inclusive). Assignments outside the range are ignored.
SHIELD_MIN = 0
SHIELD_MAX = 100

# Specialised attack formulas
TITAN_ATTACK_BONUS = 15      # flat bonus added to a titan shifter's power
CURSED_ENERGY_DIVISOR = 10   # sorcerers add cursed_energy / divisor, truncated toward zero

# Healing
DEFAULT_HEAL_AMOUNT = 10
SORCERER_HEAL_AMOUNT = 25

# Roster transforms keep fighters strictly above this HP.
HEALTHY_HP_THRESHOLD = 50
