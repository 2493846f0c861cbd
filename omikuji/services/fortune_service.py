# omikuji/services/fortune_service.py

import math
import random
from typing import Callable, Sequence

# A zero-argument callable returning a float uniformly drawn from [0, 1).
RandomSource = Callable[[], float]

FORTUNE_COUNT = 5

FORTUNE_PRESETS = {
    'classic': ('大凶', '凶', '小吉', '吉', '大吉'),
    'kichi': ('大吉', '中吉', '小吉', '吉', '末吉'),
}

DEFAULT_FORTUNES = FORTUNE_PRESETS['classic']

def pick_result(labels: Sequence[str] = DEFAULT_FORTUNES, rand: RandomSource = random.random) -> str:
    """Draws one label, uniformly over the indices of `labels`."""
    index = math.floor(rand() * len(labels))
    # Guard against float rounding pushing a value just below 1 onto len(labels).
    return labels[min(index, len(labels) - 1)]
