# omikuji/routers/dependencies.py

import random
from typing import Tuple

from ..core.config import settings
from ..services.fortune_service import RandomSource

def get_random_source() -> RandomSource:
    # The module-level generator is safe to share across worker threads.
    return random.random

def get_fortune_labels() -> Tuple[str, ...]:
    return settings.fortune_labels_list
