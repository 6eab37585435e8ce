# sitesmith/backend/app/domain/domains/value_objects.py
from __future__ import annotations

import random
from typing import Optional

ADJECTIVES = (
    "amazing", "brave", "calm", "daring", "eager", "fast", "gentle", "happy",
    "incredible", "jolly", "kind", "lively", "mysterious", "nice", "polite",
    "quiet", "rapid", "smart", "talented", "unique", "vibrant", "wonderful",
    "xcellent", "young", "zealous", "clever", "bright", "honest", "pretty",
    "sequential", "digital", "cosmic", "epic", "stellar", "dynamic",
)

NOUNS = (
    "apple", "banana", "cloud", "diamond", "eagle", "forest", "garden",
    "harbor", "island", "jungle", "kingdom", "lake", "mountain", "nest",
    "ocean", "planet", "river", "star", "tiger", "universe", "valley",
    "waterfall", "xylophone", "yacht", "zebra", "drive", "system", "portal",
    "avenue", "path", "journey", "quest", "venture", "mission", "project",
)


def generate_hostname(suffix: str, rng: Optional[random.Random] = None) -> str:
    """
    Random `test-<adjective>-<noun>-<1000..9999>.<suffix>` hostname.
    Collisions are not detected; the registry is expected to reject duplicates.
    """
    rng = rng or random.SystemRandom()
    adjective = rng.choice(ADJECTIVES)
    noun = rng.choice(NOUNS)
    number = rng.randint(1000, 9999)
    return f"test-{adjective}-{noun}-{number}.{suffix.strip('.')}"
