"""Login Sentry - Banned address rule"""

from typing import AbstractSet


def is_banned(address: str, banned: AbstractSet[str]) -> bool:
    return address in banned
