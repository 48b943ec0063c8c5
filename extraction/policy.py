"""Whitelist/blacklist gate deciding which fields get scraped."""

import logging
from dataclasses import dataclass, field
from typing import Iterable

from extraction.models import ScrapeArgs

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InclusionPolicy:
    """Field-name inclusion sets, compared case-insensitively.

    A non-empty whitelist wins outright: only whitelisted fields are included
    and the blacklist is ignored. Otherwise everything not blacklisted is.
    """

    whitelist: frozenset[str] = field(default_factory=frozenset)
    blacklist: frozenset[str] = field(default_factory=frozenset)

    @classmethod
    def of(cls, whitelist: Iterable[str] = (), blacklist: Iterable[str] = ()) -> "InclusionPolicy":
        return cls(
            whitelist=frozenset(name.lower() for name in whitelist),
            blacklist=frozenset(name.lower() for name in blacklist),
        )

    @classmethod
    def from_args(cls, args: ScrapeArgs) -> "InclusionPolicy":
        policy = cls.of(args.whitelist or (), args.blacklist or ())

        if args.blacklist is None:
            logger.info("No blacklist defined, returning everything...")
        if policy.blacklist:
            logger.info(f"Blacklist defined, will ignore: {', '.join(sorted(policy.blacklist))}")
        if policy.whitelist:
            logger.info(f"Whitelist defined, will only return: {', '.join(sorted(policy.whitelist))}...")
        return policy

    def included(self, name: str) -> bool:
        name = name.lower()
        if self.whitelist:
            return name in self.whitelist
        return name not in self.blacklist
