"""Package source classification.

Splits a package list into the official and community install queues by
asking the official package index about every name. A name the official
index does not know is assumed to come from the AUR; whether the AUR
really has it is only checked when the community queue is installed.
"""

import logging
from collections.abc import Iterable

from archsetup.models.package import ClassifiedPackages
from archsetup.operators.base import Operator

logger = logging.getLogger(__name__)


def classify(packages: Iterable[str], official: Operator) -> ClassifiedPackages:
    """Classify package names into official and community queues.

    Each name costs exactly one index query; queries are not retried and
    duplicates are queried again.

    Args:
        packages: Package names in list order.
        official: Operator for the official repositories.

    Returns:
        ClassifiedPackages with both queues in list order.

    Raises:
        CommandError: If the index query cannot be executed.
    """
    official_queue: list[str] = []
    community_queue: list[str] = []

    for name in packages:
        if official.exists(name):
            logger.debug("%s -> official", name)
            official_queue.append(name)
        else:
            logger.debug("%s -> community", name)
            community_queue.append(name)

    return ClassifiedPackages(
        official=tuple(official_queue),
        community=tuple(community_queue),
    )
