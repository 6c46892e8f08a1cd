"""Selection and lookup of license texts to embed in a report."""

import logging
import re
from collections.abc import Iterable

from attribution_artisan.models import PackageRecord
from attribution_artisan.resolvers.base import BaseTextResolver

logger = logging.getLogger(__name__)

_OR_SEPARATOR = re.compile(r"\s+OR\s+", re.IGNORECASE)


def split_license_expression(expression: str) -> list[str]:
    """Split an "A OR B" expression into its identifiers.

    Example:
        >>> split_license_expression("MIT or Apache-2.0")
        ['MIT', 'Apache-2.0']
    """
    return [part.strip() for part in _OR_SEPARATOR.split(expression) if part.strip()]


def wanted_license_ids(
    packages: Iterable[PackageRecord],
    include_texts: Iterable[str],
) -> list[str]:
    """List the allow-listed identifiers actually used by ``packages``.

    Identifiers are compared case-insensitively. Each is returned once, in
    the spelling of the first package that uses it.

    Args:
        packages: Scanned package records.
        include_texts: Allow-list of identifiers.

    Returns:
        Distinct identifiers in first-seen order.
    """
    allowed = {spdx_id.upper() for spdx_id in include_texts}
    wanted: dict[str, str] = {}
    for package in packages:
        for spdx_id in split_license_expression(package.license or ""):
            folded = spdx_id.upper()
            if folded in allowed and folded not in wanted:
                wanted[folded] = spdx_id
    return list(wanted.values())


def build_embedded_texts(
    packages: Iterable[PackageRecord],
    include_texts: Iterable[str],
    resolver: BaseTextResolver,
) -> dict[str, str]:
    """Resolve full texts for the wanted license identifiers.

    Identifiers the resolver has no text for are left out.

    Args:
        packages: Scanned package records.
        include_texts: Allow-list of identifiers.
        resolver: Source of license texts.

    Returns:
        Mapping of identifier to license text.
    """
    texts: dict[str, str] = {}
    for spdx_id in wanted_license_ids(packages, include_texts):
        text = resolver.resolve(spdx_id)
        if text is None:
            logger.debug("%s resolver has no text for %s", resolver.name, spdx_id)
            continue
        texts[spdx_id] = text
    return texts
