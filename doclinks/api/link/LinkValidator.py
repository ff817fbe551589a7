"""Validate extracted links: internal targets first, then external probes."""

import asyncio
from collections.abc import Sequence

from ..config.LinkCheckConfig import LinkCheckConfig
from .AnchorIndex import AnchorIndex
from .ExternalLinkProber import ExternalLinkProber
from .ExtractedLink import ExtractedLink
from .LinkResolutionError import LinkResolutionError
from .resolve_link_path import resolve_link_path, split_link_url
from .ResultCategory import ResultCategory
from .ValidationResult import ValidationResult


class LinkValidator:
    """Produce one ValidationResult per link.

    Internal links (anchor-only self links included) are checked sequentially
    in input order. External links are probed as one bounded-concurrency batch
    when ``check_external`` is set, and are left out of the results otherwise.
    External results follow all internal results, in input order.
    """

    def __init__(self, config: LinkCheckConfig, anchor_index: AnchorIndex | None = None):
        self.config = config
        self.anchor_index = anchor_index or AnchorIndex()
        self._static_dirs = config.resolved_static_dirs()

    def validate_internal(self, link: ExtractedLink) -> ValidationResult:
        """Resolve the link's target file, then check its anchor if it has one."""
        try:
            target = resolve_link_path(
                link.url,
                link.source_file,
                self.config.base_dir,
                self.config.valid_extensions,
                self._static_dirs,
            )
        except LinkResolutionError as e:
            return ValidationResult(link=link, category=ResultCategory.FILE_NOT_FOUND, error=str(e))

        _, anchor = split_link_url(link.url)
        if anchor and not self.anchor_index.anchor_exists(target, anchor):
            return ValidationResult(
                link=link,
                category=ResultCategory.ANCHOR_NOT_FOUND,
                error=f"Anchor #{anchor} not found in {target}",
            )

        return ValidationResult(link=link, category=ResultCategory.INTERNAL_VALID)

    def _validate_internal_isolated(self, link: ExtractedLink) -> ValidationResult:
        try:
            return self.validate_internal(link)
        except Exception as e:
            return ValidationResult(
                link=link, category=ResultCategory.VALIDATION_ERROR, error=str(e) or type(e).__name__
            )

    async def validate_external(
        self, links: Sequence[ExtractedLink], prober: ExternalLinkProber
    ) -> list[ValidationResult]:
        """Probe external links concurrently; results keep the input order."""
        outcomes = await asyncio.gather(*(prober.probe(link) for link in links), return_exceptions=True)
        results: list[ValidationResult] = []
        for link, outcome in zip(links, outcomes):
            if isinstance(outcome, BaseException):
                outcome = ValidationResult(
                    link=link,
                    category=ResultCategory.VALIDATION_ERROR,
                    error=str(outcome) or type(outcome).__name__,
                )
            results.append(outcome)
        return results

    def _new_prober(self) -> ExternalLinkProber:
        return ExternalLinkProber(
            timeout=self.config.timeout_seconds,
            concurrency=self.config.concurrency,
            skip_domains=self.config.skip_domains,
        )

    async def validate(
        self, links: Sequence[ExtractedLink], prober: ExternalLinkProber | None = None
    ) -> list[ValidationResult]:
        """Validate every link; see the class docstring for ordering rules.

        Args:
            links: Links in extraction order
            prober: Prober to use for external links; the caller keeps ownership.
                A prober is created (and closed) internally when omitted.
        """
        internal = [link for link in links if not link.is_external]
        external = [link for link in links if link.is_external]

        results = [self._validate_internal_isolated(link) for link in internal]

        if self.config.check_external and external:
            if prober is not None:
                results.extend(await self.validate_external(external, prober))
            else:
                async with self._new_prober() as owned:
                    results.extend(await self.validate_external(external, owned))

        return results


async def validate_links_async(
    links: Sequence[ExtractedLink],
    config: LinkCheckConfig,
    prober: ExternalLinkProber | None = None,
) -> list[ValidationResult]:
    """Validate links inside a running event loop."""
    return await LinkValidator(config).validate(links, prober)


def validate_links(
    links: Sequence[ExtractedLink],
    config: LinkCheckConfig,
    prober: ExternalLinkProber | None = None,
) -> list[ValidationResult]:
    """Validate links, running the external phase on a fresh event loop."""
    return asyncio.run(validate_links_async(links, config, prober))
