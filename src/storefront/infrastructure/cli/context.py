"""State shared by every CLI command of one invocation."""

from __future__ import annotations

from dataclasses import dataclass

import click

from storefront.application.localizer import Localizer
from storefront.domain.exceptions import DomainException, ValidationError
from storefront.infrastructure.config.settings import StorefrontSettings


@dataclass
class CliContext:
    settings: StorefrontSettings
    localizer: Localizer
    session: str

    def fail(self, exc: DomainException) -> click.ClickException:
        """Build the ClickException to raise for a domain error.

        Rule violations are shown one per line in the chosen language.
        """
        if isinstance(exc, ValidationError) and exc.violations:
            return click.ClickException("\n".join(self.localizer.get_all(exc.violations)))
        return click.ClickException(str(exc))


pass_cli = click.make_pass_decorator(CliContext)
