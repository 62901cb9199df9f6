"""Shared Rich display functions for classification and run results.

Provides table builders and summary printers used by the install,
classify and services commands.
"""

from rich.table import Table

from archsetup.models.package import ClassifiedPackages, InstallOutcome, PackageSource
from archsetup.models.service import ServiceOutcome, ServiceResult
from archsetup.models.summary import RunSummary
from archsetup.utils.formatting import console, print_heading

# Outcome -> (label, style)
OUTCOME_STYLES: dict[InstallOutcome, tuple[str, str]] = {
    InstallOutcome.ALREADY_INSTALLED: ("skip", "skipped"),
    InstallOutcome.INSTALLED: ("installed", "installed"),
    InstallOutcome.NOT_FOUND: ("missing", "missing"),
    InstallOutcome.FAILED: ("FAIL", "failed"),
}

SERVICE_STYLES: dict[ServiceOutcome, tuple[str, str]] = {
    ServiceOutcome.ALREADY_ENABLED: ("skip", "skipped"),
    ServiceOutcome.ENABLED: ("enabled", "installed"),
    ServiceOutcome.FAILED: ("FAIL", "failed"),
}


def _source_cell(source: PackageSource) -> str:
    return f"[{source.value}]{source.label}[/{source.value}]"


def create_classification_table(classified: ClassifiedPackages, packages: list[str]) -> Table:
    """Create a table listing each package with the source it was classified into.

    Args:
        classified: Classification result.
        packages: Package names in list order.

    Returns:
        Rich Table with Package and Source columns.
    """
    table = Table(
        title="Package Classification",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("#", justify="right", style="muted")
    table.add_column("Package", no_wrap=True)
    table.add_column("Source", width=9)

    for index, name in enumerate(packages, start=1):
        source = classified.source_of(name)
        cell = _source_cell(source) if source is not None else "[muted]-[/muted]"
        table.add_row(str(index), name, cell)

    return table


def create_summary_table(summary: RunSummary) -> Table:
    """Create a table with per-source classification and outcome counts.

    Args:
        summary: Summary of the run (finished or aborted).

    Returns:
        Rich Table with one row per package source.
    """
    title = "Summary" if summary.is_finished else "Summary (aborted)"
    table = Table(
        title=title,
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Source")
    table.add_column("Classified", justify="right")
    table.add_column("Installed", justify="right", style="installed")
    table.add_column("Skipped", justify="right", style="skipped")
    table.add_column("Missing", justify="right", style="missing")
    table.add_column("Failed", justify="right", style="failed")

    for source in PackageSource:
        table.add_row(
            _source_cell(source),
            str(summary.classified_count(source)),
            str(summary.count(source, InstallOutcome.INSTALLED)),
            str(summary.count(source, InstallOutcome.ALREADY_INSTALLED)),
            str(summary.count(source, InstallOutcome.NOT_FOUND)),
            str(summary.count(source, InstallOutcome.FAILED)),
        )

    return table


def create_problems_table(summary: RunSummary) -> Table:
    """Create a table of packages that were not installed.

    Args:
        summary: Summary of the run.

    Returns:
        Rich Table listing missing and failed packages with their reason.
    """
    table = Table(
        title="Packages Not Installed",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Status", width=8, justify="center")
    table.add_column("Source", width=9)
    table.add_column("Package", no_wrap=True)
    table.add_column("Reason")

    for record in summary.records:
        if record.outcome not in (InstallOutcome.NOT_FOUND, InstallOutcome.FAILED):
            continue
        label, style = OUTCOME_STYLES[record.outcome]
        table.add_row(
            f"[{style}]{label}[/{style}]",
            _source_cell(record.source),
            record.name,
            f"[muted]{record.detail or ''}[/muted]",
        )

    return table


def create_services_table(results: list[ServiceResult]) -> Table:
    """Create a table of systemd unit enablement results."""
    table = Table(
        title="Services",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Status", width=8, justify="center")
    table.add_column("Scope", width=7)
    table.add_column("Unit", no_wrap=True)
    table.add_column("Message")

    for result in results:
        label, style = SERVICE_STYLES[result.outcome]
        table.add_row(
            f"[{style}]{label}[/{style}]",
            result.scope.value,
            result.unit,
            f"[muted]{result.error or ''}[/muted]",
        )

    return table


def print_summary(summary: RunSummary) -> None:
    """Print the end-of-run summary block.

    Shows the per-source table, any packages that were not installed and
    the service results, followed by the plain per-source counts.

    Args:
        summary: Summary of the run (finished or aborted).
    """
    console.print()
    console.print(create_summary_table(summary))

    if summary.count(outcome=InstallOutcome.NOT_FOUND) or summary.has_failures:
        console.print(create_problems_table(summary))

    if summary.services:
        console.print(create_services_table(summary.services))

    console.print(f"Official packages: {summary.classified_count(PackageSource.OFFICIAL)}")
    console.print(f"Community packages: {summary.classified_count(PackageSource.COMMUNITY)}")

    if summary.is_finished and not summary.has_failures:
        console.print()
        print_heading("Installation complete")
