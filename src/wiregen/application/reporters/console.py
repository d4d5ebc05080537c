"""Console reporter: generation outcome -> rich formatted string."""

from __future__ import annotations

from dataclasses import dataclass
from io import StringIO
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from wiregen.domain.model.enums import ViolationKind

if TYPE_CHECKING:
    from wiregen.application.services.wiring import GenerationReport
    from wiregen.domain.exceptions.validation import ValidationError
    from wiregen.domain.model.violation import Violation


@dataclass(frozen=True, slots=True)
class ConsoleConfig:
    """Configuration for console reporter.

    Attributes:
        color: Emit ANSI styles (False for pipes and files)
        show_bindings: List every binding after a successful run
        width: Console width in columns
    """

    color: bool = True
    show_bindings: bool = False
    width: int = 120

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.width < 20:
            raise ValueError(f"width must be >= 20, got {self.width}")


class ConsoleReporter:
    """Console reporter: outputs rich formatted text.

    Output is str, not print(). Caller decides destination.
    """

    def __init__(self, config: ConsoleConfig | None = None) -> None:
        self._config = config or ConsoleConfig()

    def report_success(self, report: GenerationReport) -> str:
        """Format a successful generation run."""
        output, console = self._console()

        console.print(
            f"[bold green]Generated[/bold green] {escape(str(report.output))}: "
            f"{report.binding_count} binding(s), "
            f"{report.injection_count} injection site(s) "
            f"[dim]({report.duration_ms:.0f} ms)[/dim]"
        )

        if self._config.show_bindings and report.scan.bindings:
            table = Table(show_header=True, header_style="bold")
            table.add_column("Type", style="cyan")
            table.add_column("Implementation", style="yellow")
            table.add_column("Lifetime")
            table.add_column("Declared at", style="dim")
            for binding in sorted(report.scan.bindings, key=lambda b: (b.type, b.implementation)):
                table.add_row(
                    escape(binding.type),
                    escape(binding.implementation),
                    "singleton" if binding.is_singleton else "transient",
                    escape(str(binding.location)),
                )
            console.print(table)

        return output.getvalue()

    def report_failure(self, error: ValidationError) -> str:
        """Format validation problems, grouped by category."""
        output, console = self._console()

        console.rule("[bold red]DEPENDENCY VALIDATION FAILED[/bold red]")
        console.print(f"[bold]Problems:[/bold] {len(error.violations)}")
        console.print()

        duplicates = error.of_kind(ViolationKind.DUPLICATE_BINDING)
        if duplicates:
            console.print("[bold]Duplicate bindings found for the following types:[/bold]")
            for violation in duplicates:
                self._render_duplicate(console, violation)
            console.print()

        missing = error.of_kind(ViolationKind.MISSING_BINDING)
        if missing:
            console.print("[bold]Missing bindings for the following dependencies:[/bold]")
            for violation in missing:
                used_at = ", ".join(str(loc) for loc in violation.locations)
                console.print(
                    f"  [red]-[/red] [cyan]{escape(violation.type_name)}[/cyan] "
                    f"[dim](used at {escape(used_at)})[/dim]"
                )
            console.print()

        return output.getvalue()

    def _render_duplicate(self, console: Console, violation: Violation) -> None:
        console.print(
            f"  [red]-[/red] [cyan]{escape(violation.type_name)}[/cyan] "
            "is bound with multiple implementations:"
        )
        for impl, loc in zip(violation.implementations, violation.locations, strict=True):
            console.print(f"    - [yellow]{escape(impl)}[/yellow] at {escape(str(loc))}")

    def _console(self) -> tuple[StringIO, Console]:
        output = StringIO()
        console = Console(
            file=output,
            force_terminal=self._config.color,
            no_color=not self._config.color,
            highlight=False,
            emoji=False,
            width=self._config.width,
        )
        return output, console
