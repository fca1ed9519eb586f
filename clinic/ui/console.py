"""Interactive console for the clinic record manager."""

from rich.console import Console, Group
from rich.markup import escape
from rich.panel import Panel
from rich.prompt import Prompt
from rich.table import Table
from rich.text import Text

from clinic import __version__
from clinic.exceptions import ClinicError
from clinic.logic.commands import ALL_COMMANDS, CommandResult
from clinic.logic.logic import ClinicLogic
from clinic.models.events import AppointmentEvent, MedicalHistoryEvent
from clinic.models.fields import DATE_FORMAT, TIME_FORMAT
from clinic.models.patient import Patient


def patient_table(patients: tuple[Patient, ...]) -> Table:
    """Build the table of the displayed patients, numbered as commands address them."""
    table = Table(title="Patients", title_justify="left", expand=True)
    table.add_column("#", justify="right", style="bold")
    table.add_column("Name", style="cyan")
    table.add_column("NRIC")
    table.add_column("Phone")
    table.add_column("Email")
    table.add_column("Address")
    table.add_column("Tags", style="magenta")

    for number, patient in enumerate(patients, start=1):
        table.add_row(
            str(number),
            escape(patient.name),
            patient.nric,
            patient.phone,
            escape(patient.email),
            escape(patient.address),
            escape(", ".join(sorted(patient.tags))),
        )
    return table


def appointment_table(patient: Patient, appointments: tuple[AppointmentEvent, ...]) -> Table:
    table = Table(title=f"Appointments of {escape(patient.name)}", title_justify="left")
    table.add_column("#", justify="right", style="bold")
    table.add_column("Date")
    table.add_column("Time")

    for number, event in enumerate(appointments, start=1):
        table.add_row(str(number), event.date.strftime(DATE_FORMAT), event.time.strftime(TIME_FORMAT))
    return table


def medical_history_table(patient: Patient, events: tuple[MedicalHistoryEvent, ...]) -> Table:
    table = Table(title=f"Medical history of {escape(patient.name)}", title_justify="left")
    table.add_column("#", justify="right", style="bold")
    table.add_column("Date")
    table.add_column("Medical condition")
    table.add_column("Treatment")

    for number, event in enumerate(events, start=1):
        table.add_row(
            str(number),
            event.date.strftime(DATE_FORMAT),
            escape(event.medical_condition),
            escape(event.treatment),
        )
    return table


def help_text() -> str:
    """Usage of every command, one block per command."""
    return "\n\n".join(command.MESSAGE_USAGE for command in ALL_COMMANDS)


class ClinicConsole:
    """Read-execute-print loop rendering whatever the logic currently exposes."""

    def __init__(self, logic: ClinicLogic, console: Console | None = None):
        """Initialize the console around a logic facade."""
        self.logic = logic
        self.console = console if console is not None else Console()

    def start(self) -> None:
        """Run the loop until ``exit``, Ctrl-C or end of input."""
        self.console.print(
            Panel.fit(
                f"[bold blue]Clinic Book {__version__}[/bold blue]\n"
                "Type a command, e.g. [cyan]list[/cyan], [cyan]add-appt pi/1 d/2024-01-01[/cyan] or "
                "[cyan]help[/cyan].",
                border_style="blue",
            )
        )
        self.render_records()

        try:
            while True:
                command_text = Prompt.ask("\n[bold cyan]clinic[/bold cyan]", console=self.console)
                if not command_text.strip():
                    continue

                result = self.run_command(command_text)
                if result is not None and result.exit:
                    break
        except (KeyboardInterrupt, EOFError):
            pass
        finally:
            self.console.print("\n[yellow]Goodbye![/yellow]")

    def run_command(self, command_text: str) -> CommandResult | None:
        """Execute one command line and render its outcome.

        Returns:
            The command result, or None if the command failed
        """
        try:
            result = self.logic.execute(command_text)
        except ClinicError as e:
            self.console.print(f"[red]{escape(str(e))}[/red]")
            return None

        self.console.print(f"[green]{escape(result.feedback_to_user)}[/green]")
        if result.show_help:
            self.show_help()
        if not result.exit:
            self.render_records()
        return result

    def render_records(self) -> None:
        """Render the filtered patient list and the active patient's events."""
        renderables = [patient_table(self.logic.filtered_patient_list)]

        patient = self.logic.active_patient
        if patient is not None:
            renderables.append(appointment_table(patient, self.logic.filtered_appointment_list))
            renderables.append(medical_history_table(patient, self.logic.filtered_medical_history_list))

        self.console.print(Group(*renderables))

    def show_help(self) -> None:
        self.console.print(Panel(Text(help_text()), title="[cyan]Help[/cyan]", border_style="cyan"))
