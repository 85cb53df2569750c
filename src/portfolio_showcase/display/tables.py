# ABOUTME: Rich table rendering for contact messages.
# ABOUTME: Provides MessageTable for listing the inbox in the terminal.

from rich.table import Table

from portfolio_showcase.models import ContactMessage


class MessageTable:
    """Renders ContactMessage data as Rich tables.

    Long subjects and message bodies are truncated with an ellipsis.
    """

    MAX_SUBJECT_LENGTH = 30
    MAX_MESSAGE_LENGTH = 50
    TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M"

    def _truncate(self, text: str | None, max_length: int) -> str:
        """Truncate text to max length with ellipsis.

        Args:
            text: The text to truncate, or None.
            max_length: Maximum length before truncation.

        Returns:
            Truncated text with ellipsis, or empty string if None.
        """
        if text is None:
            return ""
        text = " ".join(text.split())
        if len(text) <= max_length:
            return text
        return text[: max_length - 3] + "..."

    def render(self, messages: list[ContactMessage], title: str | None = None) -> Table:
        """Render contact messages as a Rich Table.

        Args:
            messages: Messages to display, in the order given.
            title: Optional title for the table.

        Returns:
            Rich Table with formatted message data.
        """
        table = Table(title=title, show_lines=False)

        table.add_column("#", style="dim", width=4)
        table.add_column("Received", style="blue", no_wrap=True)
        table.add_column("From", style="cyan", no_wrap=True)
        table.add_column("Email", style="green")
        table.add_column("Subject", style="magenta", max_width=self.MAX_SUBJECT_LENGTH)
        table.add_column("Message", style="white", max_width=self.MAX_MESSAGE_LENGTH)

        for message in messages:
            table.add_row(
                str(message.id),
                message.created_at.strftime(self.TIMESTAMP_FORMAT),
                message.name,
                message.email,
                self._truncate(message.subject, self.MAX_SUBJECT_LENGTH),
                self._truncate(message.message, self.MAX_MESSAGE_LENGTH),
            )

        return table
