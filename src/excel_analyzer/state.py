"""Interactive application state, kept separate from the window widgets."""

from dataclasses import dataclass, field

from excel_analyzer.config import Settings
from excel_analyzer.config import settings as default_settings
from excel_analyzer.models import OutputFormat, ReportSettings
from excel_analyzer.services.orchestrator import (
    AnalysisComplete,
    AnalysisMessage,
    FileFailure,
    FileReport,
)


@dataclass
class AppState:
    """Everything the window displays or edits.

    Settings are kept as the raw text typed by the user and only parsed when
    a run starts, so invalid input falls back to the configured defaults
    instead of being rejected.
    """

    file_paths: list[str] = field(default_factory=list)
    header_rows_text: str = "1"
    sample_rows_text: str = "5"
    output_format: OutputFormat = OutputFormat.MARKDOWN
    output: str = ""
    is_analyzing: bool = False
    config: Settings = field(default_factory=lambda: default_settings)

    @classmethod
    def from_settings(cls, config: Settings) -> "AppState":
        return cls(
            header_rows_text=str(config.default_header_rows),
            sample_rows_text=str(config.default_sample_rows),
            output_format=config.default_output_format,
            config=config,
        )

    def add_file(self, file_path: str) -> None:
        self.file_paths.append(file_path)

    def remove_file(self, index: int) -> str:
        """Remove and return the file at ``index`` (0-based)."""
        return self.file_paths.pop(index)

    def snapshot(self) -> ReportSettings:
        """Parse the current inputs into settings for a new run."""
        return ReportSettings.from_text(
            self.header_rows_text,
            self.sample_rows_text,
            self.output_format,
            default_header_rows=self.config.default_header_rows,
            default_sample_rows=self.config.default_sample_rows,
        )

    def begin_run(self) -> bool:
        """Clear the output and mark a run as started.

        Returns:
            False if a run is already in progress.
        """
        if self.is_analyzing:
            return False
        self.output = ""
        self.is_analyzing = True
        return True

    def apply_message(self, message: AnalysisMessage) -> None:
        """Fold one runner message into the displayed output."""
        if isinstance(message, AnalysisComplete):
            self.is_analyzing = False
        elif isinstance(message, FileReport):
            self.output += message.text + "\n\n"
        elif isinstance(message, FileFailure):
            self.output += message.message + "\n\n"
