"""tkinter window for picking workbooks and viewing generated reports."""

import tkinter as tk
from tkinter import filedialog, scrolledtext, ttk

from excel_analyzer.config import Settings
from excel_analyzer.models import OutputFormat
from excel_analyzer.services.runner import AnalysisRunner
from excel_analyzer.services.workbook_reader import SUPPORTED_EXTENSIONS
from excel_analyzer.state import AppState
from excel_analyzer.utils.logging import get_logger

logger = get_logger(__name__)

FILE_TYPES = [
    ("Excel Files", " ".join(f"*{ext}" for ext in sorted(SUPPORTED_EXTENSIONS))),
    ("All Files", "*.*"),
]


class AnalyzerApp:
    """Main window: settings row, file list, Analyze button and output area."""

    def __init__(
        self,
        window: tk.Tk,
        config: Settings,
        state: AppState | None = None,
        runner: AnalysisRunner | None = None,
    ) -> None:
        self.window = window
        self.config = config
        self.state = state or AppState.from_settings(config)
        self.runner = runner or AnalysisRunner()

        self.window.title("Excel Analyzer")
        self.window.geometry(config.window_geometry)
        self.window.columnconfigure(0, weight=1)
        self.window.rowconfigure(0, weight=1)

        self.rows_var = tk.StringVar(value=self.state.sample_rows_text)
        self.header_rows_var = tk.StringVar(value=self.state.header_rows_text)
        self.format_var = tk.StringVar(value=self.state.output_format.label)

        self._build_layout()
        self.window.after(self.config.poll_interval_ms, self._poll)

    def _build_layout(self) -> None:
        frame = ttk.Frame(self.window, padding=12)
        frame.grid(row=0, column=0, sticky="nsew")
        frame.columnconfigure(0, weight=1)

        ttk.Label(frame, text="Excel Analyzer", font=("TkDefaultFont", 14, "bold")).grid(
            row=0, column=0, sticky="w"
        )

        settings_row = ttk.Frame(frame)
        settings_row.grid(row=1, column=0, sticky="w", pady=(8, 0))
        ttk.Label(settings_row, text="Settings:").pack(side="left")
        ttk.Label(settings_row, text="Rows:").pack(side="left", padx=(10, 2))
        ttk.Entry(settings_row, textvariable=self.rows_var, width=6).pack(side="left")
        ttk.Label(settings_row, text="Header Rows:").pack(side="left", padx=(10, 2))
        ttk.Entry(settings_row, textvariable=self.header_rows_var, width=6).pack(
            side="left"
        )
        ttk.Label(settings_row, text="Output Format:").pack(side="left", padx=(10, 2))
        ttk.Combobox(
            settings_row,
            textvariable=self.format_var,
            values=[fmt.label for fmt in OutputFormat],
            state="readonly",
            width=12,
        ).pack(side="left")

        ttk.Label(frame, text="Select Excel Files:").grid(
            row=2, column=0, sticky="w", pady=(10, 2)
        )
        ttk.Button(frame, text="Add Files", command=self._add_files).grid(
            row=3, column=0, sticky="w"
        )

        self.files_frame = ttk.LabelFrame(frame, text="Selected Files:")
        self.files_frame.grid(row=4, column=0, sticky="ew", pady=(6, 0))
        self._refresh_file_list()

        actions = ttk.Frame(frame)
        actions.grid(row=5, column=0, sticky="w", pady=(10, 6))
        self.analyze_button = ttk.Button(actions, text="Analyze", command=self._analyze)
        self.analyze_button.pack(side="left")
        self.progress = ttk.Progressbar(actions, mode="indeterminate", length=120)

        self.output_widget = scrolledtext.ScrolledText(frame, wrap="none", height=20)
        self.output_widget.grid(row=6, column=0, sticky="nsew")
        frame.rowconfigure(6, weight=1)

    def _refresh_file_list(self) -> None:
        for child in self.files_frame.winfo_children():
            child.destroy()
        for index, path in enumerate(self.state.file_paths):
            row = ttk.Frame(self.files_frame)
            row.pack(fill="x", padx=6, pady=1)
            ttk.Label(row, text=f"{index + 1}: {path}").pack(side="left")
            ttk.Button(
                row,
                text="Remove",
                command=lambda i=index: self._remove_file(i),
            ).pack(side="right")

    def _add_files(self) -> None:
        paths = filedialog.askopenfilenames(
            parent=self.window, title="Select Excel Files", filetypes=FILE_TYPES
        )
        for path in paths:
            self.state.add_file(path)
            logger.debug("File added", file_path=path)
        self._refresh_file_list()

    def _remove_file(self, index: int) -> None:
        removed = self.state.remove_file(index)
        logger.debug("File removed", file_path=removed)
        self._refresh_file_list()

    def _sync_inputs(self) -> None:
        self.state.header_rows_text = self.header_rows_var.get()
        self.state.sample_rows_text = self.rows_var.get()
        self.state.output_format = OutputFormat.from_label(self.format_var.get())

    def _analyze(self) -> None:
        self._sync_inputs()
        if not self.state.begin_run():
            return
        if not self.runner.start(self.state.file_paths, self.state.snapshot()):
            return
        self.output_widget.delete("1.0", "end")
        self.progress.pack(side="left", padx=(10, 0))
        self.progress.start(10)

    def _poll(self) -> None:
        message = self.runner.poll()
        if message is not None:
            before = len(self.state.output)
            self.state.apply_message(message)
            appended = self.state.output[before:]
            if appended:
                self.output_widget.insert("end", appended)
            if not self.state.is_analyzing:
                self.progress.stop()
                self.progress.pack_forget()
        self.window.after(self.config.poll_interval_ms, self._poll)


def run_app(config: Settings) -> None:
    """Create the main window and enter the Tk event loop."""
    window = tk.Tk()
    AnalyzerApp(window, config)
    window.mainloop()
