"""
The main window for the toy robot simulator.
"""
from PySide6.QtWidgets import (QMainWindow, QWidget, QVBoxLayout, QHBoxLayout,
                               QPushButton, QFileDialog, QTextEdit, QSplitter,
                               QLabel, QLineEdit)
from PySide6.QtCore import Qt
from PySide6.QtGui import QFont
from .editor import Editor
from .viewport import Viewport
from robot_processor import RobotProcessor
from config.shell_config import ConfigManager


class MainWindow(QMainWindow):
    def __init__(self, config=None):
        super().__init__()
        self.config = config or ConfigManager.gui()
        self.setWindowTitle(self.config.window_title)
        self.setGeometry(100, 100, 1400, 900)

        self.processor = RobotProcessor()

        self.setup_ui()
        self.connect_signals()

        self.load_sample_script()
        self.refresh_views()

    def setup_ui(self):
        """Set up the user interface."""
        main_widget = QWidget()
        self.setCentralWidget(main_widget)
        main_layout = QVBoxLayout(main_widget)

        # Top toolbar
        toolbar_layout = QHBoxLayout()

        self.load_button = QPushButton("Load Script")
        self.save_button = QPushButton("Save Script")
        self.run_button = QPushButton("Run Script")
        self.reset_button = QPushButton("Reset Robot")
        self.grid_button = QPushButton("Show Grid")
        self.grid_button.setCheckable(True)
        self.grid_button.setChecked(True)
        self.trail_button = QPushButton("Show Trail")
        self.trail_button.setCheckable(True)
        self.trail_button.setChecked(True)
        self.status_label = QLabel(self.processor.report())

        toolbar_layout.addWidget(self.load_button)
        toolbar_layout.addWidget(self.save_button)
        toolbar_layout.addWidget(self.run_button)
        toolbar_layout.addWidget(self.reset_button)
        toolbar_layout.addWidget(self.grid_button)
        toolbar_layout.addWidget(self.trail_button)
        toolbar_layout.addStretch()
        toolbar_layout.addWidget(self.status_label)

        main_layout.addLayout(toolbar_layout)

        main_splitter = QSplitter(Qt.Vertical)
        main_layout.addWidget(main_splitter)

        # Top pane with editor, viewport and state panel
        workspace_splitter = QSplitter(Qt.Horizontal)

        self.editor = Editor()
        workspace_splitter.addWidget(self.editor)

        self.viewport = Viewport(cell_size=self.config.cell_size)
        workspace_splitter.addWidget(self.viewport)

        info_panel = QWidget()
        info_layout = QVBoxLayout(info_panel)
        info_layout.setContentsMargins(5, 5, 5, 5)

        self.stats_label = QLabel("Statistics:\nNo commands processed")
        self.stats_label.setFont(QFont("Courier", 9))
        self.stats_label.setStyleSheet("QLabel { background-color: #f0f0f0; padding: 5px; }")
        info_layout.addWidget(self.stats_label)
        info_layout.addStretch()

        workspace_splitter.addWidget(info_panel)

        # Bottom pane with command entry, console and diagnostics
        bottom_pane = QWidget()
        bottom_layout = QVBoxLayout(bottom_pane)
        bottom_layout.setContentsMargins(0, 0, 0, 0)

        command_layout = QHBoxLayout()
        command_layout.addWidget(QLabel("Command:"))
        self.command_entry = QLineEdit()
        self.command_entry.setPlaceholderText("PLACE 0,0,NORTH")
        self.send_button = QPushButton("Send")
        command_layout.addWidget(self.command_entry)
        command_layout.addWidget(self.send_button)
        bottom_layout.addLayout(command_layout)

        console_splitter = QSplitter(Qt.Horizontal)
        bottom_layout.addWidget(console_splitter)

        error_widget = QWidget()
        error_layout = QVBoxLayout(error_widget)
        error_layout.setContentsMargins(0, 0, 0, 0)
        error_layout.addWidget(QLabel("Errors and Warnings:"))

        self.error_console = QTextEdit()
        self.error_console.setReadOnly(True)
        error_layout.addWidget(self.error_console)
        console_splitter.addWidget(error_widget)

        console_widget = QWidget()
        console_layout = QVBoxLayout(console_widget)
        console_layout.setContentsMargins(0, 0, 0, 0)
        console_layout.addWidget(QLabel("Console Output:"))

        self.console = QTextEdit()
        self.console.setReadOnly(True)
        console_layout.addWidget(self.console)
        console_splitter.addWidget(console_widget)

        main_splitter.addWidget(workspace_splitter)
        main_splitter.addWidget(bottom_pane)

        workspace_splitter.setSizes([400, 600, 250])
        console_splitter.setSizes([500, 500])
        main_splitter.setSizes([650, 250])

    def connect_signals(self):
        """Connect all signal handlers."""
        self.load_button.clicked.connect(self.load_script_file)
        self.save_button.clicked.connect(self.save_script_file)
        self.run_button.clicked.connect(self.run_script)
        self.reset_button.clicked.connect(self.reset_robot)
        self.send_button.clicked.connect(self.send_command)
        self.command_entry.returnPressed.connect(self.send_command)
        self.grid_button.toggled.connect(
            lambda: self.viewport.toggle_display_option('grid'))
        self.trail_button.toggled.connect(
            lambda: self.viewport.toggle_display_option('trail'))

    def load_sample_script(self):
        """Load a sample command script for demonstration."""
        sample_script = """# Walk the robot around the grid
PLACE 0,0,NORTH
MOVE
MOVE
RIGHT
MOVE
REPORT
PLACE 3,3
LEFT
MOVE
REPORT"""

        self.editor.setPlainText(sample_script)

    def load_script_file(self):
        """Load a command script from a file."""
        file_path, _ = QFileDialog.getOpenFileName(
            self, "Open Command Script", "",
            "Command Scripts (*.txt *.robot);;All Files (*)"
        )

        if file_path:
            with open(file_path, 'r', encoding='utf-8') as f:
                content = f.read()
            self.editor.setPlainText(content)
            self.console.append(f"Loaded: {file_path}")

    def save_script_file(self):
        """Save the current command script to a file."""
        file_path, _ = QFileDialog.getSaveFileName(
            self, "Save Command Script", "",
            "Command Scripts (*.txt);;All Files (*)"
        )

        if file_path:
            with open(file_path, 'w', encoding='utf-8') as f:
                f.write(self.editor.toPlainText())
            self.console.append(f"Saved: {file_path}")

    def send_command(self):
        """Execute the single command typed in the entry line."""
        command = self.command_entry.text()
        if not command.strip():
            return

        result = self.processor.command_input(command)
        self.console.append(f"> {command}")
        if not result.is_unrecognized:
            self.console.append(result.message)

        self.command_entry.clear()
        self.update_error_display()
        self.refresh_views()

    def run_script(self):
        """Run the editor contents against the current robot."""
        script_text = self.editor.toPlainText()
        if not script_text.strip():
            return

        results = self.processor.run_script(script_text)
        for result in results:
            if not result.is_unrecognized:
                self.console.append(f"[{result.line_number}] {result.message}")

        self.update_error_display(highlight_editor=True)
        self.refresh_views()
        self.console.append(f"Script finished: {len(results)} commands")

    def reset_robot(self):
        self.processor.reset()
        self.editor.clear_diagnostics()
        self.error_console.clear()
        self.console.append("Robot reset")
        self.refresh_views()

    def update_error_display(self, highlight_editor=False):
        """Update the error console with current diagnostics."""
        errors = self.processor.get_all_errors()

        if not errors:
            self.error_console.setText("No errors found.")
            if highlight_editor:
                self.editor.clear_diagnostics()
            return

        error_text = []
        error_lines = set()
        warning_lines = set()

        for error in errors:
            severity = error.severity.value.upper()
            error_text.append(f"Line {error.line_number}: [{severity}] {error.message}")
            if error.severity.value == 'warning':
                warning_lines.add(error.line_number)
            else:
                error_lines.add(error.line_number)

        self.error_console.setText("\n".join(error_text))

        if highlight_editor:
            self.editor.highlight_diagnostics(error_lines, warning_lines)

    def refresh_views(self):
        """Push robot state to the viewport, status bar and statistics."""
        self.status_label.setText(self.processor.report())
        self.viewport.set_robot(self.processor.get_robot_state(), self.processor.get_trail())
        self.update_statistics()

    def update_statistics(self):
        """Update the statistics display."""
        stats = self.processor.get_statistics()
        robot = stats['robot_state']
        position = robot['position'] or '-'

        stats_text = f"""Statistics:
Commands: {stats['processing']['total_commands']}
Unrecognized: {stats['processing']['unrecognized']}
Errors: {stats['processing']['errors']}
Warnings: {stats['processing']['warnings']}

Robot:
Placed: {robot['placed']}
Position: {position}
Facing: {robot['facing'] or '-'}
Cells Visited: {robot['trail_length']}
Grid: {robot['grid_size']}x{robot['grid_size']}"""

        self.stats_label.setText(stats_text)
