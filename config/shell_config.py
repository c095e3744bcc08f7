"""
Shell configuration for the toy robot simulator.
Simple presets for the console and GUI front ends. The grid itself is fixed.
"""
from dataclasses import dataclass, asdict, fields
import json


@dataclass
class ShellConfig:
    """Configuration for a front end that feeds commands to the robot."""
    name: str

    # Console behaviour
    exit_command: str = "x"
    prompt: str = "Please enter a command or hit 'x' to exit:"
    report_on_start: bool = True
    verbose: bool = False

    # GUI appearance
    window_title: str = "Toy Robot Simulator"
    cell_size: int = 80

    def is_exit(self, line: str) -> bool:
        """Check if a raw input line is the exit command."""
        return line.strip().lower() == self.exit_command.lower()

    def validate(self):
        """Raise TypeError or ValueError if a field holds an unusable value."""
        for item in fields(self):
            value = getattr(self, item.name)
            # bool is an int subclass; neither may stand in for the other
            if not isinstance(value, item.type) or (
                    isinstance(value, bool) and item.type is not bool):
                raise TypeError(f"{item.name} must be {item.type.__name__}")
        if self.cell_size <= 0:
            raise ValueError("cell_size must be positive")


class ConfigManager:
    """Manages shell configurations with simple presets."""

    @staticmethod
    def console() -> ShellConfig:
        """Plain interactive console."""
        return ShellConfig(name="Console")

    @staticmethod
    def verbose_console() -> ShellConfig:
        """Console that also prints diagnostics for rejected commands."""
        config = ConfigManager.console()
        config.name = "Verbose Console"
        config.verbose = True
        return config

    @staticmethod
    def gui() -> ShellConfig:
        """Desktop front end."""
        return ShellConfig(
            name="GUI",
            report_on_start=False,
            verbose=True,
            cell_size=96
        )

    @staticmethod
    def get_config(shell_type: str) -> ShellConfig:
        """Get configuration by preset name."""
        configs = {
            "console": ConfigManager.console(),
            "verbose": ConfigManager.verbose_console(),
            "verbose_console": ConfigManager.verbose_console(),
            "gui": ConfigManager.gui()
        }
        return configs.get(shell_type.lower(), ConfigManager.console())

    @staticmethod
    def save_config(config: ShellConfig, filepath: str):
        """Save configuration to JSON file."""
        with open(filepath, 'w') as f:
            json.dump(asdict(config), f, indent=2)

    @staticmethod
    def load_config(filepath: str) -> ShellConfig:
        """Load configuration from JSON file."""
        try:
            with open(filepath, 'r') as f:
                data = json.load(f)

            config = ShellConfig(**data)
            config.validate()
            return config

        except (OSError, ValueError, TypeError):
            # Return default on error
            return ConfigManager.console()
