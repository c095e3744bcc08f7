"""
Desktop entry point for the Toy Robot Simulator.
Loads the GUI shell settings, opens the main window and runs the Qt event loop.
"""

import sys
from PySide6.QtWidgets import QApplication
from config.shell_config import ConfigManager
from gui.main_window import MainWindow


def load_gui_config(args):
    """Use a JSON settings file when one is given after the program name."""
    if len(args) > 1 and args[1].endswith('.json'):
        return ConfigManager.load_config(args[1])
    return ConfigManager.gui()


def main():
    app = QApplication(sys.argv)
    window = MainWindow(load_gui_config(sys.argv))
    window.show()
    sys.exit(app.exec())

if __name__ == '__main__':
    main()
