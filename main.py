import logging
import sys

from PyQt6.QtWidgets import QApplication, QMessageBox

from emojied.app import EmojiedApp
from emojied.core.errors import DatasetError


def main():
    """
    The main entry point for the Emojied application.

    This function configures logging, initializes the QApplication, creates
    the application controller (EmojiedApp), and starts the event loop.
    """
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    app = QApplication(sys.argv)

    try:
        emojied_app = EmojiedApp()
    except DatasetError as e:
        logging.error(f"Could not start Emojied: {e}")
        QMessageBox.critical(None, "Emojied", f"Could not load the emoji dataset.\n\n{e}")
        sys.exit(1)

    emojied_app.show()

    # The return value of exec() is the exit code.
    sys.exit(app.exec())


if __name__ == '__main__':
    main()
