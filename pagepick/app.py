import sys

from PyQt5.QtWidgets import QApplication

from pagepick.config import APP_NAME, LOG_LEVEL
from pagepick.ui import MainWindow
from pagepick.utils import setup_logging


def main():
    """
    Run the PDF Page Extractor.
    An optional PDF path may be passed as the first command-line argument.
    """
    setup_logging(LOG_LEVEL)

    app = QApplication(sys.argv)
    app.setApplicationName(APP_NAME)

    file_path = None
    if len(sys.argv) > 1:
        file_path = sys.argv[1]

    window = MainWindow(file_path)
    window.show()
    sys.exit(app.exec_())
