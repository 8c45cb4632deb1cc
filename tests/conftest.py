# Headless Qt for widget tests: pytest-qt creates the QApplication lazily, so the
# platform must be chosen before the first `qtbot` fixture is requested.

import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
