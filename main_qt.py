# main_qt.py
import sys
from PySide6.QtWidgets import QApplication
from PySide6.QtGui import QFont

from infra.db.base import SessionLocal
from infra.logging_config import setup_logging
from infra.services import build_service_dict

from ui.main_window import MainWindow


def build_services():
    from infra.migrate import run_migrations
    from infra.path import default_db_path

    run_migrations(db_url=default_db_path().as_posix())
    session = SessionLocal()
    return build_service_dict(session)


def main():
    setup_logging()

    app = QApplication(sys.argv)
    app.setFont(QFont("Segoe UI", 9))

    services = build_services()
    window = MainWindow(services)
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
