from __future__ import annotations

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtWidgets import QHBoxLayout, QLabel, QPushButton, QVBoxLayout, QWidget


class ErrorOverlay(QWidget):
    retry_clicked = pyqtSignal()
    dismiss_clicked = pyqtSignal()

    def __init__(self, parent: QWidget | None = None):
        super().__init__(parent)
        self.setObjectName("errorOverlay")
        self.setVisible(False)
        self.setStyleSheet(
            """
            QWidget#errorOverlay {
                background-color: rgba(0, 0, 0, 175);
                border-radius: 12px;
            }
            QLabel#errorTitle {
                color: #f8fafc;
                font-size: 16px;
                font-weight: 700;
            }
            QLabel#errorMessage {
                color: #cbd5e1;
                font-size: 12px;
            }
            QPushButton#errorRetry, QPushButton#errorDismiss {
                background-color: #8b5cf6;
                color: white;
                border: none;
                border-radius: 8px;
                padding: 8px 14px;
                font-weight: 600;
            }
            QPushButton#errorDismiss {
                background-color: #475569;
            }
            QPushButton#errorRetry:hover {
                background-color: #7c3aed;
            }
            QPushButton#errorDismiss:hover {
                background-color: #334155;
            }
            """
        )

        layout = QVBoxLayout(self)
        layout.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.setSpacing(10)

        self.title_label = QLabel("Connection error")
        self.title_label.setObjectName("errorTitle")
        self.title_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self.title_label)

        self.message_label = QLabel("")
        self.message_label.setObjectName("errorMessage")
        self.message_label.setWordWrap(True)
        self.message_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self.message_label)

        button_row = QHBoxLayout()
        button_row.setSpacing(8)
        button_row.addStretch()

        self.retry_button = QPushButton("Retry")
        self.retry_button.setObjectName("errorRetry")
        self.retry_button.clicked.connect(self.retry_clicked.emit)
        button_row.addWidget(self.retry_button)

        self.dismiss_button = QPushButton("Dismiss")
        self.dismiss_button.setObjectName("errorDismiss")
        self.dismiss_button.clicked.connect(self.dismiss_clicked.emit)
        button_row.addWidget(self.dismiss_button)

        button_row.addStretch()
        layout.addLayout(button_row)

        self.setAttribute(Qt.WidgetAttribute.WA_TransparentForMouseEvents, False)

    def show_error(self, message: str, *, can_retry: bool = False) -> None:
        self.message_label.setText(message)
        self.retry_button.setVisible(can_retry)
        self.setVisible(True)
        self.raise_()

    def clear(self) -> None:
        self.setVisible(False)
        self.retry_button.setVisible(False)
