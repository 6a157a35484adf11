from __future__ import annotations

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtWidgets import QLabel, QPushButton, QVBoxLayout, QWidget


class HelpOverlay(QWidget):
    """Dimmed panel with usage notes; hidden until the header help button is pressed."""

    close_clicked = pyqtSignal()

    def __init__(self, text: str, parent: QWidget | None = None):
        super().__init__(parent)
        self.setObjectName("helpOverlay")
        self.setVisible(False)
        self.setStyleSheet(
            """
            QWidget#helpOverlay {
                background-color: rgba(0, 0, 0, 190);
                border-radius: 12px;
            }
            QLabel#helpText {
                color: #e2e8f0;
                font-size: 12px;
            }
            QPushButton#helpClose {
                background-color: #8b5cf6;
                color: white;
                border: none;
                border-radius: 8px;
                padding: 8px 14px;
                font-weight: 600;
            }
            QPushButton#helpClose:hover {
                background-color: #7c3aed;
            }
            """
        )

        layout = QVBoxLayout(self)
        layout.setContentsMargins(22, 22, 22, 22)
        layout.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.setSpacing(14)

        self.text_label = QLabel(text)
        self.text_label.setObjectName("helpText")
        self.text_label.setTextFormat(Qt.TextFormat.RichText)
        self.text_label.setWordWrap(True)
        layout.addWidget(self.text_label)

        self.close_button = QPushButton("Got it")
        self.close_button.setObjectName("helpClose")
        self.close_button.clicked.connect(self.close_clicked.emit)
        layout.addWidget(self.close_button, 0, Qt.AlignmentFlag.AlignCenter)

    def set_shown(self, visible: bool) -> None:
        self.setVisible(visible)
        if visible:
            self.raise_()
