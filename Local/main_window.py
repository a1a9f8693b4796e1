"""
Keyproof Main Window
=====================

Single-page window with:
  - Key settings (size, comment, output directory)
  - A read-only log panel that follows every pipeline step
  - The verified key file paths and the public key line
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from PySide6.QtGui import QAction, QKeySequence, QTextCursor
from PySide6.QtWidgets import (
    QApplication,
    QComboBox,
    QFileDialog,
    QFormLayout,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QMainWindow,
    QMessageBox,
    QPlainTextEdit,
    QPushButton,
    QStatusBar,
    QVBoxLayout,
    QWidget,
)

import keygen
import keyproof
from workers import KeyPairWorker

TITLE = "Key Pair Generator"


class KeyproofMainWindow(QMainWindow):
    """Main application window."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setWindowTitle(f"Keyproof — {TITLE}")
        self.setMinimumSize(500, 450)
        self.resize(760, 620)

        self._worker: Optional[KeyPairWorker] = None
        self._result: Optional[keygen.KeyPairResult] = None

        self._setup_ui()
        self._setup_menubar()
        self._setup_statusbar()

    # ----- UI setup -----

    def _setup_ui(self) -> None:
        central = QWidget()
        self.setCentralWidget(central)
        layout = QVBoxLayout(central)
        layout.setContentsMargins(10, 8, 10, 4)
        layout.setSpacing(8)

        # Header
        header_layout = QHBoxLayout()
        title = QLabel("KEYPROOF")
        title.setProperty("class", "heading")
        header_layout.addWidget(title)
        subtitle = QLabel(TITLE)
        subtitle.setProperty("class", "subheading")
        header_layout.addWidget(subtitle)
        header_layout.addStretch()
        layout.addLayout(header_layout)

        # Settings
        settings = QGroupBox("New Key Pair")
        form = QFormLayout(settings)

        self._size_combo = QComboBox()
        for bits in keygen.KEY_SIZES:
            self._size_combo.addItem(f"{bits} bit", bits)
        self._size_combo.setCurrentIndex(keygen.KEY_SIZES.index(keygen.DEFAULT_KEY_SIZE))
        form.addRow("Key size:", self._size_combo)

        self._comment_input = QLineEdit()
        self._comment_input.setPlaceholderText("user@host")
        try:
            self._comment_input.setText(keygen.key_comment())
        except (OSError, KeyError):
            self._comment_input.setText("")
        form.addRow("Comment:", self._comment_input)

        dir_row = QHBoxLayout()
        self._dir_input = QLineEdit(str(keygen.output_dir()))
        browse_btn = QPushButton("Browse…")
        browse_btn.setProperty("class", "secondary")
        browse_btn.clicked.connect(self._on_browse)
        dir_row.addWidget(self._dir_input, 1)
        dir_row.addWidget(browse_btn)
        form.addRow("Directory:", dir_row)

        self._generate_btn = QPushButton("Generate && Test Key Pair")
        self._generate_btn.clicked.connect(self._on_generate)
        form.addRow(self._generate_btn)
        layout.addWidget(settings)

        # Log panel
        self._log = QPlainTextEdit()
        self._log.setObjectName("log")
        self._log.setReadOnly(True)
        self._log.setPlainText(TITLE)
        layout.addWidget(self._log, 1)

        # Result
        result = QGroupBox("Verified Key Pair")
        result_layout = QVBoxLayout(result)
        self._public_label = QLabel("Public key: —")
        self._private_label = QLabel("Private key: —")
        for label in (self._public_label, self._private_label):
            label.setWordWrap(True)
            result_layout.addWidget(label)
        self._copy_btn = QPushButton("Copy Public Key")
        self._copy_btn.setProperty("class", "success")
        self._copy_btn.setEnabled(False)
        self._copy_btn.clicked.connect(self._on_copy_public)
        result_layout.addWidget(self._copy_btn)
        layout.addWidget(result)

    def _setup_menubar(self) -> None:
        menubar = self.menuBar()

        file_menu = menubar.addMenu("&File")
        quit_action = QAction("&Quit", self)
        quit_action.setShortcut(QKeySequence.StandardKey.Quit)
        quit_action.triggered.connect(self.close)
        file_menu.addAction(quit_action)

        help_menu = menubar.addMenu("&Help")
        about_action = QAction("&About Keyproof", self)
        about_action.triggered.connect(self._show_about)
        help_menu.addAction(about_action)

    def _setup_statusbar(self) -> None:
        status = QStatusBar()
        status.showMessage("Ready")
        self.setStatusBar(status)

    # ----- log panel -----

    def _append(self, text: str) -> None:
        cursor = self._log.textCursor()
        cursor.movePosition(QTextCursor.MoveOperation.End)
        cursor.insertText(text)
        self._log.setTextCursor(cursor)
        self._log.ensureCursorVisible()

    def _on_step(self, step: str, status: str) -> None:
        if status == keyproof.STEP_START:
            self._append(f"\n{step}... ")
            self.statusBar().showMessage(f"{step}…")
        elif status == keyproof.STEP_OK:
            self._append("Ok.")
        else:
            self._append("Failed!")

    # ----- actions -----

    def _on_browse(self) -> None:
        directory = QFileDialog.getExistingDirectory(
            self, "Select Output Directory", self._dir_input.text()
        )
        if directory:
            self._dir_input.setText(directory)

    def _on_generate(self) -> None:
        directory = self._dir_input.text().strip()
        if not directory or not Path(directory).is_dir():
            QMessageBox.warning(self, "Keyproof", "Please choose an existing directory.")
            return

        self._generate_btn.setEnabled(False)
        self._copy_btn.setEnabled(False)
        self._log.setPlainText(TITLE)
        comment = self._comment_input.text().strip()

        self._worker = KeyPairWorker(
            directory,
            self._size_combo.currentData(),
            comment,
            parent=self,
        )
        self._worker.step.connect(self._on_step)
        self._worker.finished.connect(self._on_finished)
        self._worker.error.connect(self._on_error)
        self._worker.start()

    def _on_finished(self, result: keygen.KeyPairResult, elapsed: float) -> None:
        self._result = result
        self._append("\n\nKey pair created successfully.\n")
        self._append(f"\nYour public key:\n  {result.public_path}\n")
        self._append(f"\nYour private key:\n  {result.private_path}\n")
        self._append("\nYou can close the window now.")
        self._public_label.setText(f"Public key: {result.public_path}")
        self._private_label.setText(f"Private key: {result.private_path}")
        self._copy_btn.setEnabled(True)
        self._generate_btn.setEnabled(True)
        self.statusBar().showMessage(
            f"{result.key_size}-bit key pair verified in {elapsed:.1f} s"
        )

    def _on_error(self, message: str, elapsed: float) -> None:
        self._append(f"\n\nKey pair generation failed ({message})")
        self._append("\nYou can close the window now.")
        self._generate_btn.setEnabled(True)
        self.statusBar().showMessage(f"Failed after {elapsed:.1f} s")

    def _on_copy_public(self) -> None:
        if self._result is None:
            return
        QApplication.clipboard().setText(self._result.public_key_text())
        self.statusBar().showMessage("Public key copied to clipboard", 3000)

    def _show_about(self) -> None:
        QMessageBox.about(
            self,
            "About Keyproof",
            "<h2>Keyproof</h2>"
            "<p>Generates an RSA key pair as a PKCS#1 private key file and an "
            "<code>ssh-rsa</code> public key line.</p>"
            "<p>Both files are re-read from disk and checked with an "
            "encrypt/decrypt round trip before they are handed out.</p>",
        )

    def closeEvent(self, event) -> None:
        if self._worker is not None and self._worker.isRunning():
            self._worker.wait()
        super().closeEvent(event)
