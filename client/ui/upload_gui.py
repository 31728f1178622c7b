#!/usr/bin/env python3
"""
Upload GUI - PyQt6 Application

Features:
- File picker for the video to upload
- Upload button wired to the upload client
- Progress bar driven by transport progress notifications
- Status line reporting the outcome of each upload
"""

import asyncio
import sys

from PyQt6.QtWidgets import (
    QApplication, QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QLabel,
    QLineEdit, QPushButton, QProgressBar, QFileDialog
)
from PyQt6.QtCore import QObject, QThread, pyqtSignal

from client.files.progress import ProgressDisplay
from client.files.selection import FileSelection
from client.files.upload_client import UploadClient, NoFileSelectedError
from client.utils.config import ClientConfig
from client.utils.logger import logger
from common.constants import UPLOAD_FIELD_NAME


# ============================================================================
# PROGRESS DISPLAY
# ============================================================================

class QtProgressDisplay(QObject, ProgressDisplay):
    """Progress display backed by a QProgressBar.

    Updates may come from a worker thread; they reach the bar through
    queued signals.
    """

    width_changed = pyqtSignal(int)
    label_changed = pyqtSignal(str)

    def __init__(self, progress_bar: QProgressBar):
        super().__init__()
        self.progress_bar = progress_bar
        self.width_changed.connect(self.progress_bar.setValue)
        self.label_changed.connect(self.progress_bar.setFormat)

    def set_width(self, percent: int):
        self.width_changed.emit(percent)

    def set_label(self, text: str):
        self.label_changed.emit(text)


# ============================================================================
# MAIN WINDOW
# ============================================================================

class UploadWindow(QMainWindow):
    """Main application window."""

    def __init__(self, config: ClientConfig = None, upload_client: UploadClient = None):
        super().__init__()
        self.config = config or ClientConfig()
        self.upload_client = upload_client or UploadClient(self.config)
        self.selection = FileSelection()
        self.upload_worker = None

        self.setWindowTitle("MeTube Upload")
        self.setup_ui()
        self.progress_display = QtProgressDisplay(self.progress_bar)

    def setup_ui(self):
        """Setup upload form UI."""
        central = QWidget()
        layout = QVBoxLayout()
        layout.setSpacing(8)
        layout.setContentsMargins(10, 10, 10, 10)

        target_label = QLabel(f"Uploading to {self.upload_client.target_url}")
        target_label.setStyleSheet("color: #7F8C8D;")
        layout.addWidget(target_label)

        # File selection row
        file_layout = QHBoxLayout()
        self.file_field = QLineEdit()
        self.file_field.setObjectName(UPLOAD_FIELD_NAME)
        self.file_field.setReadOnly(True)
        self.file_field.setPlaceholderText("No file selected")
        file_layout.addWidget(self.file_field)

        self.browse_btn = QPushButton("Browse...")
        self.browse_btn.clicked.connect(self.choose_file)
        file_layout.addWidget(self.browse_btn)
        layout.addLayout(file_layout)

        self.upload_btn = QPushButton("Upload")
        self.upload_btn.clicked.connect(self.start_upload)
        self.upload_btn.setStyleSheet("""
            QPushButton {
                background-color: #27AE60;
                color: white;
                border: none;
                padding: 8px 15px;
                border-radius: 5px;
                font-weight: bold;
            }
            QPushButton:hover {
                background-color: #229954;
            }
            QPushButton:disabled {
                background-color: #95A5A6;
            }
        """)
        layout.addWidget(self.upload_btn)

        self.progress_bar = QProgressBar()
        self.progress_bar.setObjectName("ProgressBar")
        self.progress_bar.setRange(0, 100)
        self.progress_bar.setValue(0)
        self.progress_bar.setFormat("0%")
        layout.addWidget(self.progress_bar)

        self.status_label = QLabel("")
        self.status_label.setWordWrap(True)
        layout.addWidget(self.status_label)

        central.setLayout(layout)
        self.setCentralWidget(central)
        self.resize(520, 180)

    def choose_file(self):
        """Pick the file to upload."""
        file_path, _ = QFileDialog.getOpenFileName(
            self, "Select video to upload", "", "Videos (*.mp4 *.webm *.mkv *.mov);;All Files (*)"
        )
        if file_path:
            self.select_file(file_path)

    def select_file(self, file_path: str):
        """Select ``file_path`` for the next upload."""
        try:
            selected = self.selection.select(file_path)
        except OSError as e:
            logger.log_error("file selection", e)
            self.show_status(f"Cannot open {file_path}: {e}")
            return
        self.file_field.setText(str(selected.path))
        self.show_status("")

    def start_upload(self):
        """Upload the selected file in a background worker."""
        if self.upload_worker is not None:
            return

        try:
            self.upload_client.build_request(self.selection)
        except NoFileSelectedError as e:
            self.show_status(str(e))
            return

        self.upload_btn.setEnabled(False)
        self.show_status(f"Uploading {self.selection.files[0].name}...")

        worker = AsyncTaskWorker(self.upload_client.post_file, self.selection, self.progress_display)
        worker.task_done.connect(
            lambda success, error, result: self._on_upload_complete_with_result(success, error, result, worker)
        )
        # Owned by the window until run() has returned
        worker.setParent(self)
        worker.finished.connect(worker.deleteLater)
        self.upload_worker = worker
        worker.start()

    def _on_upload_complete_with_result(self, success: bool, error: str, result, completing_worker=None):
        """Handle upload completion result from worker."""
        if not success:
            self.show_status(f"Upload failed: {error}")
        elif result.ok:
            self.show_status("Upload complete")
        elif result.status_code is not None:
            self.show_status(f"Server rejected the upload: {result.error}")
        else:
            self.show_status(f"Upload failed: {result.error}")

        self.upload_btn.setEnabled(True)
        # Only clear worker reference if it's the same instance
        if completing_worker is not None and self.upload_worker is completing_worker:
            self.upload_worker = None

    def show_status(self, message: str):
        self.status_label.setText(message)


# ============================================================================
# WORKER THREAD
# ============================================================================

class AsyncTaskWorker(QThread):
    """Worker thread for running async tasks."""

    task_done = pyqtSignal(bool, str, object)  # success, error, result

    def __init__(self, async_func, *args, **kwargs):
        super().__init__()
        self.async_func = async_func
        self.args = args
        self.kwargs = kwargs

    def run(self):
        """Run the async task in this thread's event loop."""
        loop = asyncio.new_event_loop()
        asyncio.set_event_loop(loop)

        try:
            result = loop.run_until_complete(self.async_func(*self.args, **self.kwargs))
            self.task_done.emit(True, '', result)
        except Exception as e:
            logger.log_error("upload worker", e)
            self.task_done.emit(False, str(e), None)
        finally:
            # Clean up all tasks before closing the loop
            pending = asyncio.all_tasks(loop)
            for task in pending:
                task.cancel()
            if pending:
                loop.run_until_complete(asyncio.gather(*pending, return_exceptions=True))
            loop.close()


# ============================================================================
# MAIN ENTRY POINT
# ============================================================================

def main(config: ClientConfig = None):
    """Main entry point."""
    app = QApplication(sys.argv)

    window = UploadWindow(config or ClientConfig.load())
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
