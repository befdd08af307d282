from __future__ import annotations

from pathlib import Path

from PySide6.QtCore import QUrl, Slot
from PySide6.QtWebChannel import QWebChannel
from PySide6.QtWebEngineWidgets import QWebEngineView
from PySide6.QtWidgets import QMainWindow

from notedesk.settings import APP_NAME, BRIDGE_OBJECT_NAME
from notedesk.logging_setup import get_logger
from notedesk.bridge.commands import CommandDispatcher
from notedesk.bridge.channel import NoteBridge

log = get_logger("ui")


class MainWindow(QMainWindow):
    def __init__(self, *, dispatcher: CommandDispatcher, frontend_index: Path):
        super().__init__()
        self.setWindowTitle(APP_NAME)

        self.view = QWebEngineView()
        self.bridge = NoteBridge(dispatcher, parent=self)

        # channel must be attached before load()
        self.channel = QWebChannel(self.view.page())
        self.channel.registerObject(BRIDGE_OBJECT_NAME, self.bridge)
        self.view.page().setWebChannel(self.channel)

        self.view.loadFinished.connect(self._on_load_finished)
        self.setCentralWidget(self.view)

        self.frontend_index = Path(frontend_index)
        log.info("Loading front end: %s commands=%s", self.frontend_index, dispatcher.commands())
        self.view.load(QUrl.fromLocalFile(str(self.frontend_index.resolve())))

    @Slot(bool)
    def _on_load_finished(self, ok: bool):
        if ok:
            log.info("Front end loaded: %s", self.frontend_index)
        else:
            log.error("Front end failed to load: %s", self.frontend_index)
