"""
Main Window - PySide6 window of the Pixel Texture Editor.
"""

from __future__ import annotations
from typing import Optional

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QFormLayout,
    QToolBar, QStatusBar, QPushButton, QLabel, QDockWidget, QLineEdit,
    QFileDialog, QMessageBox, QScrollArea, QSlider, QSpinBox, QGroupBox,
    QColorDialog
)
from PySide6.QtCore import Qt, Signal, QSize
from PySide6.QtGui import QAction, QColor

from pixeledit import config
from pixeledit.core.controller import InteractionController
from pixeledit.core.models import Color
from pixeledit.core.session import SessionState
from pixeledit.ui.canvas_widget import CanvasWidget
from pixeledit.ui.dialogs.new_texture_dialog import NewTextureDialog


class MainWindow(QMainWindow):
    """Main window: texture canvas, size/zoom fields and the pixel color editor."""

    # Signals
    create_requested = Signal(int, int)
    zoom_changed = Signal(int)
    select_requested = Signal(int, int)
    clear_selection_requested = Signal()
    color_edited = Signal(object)  # Color
    apply_requested = Signal()
    save_requested = Signal()
    load_image_requested = Signal(str)

    def __init__(self, controller: InteractionController):
        super().__init__()

        self.controller = controller

        # Setup UI
        self.setWindowTitle(config.APP_TITLE)
        self.resize(*config.WINDOW_SIZE)

        # Create widgets
        self._create_widgets()
        self._create_menu_bar()
        self._create_toolbar()
        self._create_dock_widgets()
        self._create_status_bar()

        # Connect signals
        self._connect_signals()

    def _create_widgets(self):
        """Creates main widgets."""
        # Central widget - Canvas
        self.canvas = CanvasWidget(self.controller)
        self.setCentralWidget(self.canvas)

    def _create_menu_bar(self):
        """Creates menu bar."""
        menubar = self.menuBar()

        # File menu
        file_menu = menubar.addMenu("&File")

        new_action = QAction("&New Texture...", self)
        new_action.setShortcut("Ctrl+N")
        new_action.triggered.connect(self._on_new_texture)
        file_menu.addAction(new_action)

        open_action = QAction("&Open Image...", self)
        open_action.setShortcut("Ctrl+O")
        open_action.triggered.connect(self._on_open_image)
        file_menu.addAction(open_action)

        save_action = QAction("&Save Texture...", self)
        save_action.setShortcut("Ctrl+S")
        save_action.triggered.connect(self.save_requested.emit)
        file_menu.addAction(save_action)

        file_menu.addSeparator()

        exit_action = QAction("E&xit", self)
        exit_action.setShortcut("Ctrl+Q")
        exit_action.triggered.connect(self.close)
        file_menu.addAction(exit_action)

        # Edit menu
        edit_menu = menubar.addMenu("&Edit")

        apply_action = QAction("&Apply Color", self)
        apply_action.setShortcut("Ctrl+Return")
        apply_action.triggered.connect(self.apply_requested.emit)
        edit_menu.addAction(apply_action)

        clear_action = QAction("&Clear Selection", self)
        clear_action.setShortcut("Escape")
        clear_action.triggered.connect(self.clear_selection_requested.emit)
        edit_menu.addAction(clear_action)

        # View menu
        view_menu = menubar.addMenu("&View")

        zoom_in_action = QAction("Zoom &In", self)
        zoom_in_action.setShortcut("Ctrl++")
        zoom_in_action.triggered.connect(lambda: self.zoom_slider.setValue(self.zoom_slider.value() + 1))
        view_menu.addAction(zoom_in_action)

        zoom_out_action = QAction("Zoom &Out", self)
        zoom_out_action.setShortcut("Ctrl+-")
        zoom_out_action.triggered.connect(lambda: self.zoom_slider.setValue(self.zoom_slider.value() - 1))
        view_menu.addAction(zoom_out_action)

        reset_action = QAction("&Reset View", self)
        reset_action.setShortcut("Ctrl+0")
        reset_action.triggered.connect(self.controller.reset_view)
        view_menu.addAction(reset_action)

    def _create_toolbar(self):
        """Creates main toolbar."""
        toolbar = QToolBar("Main Toolbar")
        toolbar.setIconSize(QSize(24, 24))
        toolbar.setMovable(False)
        self.addToolBar(toolbar)

        new_btn = QPushButton("New Texture")
        new_btn.clicked.connect(self._on_new_texture)
        toolbar.addWidget(new_btn)

        open_btn = QPushButton("Open Image")
        open_btn.clicked.connect(self._on_open_image)
        toolbar.addWidget(open_btn)

        save_btn = QPushButton("Save Texture")
        save_btn.clicked.connect(self.save_requested.emit)
        toolbar.addWidget(save_btn)

        toolbar.addSeparator()

        reset_btn = QPushButton("Reset View")
        reset_btn.clicked.connect(self.controller.reset_view)
        toolbar.addWidget(reset_btn)

    def _create_dock_widgets(self):
        """Creates dock widgets."""
        dock = QDockWidget("Texture", self)
        dock.setAllowedAreas(Qt.DockWidgetArea.LeftDockWidgetArea | Qt.DockWidgetArea.RightDockWidgetArea)

        panel = QWidget()
        panel_layout = QVBoxLayout(panel)

        # Size and zoom
        size_group = QGroupBox("Width and Height")
        size_layout = QFormLayout(size_group)

        self.width_spin = QSpinBox()
        self.width_spin.setRange(0, config.MAX_TEX_SIZE)
        self.width_spin.setValue(config.DEFAULT_TEX_SIZE)
        size_layout.addRow("Width:", self.width_spin)

        self.height_spin = QSpinBox()
        self.height_spin.setRange(0, config.MAX_TEX_SIZE)
        self.height_spin.setValue(config.DEFAULT_TEX_SIZE)
        size_layout.addRow("Height:", self.height_spin)

        create_btn = QPushButton("Create Texture")
        create_btn.clicked.connect(self._on_create_texture)
        size_layout.addRow(create_btn)

        panel_layout.addWidget(size_group)

        zoom_group = QGroupBox("Display Zoom")
        zoom_layout = QHBoxLayout(zoom_group)

        self.zoom_slider = QSlider(Qt.Orientation.Horizontal)
        self.zoom_slider.setMinimum(config.MIN_ZOOM)
        self.zoom_slider.setMaximum(config.MAX_ZOOM)
        self.zoom_slider.setValue(config.DEFAULT_ZOOM)
        self.zoom_slider.setTickPosition(QSlider.TickPosition.TicksBelow)
        self.zoom_slider.setTickInterval(1)
        self.zoom_slider.valueChanged.connect(self._on_zoom_slider_changed)
        zoom_layout.addWidget(self.zoom_slider)

        self.zoom_label = QLabel(f"{config.DEFAULT_ZOOM}x")
        self.zoom_label.setMinimumWidth(35)
        zoom_layout.addWidget(self.zoom_label)

        panel_layout.addWidget(zoom_group)

        # Selected pixel
        selection_group = QGroupBox("Selected Pixel")
        selection_layout = QVBoxLayout(selection_group)

        coords_layout = QHBoxLayout()
        coords_layout.addWidget(QLabel("X"))
        self.x_spin = QSpinBox()
        self.x_spin.setRange(-1, config.MAX_TEX_SIZE)
        self.x_spin.setValue(-1)
        coords_layout.addWidget(self.x_spin)
        coords_layout.addWidget(QLabel("Y"))
        self.y_spin = QSpinBox()
        self.y_spin.setRange(-1, config.MAX_TEX_SIZE)
        self.y_spin.setValue(-1)
        coords_layout.addWidget(self.y_spin)
        select_btn = QPushButton("Select")
        select_btn.clicked.connect(self._on_select_coordinates)
        coords_layout.addWidget(select_btn)
        selection_layout.addLayout(coords_layout)

        color_layout = QHBoxLayout()
        self.color_swatch = QPushButton()
        self.color_swatch.setFixedSize(48, 48)
        self.color_swatch.setToolTip("Pick color")
        self.color_swatch.clicked.connect(self._on_pick_color)
        color_layout.addWidget(self.color_swatch)

        self.hex_edit = QLineEdit()
        self.hex_edit.setPlaceholderText("#RRGGBBAA")
        self.hex_edit.setMaxLength(9)
        self.hex_edit.editingFinished.connect(self._on_hex_edited)
        color_layout.addWidget(self.hex_edit, stretch=1)
        selection_layout.addLayout(color_layout)

        self.apply_btn = QPushButton("Apply Color")
        self.apply_btn.clicked.connect(self.apply_requested.emit)
        selection_layout.addWidget(self.apply_btn)

        self.selection_label = QLabel("No pixel selected")
        self.selection_label.setWordWrap(True)
        selection_layout.addWidget(self.selection_label)

        panel_layout.addWidget(selection_group)
        panel_layout.addStretch()

        scroll_area = QScrollArea()
        scroll_area.setWidgetResizable(True)
        scroll_area.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        scroll_area.setWidget(panel)

        dock.setWidget(scroll_area)
        dock.setMinimumWidth(280)
        self.addDockWidget(Qt.DockWidgetArea.LeftDockWidgetArea, dock)

    def _create_status_bar(self):
        """Creates status bar."""
        self.status_bar = QStatusBar()
        self.setStatusBar(self.status_bar)

        self.status_label = QLabel("Ready")
        self.status_bar.addWidget(self.status_label, stretch=1)

        self.position_label = QLabel()
        self.status_bar.addPermanentWidget(self.position_label)

    def _connect_signals(self):
        """Connects signals."""
        self.canvas.pixel_hovered.connect(self._on_canvas_pixel_hovered)
        self.canvas.zoom_requested.connect(self.zoom_slider.setValue)

    # Event handlers
    def _on_new_texture(self):
        """Opens the new texture dialog."""
        dialog = NewTextureDialog(self.width_spin.value() or 1, self.height_spin.value() or 1, self)
        if dialog.exec() == NewTextureDialog.DialogCode.Accepted:
            width, height = dialog.get_dimensions()
            self.width_spin.setValue(width)
            self.height_spin.setValue(height)
            self.create_requested.emit(width, height)

    def _on_create_texture(self):
        self.create_requested.emit(self.width_spin.value(), self.height_spin.value())

    def _on_open_image(self):
        """Handles open image button."""
        file_path, _ = QFileDialog.getOpenFileName(
            self,
            "Open Image",
            "",
            "Images (*.png *.jpg *.jpeg *.bmp *.gif)"
        )

        if file_path:
            self.load_image_requested.emit(file_path)

    def _on_zoom_slider_changed(self, value: int):
        self.zoom_label.setText(f"{value}x")
        self.zoom_changed.emit(value)

    def _on_select_coordinates(self):
        self.select_requested.emit(self.x_spin.value(), self.y_spin.value())

    def _on_pick_color(self):
        """Opens a color dialog seeded with the working color."""
        current = self.controller.session.selection.working_color
        chosen = QColorDialog.getColor(
            QColor(current.r, current.g, current.b, current.a),
            self,
            "Selected Pixel Color",
            QColorDialog.ColorDialogOption.ShowAlphaChannel
        )
        if chosen.isValid():
            self.color_edited.emit(Color(chosen.red(), chosen.green(), chosen.blue(), chosen.alpha()))

    def _on_hex_edited(self):
        text = self.hex_edit.text()
        try:
            color = Color.from_hex(text)
        except ValueError:
            self.set_status(f"Invalid color: {text}")
            self._update_color_fields(self.controller.session)
            return
        self.color_edited.emit(color)

    def _on_canvas_pixel_hovered(self, x: int, y: int):
        """Handles cursor position change on canvas."""
        bitmap = self.controller.session.bitmap
        if bitmap is not None and bitmap.contains(x, y):
            color = bitmap.get_pixel(x, y)
            self.position_label.setText(f"({x}, {y}) {color.to_hex()}")
        else:
            self.position_label.setText("")

    # Public methods
    def refresh(self, session: SessionState):
        """Syncs the fields and canvas with the session."""
        for spin, value in ((self.width_spin, session.width), (self.height_spin, session.height)):
            if spin.value() != value:
                spin.blockSignals(True)
                spin.setValue(value)
                spin.blockSignals(False)

        if self.zoom_slider.value() != session.view.zoom:
            self.zoom_slider.blockSignals(True)
            self.zoom_slider.setValue(session.view.zoom)
            self.zoom_slider.blockSignals(False)
            self.zoom_label.setText(f"{session.view.zoom}x")

        selection = session.selection
        self.x_spin.setValue(selection.x)
        self.y_spin.setValue(selection.y)
        self._update_color_fields(session)

        self.canvas.refresh()

    def _update_color_fields(self, session: SessionState):
        selection = session.selection
        enabled = selection.is_selected
        self.color_swatch.setEnabled(enabled)
        self.hex_edit.setEnabled(enabled)
        self.apply_btn.setEnabled(enabled)

        if not enabled:
            self.color_swatch.setStyleSheet("")
            self.hex_edit.setText("")
            self.selection_label.setText("No pixel selected")
            return

        color = selection.working_color
        self.color_swatch.setStyleSheet(
            f"background-color: rgba({color.r}, {color.g}, {color.b}, {color.a}); border: 1px solid #ccc;"
        )
        self.hex_edit.setText(color.to_hex())
        pending = " (not applied)" if selection.has_pending_edit else ""
        self.selection_label.setText(f"<b>({selection.x}, {selection.y})</b> {color.to_hex()}{pending}")

    def set_status(self, message: str):
        """Sets status bar message."""
        self.status_label.setText(message)

    def ask_save_path(self, default_name: str) -> Optional[str]:
        """Shows the save dialog; returns None if cancelled."""
        default_path = f"{default_name}.png"
        if config.ensure_directories():
            default_path = str(config.OUTPUT_DIR / default_path)
        file_path, _ = QFileDialog.getSaveFileName(
            self,
            "Save Texture As PNG",
            default_path,
            "PNG Images (*.png)"
        )
        return file_path or None

    def show_error(self, title: str, message: str):
        """Shows error dialog."""
        QMessageBox.critical(self, title, message)

    def ask_question(self, title: str, message: str) -> bool:
        """Shows yes/no question dialog."""
        reply = QMessageBox.question(
            self, title, message,
            QMessageBox.StandardButton.Yes | QMessageBox.StandardButton.No
        )
        return reply == QMessageBox.StandardButton.Yes
